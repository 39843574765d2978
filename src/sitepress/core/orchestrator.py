"""Site build orchestration."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sitepress.config import Config
from sitepress.core import pages
from sitepress.core.assets import BuiltSite
from sitepress.core.base import BuildEnvironment
from sitepress.dates import make_date_formatter
from sitepress.rendering import REQUIRED_TEMPLATES, JinjaRenderer, TemplateRenderer
from sitepress.rendering.base import INDEX_FOLDERS

if TYPE_CHECKING:
    from sitepress.content.models import Site

logger = logging.getLogger(__name__)


def build_site(site: Site, out: BuiltSite, env: BuildEnvironment) -> None:
    """Append every asset for ``site`` to ``out`` in output order.

    Listing pages, feed and sitemap come first, then passthrough assets, then
    one page per post and one per author, each group in collection order. The
    first failure propagates immediately; ``out`` keeps whatever was appended
    before it and nothing after.
    """

    for folder in INDEX_FOLDERS:
        out.append(pages.index(site, folder, env))
    out.append(pages.feed(site, env))
    out.append(pages.sitemap(site, env))
    logger.debug("Built listing pages, feed and sitemap.")

    for asset in site.assets:
        out.append(asset)

    for post in site.posts:
        post.build(out, env)
    logger.debug("Built %s post page(s).", len(site.posts))

    for author in site.authors:
        author.build(out, env)
    logger.debug("Built %s author page(s).", len(site.authors))


@dataclass(slots=True)
class BuildSummary:
    """Result of a completed build."""

    built: BuiltSite
    posts: int
    authors: int
    passthrough: int
    duration_seconds: float


@dataclass(slots=True)
class SiteBuilder:
    """Build sites with one renderer constructed at startup."""

    config: Config
    renderer: TemplateRenderer
    logger: logging.Logger

    def __post_init__(self) -> None:
        if isinstance(self.renderer, JinjaRenderer):
            self.renderer.use_date_formatter(make_date_formatter(self.config.date_format))

    @classmethod
    def from_config(
        cls,
        config: Config,
        logger: logging.Logger,
        *,
        renderer: TemplateRenderer | None = None,
    ) -> SiteBuilder:
        """Create a builder, loading templates from configuration when needed."""

        if renderer is None:
            settings = config.templates
            if settings.path is None:
                raise ValueError("No template directory configured and no renderer supplied.")
            jinja = JinjaRenderer.from_directory(
                settings.path,
                date_formatter=make_date_formatter(config.date_format),
                globals=settings.globals,
                autoescape=settings.autoescape,
            )
            if settings.verify_on_start:
                jinja.verify(REQUIRED_TEMPLATES)
            logger.info("Loaded templates from %s.", settings.path)
            renderer = jinja
        return cls(config=config, renderer=renderer, logger=logger)

    def environment(self) -> BuildEnvironment:
        """Return the collaborators for one build.

        Pages and the ``fmt_date`` template filter share one formatter.
        """

        if isinstance(self.renderer, JinjaRenderer):
            formatter = self.renderer.date_formatter
        else:
            formatter = make_date_formatter(self.config.date_format)
        return BuildEnvironment(
            renderer=self.renderer,
            fmt_date=formatter,
            output_root=self.config.outputs.root,
        )

    def run(self, site: Site) -> BuildSummary:
        """Build ``site`` into a fresh accumulator.

        On failure the partially built accumulator is discarded and the
        original exception is re-raised.
        """

        started = time.monotonic()
        self.logger.info(
            "Building site: %s post(s), %s author(s), %s passthrough asset(s).",
            len(site.posts),
            len(site.authors),
            len(site.assets),
        )

        built = BuiltSite()
        try:
            build_site(site, built, self.environment())
        except Exception as exc:
            self.logger.error(
                "Build aborted after %s asset(s): %s",
                len(built),
                exc,
            )
            raise

        duration = time.monotonic() - started
        self.logger.info("Built %s asset(s) in %.3fs.", len(built), duration)
        return BuildSummary(
            built=built,
            posts=len(site.posts),
            authors=len(site.authors),
            passthrough=len(site.assets),
            duration_seconds=duration,
        )
