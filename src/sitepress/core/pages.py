"""Aggregate pages built from the whole site."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sitepress.core.assets import Asset
from sitepress.core.base import BuildEnvironment
from sitepress.rendering.base import FEED_TEMPLATE, INDEX_FOLDERS, SITEMAP_TEMPLATE

if TYPE_CHECKING:
    from sitepress.content.models import Site


def index(site: Site, folder: str, env: BuildEnvironment) -> Asset:
    """Render the listing page for ``folder`` ("", "blog/" or "team/")."""

    if folder not in INDEX_FOLDERS:
        raise ValueError(f"Unsupported index folder: {folder!r}")
    name = f"{folder}index.html"
    content = env.render(name, {"posts": site.posts, "authors": site.authors})
    return Asset.html(env.output_path(name), content)


def sitemap(site: Site, env: BuildEnvironment) -> Asset:
    content = env.render(SITEMAP_TEMPLATE, {"posts": site.posts})
    return Asset.xml(env.output_path("sitemap.xml"), content)


def feed(site: Site, env: BuildEnvironment) -> Asset:
    content = env.render(FEED_TEMPLATE, {"posts": site.posts})
    return Asset.xml(env.output_path("feed.xml"), content)
