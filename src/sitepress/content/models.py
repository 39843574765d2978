"""Content records consumed by the build."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import PurePosixPath
from typing import Any

from bs4 import BeautifulSoup

from sitepress.core.assets import Asset, BuiltSite
from sitepress.core.base import BuildEnvironment
from sitepress.core.orchestrator import build_site
from sitepress.dates import DateFormatter
from sitepress.errors import MissingGithubProfileError
from sitepress.rendering.base import AUTHOR_TEMPLATE, POST_TEMPLATE, RenderRequest


@dataclass(slots=True)
class PostMeta:
    slug: str
    title: str
    created_date: date
    last_modified_date: date
    authors: list[str] = field(default_factory=list)
    description: str | None = None


@dataclass(slots=True)
class Post:
    """A blog post with its pre-rendered body.

    ``content_markdown`` records where the HTML came from and is never passed
    to templates.
    """

    meta: PostMeta
    content_html: str
    content_markdown: str = ""

    def output_path(self, env: BuildEnvironment) -> PurePosixPath:
        return env.output_path(f"blog/{self.meta.slug}.html")

    def excerpt(self, words: int = 40) -> str:
        """Return the first ``words`` words of the body as plain text."""

        if words < 1:
            raise ValueError("words must be at least 1.")
        text = BeautifulSoup(self.content_html, "html.parser").get_text(" ", strip=True)
        tokens = text.split()
        if len(tokens) <= words:
            return " ".join(tokens)
        return " ".join(tokens[:words]) + "…"

    def render_context(self, fmt_date: DateFormatter) -> RenderRequest:
        context: dict[str, Any] = {
            "title": self.meta.title,
            "html": self.content_html,
            "authors": self.meta.authors,
            "created_date": fmt_date(self.meta.created_date),
            "last_modified_date": fmt_date(self.meta.last_modified_date),
        }
        return RenderRequest(POST_TEMPLATE, context)

    def build(self, out: BuiltSite, env: BuildEnvironment) -> None:
        template_name, context = self.render_context(env.fmt_date)
        out.append(Asset.html(self.output_path(env), env.render(template_name, context)))


@dataclass(slots=True)
class GithubProfile:
    name: str
    avatar_url: str
    created_at: datetime


@dataclass(slots=True)
class AuthorMeta:
    username: str
    tagline: str = ""
    github: GithubProfile | None = None


@dataclass(slots=True)
class Author:
    """A team member profile.

    ``meta.github`` is filled in by an earlier stage and must be present by the
    time the author is rendered.
    """

    meta: AuthorMeta
    content_html: str
    content_markdown: str = ""

    def output_path(self, env: BuildEnvironment) -> PurePosixPath:
        return env.output_path(f"team/{self.meta.username}.html")

    def render_context(self, fmt_date: DateFormatter) -> RenderRequest:
        github = self.meta.github
        if github is None:
            raise MissingGithubProfileError(self.meta.username)
        context: dict[str, Any] = {
            "username": self.meta.username,
            "name": github.name,
            "tagline": self.meta.tagline,
            "avatar_url": github.avatar_url,
            "html": self.content_html,
            "created_date": fmt_date(github.created_at),
        }
        return RenderRequest(AUTHOR_TEMPLATE, context)

    def build(self, out: BuiltSite, env: BuildEnvironment) -> None:
        template_name, context = self.render_context(env.fmt_date)
        out.append(Asset.html(self.output_path(env), env.render(template_name, context)))


@dataclass(slots=True)
class Site:
    """Everything a build consumes: posts, authors and passthrough assets."""

    posts: list[Post] = field(default_factory=list)
    authors: list[Author] = field(default_factory=list)
    assets: list[Asset] = field(default_factory=list)

    def build(self, out: BuiltSite, env: BuildEnvironment) -> None:
        build_site(self, out, env)
