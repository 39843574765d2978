"""Shared fixtures for build tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, timezone

import pytest

from sitepress.content import Author, AuthorMeta, GithubProfile, Post, PostMeta
from sitepress.core import BuildEnvironment
from sitepress.rendering import JinjaRenderer

TEMPLATES: dict[str, str] = {
    "index.html": (
        "home:{% for p in posts %}{{ p.meta.slug }};{% endfor %}"
        "|{% for a in authors %}{{ a.meta.username }};{% endfor %}"
    ),
    "blog/index.html": "blog:{% for p in posts %}{{ p.meta.title }};{% endfor %}",
    "team/index.html": "team:{% for a in authors %}{{ a.meta.username }};{% endfor %}",
    "rss.xml": (
        "<rss>{% for p in posts %}<item><title>{{ p.meta.title }}</title>"
        "<description>{{ p.excerpt(3) }}</description></item>{% endfor %}</rss>"
    ),
    "sitemap.xml": (
        "<urlset>{% for p in posts %}<url>/blog/{{ p.meta.slug }}.html</url>{% endfor %}</urlset>"
    ),
    "blog/post.html": (
        "<h1>{{ title }}</h1><p>{{ authors|join(', ') }}</p>"
        "<time>{{ created_date }}</time><time>{{ last_modified_date }}</time>{{ html|safe }}"
    ),
    "team/author.html": (
        '<h1>{{ name }} ({{ username }})</h1><img src="{{ avatar_url }}">'
        "<p>{{ tagline }}</p><time>{{ created_date }}</time>{{ html|safe }}"
    ),
}


@pytest.fixture
def renderer() -> JinjaRenderer:
    return JinjaRenderer.from_mapping(TEMPLATES)


@pytest.fixture
def env(renderer: JinjaRenderer) -> BuildEnvironment:
    return BuildEnvironment(renderer=renderer)


@pytest.fixture
def make_post() -> Callable[..., Post]:
    def _make(slug: str, title: str | None = None, **meta) -> Post:
        meta.setdefault("created_date", date(2024, 1, 5))
        meta.setdefault("last_modified_date", date(2024, 2, 10))
        meta.setdefault("authors", ["ada"])
        return Post(
            meta=PostMeta(slug=slug, title=title or slug.title(), **meta),
            content_html=f"<p>Body of {slug}</p>",
            content_markdown=f"Body of {slug}",
        )

    return _make


@pytest.fixture
def make_author() -> Callable[..., Author]:
    def _make(username: str, *, with_github: bool = True, tagline: str = "Writes code") -> Author:
        github = (
            GithubProfile(
                name=username.title(),
                avatar_url=f"https://avatars.example.com/{username}.png",
                created_at=datetime(2015, 6, 1, 12, 0, tzinfo=timezone.utc),
            )
            if with_github
            else None
        )
        return Author(
            meta=AuthorMeta(username=username, tagline=tagline, github=github),
            content_html=f"<p>About {username}</p>",
            content_markdown=f"About {username}",
        )

    return _make


@pytest.fixture
def template_sources() -> dict[str, str]:
    return dict(TEMPLATES)
