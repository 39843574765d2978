"""Template renderer interface."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NamedTuple, Protocol

POST_TEMPLATE = "blog/post.html"
AUTHOR_TEMPLATE = "team/author.html"
SITEMAP_TEMPLATE = "sitemap.xml"
FEED_TEMPLATE = "rss.xml"
INDEX_FOLDERS = ("", "blog/", "team/")

REQUIRED_TEMPLATES: tuple[str, ...] = (
    POST_TEMPLATE,
    AUTHOR_TEMPLATE,
    *(f"{folder}index.html" for folder in INDEX_FOLDERS),
    SITEMAP_TEMPLATE,
    FEED_TEMPLATE,
)


class RenderRequest(NamedTuple):
    """Template name plus the context values supplied to it."""

    template_name: str
    context: dict[str, Any]


class TemplateRenderer(Protocol):
    """Interface for template engines used by the build."""

    def render(self, template_name: str, context: Mapping[str, Any]) -> str:
        """Render ``template_name`` with ``context`` or raise ``RenderError``."""
