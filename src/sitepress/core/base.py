"""Contracts shared by everything that takes part in a build."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import TYPE_CHECKING, Any, Protocol

from sitepress.dates import DateFormatter, fmt_date
from sitepress.rendering.base import RenderRequest, TemplateRenderer

if TYPE_CHECKING:
    from sitepress.core.assets import BuiltSite

DEFAULT_OUTPUT_ROOT = "public"


@dataclass(frozen=True, slots=True)
class BuildEnvironment:
    """Collaborators handed to every build step."""

    renderer: TemplateRenderer
    fmt_date: DateFormatter = fmt_date
    output_root: str = DEFAULT_OUTPUT_ROOT

    def output_path(self, relative: str) -> PurePosixPath:
        return PurePosixPath(self.output_root, relative)

    def render(self, template_name: str, context: Mapping[str, Any]) -> str:
        return self.renderer.render(template_name, context)


class Renderable(Protocol):
    """Content that knows which template renders it and with what values."""

    def render_context(self, fmt_date: DateFormatter) -> RenderRequest:
        """Return the template name and context for this item."""


class Buildable(Protocol):
    """Content that turns itself into assets appended to ``out``."""

    def build(self, out: BuiltSite, env: BuildEnvironment) -> None:
        """Append this item's assets to ``out``."""
