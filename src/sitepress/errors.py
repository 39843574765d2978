"""Exception hierarchy for Sitepress builds."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import PurePosixPath


class SitepressError(Exception):
    """Base class for all Sitepress errors."""


class RenderError(SitepressError):
    """Raised when a template cannot be rendered for a given context."""

    def __init__(self, template_name: str, message: str) -> None:
        super().__init__(f"Failed to render '{template_name}': {message}")
        self.template_name = template_name


class TemplatesMissingError(RenderError):
    """Raised when required templates are not available to the renderer."""

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = tuple(missing)
        names = ", ".join(self.missing)
        super().__init__(self.missing[0] if self.missing else "", f"missing templates: {names}")


class ContentError(SitepressError):
    """Raised when a content record violates a build precondition."""


class MissingGithubProfileError(ContentError):
    """Raised when an author reaches the build without GitHub details."""

    def __init__(self, username: str) -> None:
        super().__init__(f"Author '{username}' is missing GitHub details.")
        self.username = username


class AssetPathCollisionError(SitepressError):
    """Raised when two assets in one build target the same output path."""

    def __init__(self, path: PurePosixPath) -> None:
        super().__init__(f"Duplicate output path: {path}")
        self.path = path
