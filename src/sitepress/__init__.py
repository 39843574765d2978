"""Sitepress: build a blog and team site into publishable assets."""

from __future__ import annotations

from functools import lru_cache
from importlib import metadata

from sitepress.errors import (
    AssetPathCollisionError,
    ContentError,
    MissingGithubProfileError,
    RenderError,
    SitepressError,
    TemplatesMissingError,
)


@lru_cache(maxsize=1)
def get_version() -> str:
    """Return the installed Sitepress version."""

    try:
        return metadata.version("sitepress")
    except metadata.PackageNotFoundError as exc:  # pragma: no cover - occurs in dev
        raise RuntimeError("Unable to determine Sitepress version.") from exc


__all__ = [
    "AssetPathCollisionError",
    "ContentError",
    "MissingGithubProfileError",
    "RenderError",
    "SitepressError",
    "TemplatesMissingError",
    "get_version",
]
