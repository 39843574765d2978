"""Core build pipeline for Sitepress."""

from .assets import Asset, AssetKind, BuildArtifact, BuiltSite, CopyFile
from .base import BuildEnvironment, Buildable, Renderable
from .orchestrator import BuildSummary, SiteBuilder, build_site
from .pages import feed, index, sitemap

__all__ = [
    "Asset",
    "AssetKind",
    "BuildArtifact",
    "BuildEnvironment",
    "BuildSummary",
    "Buildable",
    "BuiltSite",
    "CopyFile",
    "Renderable",
    "SiteBuilder",
    "build_site",
    "feed",
    "index",
    "sitemap",
]
