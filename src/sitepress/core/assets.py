"""Build output records."""

from __future__ import annotations

import posixpath
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import StrEnum
from pathlib import PurePosixPath

from sitepress.errors import AssetPathCollisionError


class AssetKind(StrEnum):
    """Variants of build output."""

    HTML = "html"
    XML = "xml"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class BuildArtifact:
    """Rendered text destined for a relative output path."""

    path: PurePosixPath
    content: str


@dataclass(frozen=True, slots=True)
class CopyFile:
    """Reference to a source file copied verbatim at publish time."""

    path: PurePosixPath


@dataclass(frozen=True, slots=True)
class Asset:
    """One unit of build output.

    ``HTML`` and ``XML`` assets carry a :class:`BuildArtifact`; ``OTHER`` assets
    carry a :class:`CopyFile`. Use the ``html``/``xml``/``other`` constructors.
    """

    kind: AssetKind
    payload: BuildArtifact | CopyFile

    def __post_init__(self) -> None:
        expected = CopyFile if self.kind is AssetKind.OTHER else BuildArtifact
        if not isinstance(self.payload, expected):
            raise TypeError(
                f"{self.kind.value} asset requires {expected.__name__}, "
                f"got {type(self.payload).__name__}."
            )

    @classmethod
    def html(cls, path: str | PurePosixPath, content: str) -> Asset:
        return cls(AssetKind.HTML, BuildArtifact(path=PurePosixPath(path), content=content))

    @classmethod
    def xml(cls, path: str | PurePosixPath, content: str) -> Asset:
        return cls(AssetKind.XML, BuildArtifact(path=PurePosixPath(path), content=content))

    @classmethod
    def other(cls, path: str | PurePosixPath) -> Asset:
        return cls(AssetKind.OTHER, CopyFile(path=PurePosixPath(path)))

    @property
    def path(self) -> PurePosixPath:
        return self.payload.path

    @property
    def content(self) -> str | None:
        """Return rendered text, or None for passthrough files."""

        if isinstance(self.payload, BuildArtifact):
            return self.payload.content
        return None


class BuiltSite:
    """Ordered, append-only accumulator of assets from one build run.

    Paths are compared after normalization, so ``public/blog/../index.html``
    collides with ``public/index.html``.
    """

    __slots__ = ("_assets", "_paths")

    def __init__(self, assets: Iterable[Asset] = ()) -> None:
        self._assets: list[Asset] = []
        self._paths: set[PurePosixPath] = set()
        for asset in assets:
            self.append(asset)

    @property
    def assets(self) -> tuple[Asset, ...]:
        return tuple(self._assets)

    def append(self, asset: Asset) -> None:
        """Append an asset, rejecting a path already present in this build."""

        key = PurePosixPath(posixpath.normpath(str(asset.path)))
        if key in self._paths:
            raise AssetPathCollisionError(asset.path)
        self._paths.add(key)
        self._assets.append(asset)

    def paths(self) -> list[str]:
        return [str(asset.path) for asset in self._assets]

    def __iter__(self) -> Iterator[Asset]:
        return iter(self._assets)

    def __len__(self) -> int:
        return len(self._assets)

    def __repr__(self) -> str:
        return f"BuiltSite(assets={self._assets!r})"
