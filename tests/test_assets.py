"""Tests for asset records and the build accumulator."""

from __future__ import annotations

from pathlib import PurePosixPath

import pytest

from sitepress.core import Asset, AssetKind, BuildArtifact, BuiltSite, CopyFile
from sitepress.errors import AssetPathCollisionError


class TestAsset:
    def test_html_asset_carries_artifact(self):
        asset = Asset.html("public/index.html", "<html></html>")

        assert asset.kind is AssetKind.HTML
        assert asset.payload == BuildArtifact(PurePosixPath("public/index.html"), "<html></html>")
        assert asset.path == PurePosixPath("public/index.html")
        assert asset.content == "<html></html>"

    def test_xml_asset(self):
        asset = Asset.xml("public/feed.xml", "<rss/>")

        assert asset.kind is AssetKind.XML
        assert asset.content == "<rss/>"

    def test_other_asset_has_no_content(self):
        asset = Asset.other("public/style.css")

        assert asset.kind is AssetKind.OTHER
        assert asset.payload == CopyFile(PurePosixPath("public/style.css"))
        assert asset.content is None

    def test_kind_payload_mismatch_rejected(self):
        with pytest.raises(TypeError):
            Asset(AssetKind.OTHER, BuildArtifact(PurePosixPath("public/a.html"), ""))
        with pytest.raises(TypeError):
            Asset(AssetKind.HTML, CopyFile(PurePosixPath("public/a.png")))

    def test_assets_are_immutable(self):
        asset = Asset.html("public/a.html", "a")

        with pytest.raises(AttributeError):
            asset.kind = AssetKind.XML  # type: ignore[misc]


class TestBuiltSite:
    def test_append_preserves_order(self):
        built = BuiltSite()
        built.append(Asset.html("public/b.html", "b"))
        built.append(Asset.other("public/a.png"))
        built.append(Asset.xml("public/c.xml", "c"))

        assert built.paths() == ["public/b.html", "public/a.png", "public/c.xml"]
        assert len(built) == 3
        assert [asset.kind for asset in built] == [AssetKind.HTML, AssetKind.OTHER, AssetKind.XML]

    def test_duplicate_path_rejected(self):
        built = BuiltSite()
        built.append(Asset.html("public/index.html", "one"))

        with pytest.raises(AssetPathCollisionError) as excinfo:
            built.append(Asset.other("public/index.html"))

        assert excinfo.value.path == PurePosixPath("public/index.html")
        assert len(built) == 1

    def test_initial_assets_are_checked(self):
        with pytest.raises(AssetPathCollisionError):
            BuiltSite([Asset.other("public/x"), Asset.other("public/x")])

    def test_normalized_paths_collide(self):
        built = BuiltSite([Asset.html("public/index.html", "home")])

        with pytest.raises(AssetPathCollisionError):
            built.append(Asset.html("public/blog/../index.html", "shadow"))
        with pytest.raises(AssetPathCollisionError):
            built.append(Asset.other("public/./index.html"))

        assert built.paths() == ["public/index.html"]

    def test_assets_view_is_read_only(self):
        built = BuiltSite([Asset.html("public/a.html", "a")])

        assert isinstance(built.assets, tuple)
        with pytest.raises(AttributeError):
            built.assets.append(Asset.html("public/a.html", "again"))  # type: ignore[attr-defined]
        assert len(built) == 1
