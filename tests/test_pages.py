"""Tests for the index, feed and sitemap generators."""

from __future__ import annotations

import pytest

from sitepress.content import Site
from sitepress.core import AssetKind, BuildEnvironment, feed, index, sitemap
from sitepress.errors import RenderError
from sitepress.rendering import JinjaRenderer


@pytest.fixture
def site(make_post, make_author) -> Site:
    return Site(
        posts=[make_post("a", "Alpha"), make_post("b", "Beta")],
        authors=[make_author("x")],
    )


@pytest.mark.parametrize(
    "folder,expected_path,expected_content",
    [
        ("", "public/index.html", "home:a;b;|x;"),
        ("blog/", "public/blog/index.html", "blog:Alpha;Beta;"),
        ("team/", "public/team/index.html", "team:x;"),
    ],
)
def test_index_pages(site, env: BuildEnvironment, folder, expected_path, expected_content):
    asset = index(site, folder, env)

    assert asset.kind is AssetKind.HTML
    assert str(asset.path) == expected_path
    assert asset.content == expected_content


def test_index_rejects_unknown_folder(site, env: BuildEnvironment):
    with pytest.raises(ValueError):
        index(site, "docs/", env)


def test_feed(site, env: BuildEnvironment):
    asset = feed(site, env)

    assert asset.kind is AssetKind.XML
    assert str(asset.path) == "public/feed.xml"
    assert asset.content == (
        "<rss><item><title>Alpha</title><description>Body of a</description></item>"
        "<item><title>Beta</title><description>Body of b</description></item></rss>"
    )


def test_sitemap(site, env: BuildEnvironment):
    asset = sitemap(site, env)

    assert asset.kind is AssetKind.XML
    assert str(asset.path) == "public/sitemap.xml"
    assert asset.content == (
        "<urlset><url>/blog/a.html</url><url>/blog/b.html</url></urlset>"
    )


def test_feed_and_sitemap_only_see_posts(site):
    renderer = JinjaRenderer.from_mapping(
        {"rss.xml": "{{ authors }}", "sitemap.xml": "{{ authors }}"}
    )
    env = BuildEnvironment(renderer=renderer)

    with pytest.raises(RenderError):
        feed(site, env)
    with pytest.raises(RenderError):
        sitemap(site, env)


def test_generators_do_not_consume_site(site, env: BuildEnvironment):
    index(site, "", env)
    feed(site, env)
    sitemap(site, env)

    assert [post.meta.slug for post in site.posts] == ["a", "b"]
    assert [author.meta.username for author in site.authors] == ["x"]
