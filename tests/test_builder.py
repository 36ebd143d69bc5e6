"""Tests for the site builder."""

import json
from pathlib import Path

import pytest

from ssg.builder import build, copy_post_assets, scan_content
from ssg.models import Config, Post
from ssg.parser import ContentParseError

FIXTURES = Path(__file__).parent / "fixtures" / "content"


def make_config(content_dir=FIXTURES, output_dir="public", **kwargs):
    return Config(
        title="Test Site",
        base_url="https://example.com",
        content_dir=str(content_dir),
        output_dir=str(output_dir),
        **kwargs,
    )


class TestScanContent:
    def test_pages_and_posts(self):
        site = scan_content(make_config())
        assert [p.slug for p in site.pages] == ["", "about", "moments"]
        assert [p.slug for p in site.posts] == ["testing-tips", "my-post"]
        assert site.description == "Test Site"

    def test_underscore_files_skipped(self):
        site = scan_content(make_config())
        assert all(p.title != "Draft" for p in site.pages)

    def test_topics_only_for_configured_pages(self):
        site = scan_content(make_config(topic_pages=["moments"]))
        pages = {p.slug: p for p in site.pages}
        assert [t.word for t in pages["moments"].topics] == ["docker", "claude", "notes"]
        assert pages["about"].topics == []

    def test_no_topics_without_config(self):
        site = scan_content(make_config())
        assert all(p.topics == [] for p in site.pages)

    def test_missing_content_dir(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Content directory not found"):
            scan_content(make_config(content_dir=tmp_path / "missing"))

    def test_no_blog_dir(self, tmp_path):
        (tmp_path / "home.md").write_text("---\ntitle: Home\n---\nHi")
        site = scan_content(make_config(content_dir=tmp_path))
        assert site.posts == []
        assert [p.path for p in site.pages] == ["/"]

    def test_bad_post_aborts_scan(self, tmp_path):
        (tmp_path / "blog").mkdir()
        (tmp_path / "blog" / "2021-02-30-bad.md").write_text("Body")
        with pytest.raises(ContentParseError, match="2021-02-30-bad.md"):
            scan_content(make_config(content_dir=tmp_path))


class TestCopyPostAssets:
    def test_copies_nested_assets(self, tmp_path):
        post = Post(
            title="t", slug="my-post", content="", path="/blog/my-post/",
            assets=["assets/diagram.png", "assets/photos/vacation.jpg", "assets/diagram.png"],
        )
        copied = copy_post_assets(post, FIXTURES, tmp_path)
        assert copied == [tmp_path / "diagram.png", tmp_path / "photos" / "vacation.jpg"]
        assert (tmp_path / "photos" / "vacation.jpg").read_text() == "JPG-vacation"

    def test_missing_asset_names_asset_and_post(self, tmp_path):
        post = Post(title="t", slug="my-post", content="", path="/blog/my-post/", assets=["assets/missing.png"])
        with pytest.raises(FileNotFoundError) as excinfo:
            copy_post_assets(post, FIXTURES, tmp_path)
        assert "missing.png" in str(excinfo.value)
        assert "my-post" in str(excinfo.value)

    def test_no_assets(self, tmp_path):
        post = Post(title="t", slug="p", content="", path="/blog/p/")
        assert copy_post_assets(post, FIXTURES, tmp_path) == []

    @pytest.mark.parametrize("asset", ["assets/../../secret.txt", "assets/../2021-03-26-my-post.md"])
    def test_asset_outside_assets_dir_rejected(self, tmp_path, asset):
        out = tmp_path / "public" / "blog" / "p"
        post = Post(title="t", slug="p", content="", path="/blog/p/", assets=[asset])
        with pytest.raises(ValueError, match="'p'"):
            copy_post_assets(post, FIXTURES, out)
        assert not (tmp_path / "public").exists()


class TestBuild:
    def test_writes_site_model_feed_and_assets(self, tmp_path):
        out = tmp_path / "public"
        summary = build(make_config(output_dir=out, feed_pages=["/moments/", "/gone/"]))

        assert summary == {"pages": 3, "posts": 2, "feed_items": 7, "words": 13}

        data = json.loads((out / "site.json").read_text())
        assert data["title"] == "Test Site"
        post = next(p for p in data["posts"] if p["slug"] == "my-post")
        assert post["date"] == "2021-03-26"
        assert 'src="diagram.png"' in post["content"]
        assert "assets/" not in post["content"]

        assert (out / "blog" / "my-post" / "diagram.png").read_text() == "PNG-diagram"
        assert (out / "blog" / "my-post" / "photos" / "vacation.jpg").exists()

        feed = (out / "feed.xml").read_text()
        assert "<title>Testing Tips</title>" in feed
        assert "https://example.com/moments/#2026-02-03" in feed

    def test_no_feed_without_items(self, tmp_path):
        content = tmp_path / "content"
        content.mkdir()
        (content / "home.md").write_text("---\ntitle: Home\n---\nWelcome")
        out = tmp_path / "public"

        summary = build(make_config(content_dir=content, output_dir=out))

        assert summary["feed_items"] == 0
        assert (out / "site.json").exists()
        assert not (out / "feed.xml").exists()

    def test_copies_static_assets(self, tmp_path):
        static = tmp_path / "static"
        static.mkdir()
        (static / "style.css").write_text("body {}")
        out = tmp_path / "public"

        build(make_config(output_dir=out, assets_dir=str(static)))

        assert (out / "style.css").read_text() == "body {}"
