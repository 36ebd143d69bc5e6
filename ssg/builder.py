"""Site builder: ingest a content directory into the site model.

Scans pages and blog posts, writes the site model as JSON, the RSS feed
and each post's co-located assets.

CLI: python -m ssg.builder --config ssg.yaml --output-dir public/
"""

import argparse
import dataclasses
import json
import logging
import shutil
import sys
from datetime import date
from pathlib import Path

from .assets import ASSET_PREFIX, rewrite_asset_paths
from .config import load_config
from .dates import page_slug_and_path
from .feed import collect_feed_items, normalize_page_path, render_feed
from .models import Config, Post, Site
from .parser import ContentParseError, parse_page, parse_post

logger = logging.getLogger(__name__)

BLOG_DIR = "blog"


def _markdown_files(directory: Path) -> list[Path]:
    """Markdown files in a directory, skipping ``_``-prefixed partials."""
    return sorted(
        p for p in directory.glob("*.md")
        if p.is_file() and not p.name.startswith("_")
    )


def _post_sort_key(post: Post) -> tuple[bool, date]:
    return (post.date is not None, post.date or date.min)


def scan_content(config: Config) -> Site:
    """Parse every page and post under the content directory.

    Raises:
        FileNotFoundError: If the content directory doesn't exist.
        ContentParseError: If any content file is malformed.
    """
    content_dir = Path(config.content_dir)
    if not content_dir.is_dir():
        raise FileNotFoundError(f"Content directory not found: {content_dir}")

    topic_paths = {normalize_page_path(p) for p in config.topic_pages}

    pages = []
    for path in _markdown_files(content_dir):
        _, page_path = page_slug_and_path(path.name)
        page = parse_page(path, with_topics=page_path in topic_paths)
        pages.append(page)
        logger.debug("Parsed page %s -> %s", path.name, page.path)
    pages.sort(key=lambda p: p.slug)

    posts = []
    blog_dir = content_dir / BLOG_DIR
    if blog_dir.is_dir():
        for path in _markdown_files(blog_dir):
            posts.append(parse_post(path))
            logger.debug("Parsed post %s", path.name)
    posts.sort(key=_post_sort_key, reverse=True)

    return Site(
        title=config.title,
        base_url=config.base_url,
        description=config.description or config.title,
        author=config.author,
        navigation=config.navigation,
        pages=pages,
        posts=posts,
    )


def copy_post_assets(post: Post, content_dir: Path, post_output_dir: Path) -> list[Path]:
    """Copy a post's ``assets/...`` files next to its output.

    ``blog/assets/photos/a.jpg`` lands at ``<post_output_dir>/photos/a.jpg``.

    Raises:
        ValueError: If an asset path escapes the assets or output directory.
        FileNotFoundError: If a referenced asset is missing.
    """
    assets_root = (Path(content_dir) / BLOG_DIR / ASSET_PREFIX).resolve()
    output_root = Path(post_output_dir).resolve()
    copied = []
    for asset in dict.fromkeys(post.assets):
        src = Path(content_dir) / BLOG_DIR / asset
        dst = Path(post_output_dir) / asset.removeprefix(ASSET_PREFIX)
        if not (
            src.resolve().is_relative_to(assets_root)
            and dst.resolve().is_relative_to(output_root)
        ):
            raise ValueError(f"post '{post.slug}': asset {asset} points outside {ASSET_PREFIX}")
        if not src.is_file():
            raise FileNotFoundError(f"post '{post.slug}': asset {asset} not found at {src}")
        dst.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src, dst)
        copied.append(dst)
    return copied


def copy_static_assets(assets_dir: Path, output_dir: Path) -> int:
    """Copy top-level static files (stylesheets, icons) to the output root."""
    if not assets_dir.is_dir():
        return 0
    count = 0
    for src in sorted(assets_dir.iterdir()):
        if src.is_file():
            shutil.copy2(src, output_dir / src.name)
            count += 1
    return count


def _json_default(value):
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def site_to_dict(site: Site) -> dict:
    """Site model as plain data; post HTML points at relocated assets."""
    posts = [
        dataclasses.replace(post, content=rewrite_asset_paths(post.content))
        for post in site.posts
    ]
    return dataclasses.asdict(dataclasses.replace(site, posts=posts))


def build(config: Config) -> dict:
    """Build the site model and write it to the output directory.

    Returns a summary dict with counts.
    """
    site = scan_content(config)
    content_dir = Path(config.content_dir)
    out = Path(config.output_dir)
    out.mkdir(parents=True, exist_ok=True)

    (out / "site.json").write_text(
        json.dumps(site_to_dict(site), indent=2, ensure_ascii=False, default=_json_default) + "\n",
        encoding="utf-8",
    )

    for post in site.posts:
        copy_post_assets(post, content_dir, out / BLOG_DIR / post.slug)
    static = copy_static_assets(Path(config.assets_dir), out)
    logger.debug("Copied %d static assets", static)

    items = collect_feed_items(site, config.feed_pages)
    if items is None:
        logger.info("No posts or feed sections, skipping feed.xml")
    else:
        (out / "feed.xml").write_text(render_feed(site, items), encoding="utf-8")

    return {
        "pages": len(site.pages),
        "posts": len(site.posts),
        "feed_items": len(items) if items else 0,
        "words": sum(p.word_count for p in site.posts),
    }


def main():
    parser = argparse.ArgumentParser(description="Build the site model from Markdown content")
    parser.add_argument("--config", default="ssg.yaml", help="Path to ssg.yaml")
    parser.add_argument("--content-dir", help="Override build.content")
    parser.add_argument("--output-dir", help="Override build.output")
    parser.add_argument("--assets-dir", help="Override build.assets")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config, args.content_dir, args.output_dir, args.assets_dir)
        summary = build(config)
    except (ContentParseError, FileNotFoundError, ValueError) as exc:
        print(f"FAILED — {exc}", file=sys.stderr)
        sys.exit(1)

    print(
        f"Built {summary['pages']} pages and {summary['posts']} posts "
        f"({summary['feed_items']} feed items, {summary['words']} words)"
    )
    sys.exit(0)


if __name__ == "__main__":
    main()
