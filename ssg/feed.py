"""Feed aggregation: blog posts plus dated sections of selected pages.

Pages listed as feed pages contribute one item per date heading found in
their rendered HTML. Everything is merged, ordered newest first and
capped at MAX_FEED_ITEMS.
"""

import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from datetime import date, datetime, timezone
from email.utils import format_datetime

from .dates import parse_iso_date
from .models import DateSectionFeedItem, FeedItem, Page, PostFeedItem, Site

logger = logging.getLogger(__name__)

MAX_FEED_ITEMS = 20

# <h2 id="2026-01-27"><a class="toclink" href="#2026-01-27">...</a></h2>
DATE_HEADER_RE = re.compile(r'<h[1-6] id="([0-9]{4}-[0-9]{2}-[0-9]{2})">.*?</h[1-6]>')


@dataclass(frozen=True)
class FeedDateSection:
    """HTML between one date heading and the next."""

    anchor: str
    content: str


def extract_feed_date_sections(html: str) -> list[FeedDateSection]:
    """Cut rendered page HTML into date-anchored sections.

    A section runs from its date heading to the next date heading or the
    end of the document. Sections with only whitespace are dropped.
    """
    matches = list(DATE_HEADER_RE.finditer(html))
    sections = []
    for i, match in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(html)
        content = html[match.end():end].strip()
        if not content:
            continue
        sections.append(FeedDateSection(anchor=match.group(1), content=content))
    return sections


def normalize_page_path(path: str) -> str:
    """Give a configured page path its leading and trailing slash."""
    stripped = path.strip("/")
    return f"/{stripped}/" if stripped else "/"


def find_page_by_path(pages: list[Page], path: str) -> Page | None:
    target = normalize_page_path(path)
    for page in pages:
        if page.path == target:
            return page
    return None


def _sort_key(item: FeedItem) -> date:
    return item.date or date.min


def collect_feed_items(site: Site, feed_pages: list[str] | None = None) -> list[FeedItem] | None:
    """Merge posts and feed-page sections into one ordered feed.

    Returns None when there is nothing to syndicate, so callers never
    write an empty feed document. Unknown feed pages are skipped.
    """
    items: list[FeedItem] = [PostFeedItem(post=post, base_url=site.base_url) for post in site.posts]

    for path in feed_pages or []:
        page = find_page_by_path(site.pages, path)
        if page is None:
            logger.debug("Feed page %s not found, skipping", path)
            continue
        for section in extract_feed_date_sections(page.content):
            try:
                section_date = parse_iso_date(section.anchor)
            except ValueError:
                logger.debug("Skipping section %s on %s: not a calendar date", section.anchor, page.path)
                continue
            items.append(
                DateSectionFeedItem(
                    page_title=page.title,
                    page_path=page.path,
                    anchor=section.anchor,
                    content=section.content,
                    date=section_date,
                    base_url=site.base_url,
                )
            )

    if not items:
        return None
    items.sort(key=_sort_key, reverse=True)
    return items[:MAX_FEED_ITEMS]


def _rfc2822(value: date) -> str:
    return format_datetime(datetime(value.year, value.month, value.day, tzinfo=timezone.utc))


def render_feed(site: Site, items: list[FeedItem], now: datetime | None = None) -> str:
    """Serialize feed items as an RSS 2.0 document."""
    now = now or datetime.now(timezone.utc)

    rss = ET.Element("rss", version="2.0")
    channel = ET.SubElement(rss, "channel")
    ET.SubElement(channel, "title").text = site.title
    ET.SubElement(channel, "link").text = site.base_url
    ET.SubElement(channel, "description").text = site.description
    ET.SubElement(channel, "lastBuildDate").text = format_datetime(now)

    for item in items[:MAX_FEED_ITEMS]:
        entry = ET.SubElement(channel, "item")
        ET.SubElement(entry, "title").text = item.title
        ET.SubElement(entry, "link").text = item.link
        ET.SubElement(entry, "guid", isPermaLink="true").text = item.id
        ET.SubElement(entry, "description").text = item.content
        if item.date is not None:
            ET.SubElement(entry, "pubDate").text = _rfc2822(item.date)

    ET.indent(rss)
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + ET.tostring(rss, encoding="unicode") + "\n"
