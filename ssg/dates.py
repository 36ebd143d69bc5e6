"""Publication dates and slugs derived from filenames and frontmatter."""

import calendar
import re
from datetime import date, datetime
from pathlib import Path

ISO_FORMAT = "%Y-%m-%d"

HOME_SLUG = "home"

DATE_FILENAME_RE = re.compile(r"^([0-9]{4}-[0-9]{2}-[0-9]{2})-(.+)\.md$")
_ISO_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


def parse_iso_date(value: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` string.

    Raises:
        ValueError: If the value is not zero-padded ISO or not a real
            calendar date.
    """
    if not isinstance(value, str) or not _ISO_DATE_RE.match(value):
        raise ValueError(f"expected YYYY-MM-DD, got {value!r}")
    return datetime.strptime(value, ISO_FORMAT).date()


def format_long_date(value: date) -> str:
    """Format a date as ``January 28, 2026``."""
    return f"{calendar.month_name[value.month]} {value.day}, {value.year}"


def resolve_post_slug_and_date(
    filename: str, frontmatter_date: str | None = None
) -> tuple[str, date | None]:
    """Derive a post's slug and publication date.

    ``YYYY-MM-DD-<slug>.md`` yields the slug and the embedded date; any
    other name becomes the slug whole (minus ``.md``) with no date. A
    frontmatter date, when given, overrides the filename date.

    Raises:
        ValueError: If either date is malformed. The message quotes the
            offending text and says where it came from.
    """
    slug = filename.removesuffix(".md")
    post_date = None

    match = DATE_FILENAME_RE.match(filename)
    if match:
        try:
            post_date = parse_iso_date(match.group(1))
        except ValueError as exc:
            raise ValueError(f"invalid date in filename '{match.group(1)}'") from exc
        slug = match.group(2)

    if frontmatter_date:
        try:
            post_date = parse_iso_date(str(frontmatter_date))
        except ValueError as exc:
            raise ValueError(
                f"invalid date in frontmatter '{frontmatter_date}'"
            ) from exc

    return slug, post_date


def page_slug_and_path(filename: str) -> tuple[str, str]:
    """Return ``(slug, path)`` for a page; ``home`` maps to the site root."""
    slug = Path(filename).name.removesuffix(".md")
    if slug == HOME_SLUG:
        return "", "/"
    return slug, f"/{slug}/"
