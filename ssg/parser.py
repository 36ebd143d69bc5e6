"""Build Page and Post content units from Markdown files.

Every derived field is computed here, once, from the raw body:
rendered HTML, word count, date anchors and their archive, topics for
pages and asset references for posts.
"""

from pathlib import Path

from .anchors import extract_date_anchors, group_dates_by_month, group_months_by_year
from .assets import extract_asset_references
from .converter import markdown_to_html
from .dates import page_slug_and_path, resolve_post_slug_and_date
from .frontmatter import FrontmatterError, extract_frontmatter
from .models import Page, Post
from .topics import extract_topics
from .wordcount import count_words


class ContentParseError(ValueError):
    """A content file could not be ingested.

    The message always starts with the offending file's path.
    """

    def __init__(self, path, problem: str):
        self.path = Path(path)
        self.problem = problem
        super().__init__(f"{path}: {problem}")


def _read_content(path: Path) -> tuple[dict, str]:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ContentParseError(path, f"not valid UTF-8: {exc.reason}") from exc
    try:
        return extract_frontmatter(text)
    except FrontmatterError as exc:
        raise ContentParseError(path, str(exc)) from exc


def _text_field(fm: dict, key: str) -> str:
    value = fm.get(key)
    return "" if value is None else str(value)


def parse_page(path, with_topics: bool = False) -> Page:
    """Parse a page. ``home.md`` becomes the site root.

    Args:
        path: Markdown file to read.
        with_topics: Extract topics; only pages configured for it pay
            for the tokenizer.

    Raises:
        ContentParseError: If the file is not UTF-8 or its frontmatter is
            malformed.
        OSError: If the file cannot be read.
    """
    path = Path(path)
    fm, body = _read_content(path)
    slug, page_path = page_slug_and_path(path.name)

    anchors = extract_date_anchors(body)
    current_month, archived_months = group_dates_by_month(anchors)

    return Page(
        title=_text_field(fm, "title"),
        slug=slug,
        content=markdown_to_html(body),
        path=page_path,
        summary=_text_field(fm, "summary"),
        word_count=count_words(body),
        date_anchors=anchors,
        current_month_dates=current_month,
        archived_years=group_months_by_year(archived_months),
        topics=extract_topics(body) if with_topics else [],
    )


def parse_post(path) -> Post:
    """Parse a blog post named ``YYYY-MM-DD-<slug>.md``.

    The frontmatter ``date`` overrides the filename date.

    Raises:
        ContentParseError: If the file is not UTF-8, or its frontmatter or
            either date is malformed.
        OSError: If the file cannot be read.
    """
    path = Path(path)
    fm, body = _read_content(path)
    try:
        slug, post_date = resolve_post_slug_and_date(path.name, fm.get("date"))
    except ValueError as exc:
        raise ContentParseError(path, str(exc)) from exc

    return Post(
        title=_text_field(fm, "title"),
        slug=slug,
        content=markdown_to_html(body),
        path=f"/blog/{slug}/",
        summary=_text_field(fm, "summary"),
        word_count=count_words(body),
        date=post_date,
        assets=extract_asset_references(body),
    )
