"""Site model shared by the parser, the feed aggregator and the builder.

Values are built once during ingestion and never mutated.
"""

import datetime
from dataclasses import dataclass, field

from .dates import format_long_date


@dataclass(frozen=True)
class NavItem:
    title: str
    url: str


@dataclass(frozen=True)
class Topic:
    """A recurring content word and how often it occurs."""

    word: str
    count: int


@dataclass(frozen=True)
class MonthGroup:
    """Date anchors of one month, in document order."""

    year: int
    month: str
    dates: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class YearGroup:
    """Archived months of one year, newest month first."""

    year: int
    months: list[MonthGroup] = field(default_factory=list)


@dataclass(frozen=True)
class Page:
    title: str
    slug: str
    content: str
    path: str
    summary: str = ""
    word_count: int = 0
    date_anchors: list[str] = field(default_factory=list)
    current_month_dates: list[str] = field(default_factory=list)
    archived_years: list[YearGroup] = field(default_factory=list)
    topics: list[Topic] = field(default_factory=list)


@dataclass(frozen=True)
class Post(Page):
    date: datetime.date | None = None
    assets: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Config:
    title: str
    base_url: str
    description: str = ""
    author: str = ""
    content_dir: str = "content"
    output_dir: str = "public"
    assets_dir: str = "assets"
    navigation: list[NavItem] = field(default_factory=list)
    feed_pages: list[str] = field(default_factory=list)
    topic_pages: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Site:
    title: str
    base_url: str
    description: str = ""
    author: str = ""
    navigation: list[NavItem] = field(default_factory=list)
    pages: list[Page] = field(default_factory=list)
    posts: list[Post] = field(default_factory=list)


@dataclass(frozen=True)
class PostFeedItem:
    """Feed entry backed by a blog post."""

    post: Post
    base_url: str

    @property
    def title(self) -> str:
        return self.post.title

    @property
    def link(self) -> str:
        return f"{self.base_url}/blog/{self.post.slug}/"

    @property
    def content(self) -> str:
        return self.post.content

    @property
    def date(self) -> datetime.date | None:
        return self.post.date

    @property
    def id(self) -> str:
        return self.link


@dataclass(frozen=True)
class DateSectionFeedItem:
    """Feed entry for one date-anchored section lifted out of a page."""

    page_title: str
    page_path: str
    anchor: str
    content: str
    date: datetime.date
    base_url: str

    @property
    def title(self) -> str:
        return f"{self.page_title} - {format_long_date(self.date)}"

    @property
    def link(self) -> str:
        return f"{self.base_url}{self.page_path}#{self.anchor}"

    @property
    def id(self) -> str:
        return self.link


FeedItem = PostFeedItem | DateSectionFeedItem
