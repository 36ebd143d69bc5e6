"""Date anchors for diary-style pages and their month/year archive.

A date anchor is a heading whose text starts with an italic ISO date::

    #### *2026-01-26* - Weekly update

The newest month stays inline on the page; every other month is folded
into an archive of years, newest first.
"""

import calendar
import re

from .dates import parse_iso_date
from .models import MonthGroup, YearGroup

DATE_ANCHOR_RE = re.compile(r"^#{1,6} \*([0-9]{4}-[0-9]{2}-[0-9]{2})\*", re.MULTILINE)


def extract_date_anchors(markdown: str) -> list[str]:
    """Return the anchor dates in document order, duplicates included.

    Only the shape is checked here; calendar validity is left to
    :func:`group_dates_by_month`.
    """
    return DATE_ANCHOR_RE.findall(markdown)


def group_dates_by_month(dates: list[str]) -> tuple[list[str], list[MonthGroup]]:
    """Split dates into the current month and archived months.

    The current month is the one holding the most recent valid date.
    Archived months come back newest first, each keeping its dates in
    input order. Unparseable dates are dropped.
    """
    groups: dict[tuple[int, int], list[str]] = {}
    for value in dates:
        try:
            parsed = parse_iso_date(value)
        except ValueError:
            continue
        groups.setdefault((parsed.year, parsed.month), []).append(value)

    if not groups:
        return [], []

    current = max(groups)
    archived = [
        MonthGroup(year=year, month=calendar.month_name[month], dates=groups[(year, month)])
        for year, month in sorted(groups, reverse=True)
        if (year, month) != current
    ]
    return groups[current], archived


def group_months_by_year(months: list[MonthGroup]) -> list[YearGroup]:
    """Fold months into years, newest year first.

    Months keep their input order within a year.
    """
    by_year: dict[int, list[MonthGroup]] = {}
    for month in months:
        by_year.setdefault(month.year, []).append(month)
    return [YearGroup(year=year, months=by_year[year]) for year in sorted(by_year, reverse=True)]
