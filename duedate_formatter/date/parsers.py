from __future__ import annotations

import re
from datetime import date, datetime, timedelta

from .types import RELATIVE_DAYS, WEEKDAYS, ParseOutcome, PassThrough, ResolvedDate

# "2025年 3月 15日", "3月 15日", "15日"; year and month are optional.
DATE_TEXT_RE = re.compile(r"((?P<year>\d+)年 )?((?P<month>\d+)月 )?(?P<day>\d+)日", re.ASCII)


def _as_date(d: date | datetime | ResolvedDate) -> date:
    if isinstance(d, ResolvedDate):
        return d.d
    if isinstance(d, datetime):
        return d.date()
    return d


def _lenient_date(year: int, month: int, day: int) -> date | None:
    """Build a date letting month/day overflow roll forward (Apr 31 -> May 1, month 13 -> Jan).

    Zero or negative month/day is treated as malformed rather than rolled back.
    """
    if month < 1 or day < 1:
        return None
    y = year + (month - 1) // 12
    m = (month - 1) % 12 + 1
    try:
        return date(y, m, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError):
        return None


def _resolve_weekday(text: str, today: date) -> date:
    offset = WEEKDAYS.index(text) - today.isoweekday() % 7
    if offset < 0:
        offset += 7
    return today + timedelta(days=offset)


def _resolve_relative(text: str, today: date) -> date:
    return today + timedelta(days=RELATIVE_DAYS.index(text) - 1)


def _resolve_numeric(m: re.Match[str], base: date) -> date | None:
    try:
        year = int(m.group("year")) if m.group("year") else base.year
        month = int(m.group("month")) if m.group("month") else base.month
        day = int(m.group("day"))
    except ValueError:
        return None
    return _lenient_date(year, month, day)


def resolve(
    text: str,
    today: date | datetime,
    previous_date: ResolvedDate | date | None = None,
) -> ParseOutcome:
    """Resolve a due-date label to a calendar date.

    Tried in order: weekday name, relative day, numeric `[Y年 ][M月 ]D日`.
    Missing year/month in the numeric form come from `previous_date` when given
    (range continuation), else from `today`. Anything unrecognised or invalid
    comes back as PassThrough(text).
    """

    t = _as_date(today)

    try:
        if text in WEEKDAYS:
            return ResolvedDate(_resolve_weekday(text, t))
        if text in RELATIVE_DAYS:
            return ResolvedDate(_resolve_relative(text, t))
    except OverflowError:
        # today is at the edge of date.min / date.max
        return PassThrough(text)

    m = DATE_TEXT_RE.search(text)
    if m:
        base = _as_date(previous_date) if previous_date is not None else t
        d = _resolve_numeric(m, base)
        if d is not None:
            return ResolvedDate(d)

    return PassThrough(text)
