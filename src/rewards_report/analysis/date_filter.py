"""
Date-range filtering for nominations.

A nomination is in range when it has a nomination_date and
start <= date <= end. Dates without a timezone (including date-only
strings such as "2024-01-10") are read as UTC.
"""

import logging
from datetime import date, datetime, time, timezone
from typing import Iterable, Optional, Union

from dateutil.parser import isoparse

from rewards_report.records import Nomination

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]


def to_utc(value: DateLike) -> datetime:
    """Normalize a date or datetime to an aware UTC datetime."""
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_nomination_date(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 nomination date, returning None if absent or invalid."""
    if not value:
        return None
    try:
        return to_utc(isoparse(value))
    except (ValueError, OverflowError):
        logger.debug("Ignoring unparseable nomination_date %r", value)
        return None


def day_bounds(start_day: date, end_day: date) -> tuple[datetime, datetime]:
    """Expand a pair of calendar days to [start 00:00, end 23:59:59.999999] UTC."""
    start = datetime.combine(start_day, time.min, tzinfo=timezone.utc)
    end = datetime.combine(end_day, time.max, tzinfo=timezone.utc)
    return start, end


def filter_by_date_range(
    nominations: Iterable[Nomination],
    start: DateLike,
    end: DateLike,
) -> list[Nomination]:
    """
    Keep nominations dated inside the inclusive window [start, end].

    Nominations with no date are always dropped. When start is after end
    the result is empty.

    Args:
        nominations: Nominations to filter (not modified)
        start: Window start (date or datetime)
        end: Window end (date or datetime)

    Returns:
        New list of matching nominations in input order
    """
    start_utc = to_utc(start)
    end_utc = to_utc(end)

    if start_utc > end_utc:
        return []

    filtered = []
    for nomination in nominations:
        when = parse_nomination_date(nomination.nomination_date)
        if when is not None and start_utc <= when <= end_utc:
            filtered.append(nomination)
    return filtered
