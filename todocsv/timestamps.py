"""Timestamps in the numeric-zone RFC 822 form kept in the todo file."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_MONTH_NUMBERS = {name.lower(): number for number, name in enumerate(_MONTHS, start=1)}

_PATTERN = re.compile(
    r"(\d{2}) ([A-Za-z]{3}) (\d{2}) (\d{1,2}):(\d{2}) ([+-])(\d{2})(\d{2})"
)


def format_timestamp(moment: datetime) -> str:
    """Format a moment as ``DD Mon YY HH:MM +hhmm``; naive moments are local time."""
    if moment.tzinfo is None:
        moment = moment.astimezone()
    offset = moment.utcoffset() or timedelta()
    offset_minutes = int(offset.total_seconds()) // 60
    sign = "-" if offset_minutes < 0 else "+"
    hours, minutes = divmod(abs(offset_minutes), 60)
    return (
        f"{moment.day:02d} {_MONTHS[moment.month - 1]} {moment.year % 100:02d} "
        f"{moment.hour:02d}:{moment.minute:02d} {sign}{hours:02d}{minutes:02d}"
    )


def parse_timestamp(text: str) -> datetime:
    """Parse a timestamp written by :func:`format_timestamp`.

    Raises ValueError when the text is not in that form.
    """
    match = _PATTERN.fullmatch(text)
    if match is None:
        raise ValueError(f"cannot parse {text!r} as a timestamp")
    day, month_name, year, hour, minute, sign, offset_hours, offset_minutes = match.groups()
    month = _MONTH_NUMBERS.get(month_name.lower())
    if month is None:
        raise ValueError(f"cannot parse {text!r} as a timestamp: bad month")
    short_year = int(year)
    full_year = short_year + (1900 if short_year >= 69 else 2000)
    offset = timedelta(hours=int(offset_hours), minutes=int(offset_minutes))
    if sign == "-":
        offset = -offset
    try:
        return datetime(
            full_year, month, int(day), int(hour), int(minute), tzinfo=timezone(offset)
        )
    except ValueError as exc:
        raise ValueError(f"cannot parse {text!r} as a timestamp: {exc}") from None


def humanize_age(text: str, now: datetime | None = None) -> str:
    """Describe how long before ``now`` the timestamp ``text`` lies."""
    then = parse_timestamp(text)
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.astimezone()
    seconds = (now - then).total_seconds()
    if seconds < 60:
        return f"{int(seconds)} seconds ago"
    if seconds < 3600:
        return f"{int(seconds / 60)} minutes ago"
    if seconds < 24 * 3600:
        return f"{int(seconds / 3600)} hours ago"
    return f"{int(seconds / 3600 / 24)} days ago"