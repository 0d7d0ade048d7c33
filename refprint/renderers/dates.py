"""Date rendering: absolute UTC instant plus a rounded relative phrase."""
from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

from refprint.layout import Line, blank, container
from refprint.paths import Path
from refprint.renderers.objects import own_attributes, render_properties

if TYPE_CHECKING:
    from refprint.walker import Walker

log = logging.getLogger(__name__)


MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY
MONTH = 30 * DAY
YEAR = 365 * DAY

# Largest first
UNITS = [
    ("year", YEAR),
    ("month", MONTH),
    ("day", DAY),
    ("hour", HOUR),
    ("minute", MINUTE),
    ("second", 1),
]


def as_aware(value: date) -> datetime:
    """``value`` as an aware datetime; naive values and plain dates are UTC."""
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.utcoffset() is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def to_utc(value: date) -> datetime:
    """Aware UTC datetime for ``value``; naive values are read as UTC.

    Raises OverflowError when the UTC instant falls outside the datetime range.
    """
    return as_aware(value).astimezone(timezone.utc)


def format_offset(offset: timedelta) -> str:
    """``+HHMM`` / ``-HHMM`` for a UTC offset."""
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(offset) // timedelta(minutes=1)
    return f"{sign}{minutes // 60:02d}{minutes % 60:02d}"


def format_instant(value: date) -> str:
    """``YYYY-MM-DD HH:MM:SS[.fraction] GMT`` with trailing zeros trimmed.

    Instants that cannot be shifted to UTC keep their wall clock and print the
    offset after ``GMT``.
    """
    zone = "GMT"
    try:
        t = to_utc(value)
    except OverflowError:
        t = as_aware(value)
        zone += format_offset(t.utcoffset())
        log.debug("%r is out of range in UTC, printing wall clock", value)
    text = (f"{t.year:04d}-{t.month:02d}-{t.day:02d} "
            f"{t.hour:02d}:{t.minute:02d}:{t.second:02d}")
    fraction = f"{t.microsecond:06d}".rstrip("0")
    if fraction:
        text += "." + fraction
    return f"{text} {zone}"


def describe_interval(seconds: float) -> str:
    """Human phrase for an offset; positive offsets lie in the past."""
    suffix = "ago" if seconds >= 0 else "from now"
    span = abs(seconds)

    for unit, size in UNITS:
        if span >= size:
            break

    # Whole seconds always; whole units past a week
    places = Decimal(1) if unit == "second" or span > WEEK else Decimal("0.1")
    amount = Decimal(repr(span / size)).quantize(places, rounding=ROUND_HALF_UP)
    text = format(amount.normalize(), "f")
    if amount != 1:
        unit += "s"
    return f"{text} {unit} {suffix}"


def relative_phrase(value: date, now: datetime) -> str:
    # Aware subtraction works in timedeltas, so no UTC conversion can overflow
    return describe_interval((as_aware(now) - as_aware(value)).total_seconds())


def render_date(walker: Walker, value: date, path: Path) -> list[Line]:
    body = [
        Line(0, format_instant(value)),
        Line(0, relative_phrase(value, walker.now)),
    ]
    extras = own_attributes(value)
    if extras:
        body.append(blank())
        body.extend(render_properties(walker, extras, path))
    return container("Date{", body, "}")
