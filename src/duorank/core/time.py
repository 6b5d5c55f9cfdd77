"""Time and season helpers for tournament timestamps."""

from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

MIN_UTC = datetime.min.replace(tzinfo=timezone.utc)
MAX_UTC = datetime.max.replace(tzinfo=timezone.utc)

_BOUND_RE = re.compile(
    r"""
    ^(?P<year>\d{4})
    (?:-(?P<month>\d{2})
    (?:-(?P<day>\d{2})
    (?:T(?P<hour>\d{2})
    (?::(?P<minute>\d{2})
    (?::(?P<second>\d{2})
    )?)?)?)?)?
    (?P<offset>Z|[+-]\d{2}:?\d{2})?$
    """,
    re.VERBOSE,
)


def ensure_utc(value: datetime) -> datetime:
    """Return an aware UTC datetime; naive values are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _parse_offset(raw: str | None) -> timezone:
    if raw is None or raw == "Z":
        return timezone.utc
    sign = -1 if raw[0] == "-" else 1
    digits = raw[1:].replace(":", "")
    delta = timedelta(hours=int(digits[:2]), minutes=int(digits[2:]))
    return timezone(sign * delta)


def parse_date_bound(text: str, upper: bool = False) -> datetime:
    """Parse a possibly partial ISO-like timestamp into a UTC datetime.

    Components that are not given are filled with the start of the period,
    or with its end when ``upper`` is set, so ``"2023"`` as an upper bound
    means the last second of 2023.

    Args:
        text: ``YYYY[-MM[-DD[THH[:MM[:SS]]]]]`` with an optional ``Z`` or
            ``+HH:MM`` offset.
        upper: Fill missing components to the end of the period.

    Returns:
        Aware datetime in UTC.

    Raises:
        ValueError: If the text is not a valid timestamp.
    """
    match = _BOUND_RE.match(text.strip())
    if match is None:
        raise ValueError(f"Could not parse datetime: {text!r}")

    def _field(name: str, default: int) -> int:
        raw = match.group(name)
        return int(raw) if raw is not None else default

    year = _field("year", 0)
    month = _field("month", 12 if upper else 1)
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month in {text!r}")
    last_day = calendar.monthrange(year, month)[1]
    day = _field("day", last_day if upper else 1)
    hour = _field("hour", 23 if upper else 0)
    minute = _field("minute", 59 if upper else 0)
    second = _field("second", 59 if upper else 0)

    local = datetime(
        year,
        month,
        day,
        hour,
        minute,
        second,
        tzinfo=_parse_offset(match.group("offset")),
    )
    try:
        return local.astimezone(timezone.utc)
    except OverflowError as exc:
        raise ValueError(f"Datetime out of range: {text!r}") from exc


@dataclass
class Clock:
    """Clock abstraction so "now" can be injected in tests."""

    now_datetime: datetime | None = None

    @property
    def now(self) -> datetime:
        if self.now_datetime is not None:
            return ensure_utc(self.now_datetime)
        return datetime.now(timezone.utc)

    @property
    def current_season(self) -> int:
        """The season (calendar year) that ages are measured against."""
        return self.now.year
