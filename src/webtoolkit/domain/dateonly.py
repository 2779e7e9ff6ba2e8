"""Nullable calendar date stored as a UTC midnight instant.

``DateOnly`` is a tagged option around a ``datetime``: ``value is None`` is the
absent state and is a regular value, never an error. Text and storage forms
both use the ``YYYY-MM-DD`` layout; absence maps to JSON ``null`` and SQL ``NULL``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta

from webtoolkit.config.formats import (
    DATE_FORMAT,
    DATE_PATTERN,
    END_OF_DAY_NANOSECOND,
    NULL_TOKEN,
    ZERO_INSTANT,
)

from .errors import ParseError, ScanError

_LAYOUT = "YYYY-MM-DD"


def strip_json_quotes(text: str) -> str:
    """Remove surrounding double quotes from a JSON scalar."""

    return text.strip('"')


def parse_date_text(text: str) -> date:
    """Parse ``text`` strictly as ``YYYY-MM-DD``."""

    if not DATE_PATTERN.fullmatch(text):
        raise ParseError(text, _LAYOUT)
    try:
        return datetime.strptime(text, DATE_FORMAT).date()  # noqa: DTZ007
    except ValueError as exc:
        raise ParseError(text, _LAYOUT) from exc


def _utc_midnight(day: date) -> datetime:
    return datetime.combine(day, time(0), tzinfo=UTC)


@dataclass(frozen=True, slots=True)
class DateOnly:
    """Optional calendar date; ``DateOnly()`` is the absent value."""

    value: datetime | None = None

    def __post_init__(self) -> None:
        if self.value is not None and self.value.tzinfo is None:
            object.__setattr__(self, "value", self.value.replace(tzinfo=UTC))

    @classmethod
    def of(cls, year: int, month: int, day: int) -> DateOnly:
        """Build a date at UTC midnight, rolling overflowing months and days forward."""

        year += (month - 1) // 12
        month = (month - 1) % 12 + 1
        first = datetime(year, month, 1, tzinfo=UTC)
        return cls(first + timedelta(days=day - 1))

    @classmethod
    def parse(cls, text: str) -> DateOnly:
        """Parse a quoted or bare ``YYYY-MM-DD`` string; ``null`` and ``""`` are absent."""

        stripped = strip_json_quotes(text)
        if stripped in (NULL_TOKEN, ""):
            return cls()
        return cls(_utc_midnight(parse_date_text(stripped)))

    @classmethod
    def from_json(cls, raw: str | bytes) -> DateOnly:
        if isinstance(raw, bytes):
            raw = raw.decode()
        return cls.parse(raw.strip())

    @classmethod
    def from_storage(cls, raw: object) -> DateOnly:
        """Read a value produced by a database driver.

        Native ``datetime`` values are kept as they are (naive ones are tagged UTC),
        plain ``date`` values land on UTC midnight and strings are parsed strictly.
        """

        if raw is None:
            return cls()
        if isinstance(raw, datetime):
            return cls(raw)
        if isinstance(raw, date):
            return cls(_utc_midnight(raw))
        if isinstance(raw, str):
            return cls(_utc_midnight(parse_date_text(raw)))
        raise ScanError("DateOnly", raw)

    def to_text(self) -> str | None:
        if self.value is None:
            return None
        return self.value.date().isoformat()

    def to_json(self) -> str:
        return json.dumps(self.to_text())

    def to_storage(self) -> str | None:
        return self.to_text()

    def is_zero(self) -> bool:
        return self.value is None or self.value == ZERO_INSTANT

    def after(self, other: DateOnly | None) -> bool:
        if self.value is None or other is None or other.value is None:
            return False
        return self.value > other.value

    def before(self, other: DateOnly | None) -> bool:
        if self.value is None or other is None or other.value is None:
            return False
        return self.value < other.value

    def equal(self, other: DateOnly | None) -> bool:
        if self.value is None or other is None or other.value is None:
            return False
        return self.value == other.value

    def to_datetime(self) -> datetime:
        if self.value is None:
            return ZERO_INSTANT
        return self.value

    def add(self, delta: timedelta) -> DateOnly:
        if self.value is None:
            return DateOnly()
        return DateOnly(self.value + delta)

    def start_of_day(self) -> datetime:
        if self.value is None:
            return ZERO_INSTANT
        return _utc_midnight(self.value.date())

    def end_of_day(self) -> datetime:
        """Return the last representable instant of the day in UTC.

        The 999 ns offset is below microsecond resolution, so the result is
        ``23:59:59.000000`` rather than ``23:59:59.999``.
        """

        if self.value is None:
            return ZERO_INSTANT
        return datetime.combine(
            self.value.date(),
            time(23, 59, 59, END_OF_DAY_NANOSECOND // 1000),
            tzinfo=UTC,
        )

    def __str__(self) -> str:
        text = self.to_text()
        return NULL_TOKEN if text is None else text


__all__ = ["DateOnly", "parse_date_text", "strip_json_quotes"]
