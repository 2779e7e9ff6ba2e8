"""Nullable time of day with minute granularity.

The wrapped ``datetime`` carries a date part only as an anchor. Directly built
values sit on :data:`~webtoolkit.config.formats.REFERENCE_DATE`; values parsed
from text or read from storage strings sit on the current UTC day, and native
storage values are moved back onto the reference date. Equality therefore only
looks at hour and minute while ordering compares the whole instant.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta

from webtoolkit.config.formats import (
    NULL_TOKEN,
    REFERENCE_DATE,
    TIME_FORMAT,
    TIME_PATTERN,
    ZERO_INSTANT,
)

from .clock import Clock, utcnow
from .dateonly import strip_json_quotes
from .errors import ParseError, ScanError

_LAYOUT = "HH:MM"


def parse_time_text(text: str) -> time:
    """Parse ``text`` strictly as ``HH:MM``."""

    if not TIME_PATTERN.fullmatch(text):
        raise ParseError(text, _LAYOUT)
    try:
        parsed = datetime.strptime(text, TIME_FORMAT)  # noqa: DTZ007
    except ValueError as exc:
        raise ParseError(text, _LAYOUT) from exc
    return parsed.time()


def _anchor(day: date, hour: int, minute: int) -> datetime:
    return datetime.combine(day, time(hour, minute), tzinfo=UTC)


@dataclass(frozen=True, slots=True)
class TimeOnly:
    """Optional hour and minute; ``TimeOnly()`` is the absent value."""

    value: datetime | None = None

    def __post_init__(self) -> None:
        if self.value is not None and self.value.tzinfo is None:
            object.__setattr__(self, "value", self.value.replace(tzinfo=UTC))

    @classmethod
    def of(cls, hour: int, minute: int) -> TimeOnly:
        """Build a time on the reference date, rolling overflowing minutes into hours."""

        start = datetime.combine(REFERENCE_DATE, time(0), tzinfo=UTC)
        return cls(start + timedelta(hours=hour, minutes=minute))

    @classmethod
    def parse(cls, text: str, *, clock: Clock = utcnow) -> TimeOnly:
        """Parse a quoted or bare ``HH:MM`` string anchored to today."""

        stripped = strip_json_quotes(text)
        if stripped in (NULL_TOKEN, ""):
            return cls()
        parsed = parse_time_text(stripped)
        return cls(_anchor(clock().date(), parsed.hour, parsed.minute))

    @classmethod
    def from_json(cls, raw: str | bytes, *, clock: Clock = utcnow) -> TimeOnly:
        if isinstance(raw, bytes):
            raw = raw.decode()
        return cls.parse(raw.strip(), clock=clock)

    @classmethod
    def from_storage(cls, raw: object, *, clock: Clock = utcnow) -> TimeOnly:
        if raw is None:
            return cls()
        if isinstance(raw, str):
            parsed = parse_time_text(raw)
            return cls(_anchor(clock().date(), parsed.hour, parsed.minute))
        if isinstance(raw, (datetime, time)):
            return cls(_anchor(REFERENCE_DATE, raw.hour, raw.minute))
        raise ScanError("TimeOnly", raw)

    def to_text(self) -> str | None:
        if self.value is None:
            return None
        return f"{self.value.hour:02d}:{self.value.minute:02d}"

    def to_json(self) -> str:
        return json.dumps(self.to_text())

    def to_storage(self) -> str | None:
        return self.to_text()

    def is_zero(self) -> bool:
        return self.value is None

    def equal(self, other: TimeOnly | None) -> bool:
        if self.value is None or other is None or other.value is None:
            return False
        return (self.value.hour, self.value.minute) == (other.value.hour, other.value.minute)

    def after(self, other: TimeOnly | None) -> bool:
        if self.value is None or other is None or other.value is None:
            return False
        return self.value > other.value

    def before(self, other: TimeOnly | None) -> bool:
        if self.value is None or other is None or other.value is None:
            return False
        return self.value < other.value

    def to_datetime(self) -> datetime:
        if self.value is None:
            return ZERO_INSTANT
        return self.value

    def add(self, delta: timedelta) -> TimeOnly:
        if self.value is None:
            return TimeOnly()
        return TimeOnly(self.value + delta)

    def __str__(self) -> str:
        text = self.to_text()
        return NULL_TOKEN if text is None else text


__all__ = ["TimeOnly", "parse_time_text"]
