"""SQLAlchemy column types that persist the nullable temporal wrappers as text."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import String, TypeDecorator

from webtoolkit.domain.clock import Clock, utcnow
from webtoolkit.domain.dateonly import DateOnly
from webtoolkit.domain.errors import ParseError, ScanError
from webtoolkit.domain.timeonly import TimeOnly

if TYPE_CHECKING:
    from sqlalchemy import Dialect

log = logging.getLogger(__name__)


class DateOnlyType(TypeDecorator[DateOnly]):
    """Store :class:`DateOnly` as ``YYYY-MM-DD``; ``NULL`` loads as an absent date."""

    impl = String(10)
    cache_ok = True

    def process_bind_param(self, value: DateOnly | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        return value.to_storage()

    def process_result_value(self, value: object, dialect: Dialect) -> DateOnly:
        _ = dialect
        try:
            return DateOnly.from_storage(value)
        except (ParseError, ScanError):
            log.warning("Unreadable DateOnly column value %r", value)
            raise


class TimeOnlyType(TypeDecorator[TimeOnly]):
    """Store :class:`TimeOnly` as ``HH:MM``; loaded strings are anchored with ``clock``."""

    impl = String(5)
    cache_ok = True

    def __init__(self, *, clock: Clock = utcnow) -> None:
        super().__init__()
        self.clock = clock

    def process_bind_param(self, value: TimeOnly | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        return value.to_storage()

    def process_result_value(self, value: object, dialect: Dialect) -> TimeOnly:
        _ = dialect
        try:
            return TimeOnly.from_storage(value, clock=self.clock)
        except (ParseError, ScanError):
            log.warning("Unreadable TimeOnly column value %r", value)
            raise


__all__ = ["DateOnlyType", "TimeOnlyType"]
