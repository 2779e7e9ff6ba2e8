"""Value types and validation rules."""

from __future__ import annotations

from .clock import Clock, utcnow
from .dateonly import DateOnly, parse_date_text
from .errors import ParseError, ScanError
from .timeonly import TimeOnly, parse_time_text
from .validation import Field, FormRequest, Validation

__all__ = [
    "Clock",
    "DateOnly",
    "Field",
    "FormRequest",
    "ParseError",
    "ScanError",
    "TimeOnly",
    "Validation",
    "parse_date_text",
    "parse_time_text",
    "utcnow",
]
