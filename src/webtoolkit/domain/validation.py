"""Accumulating validator for submitted form fields.

Rules never raise. Each failure is recorded under the field name and only the
first message per field is kept, so callers see the earliest rule that failed.

Two rules keep long-standing behaviour that callers may depend on:

* :meth:`Validation.has` returns ``True`` when the form field is *empty*.
* :meth:`Validation.no_spaces` tests ``value in " "``, so it only flags ``""`` and
  ``" "`` and lets values such as ``"a b"`` through.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final, Protocol

import re2

from .dateonly import parse_date_text
from .errors import ParseError

if TYPE_CHECKING:
    from collections.abc import Mapping

log = logging.getLogger(__name__)

_INT64_MIN: Final[int] = -(2**63)
_INT64_MAX: Final[int] = 2**63 - 1
_INTEGER_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")

_EMAIL_EXTENDED_CHARS: Final[str] = r"\x{00A0}-\x{D7FF}\x{F900}-\x{FDCF}\x{FDF0}-\x{FFEF}"
_EMAIL_PATTERN: Final[str] = (
    # dot-atom local part
    r"(((([a-zA-Z]|\d|[!#\$%&'\*\+\-\/=\?\^_` w2`{\|}~]|[<U>])+"
    r"(\.([a-zA-Z]|\d|[!#\$%&'\*\+\-\/=\?\^_`{\|}~]|[<U>])+)*)|"
    # quoted-string local part
    r"((\x22)((((\x20|\x09)*(\x0d\x0a))?(\x20|\x09)+)?"
    r"(([\x01-\x08\x0b\x0c\x0e-\x1f\x7f]|\x21|[\x23-\x5b]|[\x5d-\x7e]|[<U>])|"
    r"(\([\x01-\x09\x0b\x0c\x0d-\x7f]|[<U>]))))*"
    r"(((\x20|\x09)*(\x0d\x0a))?(\x20|\x09)+)?(\x22)))"
    r"@"
    # domain labels
    r"((([a-zA-Z]|\d|[<U>])|"
    r"(([a-zA-Z]|\d|[<U>])([a-zA-Z]|\d|-|\.|_|~|[<U>])*([a-zA-Z]|\d|[<U>])))\.)+"
    # top-level label
    r"(([a-zA-Z]|[<U>])|"
    r"(([a-zA-Z]|[<U>])([a-zA-Z]|\d|-|_|~|[<U>])*([a-zA-Z]|[<U>])))\.?"
)
# Matched with RE2 so the cost stays linear in the input length.
EMAIL_RE: Final = re2.compile(_EMAIL_PATTERN.replace("<U>", _EMAIL_EXTENDED_CHARS))


class FormRequest(Protocol):
    """Anything exposing decoded form values the way web frameworks do."""

    @property
    def form(self) -> Mapping[str, str]: ...


@dataclass(frozen=True, slots=True)
class Field:
    name: str
    label: str
    value: str


@dataclass
class Validation:
    """Collect validation errors for a set of form values.

    ``data`` is optional so the rules can be used without an HTTP form.
    """

    data: Mapping[str, str] | None = None
    errors: dict[str, str] = field(default_factory=dict[str, str])

    def valid(self) -> bool:
        return len(self.errors) == 0

    def add_error(self, key: str, message: str) -> None:
        if key in self.errors:
            return
        log.debug("Validation failed for %s: %s", key, message)
        self.errors[key] = message

    def form_field(self, name: str, label: str) -> Field:
        """Build a :class:`Field` from ``data``; missing values read as ``""``."""

        value = "" if self.data is None else self.data.get(name, "")
        return Field(name=name, label=label, value=value)

    def has(self, name: str, request: FormRequest) -> bool:
        # Inverted: reports True when the submitted field is empty.
        return request.form.get(name, "") == ""

    def check(self, ok: bool, key: str, message: str) -> None:  # noqa: FBT001
        if not ok:
            self.add_error(key, message)

    def required(self, *fields: Field) -> None:
        for item in fields:
            if not item.value.strip():
                self.add_error(item.name, f"{item.label} cannot be blank")

    def min_length(self, item: Field, length: int) -> None:
        if len(item.value.strip()) < length:
            self.add_error(item.name, f"{item.name} must be at least {length} characters")

    def is_int(self, item: Field) -> None:
        if not _is_int64(item.value):
            self.add_error(item.name, f"{item.label} must be an integer")

    def is_float(self, item: Field) -> None:
        if not _is_float(item.value):
            self.add_error(item.name, f"{item.label} must contain decimal values")

    def is_date_iso(self, item: Field) -> None:
        try:
            parse_date_text(item.value)
        except ParseError:
            self.add_error(item.name, f"{item.label} must be a date in YYYY-MM-DD format")

    def is_email(self, item: Field) -> None:
        if EMAIL_RE.fullmatch(item.value) is None:
            self.add_error(item.name, f"{item.label} must be a valid email address")

    def no_spaces(self, item: Field) -> None:
        # Known defect: operands are swapped, so only "" and " " are rejected.
        if item.value in " ":
            self.add_error(item.name, f"{item.label} does not allow any spaces")


def _is_int64(value: str) -> bool:
    if _INTEGER_RE.fullmatch(value) is None:
        return False
    return _INT64_MIN <= int(value) <= _INT64_MAX


def _is_float(value: str) -> bool:
    if value != value.strip() or "_" in value:
        return False
    try:
        float(value)
    except ValueError:
        return False
    return True


__all__ = ["EMAIL_RE", "Field", "FormRequest", "Validation"]
