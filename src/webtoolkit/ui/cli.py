# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from datetime import timedelta
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from webtoolkit.config import ConfigurationError, configure_logging
from webtoolkit.domain import DateOnly, TimeOnly, Validation

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from types import FrameType

    from webtoolkit.domain import Field

log = logging.getLogger(__name__)

_FIELD_RULES: tuple[tuple[str, str], ...] = (
    ("required", "required"),
    ("int", "is_int"),
    ("float", "is_float"),
    ("date", "is_date_iso"),
    ("email", "is_email"),
    ("no_spaces", "no_spaces"),
)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Parse dates and times, validate form fields")
    subparsers = parser.add_subparsers(dest="command", required=True)

    date_cmd = subparsers.add_parser("date", help="Normalise a YYYY-MM-DD date")
    date_cmd.add_argument("value", type=str, help="Date text; 'null' or '' for no date")
    date_cmd.add_argument(
        "--add-days",
        type=int,
        default=0,
        help="Shift the date by this many days (default: %(default)s)",
    )

    time_cmd = subparsers.add_parser("time", help="Normalise an HH:MM time")
    time_cmd.add_argument("value", type=str, help="Time text; 'null' or '' for no time")

    validate = subparsers.add_parser("validate", help="Validate form fields")
    validate.add_argument(
        "--field",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Form value to validate (repeatable)",
    )
    validate.add_argument(
        "--label",
        action="append",
        default=[],
        metavar="NAME=LABEL",
        help="Human readable label used in messages (defaults to the name)",
    )
    validate.add_argument(
        "--min-length",
        action="append",
        default=[],
        metavar="NAME:N",
        help="Require at least N characters",
    )
    for option, _ in _FIELD_RULES:
        validate.add_argument(
            f"--{option.replace('_', '-')}",
            dest=option,
            action="append",
            default=[],
            metavar="NAME",
            help=f"Apply the {option.replace('_', ' ')} rule to NAME",
        )

    return parser.parse_args(list(argv))


def _split_pairs(values: Sequence[str], separator: str) -> dict[str, str]:
    pairs: dict[str, str] = {}
    for raw in values:
        name, found, value = raw.partition(separator)
        if not found or not name:
            raise ValueError(f"Expected NAME{separator}VALUE, got: {raw}")
        pairs[name] = value
    return pairs


def _run_date(args: argparse.Namespace) -> int:
    value = DateOnly.parse(args.value)
    if args.add_days:
        value = value.add(timedelta(days=args.add_days))
    print(f"date: {value}")
    if not value.is_zero():
        print(f"start: {value.start_of_day().isoformat()}")
        print(f"end: {value.end_of_day().isoformat()}")
    return 0


def _run_time(args: argparse.Namespace) -> int:
    print(f"time: {TimeOnly.parse(args.value)}")
    return 0


def _run_validate(args: argparse.Namespace) -> int:
    data = _split_pairs(args.field, "=")
    labels = _split_pairs(args.label, "=")
    validation = Validation(data)

    def field(name: str) -> Field:
        return validation.form_field(name, labels.get(name, name))

    for option, method in _FIELD_RULES:
        rule: Callable[[Field], None] = getattr(validation, method)
        for name in getattr(args, option):
            rule(field(name))
    for name, length in _split_pairs(args.min_length, ":").items():
        validation.min_length(field(name), int(length))

    if validation.valid():
        print("valid")
        return 0
    for name, message in validation.errors.items():
        print(f"{name}: {message}")
    return 1


_COMMANDS: dict[str, Callable[[argparse.Namespace], int]] = {
    "date": _run_date,
    "time": _run_time,
    "validate": _run_validate,
}


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    try:
        configure_logging()
    except ConfigurationError:
        log.exception("Invalid logging configuration")
        sys.exit(2)
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    try:
        code = _COMMANDS[parsed_args.command](parsed_args)
    except (ValueError, OverflowError):
        log.exception("CLI validation error")
        sys.exit(2)
    if code:
        sys.exit(code)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
