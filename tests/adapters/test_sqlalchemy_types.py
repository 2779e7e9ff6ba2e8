from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import Column, Integer, MetaData, Table, insert, select, text

from tests.support.clock import FIXED_NOW
from webtoolkit.adapters.sqlalchemy import DateOnlyType, TimeOnlyType
from webtoolkit.domain import DateOnly, ParseError, TimeOnly

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from webtoolkit.domain import Clock


def _bookings_table(clock: Clock) -> tuple[MetaData, Table]:
    metadata = MetaData()
    table = Table(
        "bookings",
        metadata,
        Column("id", Integer, primary_key=True),
        Column("day", DateOnlyType(), nullable=True),
        Column("start", TimeOnlyType(clock=clock), nullable=True),
    )
    return metadata, table


@pytest.fixture
def bookings(sqlite_engine: Engine, fixed_clock: Clock) -> Table:
    metadata, table = _bookings_table(fixed_clock)
    metadata.create_all(sqlite_engine)
    with sqlite_engine.begin() as connection:
        connection.execute(
            insert(table),
            [
                {"id": 1, "day": DateOnly.of(2024, 3, 1), "start": TimeOnly.of(9, 30)},
                {"id": 2, "day": DateOnly(), "start": TimeOnly()},
                {"id": 3, "day": None, "start": None},
            ],
        )
    return table


def test_values_are_written_as_text(sqlite_engine: Engine, bookings: Table) -> None:
    _ = bookings
    with sqlite_engine.connect() as connection:
        rows = connection.execute(text("SELECT id, day, start FROM bookings ORDER BY id")).all()

    assert [tuple(row) for row in rows] == [
        (1, "2024-03-01", "09:30"),
        (2, None, None),
        (3, None, None),
    ]


def test_present_values_round_trip(sqlite_engine: Engine, bookings: Table) -> None:
    with sqlite_engine.connect() as connection:
        row = connection.execute(select(bookings).where(bookings.c.id == 1)).one()

    assert row.day == DateOnly.of(2024, 3, 1)
    assert row.start.equal(TimeOnly.of(9, 30))
    assert row.start.value.date() == FIXED_NOW.date()


def test_null_columns_load_as_absent_wrappers(sqlite_engine: Engine, bookings: Table) -> None:
    with sqlite_engine.connect() as connection:
        rows = connection.execute(select(bookings).where(bookings.c.id > 1)).all()

    assert all(row.day.is_zero() for row in rows)
    assert all(row.start.is_zero() for row in rows)


def test_filter_by_wrapped_value(sqlite_engine: Engine, bookings: Table) -> None:
    with sqlite_engine.connect() as connection:
        ids = connection.scalars(
            select(bookings.c.id).where(bookings.c.day == DateOnly.parse("2024-03-01"))
        ).all()

    assert ids == [1]


def test_unreadable_values_raise(sqlite_engine: Engine, bookings: Table) -> None:
    with sqlite_engine.begin() as connection:
        connection.execute(text("INSERT INTO bookings (id, day) VALUES (4, 'garbage')"))

    with sqlite_engine.connect() as connection, pytest.raises(ParseError):
        connection.execute(select(bookings.c.day).where(bookings.c.id == 4)).all()
