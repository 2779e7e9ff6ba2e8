from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002

from tests.support.clock import FIXED_NOW, make_clock

if TYPE_CHECKING:
    from collections.abc import Iterator

    from webtoolkit.domain.clock import Clock


@pytest.fixture
def fixed_clock() -> Clock:
    return make_clock(FIXED_NOW)


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    try:
        yield engine
    finally:
        engine.dispose()
