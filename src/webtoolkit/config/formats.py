"""Text layouts and reference instants shared by the temporal value types."""

from __future__ import annotations

import re
from datetime import UTC, date, datetime
from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"
TIME_FORMAT: Final[str] = "%H:%M"

DATE_PATTERN: Final[re.Pattern[str]] = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
TIME_PATTERN: Final[re.Pattern[str]] = re.compile(r"\d{2}:\d{2}", re.ASCII)

# Token accepted as "no value" when reading JSON text.
NULL_TOKEN: Final[str] = "null"

# Anchor for directly constructed times. Far enough from MINYEAR that shifting
# back across midnight stays in range, and earlier than any real "today".
REFERENCE_DATE: Final[date] = date(1970, 1, 1)

ZERO_INSTANT: Final[datetime] = datetime.min.replace(tzinfo=UTC)

# Nanoseconds past 23:59:59 used for end of day. Floors to zero microseconds.
END_OF_DAY_NANOSECOND: Final[int] = 999
