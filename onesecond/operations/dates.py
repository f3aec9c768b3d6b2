from __future__ import annotations

import calendar
import re
from datetime import date, datetime, timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pandas as pd

"""Date parsing operations (ISO ``YYYY-MM-DD``).

- parse_date: datetime.strptime, raises ValueError on bad input
- try_parse_date: pattern + calendar check, returns None, never raises
- coerce_date: pandas.to_datetime(errors="coerce"), returns NaT on bad input

pandas is imported on first use of coerce_date/is_missing only, so workload
processes for the other operation families never pay its import time.
"""

__all__ = [
    "DATE_FORMAT",
    "parse_date",
    "try_parse_date",
    "coerce_date",
    "is_missing",
    "good_date",
    "bad_date",
]

DATE_FORMAT = "%Y-%m-%d"
EPOCH = date(2000, 1, 1)

_DATE_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def parse_date(text: str) -> datetime:
    return datetime.strptime(text, DATE_FORMAT)


def try_parse_date(text: str) -> datetime | None:
    m = _DATE_PATTERN.fullmatch(text)
    if m is None:
        return None
    year, month, day = (int(g) for g in m.groups())
    if year < 1 or not 1 <= month <= 12:
        return None
    if not 1 <= day <= calendar.monthrange(year, month)[1]:
        return None
    return datetime(year, month, day)


def coerce_date(text: str) -> pd.Timestamp:
    """NaT (not an exception) for anything that is not a DATE_FORMAT date."""
    import pandas as pd

    return pd.to_datetime(text, format=DATE_FORMAT, errors="coerce")


def is_missing(value: object) -> bool:
    import pandas as pd

    return bool(pd.isna(value))


def good_date(i: int) -> str:
    # 日付は EPOCH から i 日後 (約 8000 年で一巡)
    return (EPOCH + timedelta(days=i % 2_900_000)).strftime(DATE_FORMAT)


def bad_date(i: int) -> str:
    return "x" + good_date(i)
