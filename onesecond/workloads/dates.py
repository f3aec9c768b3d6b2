from __future__ import annotations

from itertools import count

from ..models.benchmark_case import BenchmarkCase, BenchmarkSuite
from ..models.result_holder import ResultHolder
from ..operations.dates import bad_date, coerce_date, good_date, is_missing, parse_date, try_parse_date


def parse_dates(holder: ResultHolder) -> None:
    for i in count():
        parse_date(good_date(i))
        holder.increment()


def parse_catch_dates(holder: ResultHolder) -> None:
    for i in count():
        try:
            parse_date(good_date(i))
            holder.increment()
        except ValueError:
            pass


def try_parse_dates(holder: ResultHolder) -> None:
    for i in count():
        if try_parse_date(good_date(i)) is not None:
            holder.increment()


def parse_bad_dates(holder: ResultHolder) -> None:
    for i in count():
        try:
            parse_date(bad_date(i))
        except ValueError:
            holder.increment()


def try_parse_bad_dates(holder: ResultHolder) -> None:
    for i in count():
        if try_parse_date(bad_date(i)) is None:
            holder.increment()


def coerce_bad_dates(holder: ResultHolder) -> None:
    for i in count():
        if is_missing(coerce_date(bad_date(i))):
            holder.increment()


DATES = BenchmarkSuite(
    name="dates",
    cases=(
        BenchmarkCase("Parse          dates", parse_dates),
        BenchmarkCase("Parse catch    dates", parse_catch_dates),
        BenchmarkCase("TryParse       dates", try_parse_dates),
        BenchmarkCase("Parse      bad dates", parse_bad_dates),
        BenchmarkCase("TryParse   bad dates", try_parse_bad_dates),
        BenchmarkCase("Coerce     bad dates", coerce_bad_dates),
    ),
)
