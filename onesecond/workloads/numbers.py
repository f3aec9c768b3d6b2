from __future__ import annotations

from itertools import count

from ..models.benchmark_case import BenchmarkCase, BenchmarkSuite
from ..models.result_holder import ResultHolder
from ..operations.numbers import bad_number, good_number, parse_int, try_parse_int

"""Integer parsing workloads.

Each one loops forever over i = 0, 1, 2, ...; the runner stops it.
"""


def parse_numbers(holder: ResultHolder) -> None:
    for i in count():
        parse_int(good_number(i))
        holder.increment()


def parse_catch_numbers(holder: ResultHolder) -> None:
    for i in count():
        try:
            parse_int(good_number(i))
            holder.increment()
        except ValueError:
            pass


def try_parse_numbers(holder: ResultHolder) -> None:
    for i in count():
        if try_parse_int(good_number(i)) is not None:
            holder.increment()


def parse_bad_numbers(holder: ResultHolder) -> None:
    for i in count():
        try:
            parse_int(bad_number(i))
        except ValueError:
            holder.increment()


def try_parse_bad_numbers(holder: ResultHolder) -> None:
    for i in count():
        if try_parse_int(bad_number(i)) is None:
            holder.increment()


NUMBERS = BenchmarkSuite(
    name="numbers",
    cases=(
        BenchmarkCase("Parse        numbers", parse_numbers),
        BenchmarkCase("Parse catch  numbers", parse_catch_numbers),
        BenchmarkCase("TryParse     numbers", try_parse_numbers),
        BenchmarkCase("Parse    bad numbers", parse_bad_numbers),
        BenchmarkCase("TryParse bad numbers", try_parse_bad_numbers),
    ),
)
