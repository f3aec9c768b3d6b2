from __future__ import annotations

from itertools import count

from ..models.benchmark_case import BenchmarkCase, BenchmarkSuite
from ..models.result_holder import ResultHolder
from ..operations.layers import CheckingExecutor, ThrowingExecutor

"""Layered invocation workloads.

Good calls pass i, bad calls pass -1 - i so every bad call fails at the
innermost layer.
"""


def throw_good_calls(holder: ResultHolder) -> None:
    executor = ThrowingExecutor()
    for i in count():
        if executor.try_execute(i):
            holder.increment()


def check_good_calls(holder: ResultHolder) -> None:
    executor = CheckingExecutor()
    for i in count():
        if executor.execute(i):
            holder.increment()


def throw_bad_calls(holder: ResultHolder) -> None:
    executor = ThrowingExecutor()
    for i in count():
        if not executor.try_execute(-1 - i):
            holder.increment()


def check_bad_calls(holder: ResultHolder) -> None:
    executor = CheckingExecutor()
    for i in count():
        if not executor.execute(-1 - i):
            holder.increment()


LAYERS = BenchmarkSuite(
    name="layers",
    cases=(
        BenchmarkCase("Throw     good calls", throw_good_calls),
        BenchmarkCase("Check     good calls", check_good_calls),
        BenchmarkCase("Throw      bad calls", throw_bad_calls),
        BenchmarkCase("Check      bad calls", check_bad_calls),
    ),
)
