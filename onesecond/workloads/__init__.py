"""Workload catalog.

Case selection is source-level: DEFAULT_SUITES is the list the driver runs,
in order. Nothing here imports pandas; the date operations load it on first use.
"""

from ..models.benchmark_case import BenchmarkSuite
from .dates import DATES
from .layers import LAYERS
from .numbers import NUMBERS

__all__ = [
    "SUITES",
    "DEFAULT_SUITES",
    "UnknownSuiteError",
    "get_suite",
]

SUITES = {suite.name: suite for suite in (NUMBERS, DATES, LAYERS)}

DEFAULT_SUITES = ("numbers", "dates", "layers")


class UnknownSuiteError(Exception):
    pass


def get_suite(name: str) -> BenchmarkSuite:
    try:
        return SUITES[name]
    except KeyError:
        known = ", ".join(sorted(SUITES))
        raise UnknownSuiteError(f"unknown suite: {name} (known: {known})") from None
