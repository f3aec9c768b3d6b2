"""Domain models for the one-second benchmark harness.

ResultHolder is the only shared mutable state; everything else is frozen.
"""

from .benchmark_case import BenchmarkCase, BenchmarkSuite, Workload
from .result_holder import ResultHolder
from .run_report import BenchmarkSummary, RunReport

__all__ = [
    # Case models
    "BenchmarkCase",
    "BenchmarkSuite",
    "Workload",
    # Run models
    "ResultHolder",
    "RunReport",
    "BenchmarkSummary",
]
