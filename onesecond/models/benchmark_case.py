from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .result_holder import ResultHolder

"""Benchmark case models.

A case pairs a display label with a workload function. Workloads must be
module-level functions so they survive pickling under the spawn/forkserver
start methods.
"""

Workload = Callable[["ResultHolder"], None]


@dataclass(frozen=True)
class BenchmarkCase:
    label: str
    workload: Workload


@dataclass(frozen=True)
class BenchmarkSuite:
    """Named, ordered group of cases sharing one operation family."""
    name: str
    cases: tuple[BenchmarkCase, ...]

    @property
    def labels(self) -> list[str]:
        return [c.label for c in self.cases]
