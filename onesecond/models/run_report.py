from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

"""Run outcome models.

RunReport describes a single finished run; BenchmarkSummary aggregates the
reports of one driver invocation in execution order.
"""

STOP_TERMINATED = "terminated"  # SIGTERM took effect within the grace period
STOP_KILLED = "killed"  # SIGTERM ignored/late, SIGKILL took effect
STOP_EXITED = "exited"  # workload ended on its own before the deadline
STOP_ORPHANED = "orphaned"  # still alive after every stop attempt


@dataclass(frozen=True)
class RunReport:
    """Outcome of one run of a workload through the runner."""
    label: str
    counter: int
    elapsed_seconds: float  # launch -> counter read
    exitcode: int | None  # None when orphaned
    stop_mode: str

    @property
    def completed_cleanly(self) -> bool:
        return self.stop_mode in (STOP_TERMINATED, STOP_KILLED)


@dataclass(frozen=True)
class BenchmarkSummary:
    """Aggregated results of one sequential pass over a case list."""
    reports: list[RunReport]
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float

    @property
    def total_cases(self) -> int:
        return len(self.reports)
