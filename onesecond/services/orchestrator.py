from __future__ import annotations

import time
from collections.abc import Iterable, Sequence
from datetime import UTC, datetime

from ..logging.init import get_logger
from ..models.benchmark_case import BenchmarkCase
from ..models.result_holder import ResultHolder
from ..models.run_report import BenchmarkSummary, RunReport
from ..workloads import get_suite
from .progress import CaseProgressTracker
from .runner import OneSecondRunner

"""Sequential benchmark driver.

One fresh ResultHolder per case, one run per holder, cases strictly in order.
"""

__all__ = [
    "resolve_cases",
    "run_cases",
]


def resolve_cases(suite_names: Iterable[str]) -> list[BenchmarkCase]:
    """Flatten suites into their cases, preserving suite and case order.

    Raises:
        UnknownSuiteError: a name is not in the catalog
    """
    cases: list[BenchmarkCase] = []
    for name in suite_names:
        cases.extend(get_suite(name).cases)
    return cases


def run_cases(
    cases: Sequence[BenchmarkCase],
    runner: OneSecondRunner,
    *,
    progress: CaseProgressTracker | None = None,
) -> BenchmarkSummary:
    """Run every case once through ``runner``.

    The result line of each case is printed as soon as it is known: by the runner
    itself when it was built with ``report=True``, otherwise here (through the
    progress bar when one is active).
    """
    logger = get_logger()
    start_time = datetime.now(UTC)
    t0 = time.perf_counter()

    reports: list[RunReport] = []
    for case in cases:
        if progress is not None:
            progress.start_case(case.label)
        holder = ResultHolder(case.label)
        report = runner.run(case.workload, holder)
        if not runner.report:
            if progress is not None:
                progress.write(holder.render())
            else:
                holder.show_result()
        if not report.completed_cleanly:
            logger.info(f"case ended {report.stop_mode} label={case.label!r} exitcode={report.exitcode}")
        reports.append(report)
        if progress is not None:
            progress.finish_case()

    elapsed = time.perf_counter() - t0
    end_time = datetime.now(UTC)
    return BenchmarkSummary(
        reports=reports,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=elapsed,
    )
