from __future__ import annotations

import importlib
import multiprocessing as mp
import time
from multiprocessing import forkserver
from multiprocessing.context import BaseContext
from multiprocessing.process import BaseProcess

from ..logging.init import get_logger
from ..models.benchmark_case import Workload
from ..models.result_holder import ResultHolder
from ..models.run_report import (
    STOP_EXITED,
    STOP_KILLED,
    STOP_ORPHANED,
    STOP_TERMINATED,
    RunReport,
)

"""Fixed-window runner.

Each run gets its own daemon process: CPython threads cannot be interrupted
from the outside, processes can. The workload never sees a cancellation flag;
after the deadline the process is sent SIGTERM, then SIGKILL if it is still
around after the grace period. Forced termination can stop the workload in the
middle of anything (parse call, except block, counter store); only the counter
cell is shared, and a lost in-flight increment is accepted.
"""

__all__ = [
    "DEFAULT_DEADLINE_SECONDS",
    "DEFAULT_GRACE_SECONDS",
    "OneSecondRunner",
]

DEFAULT_DEADLINE_SECONDS = 1.0
DEFAULT_GRACE_SECONDS = 1.0
PRELOAD_MODULES = ["onesecond.workloads", "pandas"]

_prepared_methods: set[str] = set()


def _default_context() -> BaseContext:
    return mp.get_context()


def _prepare_context(ctx: BaseContext) -> BaseContext:
    """Load PRELOAD_MODULES where children can inherit them, once per start method.

    fork children inherit the parent's modules; forkserver children inherit the
    server's, and the server is started here. Either way the imports land before
    the first timing window instead of inside it. spawn children always
    re-import what their workload needs.
    """
    method = ctx.get_start_method()
    if method in _prepared_methods:
        return ctx
    if method == "forkserver":
        ctx.set_forkserver_preload(PRELOAD_MODULES)
        forkserver.ensure_running()
    elif method == "fork":
        for name in PRELOAD_MODULES:
            importlib.import_module(name)
    _prepared_methods.add(method)
    return ctx


def _run_workload(workload: Workload, holder: ResultHolder) -> None:
    """Child-side entry point. Workload failures end the run early, nothing more."""
    try:
        workload(holder)
    except Exception as e:
        get_logger().debug(f"workload failed label={holder.label!r} error={e!r}")


class OneSecondRunner:
    """Run a workload for a fixed wall-clock window, then stop it unconditionally.

    Args:
        deadline_seconds: Window length, measured from process launch
        grace_seconds: Bound for each join after terminate()/kill()
        report: Print the holder's result line after each run
        context: multiprocessing context (default: platform default start method)
    """

    def __init__(
        self,
        *,
        deadline_seconds: float = DEFAULT_DEADLINE_SECONDS,
        grace_seconds: float = DEFAULT_GRACE_SECONDS,
        report: bool = True,
        context: BaseContext | None = None,
    ) -> None:
        if deadline_seconds <= 0:
            raise ValueError(f"deadline_seconds must be positive: {deadline_seconds}")
        if grace_seconds <= 0:
            raise ValueError(f"grace_seconds must be positive: {grace_seconds}")
        self.deadline_seconds = deadline_seconds
        self.grace_seconds = grace_seconds
        self.report = report
        self._ctx = _prepare_context(context if context is not None else _default_context())

    def run(self, workload: Workload, holder: ResultHolder) -> RunReport:
        """Execute one run and return its report. Never raises for workload faults."""
        logger = get_logger()
        process = self._ctx.Process(
            target=_run_workload,
            args=(workload, holder),
            name=f"onesecond:{holder.label.strip()}",
            daemon=True,
        )

        launched = time.monotonic()
        process.start()
        logger.debug(f"run label={holder.label!r} pid={process.pid}")

        remaining = self.deadline_seconds - (time.monotonic() - launched)
        if remaining > 0:
            time.sleep(remaining)

        stop_mode = self._stop(process, holder.label)
        exitcode = process.exitcode
        if stop_mode != STOP_ORPHANED:
            process.close()

        # join() above is the barrier between the writer and this read
        report = RunReport(
            label=holder.label,
            counter=holder.counter,
            elapsed_seconds=time.monotonic() - launched,
            exitcode=exitcode,
            stop_mode=stop_mode,
        )
        logger.debug(
            f"stopped label={holder.label!r} mode={stop_mode} exitcode={exitcode} "
            f"elapsed_sec={report.elapsed_seconds:.3f}"
        )
        if self.report:
            holder.show_result()
        return report

    def _stop(self, process: BaseProcess, label: str) -> str:
        if not process.is_alive():
            process.join(timeout=self.grace_seconds)
            return STOP_EXITED

        process.terminate()
        process.join(timeout=self.grace_seconds)
        if not process.is_alive():
            return STOP_TERMINATED

        process.kill()
        process.join(timeout=self.grace_seconds)
        if not process.is_alive():
            return STOP_KILLED

        # daemon=True: the interpreter will still reap it on exit
        get_logger().warning(f"workload process survived kill label={label!r} pid={process.pid}")
        return STOP_ORPHANED
