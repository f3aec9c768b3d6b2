from __future__ import annotations

import argparse
import sys
from pathlib import Path

from onesecond.cli.keypress import wait_for_keypress
from onesecond.config.loader import ConfigError, load_config
from onesecond.logging.init import enable_debug, setup_logging
from onesecond.services.orchestrator import resolve_cases, run_cases
from onesecond.services.progress import CaseProgressTracker
from onesecond.services.runner import DEFAULT_DEADLINE_SECONDS, OneSecondRunner
from onesecond.workloads import DEFAULT_SUITES, SUITES, UnknownSuiteError

"""CLI entrypoint.

Flow:
- Load config (optional; only grace period and keypress wait are configurable)
- Print "start"
- Run the DEFAULT_SUITES cases one after another, one result line each
- Print "press any key to exit" and wait for a single key
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1

DEADLINE_SECONDS = DEFAULT_DEADLINE_SECONDS


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="onesecond",
        description="Count operations completed in a fixed one-second window",
    )
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--list", action="store_true", help="List suites and case labels then exit")
    p.add_argument("--no-wait", action="store_true", help="Exit without waiting for a keypress")
    p.add_argument("--config", type=Path, default=None, help="YAML config (default: config/bench.yml if present)")
    return p.parse_args(argv)


def _list_suites() -> int:
    for name, suite in SUITES.items():
        print(name)
        for label in suite.labels:
            print(f"  {label}")
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # 空リスト [] は「引数なし」として扱う (None のときのみ sys.argv を読む)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)

    if args.debug:
        enable_debug()

    if args.list:
        return _list_suites()

    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    try:
        cases = resolve_cases(DEFAULT_SUITES)
    except UnknownSuiteError as e:
        logger.error(f"suite: {e}")
        return EXIT_FATAL

    logger.debug(
        f"suites={','.join(DEFAULT_SUITES)} cases={len(cases)} "
        f"deadline_sec={DEADLINE_SECONDS} grace_ms={cfg.grace_ms}"
    )

    print("start", flush=True)
    runner = OneSecondRunner(
        deadline_seconds=DEADLINE_SECONDS,
        grace_seconds=cfg.grace_seconds,
        report=False,
    )
    with CaseProgressTracker(len(cases)) as progress:
        summary = run_cases(cases, runner, progress=progress)

    unclean = sum(1 for r in summary.reports if not r.completed_cleanly)
    logger.debug(
        f"cases={summary.total_cases} unclean={unclean} "
        f"elapsed_sec={summary.elapsed_seconds:.3f}"
    )

    if cfg.wait_for_key and not args.no_wait:
        print("press any key to exit", flush=True)
        wait_for_keypress()

    return EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
