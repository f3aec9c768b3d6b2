from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import get_type_hints

import pytest

from onesecond.models.benchmark_case import BenchmarkSuite
from onesecond.models.result_holder import ResultHolder
from onesecond.workloads import DEFAULT_SUITES, SUITES, UnknownSuiteError, get_suite


class _Stop(Exception):
    pass


class _BoundedHolder(ResultHolder):
    """Holder that ends the workload loop after a fixed number of increments."""

    def __init__(self, label: str, limit: int) -> None:
        super().__init__(label)
        self._limit = limit

    def increment(self) -> None:
        super().increment()
        if self.counter >= self._limit:
            raise _Stop()


ALL_CASES = [case for suite in SUITES.values() for case in suite.cases]
PROJECT_ROOT = Path(__file__).resolve().parents[2]


def test_catalog_contents():
    assert DEFAULT_SUITES == ("numbers", "dates", "layers")
    assert set(SUITES) == set(DEFAULT_SUITES)
    assert len(SUITES["numbers"].cases) == 5
    assert len(SUITES["dates"].cases) == 6
    assert len(SUITES["layers"].cases) == 4


def test_labels_unique_and_aligned():
    labels = [c.label for c in ALL_CASES]
    assert len(labels) == len(set(labels))
    assert {len(label) for label in labels} == {20}


def test_get_suite_unknown():
    with pytest.raises(UnknownSuiteError):
        get_suite("strings")


@pytest.mark.parametrize("case", ALL_CASES, ids=lambda c: " ".join(c.label.split()))
def test_every_workload_counts_every_iteration(case):
    # good input always succeeds, bad input always fails: one increment per iteration
    holder = _BoundedHolder(case.label, limit=50)
    with pytest.raises(_Stop):
        case.workload(holder)
    assert holder.counter == 50


def test_workloads_are_module_level_functions():
    for case in ALL_CASES:
        assert "<locals>" not in case.workload.__qualname__
        assert case.workload.__module__.startswith("onesecond.workloads.")


@pytest.mark.parametrize("module", ["onesecond.workloads", "onesecond.workloads.numbers", "onesecond.workloads.layers"])
def test_catalog_import_does_not_load_pandas(module: str):
    # spawn children re-import the catalog inside the timing window
    code = f"import sys, {module}; print('pandas' in sys.modules)"
    out = subprocess.run([sys.executable, "-c", code], capture_output=True, text=True, check=True, cwd=PROJECT_ROOT).stdout
    assert out.strip() == "False"


def test_coerce_case_loads_pandas_on_first_use():
    code = (
        "import sys\n"
        "from onesecond.operations.dates import coerce_date, is_missing\n"
        "assert 'pandas' not in sys.modules\n"
        "print(is_missing(coerce_date('x2000-01-01')), 'pandas' in sys.modules)\n"
    )
    out = subprocess.run([sys.executable, "-c", code], capture_output=True, text=True, check=True, cwd=PROJECT_ROOT).stdout
    assert out.split() == ["True", "True"]


def test_get_suite_returns_suite():
    assert get_suite("layers") is SUITES["layers"]
    assert get_type_hints(get_suite)["return"] is BenchmarkSuite
