# Shared pytest fixtures
from __future__ import annotations
import multiprocessing as mp
import tempfile
from pathlib import Path
import pytest

from onesecond.logging.init import reset_logging
from onesecond.services.runner import OneSecondRunner

# Short windows keep the unit suite fast; tests/perf runs the real 1000 ms window.
SHORT_DEADLINE = 0.3
SHORT_GRACE = 1.0


@pytest.fixture(autouse=True)
def _clean_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """grace_ms: 500
wait_for_key: false
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "bench.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def mp_context():
    # fork: no pickling, no re-import, start-up far below the short window
    if "fork" in mp.get_all_start_methods():
        return mp.get_context("fork")
    return mp.get_context()


@pytest.fixture()
def fast_runner(mp_context) -> OneSecondRunner:
    return OneSecondRunner(
        deadline_seconds=SHORT_DEADLINE,
        grace_seconds=SHORT_GRACE,
        report=False,
        context=mp_context,
    )
