from __future__ import annotations

from multiprocessing.sharedctypes import RawValue

from ..services.summary import render_result_line

"""ResultHolder: label + counter shared between the caller and one workload.

The counter lives in an anonymous shared-memory cell (unsigned 64 bit) so that
increments made inside the workload process are visible to the caller once the
process has been joined. There is a single writer per run, hence no lock.
"""

__all__ = [
    "ResultHolder",
]

COUNTER_TYPECODE = "Q"  # unsigned long long


class ResultHolder:
    """Mutable run record owned by the caller and lent to exactly one workload.

    Attributes:
        label: Descriptive case label, fixed at creation
        counter: Number of successful operation iterations (read-only view)
    """

    def __init__(self, label: str) -> None:
        self._label = label
        self._cell = RawValue(COUNTER_TYPECODE, 0)

    @property
    def label(self) -> str:
        return self._label

    @property
    def counter(self) -> int:
        return self._cell.value

    def increment(self) -> None:
        """Add one to the counter. The only mutation a workload may perform."""
        self._cell.value += 1

    def render(self) -> str:
        return render_result_line(self._label, self.counter)

    def show_result(self) -> None:
        """Print ``<label> : <counter>`` to stdout."""
        print(self.render(), flush=True)

    def __repr__(self) -> str:  # pragma: no cover (trivial)
        return f"ResultHolder(label={self._label!r}, counter={self.counter})"
