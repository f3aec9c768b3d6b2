from __future__ import annotations

import sys
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

"""Progress display with tqdm (TTY only).

One bar over the case list, written to stderr so stdout carries nothing but
the result lines. Disabled entirely when stderr is not a terminal.
"""

__all__ = [
    "CaseProgressTracker",
    "is_tty_enabled",
]


def is_tty_enabled() -> bool:
    return sys.stderr.isatty()


class CaseProgressTracker:
    """Progress tracker over benchmark cases."""

    def __init__(self, total_cases: int, *, description: str = "Running cases") -> None:
        self.total_cases = total_cases
        self.description = description
        self.current_case = 0

        self.enabled = is_tty_enabled()
        self.pbar: TqdmType[Any] | None
        if self.enabled:
            self.pbar = tqdm(
                total=total_cases,
                desc=description,
                unit="case",
                file=sys.stderr,
                leave=False,
                position=0,
                ncols=80,
                ascii=True,
            )
        else:
            self.pbar = None

    def start_case(self, label: str) -> None:
        self.current_case += 1
        if self.enabled and self.pbar is not None:
            # 連続スペースは表示上つぶす
            self.pbar.set_description(f"{self.description} ({' '.join(label.split())})")

    def finish_case(self) -> None:
        if self.enabled and self.pbar is not None:
            self.pbar.update(1)
            self.pbar.set_description(self.description)

    def write(self, line: str) -> None:
        """Print a line to stdout without tearing the bar."""
        if self.enabled and self.pbar is not None:
            tqdm.write(line, file=sys.stdout)
        else:
            print(line, flush=True)

    def close(self) -> None:
        if self.enabled and self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> CaseProgressTracker:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
