from __future__ import annotations

import os
import sys
from typing import TextIO

"""Single keypress wait for the interactive "press any key to exit" prompt.

On a terminal the key is read in raw/cbreak mode so no Enter is needed. When
stdin is redirected one character is consumed instead (EOF returns at once).
"""

__all__ = [
    "wait_for_keypress",
]


def _read_posix_tty(stream: TextIO) -> str:
    import termios
    import tty

    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        return stream.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def _read_windows_console() -> str:  # pragma: no cover (windows only)
    import msvcrt

    return msvcrt.getwch()


def wait_for_keypress(stream: TextIO | None = None) -> str:
    """Block until one key is available and return it ('' on EOF)."""
    stream = stream if stream is not None else sys.stdin
    if stream is None or getattr(stream, "closed", False):
        return ""
    if stream.isatty():
        if os.name == "nt":  # pragma: no cover
            return _read_windows_console()
        return _read_posix_tty(stream)
    return stream.read(1)
