from __future__ import annotations

"""Result line rendering.

Format: ``<label> : <counter>``. The label is emitted verbatim, including the
internal padding used to line the counters up.
"""


def render_result_line(label: str, counter: int) -> str:
    """Render one report line.

    Examples:
        >>> render_result_line("TryParse     numbers", 1234)
        'TryParse     numbers : 1234'
    """
    if counter < 0:
        raise ValueError(f"counter must be non-negative: {counter}")
    return f"{label} : {counter}"

