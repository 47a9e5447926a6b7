"""Render a one-line excerpt around a span with a caret line beneath it."""

from __future__ import annotations

from templint.models.errors import ContextWindow

DEFAULT_CONTEXT_PADDING = 35

_FLATTEN = str.maketrans({"\n": "-", "\t": " "})


def render_context(buffer: str, head: int, tail: int, offset: int) -> ContextWindow:
    """Cut ``buffer[head..tail]`` (inclusive) plus ``offset`` characters each side.

    The window is clipped to the buffer.  Newlines become ``-`` and tabs a
    space so the excerpt prints on one line; the marker line carries ``^``
    under every target position and a space elsewhere.
    """
    if offset < 0:
        raise ValueError(f"context offset must be >= 0, got {offset}")
    if tail < head:
        raise ValueError(f"tail ({tail}) precedes head ({head})")

    low = max(0, head - offset)
    high = min(len(buffer), tail + offset + 1)
    context = buffer[low:high].translate(_FLATTEN)
    marker = "".join("^" if head <= pos <= tail else " " for pos in range(low, high))
    return ContextWindow(context=context, marker=marker)
