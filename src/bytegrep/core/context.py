from __future__ import annotations

from collections.abc import Iterable

from bytegrep.core.spans import ContextWindow, MatchSpan


def row_floor(offset: int, width: int) -> int:
    return (offset // width) * width


def row_ceil(offset: int, width: int) -> int:
    return -(-offset // width) * width


def match_window(match: MatchSpan, buffer_length: int, width: int, context: int) -> ContextWindow:
    """Rows enclosing `match`, widened by `context` rows each side and clamped to the buffer."""
    start = row_floor(match.start, width) - context * width
    end = row_ceil(match.end, width) + context * width
    return ContextWindow(
        display_start=max(0, start),
        display_end=min(buffer_length, end),
        matches=(match,),
    )


def resolve_windows(
    matches: Iterable[MatchSpan],
    buffer_length: int,
    width: int,
    context: int,
) -> list[ContextWindow]:
    """Expand matches into row-aligned display windows and merge those that touch.

    Returns windows in ascending order with no overlaps. A window that starts
    at or before the end of the previous one is folded into it, together
    with its matches.
    """
    if width < 1:
        raise ValueError("width must be >= 1")
    if context < 0:
        raise ValueError("context must be >= 0")

    windows = sorted(
        (match_window(m, buffer_length, width, context) for m in matches),
        key=lambda w: (w.display_start, w.display_end),
    )

    merged: list[ContextWindow] = []
    for w in windows:
        if not merged:
            merged.append(w)
            continue
        prev = merged[-1]
        if w.display_start <= prev.display_end:
            merged[-1] = ContextWindow(
                display_start=prev.display_start,
                display_end=max(prev.display_end, w.display_end),
                matches=prev.matches + w.matches,
            )
        else:
            merged.append(w)
    return merged
