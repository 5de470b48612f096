from __future__ import annotations

import pytest

from bytegrep.core.context import match_window, resolve_windows, row_ceil, row_floor
from bytegrep.core.spans import ContextWindow, MatchSpan


def test_row_rounding() -> None:
    assert row_floor(20, 16) == 16
    assert row_floor(16, 16) == 16
    assert row_ceil(21, 16) == 32
    assert row_ceil(32, 16) == 32
    assert row_ceil(0, 16) == 0


def test_single_match_no_context() -> None:
    windows = resolve_windows([MatchSpan(20, 1)], 32, 16, 0)
    assert windows == [ContextWindow(16, 32, (MatchSpan(20, 1),))]


def test_match_spanning_rows() -> None:
    w = match_window(MatchSpan(14, 4), 64, 16, 0)
    assert (w.display_start, w.display_end) == (0, 32)


def test_context_clamped_to_buffer() -> None:
    w = match_window(MatchSpan(2, 1), 40, 16, 2)
    assert (w.display_start, w.display_end) == (0, 40)


def test_context_extends_whole_rows() -> None:
    windows = resolve_windows([MatchSpan(50, 2)], 256, 16, 1)
    assert [(w.display_start, w.display_end) for w in windows] == [(32, 80)]


def test_nearby_matches_merge_with_context() -> None:
    # 8 bytes apart, in neighboring rows
    matches = [MatchSpan(12, 1), MatchSpan(20, 1)]
    windows = resolve_windows(matches, 128, 16, 1)
    assert len(windows) == 1
    assert (windows[0].display_start, windows[0].display_end) == (0, 48)
    assert windows[0].matches == tuple(matches)


def test_touching_windows_merge() -> None:
    # [0,16) and [16,32) touch
    windows = resolve_windows([MatchSpan(1, 1), MatchSpan(17, 1)], 64, 16, 0)
    assert len(windows) == 1
    assert (windows[0].display_start, windows[0].display_end) == (0, 32)


def test_distant_matches_stay_separate() -> None:
    windows = resolve_windows([MatchSpan(1, 1), MatchSpan(100, 1)], 128, 16, 1)
    assert [(w.display_start, w.display_end) for w in windows] == [(0, 32), (80, 128)]
    assert windows[0].display_end < windows[1].display_start


def test_same_row_matches_share_window() -> None:
    windows = resolve_windows([MatchSpan(16, 1), MatchSpan(24, 1)], 64, 16, 0)
    assert len(windows) == 1
    assert len(windows[0].matches) == 2


def test_zero_matches() -> None:
    assert resolve_windows([], 100, 16, 3) == []


def test_width_one() -> None:
    windows = resolve_windows([MatchSpan(5, 2)], 10, 1, 1)
    assert [(w.display_start, w.display_end) for w in windows] == [(4, 8)]


@pytest.mark.parametrize(("width", "context"), [(0, 0), (-1, 0), (16, -1)])
def test_invalid_geometry(width: int, context: int) -> None:
    with pytest.raises(ValueError):
        resolve_windows([MatchSpan(0, 1)], 10, width, context)
