from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass


@dataclass(frozen=True)
class MatchSpan:
    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length


@dataclass(frozen=True)
class ContextWindow:
    display_start: int
    display_end: int  # exclusive
    matches: tuple[MatchSpan, ...] = ()


class SpanIndex:
    def __init__(self, spans: list[MatchSpan] | tuple[MatchSpan, ...]) -> None:
        # assumes non-overlapping spans, which is what the scanner produces
        self._spans = sorted((s for s in spans if s.length > 0), key=lambda s: s.start)
        self._starts = [s.start for s in self._spans]

    def find(self, offset: int) -> MatchSpan | None:
        i = bisect_right(self._starts, offset) - 1
        if i >= 0:
            s = self._spans[i]
            if s.start <= offset < s.end:
                return s
        return None

    def __contains__(self, offset: int) -> bool:
        return self.find(offset) is not None
