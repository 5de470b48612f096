from __future__ import annotations

from collections.abc import Iterator

from bytegrep.core.pattern import BytePattern
from bytegrep.core.spans import MatchSpan


def find_bytes(buffer: bytes, needle: bytes, start: int) -> int | None:
    """Find `needle` bytes at or after `start`. Returns offset or None."""
    if start < 0:
        start = 0
    if not needle:
        return start if start <= len(buffer) else None
    if start >= len(buffer):
        return None
    idx = buffer.find(needle, start)
    return idx if idx != -1 else None


class MatchScan:
    """Lazy, restartable scan for every non-overlapping occurrence of a pattern.

    Iterating walks the buffer left to right. After a match the scan resumes
    right after it, so occurrences that overlap an earlier match are not
    reported on their own. Each call to ``iter()`` starts over from offset 0.
    """

    def __init__(self, buffer: bytes, pattern: BytePattern) -> None:
        self._buffer = bytes(buffer)
        self._pattern = pattern

    @property
    def pattern(self) -> BytePattern:
        return self._pattern

    def __iter__(self) -> Iterator[MatchSpan]:
        needle = self._pattern.data
        step = len(needle)
        pos = 0
        while True:
            off = find_bytes(self._buffer, needle, pos)
            if off is None:
                return
            yield MatchSpan(start=off, length=step)
            pos = off + step


def scan(buffer: bytes, pattern: BytePattern) -> MatchScan:
    """Scan `buffer` for `pattern`. Returns an iterable of MatchSpan."""
    return MatchScan(buffer, pattern)


def count_matches(buffer: bytes, pattern: BytePattern) -> int:
    return sum(1 for _ in scan(buffer, pattern))
