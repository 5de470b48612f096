"""Report assembly: scan, resolve context, and format rows for each buffer."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from bytegrep.core.config import SearchConfig
from bytegrep.core.context import resolve_windows
from bytegrep.core.hexrow import HexRow, format_rows
from bytegrep.core.io import load_buffer
from bytegrep.core.pattern import BytePattern
from bytegrep.core.search import scan
from bytegrep.core.spans import ContextWindow

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ReportBlock:
    """One merged context window and the rows that display it."""

    window: ContextWindow
    rows: tuple[HexRow, ...]

    @property
    def match_count(self) -> int:
        return len(self.window.matches)


@dataclass
class SearchReport:
    """Everything found in one buffer (file).

    `match_count` counts distinct matches, which can exceed the number of
    blocks when nearby matches share a window. `error` holds the exception
    raised while loading the file, if any; such a report has no blocks.
    """

    source: str
    pattern: BytePattern
    width: int
    buffer_length: int = 0
    match_count: int = 0
    blocks: list[ReportBlock] = field(default_factory=list)
    error: OSError | None = None

    @property
    def found(self) -> bool:
        return self.match_count > 0

    @property
    def ok(self) -> bool:
        return self.error is None


def format_offset_line(offset: int) -> str:
    return f"offset: {offset} ({offset:08x})"


def format_summary(report: SearchReport) -> str:
    noun = "match" if report.match_count == 1 else "matches"
    return f"{report.match_count} {noun} in {report.source}"


def build_report(
    buffer: bytes,
    pattern: BytePattern,
    config: SearchConfig | None = None,
    *,
    source: str = "",
) -> SearchReport:
    """Search `buffer` for `pattern` and build its report.

    A buffer with no matches gives a report with match_count 0 and no blocks.
    """
    cfg = config or SearchConfig()
    matches = list(scan(buffer, pattern))
    windows = resolve_windows(matches, len(buffer), cfg.width, cfg.context)
    blocks = [
        ReportBlock(window=w, rows=tuple(format_rows(buffer, w, cfg.width))) for w in windows
    ]
    logger.debug(
        "scanned buffer",
        source=source,
        size=len(buffer),
        matches=len(matches),
        blocks=len(blocks),
    )
    return SearchReport(
        source=source,
        pattern=pattern,
        width=cfg.width,
        buffer_length=len(buffer),
        match_count=len(matches),
        blocks=blocks,
    )


def search_files(
    paths: Iterable[str | Path],
    pattern: BytePattern,
    config: SearchConfig | None = None,
    *,
    loader: Callable[[str | Path], bytes] = load_buffer,
) -> Iterator[SearchReport]:
    """Yield one report per path, in the order given.

    A file that cannot be read yields a report carrying the OSError; the
    remaining files are still searched.
    """
    cfg = config or SearchConfig()
    for path in paths:
        source = str(path)
        try:
            buffer = loader(path)
        except OSError as e:
            logger.warning("failed to read file", path=source, error=str(e))
            yield SearchReport(source=source, pattern=pattern, width=cfg.width, error=e)
            continue
        yield build_report(buffer, pattern, cfg, source=source)
