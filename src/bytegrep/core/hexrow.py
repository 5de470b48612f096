from __future__ import annotations

from dataclasses import dataclass

from bytegrep.core.spans import ContextWindow, SpanIndex

PRINTABLE_MIN = 0x20
PRINTABLE_MAX = 0x7E
NON_PRINTABLE = "."
OFFSET_DIGITS = 8


def to_ascii_glyph(c: int) -> str:
    return chr(c) if PRINTABLE_MIN <= c <= PRINTABLE_MAX else NON_PRINTABLE


@dataclass(frozen=True)
class HexRow:
    offset: int
    data: bytes  # up to `width` bytes; shorter only at end of buffer
    highlight: tuple[bool, ...]  # one flag per byte in `data`

    def cells(self) -> list[tuple[str, str, bool]]:
        """(hex, glyph, highlighted) for each byte in the row."""
        return [(f"{b:02x}", to_ascii_glyph(b), hl) for b, hl in zip(self.data, self.highlight)]

    @property
    def highlighted_columns(self) -> list[int]:
        return [i for i, hl in enumerate(self.highlight) if hl]


def format_rows(buffer: bytes, window: ContextWindow, width: int) -> list[HexRow]:
    """Slice `window` of `buffer` into rows of `width` bytes.

    Every row-aligned offset in [display_start, display_end) gets a row.
    Bytes inside one of the window's matches are flagged for highlight.
    """
    if width < 1:
        raise ValueError("width must be >= 1")
    index = SpanIndex(window.matches)
    rows: list[HexRow] = []
    end = min(window.display_end, len(buffer))
    for offset in range(window.display_start, end, width):
        chunk = bytes(buffer[offset : min(offset + width, len(buffer))])
        mask = tuple((offset + i) in index for i in range(len(chunk)))
        rows.append(HexRow(offset=offset, data=chunk, highlight=mask))
    return rows


def hex_column(row: HexRow, width: int) -> str:
    # Missing bytes in a short final row are left blank
    cells = [f"{b:02x}" for b in row.data]
    cells.extend("  " for _ in range(width - len(cells)))
    return " ".join(cells)


def ascii_column(row: HexRow, width: int) -> str:
    return "".join(to_ascii_glyph(b) for b in row.data).ljust(width)


def render_row(row: HexRow, width: int) -> str:
    """Plain-text row: offset, hex bytes, and printable column between bars."""
    return f"{row.offset:0{OFFSET_DIGITS}x}  {hex_column(row, width)}  |{ascii_column(row, width)}|"
