"""Rich rendering of search reports."""

from __future__ import annotations

from rich.style import Style
from rich.text import Text

from bytegrep.core.hexrow import OFFSET_DIGITS, HexRow
from bytegrep.core.report import SearchReport, format_offset_line, format_summary
from bytegrep.ui.palette import PALETTE


def _match_style() -> Style:
    return Style(color=PALETTE.match_fg, bgcolor=PALETTE.match_bg, bold=True)


def render_row_text(row: HexRow, width: int) -> Text:
    """Styled counterpart of `render_row`: same characters, matches highlighted."""
    match_style = _match_style()
    line = Text()
    line.append(f"{row.offset:0{OFFSET_DIGITS}x}", style=PALETTE.offset_fg)
    line.append("  ")

    # Hex cells
    cells = row.cells()
    for idx in range(width):
        if idx < len(cells):
            hx, _glyph, hl = cells[idx]
            line.append(hx, style=match_style if hl else PALETTE.hex_fg)
        else:
            line.append("  ")
        if idx < width - 1:
            line.append(" ")

    # ASCII column
    line.append("  ")
    line.append("|", style=PALETTE.punct_fg)
    for _hx, glyph, hl in cells:
        line.append(glyph, style=match_style if hl else PALETTE.ascii_fg)
    line.append(" " * (width - len(cells)))
    line.append("|", style=PALETTE.punct_fg)
    return line


def render_header(report: SearchReport) -> Text:
    return Text(report.source, style=f"bold {PALETTE.header_fg}")


def render_summary(report: SearchReport) -> Text:
    style = PALETTE.summary_fg if report.found else PALETTE.summary_none_fg
    return Text(format_summary(report), style=style)


def render_error(report: SearchReport) -> Text:
    return Text(f"cannot read {report.source}: {report.error}", style=PALETTE.error_fg)


def render_report(report: SearchReport) -> Text:
    """Header, one block per merged window (blank line between), then the summary."""
    out = Text()
    out.append_text(render_header(report))
    out.append("\n")
    if not report.ok:
        out.append_text(render_error(report))
        return out

    for i, block in enumerate(report.blocks):
        if i:
            out.append("\n")
        for m in block.window.matches:
            out.append(format_offset_line(m.start), style=PALETTE.match_offset_fg)
            out.append("\n")
        for row in block.rows:
            out.append_text(render_row_text(row, report.width))
            out.append("\n")
    if report.blocks:
        out.append("\n")
    out.append_text(render_summary(report))
    return out
