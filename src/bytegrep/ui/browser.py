"""Textual viewer for a finished set of search reports."""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.containers import ScrollableContainer
from textual.widgets import Footer, Header, Static

from bytegrep.core.report import SearchReport, format_summary
from bytegrep.ui.render import render_report


class ReportPanel(Static):
    """One file's rendered report."""

    DEFAULT_CSS = """
    ReportPanel {
        padding: 0 1;
        margin-bottom: 1;
    }
    """

    def __init__(self, report: SearchReport) -> None:
        super().__init__(render_report(report))
        self.report = report


class ReportBrowser(App):
    """Scrollable list of per-file reports."""

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("j", "scroll_down", "Down"),
        ("k", "scroll_up", "Up"),
        ("G", "go_end", "End"),
        ("g", "go_home", "Top"),
    ]

    def __init__(self, reports: list[SearchReport], *, title: str = "bytegrep") -> None:
        super().__init__()
        self.reports = list(reports)
        self.title = title
        total = sum(r.match_count for r in self.reports)
        self.sub_title = f"{total} match{'es' if total != 1 else ''} in {len(self.reports)} file(s)"
        self._body: ScrollableContainer | None = None

    def compose(self) -> ComposeResult:  # noqa: D401 - Textual API
        yield Header(show_clock=False)
        self._body = ScrollableContainer(*(ReportPanel(r) for r in self.reports), id="reports")
        yield self._body
        yield Footer()

    def summary_lines(self) -> list[str]:
        return [format_summary(r) for r in self.reports if r.ok]

    def action_scroll_down(self) -> None:
        if self._body is not None:
            self._body.scroll_down()

    def action_scroll_up(self) -> None:
        if self._body is not None:
            self._body.scroll_up()

    def action_go_end(self) -> None:
        if self._body is not None:
            self._body.scroll_end()

    def action_go_home(self) -> None:
        if self._body is not None:
            self._body.scroll_home()
