from __future__ import annotations

import argparse
import sys

import structlog
from rich.console import Console

from bytegrep.core.config import ConfigError, SearchConfig, load_config
from bytegrep.core.pattern import InvalidPattern, compile_pattern
from bytegrep.core.report import SearchReport, search_files
from bytegrep.logging_config import configure_logging
from bytegrep.ui.render import render_report

logger = structlog.get_logger(__name__)

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2

BYTES_HELP = (
    'Quoted bytes in hexadecimal format either without 0x (e.g.: "1f 8b 08") '
    "or with 0x in one word, which respects --endian (e.g.: -e little 0x088b1f)"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bytegrep", description="A utility to search arbitrary bytes in files"
    )
    parser.add_argument("bytes", help=BYTES_HELP)
    parser.add_argument("files", nargs="+", metavar="file", help="File(s) to search")
    parser.add_argument(
        "-e",
        "--endian",
        choices=["big", "little"],
        default=None,
        help="Byte order of a 0x... word (default: big)",
    )
    parser.add_argument("-w", "--width", type=int, default=None, help="Bytes per row (default: 16)")
    parser.add_argument(
        "-C", "--context", type=int, default=None, help="Rows of context per match (default: 0)"
    )
    parser.add_argument("--config", default=None, help="Path to a YAML config file")
    parser.add_argument(
        "--color", choices=["auto", "always", "never"], default="auto", help="Highlight matches"
    )
    parser.add_argument("--browse", action="store_true", help="Open results in a viewer")
    parser.add_argument("--debug", action="store_true", help="Verbose logging to stderr")
    return parser


def make_console(color: str, *, stderr: bool = False) -> Console:
    if color == "always":
        return Console(stderr=stderr, force_terminal=True, highlight=False, soft_wrap=True)
    if color == "never":
        return Console(stderr=stderr, no_color=True, highlight=False, soft_wrap=True)
    return Console(stderr=stderr, highlight=False, soft_wrap=True)


def resolve_config(args: argparse.Namespace) -> SearchConfig:
    base = load_config(args.config)
    return base.with_overrides(width=args.width, context=args.context, endian=args.endian)


def exit_status(reports: list[SearchReport]) -> int:
    if any(not r.ok for r in reports):
        return EXIT_ERROR
    return EXIT_FOUND if any(r.found for r in reports) else EXIT_NOT_FOUND


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(debug=True if args.debug else None)

    try:
        config = resolve_config(args)
    except ConfigError as e:
        print(f"bytegrep: {e}", file=sys.stderr)
        return EXIT_ERROR

    # Compile once, before any file is touched
    try:
        pattern = compile_pattern(args.bytes, config.endian)
    except InvalidPattern as e:
        print(f"bytegrep: {e}", file=sys.stderr)
        return EXIT_ERROR
    logger.debug("compiled pattern", spec=args.bytes, bytes=pattern.hex(), endian=config.endian)

    if args.browse:
        from bytegrep.ui.browser import ReportBrowser

        collected = list(search_files(args.files, pattern, config))
        for r in collected:
            if not r.ok:
                print(f"bytegrep: cannot read {r.source}: {r.error}", file=sys.stderr)
        ReportBrowser(collected, title=f"bytegrep {pattern.hex()}").run()
        return exit_status(collected)

    out = make_console(args.color)
    err = make_console(args.color, stderr=True)
    had_error = False
    found_any = False
    printed = 0
    for report in search_files(args.files, pattern, config):
        if not report.ok:
            had_error = True
            err.print(f"bytegrep: cannot read {report.source}: {report.error}", markup=False)
            continue
        found_any = found_any or report.found
        if printed:
            out.print()
        out.print(render_report(report))
        printed += 1
    if had_error:
        return EXIT_ERROR
    return EXIT_FOUND if found_any else EXIT_NOT_FOUND


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
