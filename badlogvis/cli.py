"""Command-line interface: turn a badlog dump into an HTML report."""

from __future__ import annotations

import argparse
import sys
import webbrowser
from pathlib import Path
from typing import Optional, Sequence

from badlogvis import __version__
from badlogvis.core import CoreError, Diagnostics
from badlogvis.io.config import InputConfig
from badlogvis.io.load import build_report, load_input
from badlogvis.render import render_page, write_page
from badlogvis.utils.logging import VERBOSE_FMT, configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="badlogvis",
        description="Create html from badlog data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  badlogvis run.bag
  badlogvis run.csv --csv report.html
  badlogvis run.bag -t -o
        """,
    )
    parser.add_argument("input", help="Input file")
    parser.add_argument("output", nargs="?", help="Output file, default to <input>.html")
    parser.add_argument(
        "-t",
        "--trim-doubles",
        action="store_true",
        help="Retry parsing doubles without whitespace",
    )
    parser.add_argument("-c", "--csv", action="store_true", help="Input is CSV file")
    parser.add_argument(
        "-o",
        "--open",
        dest="open_in_browser",
        action="store_true",
        help="Open resulting HTML in default browser",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(args: argparse.Namespace) -> Path:
    config = InputConfig(trim_doubles=args.trim_doubles, csv_only=args.csv)
    output = Path(args.output) if args.output else Path(f"{args.input}.html")

    diagnostics = Diagnostics()
    data = load_input(args.input, config, diagnostics)
    report = build_report(data, diagnostics)

    html = render_page(args.input, report.folders, data.header_text)
    write_page(output, html)
    logger.info(
        "Wrote %s (%d folders, %d warnings)", output, len(report.folders), len(diagnostics)
    )

    if args.open_in_browser and not webbrowser.open(output.resolve().as_uri()):
        logger.warning("There was an error opening the browser.")
    return output


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        configure_logging("DEBUG", fmt=VERBOSE_FMT)
    else:
        configure_logging()

    try:
        run(args)
    except CoreError as e:
        logger.error("%s", e)
        return 1
    except KeyboardInterrupt:
        logger.error("Operation cancelled by user")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
