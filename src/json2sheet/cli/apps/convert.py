from __future__ import annotations

import argparse
import logging
from typing import Optional

from json2sheet.cli.logging_utils import setup_logging
from json2sheet.cli.runtime import run_cli
from json2sheet.io_backends.router import available_backends
from json2sheet.pipeline import ConvertConfig, convert, load_config

log = logging.getLogger("json2sheet.run")

EPILOG = """\
examples:
  json2sheet data.json output.xlsx
  json2sheet data.json output.xlsx --no-format
  json2sheet data.json output.csv

with formatting enabled:
  - blue headers with white bold text
  - alternating row colors
  - number, date and e-mail formatting by value type
  - auto-sized columns (capped) with borders
  - green/red boolean values
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json2sheet",
        description="Convert a JSON document (object, array or scalar) into a styled spreadsheet.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", nargs="?", help="Path to the input JSON file")
    parser.add_argument("output", nargs="?", help="Path to the output file (.xlsx, or .csv)")

    # conversion options (override --config)
    parser.add_argument("--no-format", action="store_true", help="Plain output: bold headers, no other styling")
    parser.add_argument(
        "--backend",
        choices=available_backends() + ["xlsx"],
        help="Writer backend (default: csv for .csv outputs, otherwise openpyxl)",
    )
    parser.add_argument("--sheet-name", help="Worksheet name (default: Data)")
    parser.add_argument("--no-dates", action="store_true", help="Keep ISO date-time strings as text")
    parser.add_argument("--config", help="YAML file with conversion defaults")

    # logging options
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase verbosity (repeatable)")
    parser.add_argument("--debug", action="store_true", help="Show full tracebacks on errors")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if not args.input or not args.output:
        parser.print_help()
        return 0

    config = load_config(args.config) if args.config else ConvertConfig()
    config = config.with_overrides(
        formatting=False if args.no_format else None,
        backend=args.backend,
        sheet_name=args.sheet_name,
        parse_dates=False if args.no_dates else None,
    )

    grid = convert(args.input, args.output, config)
    log.info("Done. %s grid, %d row(s), wrote %s", grid.mode.value, grid.n_rows, args.output)

    status = "with formatting" if config.formatting else "without formatting"
    print(f"Successfully converted {args.input} to {args.output} {status}")
    return 0


def entrypoint() -> None:
    run_cli(main)


if __name__ == "__main__":
    entrypoint()
