"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from brightsky_report import __version__
from brightsky_report.config import get_settings
from brightsky_report.parser import DecodeError, load_response
from brightsky_report.renderers.report import render_report

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="brightsky-report",
        description="Readable weather reports from Bright Sky API payloads",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    report_parser = subparsers.add_parser("report", help="Print a report for a Bright Sky payload")
    report_parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="JSON file to read (default: stdin)",
    )

    subparsers.add_parser("info", help="Show application info")

    return parser


def configure_logging(debug: bool) -> None:
    """Send log records to stderr; stdout is reserved for the report."""
    settings = get_settings()
    level = logging.DEBUG if debug or settings.debug else settings.log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def read_input(source: str) -> str:
    """Read the whole payload from a file path, or stdin for ``-``."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def cmd_report(args: argparse.Namespace) -> int:
    """Handle the 'report' command."""
    settings = get_settings()
    try:
        text = read_input(args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        response = load_response(text)
    except json.JSONDecodeError as e:
        logger.debug("Input is not valid JSON", exc_info=True)
        print(f"Error: invalid JSON: {e}", file=sys.stderr)
        return 1
    except DecodeError as e:
        logger.debug("Input does not match the response schema", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(render_report(response, date_format=settings.date_format))
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Date format: {settings.date_format}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    try:
        configure_logging(args.debug)
    except ValidationError as e:
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        return 1

    commands = {
        "report": cmd_report,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
