"""Main CLI entry point for mvsgraph.

Provides commands: convert, summary
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from mvsgraph.cli.convert import convert_command
from mvsgraph.cli.summary import summary_command
from mvsgraph.config import EXPORT_FORMATS

logger = logging.getLogger("mvsgraph.cli")


def setup_logging(
    verbose: bool = False,
    console: Optional[Console] = None,
    log_file: Optional[str] = None,
) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).
        log_file: Also write plain log records to this file (optional).
    """
    level = logging.DEBUG if verbose else logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )
    handlers: list = [handler]

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s [%(name)s] [%(levelname)s] %(message)s")
        )
        file_handler.setLevel(logging.DEBUG)
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=handlers,
        force=True,
    )


def _add_input_arguments(parser: argparse.ArgumentParser) -> None:
    """Add arguments shared by commands that read an edge list."""
    parser.add_argument(
        "input",
        nargs="?",
        help=(
            "Edge-list file as printed by 'go mod graph', or '-' for stdin. "
            "When omitted, 'go mod graph' is run in --dir."
        ),
    )
    root_group = parser.add_mutually_exclusive_group()
    root_group.add_argument(
        "--root",
        help="Root module path (default: first unversioned node in the input)",
    )
    root_group.add_argument(
        "--go-mod",
        help="Read the root module path from this go.mod file",
    )
    parser.add_argument(
        "--dir",
        help="Module directory to run 'go mod graph' in (default: current directory)",
    )
    parser.add_argument(
        "--go-binary",
        help="Go executable to run (default: go)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all commands."""
    parser = argparse.ArgumentParser(
        prog="mvsgraph",
        description="mvsgraph - Minimal version selection viewer for Go module graphs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--log-file",
        help="Output log to file (optional), in addition to the console.",
    )
    parser.add_argument(
        "-c",
        "--config",
        help=(
            "Optional configuration. Can be a path to a TOML/JSON file or an "
            "inline TOML/JSON string. When omitted, built-in defaults are used."
        ),
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    convert_parser = subparsers.add_parser(
        "convert",
        help="Compute MVS picks and export the dependency graph",
    )
    _add_input_arguments(convert_parser)
    convert_parser.add_argument(
        "-o",
        "--output",
        help="Output file (default: dependency_tree.<format>)",
    )
    convert_parser.add_argument(
        "-f",
        "--format",
        choices=list(EXPORT_FORMATS),
        help="Output format (default: html)",
    )
    convert_parser.add_argument(
        "--open",
        action="store_true",
        help="Write HTML to a temporary file and open it in the default browser",
    )

    summary_parser = subparsers.add_parser(
        "summary",
        help="Print picked module versions and the versions they superseded",
    )
    _add_input_arguments(summary_parser)

    return parser


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose, log_file=args.log_file)

    if args.command == "convert":
        return convert_command(args)
    elif args.command == "summary":
        return summary_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
