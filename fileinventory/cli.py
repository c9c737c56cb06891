"""CLI entrypoint for fileinventory."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import CONFIG_FILENAME, ConfigError, load_config
from .logging import configure_logging
from .models import RunStatus
from .pipeline import InventoryPipeline
from .writer import STYLES, WriteError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fileinventory",
        description="Write a CSV inventory of JPEG and PDF files identified by their magic numbers.",
    )
    parser.add_argument("directory", help="Directory to scan.")
    parser.add_argument("output", help="Inventory file to create (must not exist).")
    parser.add_argument(
        "-r",
        "--recursive",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include files in subdirectories (--no-recursive overrides the config file).",
    )
    parser.add_argument(
        "--algorithm",
        default=None,
        help="Digest algorithm (default: md5, or hash.algorithm from the config file).",
    )
    parser.add_argument(
        "--style",
        choices=STYLES,
        default=None,
        help="Inventory line style: legacy 'path, kind, digest' or quoted CSV.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help=f"Config file or directory containing {CONFIG_FILENAME} (defaults to the current directory).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=False,
        help="Only log warnings and errors to the console.",
    )
    parser.add_argument("--log-file", default=None, help="Also write logs to this file.")
    return parser


def _validate_inputs(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    directory = Path(args.directory).expanduser()
    if not args.directory.strip() or not directory.is_dir():
        parser.exit(2, f"Not a valid directory: {args.directory}\n")
    if not args.output.strip():
        parser.exit(2, "Output file path must not be blank\n")
    if Path(args.output).expanduser().exists():
        parser.exit(2, f"Output file already exists: {args.output}\n")


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for fileinventory."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(
            verbose=bool(args.verbose),
            quiet=bool(args.quiet),
            log_file=Path(args.log_file) if args.log_file else None,
        )
    except OSError as exc:
        parser.exit(1, f"fileinventory failed: cannot open log file: {exc}\n")
    _validate_inputs(parser, args)

    config_path = Path(args.config) if args.config else Path.cwd()
    try:
        config = load_config(config_path).with_overrides(
            algorithm=args.algorithm,
            style=args.style,
            recursive=args.recursive,
        )
    except ConfigError as exc:
        parser.exit(1, f"Invalid configuration: {exc}\n")

    pipeline = InventoryPipeline.from_config(config)
    try:
        outcome = pipeline.run(args.directory, args.output, recursive=config.recursive)
    except KeyboardInterrupt:
        parser.exit(130, "Interrupted; no inventory written\n")
    except FileExistsError as exc:
        parser.exit(2, f"{exc}\n")
    except (WriteError, OSError) as exc:
        parser.exit(1, f"fileinventory failed: {exc}\nRun with --verbose for more details.\n")

    if outcome.skipped:
        print(f"Skipped {len(outcome.skipped)} unreadable file(s)")
    if outcome.status is RunStatus.EMPTY:
        print("No matching files found")
    else:
        print(f"Inventory written to {outcome.output_path} ({len(outcome.records)} files)")


if __name__ == "__main__":
    main(sys.argv[1:])
