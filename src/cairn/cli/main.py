"""CLI entrypoint for Cairn."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from cairn import __version__
from cairn.cli.handlers import handle_list, handle_run, handle_show_config, handle_validate_config
from cairn.config import load_settings
from cairn.constants.branding import CLI_DESCRIPTION
from cairn.constants.reporting import DEFAULT_LIST_FORMAT, VALID_LIST_FORMATS
from cairn.exceptions import (
    CairnError,
    ConfigError,
    LibraryDirectoryMissing,
    MissingFeatureEntry,
    UnknownFeature,
)
from cairn.exceptions.validation import format_errors
from cairn.host import Host
from cairn.io import current_working_directory
from cairn.validation import preflight_validate

LOG_FORMAT: str = "%(levelname)s %(message)s"


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-r",
        "--root",
        type=Path,
        default=None,
        help="Workspace root holding cairn.yaml (default: current directory)",
    )
    parser.add_argument("-s", "--settings", type=Path, default=None, help="Explicit settings file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="cairn",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    run = subparsers.add_parser("run", help="Load features and configuration, then run a feature")
    _add_common_arguments(run)
    run.add_argument("feature", help="Feature name to run")
    run.add_argument("args", nargs=argparse.REMAINDER, help="Arguments passed to the feature entry")

    listing = subparsers.add_parser("list", help="List discoverable features")
    _add_common_arguments(listing)
    listing.add_argument(
        "--format",
        dest="output_format",
        choices=sorted(VALID_LIST_FORMATS),
        default=DEFAULT_LIST_FORMAT,
        help="Output format (default: text)",
    )
    listing.add_argument(
        "--discover-only",
        action="store_true",
        help="List names without loading feature modules",
    )
    listing.add_argument("--no-color", action="store_true", help="Disable colored output")

    show = subparsers.add_parser("show-config", help="Evaluate configuration files and print the published bindings")
    _add_common_arguments(show)

    validate = subparsers.add_parser("validate-config", help="Validate settings without running anything")
    _add_common_arguments(validate)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    root = args.root if args.root is not None else current_working_directory()

    if args.command == "validate-config":
        return handle_validate_config(root, args.settings)

    validation_errors = preflight_validate(root, args.settings)
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return 2

    try:
        settings = load_settings(root, args.settings)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    logging.basicConfig(level=logging.DEBUG if args.verbose else settings.log_level, format=LOG_FORMAT)
    host = Host(settings)

    try:
        if args.command == "run":
            return handle_run(host, args.feature, args.args)
        if args.command == "list":
            use_color = not args.no_color and sys.stdout.isatty()
            return handle_list(host, output_format=args.output_format, load=not args.discover_only, color=use_color)
        if args.command == "show-config":
            return handle_show_config(host)
    except LibraryDirectoryMissing as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except (UnknownFeature, MissingFeatureEntry) as exc:
        print(f"Usage error: {exc}", file=sys.stderr)
        return 2
    except CairnError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"I/O error: {exc}", file=sys.stderr)
        return 1

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
