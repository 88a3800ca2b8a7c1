#!/usr/bin/env python3
"""CLI interface for highlights module."""

import argparse
from datetime import datetime
from pathlib import Path

from common.constants import DATE_FORMAT, SUPPORTED_HTML_PARSERS
from common.logger import error, setup_logging

from .errors import HighlightsError
from .main import build_import, import_highlights


def _parse_date(value: str):
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid date '{value}', expected YYYY-MM-DD") from e


def cmd_import(args):
    """Import a Kindle highlights export into the vault.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    if not args.file.is_file():
        error(f"{args.file} is not a file")
        return 1

    try:
        if args.dry_run:
            result = build_import(
                args.file,
                destination_folder=args.folder,
                current_date=args.date,
                parser=args.parser,
            )
            print(f"{result.path}\n")
            print(result.document, end="")
        else:
            import_highlights(
                args.file,
                destination_folder=args.folder,
                vault_dir=args.vault_dir,
                current_date=args.date,
                parser=args.parser,
            )
        return 0
    except HighlightsError:
        # Already reported to the user
        return 1


def main():
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Convert Kindle Notes & Highlights exports into Markdown notes"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write log records to this file",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    import_parser = subparsers.add_parser("import", help="Import highlights from an HTML export")
    import_parser.add_argument(
        "--file",
        type=Path,
        required=True,
        help="Exported HTML file",
    )
    import_parser.add_argument(
        "--folder",
        type=str,
        default=None,
        help="Destination folder inside the vault (default: $KINDLE_HIGHLIGHTS_PATH or /)",
    )
    import_parser.add_argument(
        "--vault-dir",
        type=Path,
        default=None,
        help="Vault root directory (default: $VAULT_DIR or current directory)",
    )
    import_parser.add_argument(
        "--date",
        type=_parse_date,
        default=None,
        help="Import date written to the note, YYYY-MM-DD (default: today)",
    )
    import_parser.add_argument(
        "--parser",
        choices=SUPPORTED_HTML_PARSERS,
        default=None,
        help="HTML parser (default: $HTML_PARSER or html.parser)",
    )
    import_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the note instead of writing it",
    )
    import_parser.set_defaults(func=cmd_import)

    args = parser.parse_args()
    setup_logging(log_file=args.log_file)
    return args.func(args)


if __name__ == "__main__":
    exit(main())
