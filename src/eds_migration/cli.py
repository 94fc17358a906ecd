"""Command-line front end for the migration toolkit.

Usage:
  eds-migration fix-tables page.md                  # print the fixed markdown
  eds-migration fix-tables page.md --output out.md  # write it to a file
  eds-migration fix-tables content/ --in-place      # rewrite every .md under content/
  eds-migration fix-tables content/ --check         # exit 1 if anything would change
"""

import argparse
import logging
import sys
from pathlib import Path

from eds_migration import config
from eds_migration.tables import pipeline

logger = logging.getLogger(__name__)


def _fix_tables(args: argparse.Namespace) -> int:
    """Handler for the fix-tables command; returns the process exit code."""
    n_changed = pipeline.run(args.paths, output=args.output, in_place=args.in_place, check=args.check)
    if args.check and n_changed:
        logger.error("%d file(s) have grid tables that need reformatting", n_changed)
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subparser per command."""
    parser = argparse.ArgumentParser(prog="eds-migration", description="Markdown migration utilities")
    parser.add_argument(
        "--log-level",
        default=config.log_level(),
        choices=config.LOG_LEVELS,
        type=str.upper,
        help="Logging verbosity (default: $EDS_MIGRATION_LOG_LEVEL or INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    fix = subparsers.add_parser("fix-tables", help="Align the columns of grid tables in markdown")
    fix.add_argument("paths", nargs="+", type=Path, help="Markdown files or directories to process")
    target = fix.add_mutually_exclusive_group()
    target.add_argument("--output", type=Path, help="Write the result to this file (single input only)")
    target.add_argument("--in-place", action="store_true", help="Rewrite changed files in place")
    target.add_argument("--check", action="store_true", help="Write nothing; exit 1 if any file would change")
    fix.set_defaults(handler=_fix_tables)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse *argv*, run the chosen command, and return its exit code."""
    args = build_parser().parse_args(argv)

    try:
        logging.basicConfig(level=args.log_level, format=config.LOG_FORMAT)
        return args.handler(args)
    except (OSError, ValueError) as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
