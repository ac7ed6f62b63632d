"""CLI entrypoint for cleanpkgcache."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from cleanpkgcache import __version__
from cleanpkgcache.config import load_config
from cleanpkgcache.constants.branding import BRAND_NAME, CLI_DESCRIPTION
from cleanpkgcache.constants.cli import EXIT_CONFIG_ERROR, EXIT_FATAL, EXIT_OK, EXIT_PARTIAL_FAILURE
from cleanpkgcache.constants.config import CONFIG_FILENAME, DEFAULT_CACHE_ROOT
from cleanpkgcache.exceptions import CacheRootError, ConfigError
from cleanpkgcache.reporting import StdoutReporter, write_summary_report
from cleanpkgcache.scanner import run_cleanup


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(prog=BRAND_NAME, description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=None,
        help=f"Path to the package cache directory (default: config cache_root, else {DEFAULT_CACHE_ROOT})",
    )
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Show what would be deleted without actually deleting",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument(
        "--clean-checkpoints",
        "--clean-roo-checkpoints",
        dest="clean_checkpoints",
        action="store_true",
        help="Also clean Roo checkpoints older than the configured age (default: 60 days)",
    )
    parser.add_argument(
        "--checkpoints-only",
        action="store_true",
        help="Clean Roo checkpoints only; skip the package cache",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help=f"Explicit config file (default: ~/{CONFIG_FILENAME} if present)",
    )
    parser.add_argument(
        "-j",
        "--json-report",
        type=Path,
        default=None,
        help="Write the run summary as JSON to this path",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument(
        "--strict",
        action="store_true",
        help=f"Exit with status {EXIT_PARTIAL_FAILURE} if any entry could not be read or deleted",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.checkpoints_only and args.path is not None:
        parser.error("PATH cannot be combined with --checkpoints-only")

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(message)s",
    )

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    cache_root: Path | None = None if args.checkpoints_only else (args.path or config.cache_root)
    clean_checkpoints = args.clean_checkpoints or args.checkpoints_only

    try:
        summary = run_cleanup(
            cache_root=cache_root,
            dry_run=args.dry_run,
            checkpoint_roots=config.checkpoint_roots if clean_checkpoints else None,
            checkpoint_max_age=config.checkpoint_max_age,
        )
    except CacheRootError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FATAL

    use_color = not args.no_color and sys.stdout.isatty()
    print(StdoutReporter(summary, color=use_color, verbose=args.verbose).render())

    if args.json_report is not None:
        try:
            write_summary_report(args.json_report, summary)
        except OSError as exc:
            print(f"Failed to write JSON report to {args.json_report}: {exc}", file=sys.stderr)
            return EXIT_FATAL

    if args.strict and summary.has_failures:
        return EXIT_PARTIAL_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
