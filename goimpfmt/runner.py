"""
CLI runner for goimpfmt.

This module provides the command line entry point: it collects Go source
files, formats their import blocks, writes the results back (unless running
dry) and reports what changed.
"""

import argparse
import concurrent.futures
import logging
import os
import sys
from typing import List, Optional

from pydantic import ValidationError

from .config import FormatterConfig, anchor_paths, find_config_file, load_config, save_config
from .file_filter import FileFilter, collect_files
from .formatter import format_json, format_pretty
from .gofile import GoFile
from .matcher import Matcher, split_prefixes
from .settings import Settings
from .types import FileReport

logger = logging.getLogger(__name__)

EXIT_CLEAN = 0
EXIT_CHANGED = 1
EXIT_ERROR = 2


def setup_logging(verbose: bool, level: Optional[str] = None) -> None:
    """Send diagnostics to stderr; report output stays on stdout."""
    if level is None:
        level = "INFO" if verbose else "WARNING"
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def format_file(path: str, matcher: Matcher, dry_run: bool = False) -> FileReport:
    """
    Format a single file and write it back when its imports changed.

    I/O errors are captured in the report so one unreadable file does not
    stop the run.
    """
    try:
        go_file = GoFile.load(path, matcher)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading {path}: {e}")
        return FileReport(path=path, error=str(e))

    report = FileReport(path=path, edit_script=go_file.edit_script)
    if not go_file.changed:
        return report

    if dry_run:
        logger.info(f"Would rewrite imports in {path}")
        return report

    try:
        go_file.write()
        report.written = True
    except OSError as e:
        logger.error(f"Error processing {path}: {e}")
        report.error = str(e)
    return report


def run_parallel(files: List[str], matcher: Matcher, jobs: int, dry_run: bool = False) -> List[FileReport]:
    """Format files with optional parallelization, keeping input order."""
    if jobs <= 1:
        return [format_file(path, matcher, dry_run) for path in files]

    with concurrent.futures.ThreadPoolExecutor(max_workers=jobs) as executor:
        futures = [executor.submit(format_file, path, matcher, dry_run) for path in files]
        return [future.result() for future in futures]


def exit_code(reports: List[FileReport]) -> int:
    if any(r.error for r in reports):
        return EXIT_ERROR
    if any(r.changed for r in reports):
        return EXIT_CHANGED
    return EXIT_CLEAN


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="goimpfmt",
        description="Group and sort the import blocks of Go source files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  goimpfmt ./ --project github.com/acme/api
  goimpfmt cmd/ pkg/ --project github.com/acme/api,github.com/acme/lib --dry-run
  goimpfmt . --project github.com/acme/api --ignore pkg/generated --format json --quiet

Exit status: 0 nothing to change, 1 files changed (or would change), 2 errors.
        """
    )

    parser.add_argument(
        "paths",
        nargs="*",
        help="Files or directories to format"
    )

    parser.add_argument(
        "--project", "-p",
        help="Comma-separated import prefixes of the project (local imports)"
    )

    parser.add_argument(
        "--ignore",
        help="Comma-separated files or directories to skip"
    )

    parser.add_argument(
        "--exts",
        help="Override file extensions (comma-separated, default: .go)"
    )

    parser.add_argument(
        "--dry-run", "-n",
        action="store_true",
        default=None,
        help="Report changes without writing files"
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        default=None,
        help="Do not print the report; only the exit status is meaningful"
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable coloured diff output"
    )

    parser.add_argument(
        "--format",
        choices=["pretty", "json"],
        help="Report format (default: pretty)"
    )

    parser.add_argument(
        "--jobs", "-j",
        type=int,
        help="Number of parallel jobs (0=auto, 1=sequential, N=parallel)"
    )

    parser.add_argument(
        "--config",
        help="Path to configuration file (default: search upwards for .goimpfmt.yml)"
    )

    parser.add_argument(
        "--write-config",
        metavar="PATH",
        help="Write the effective configuration to PATH and exit"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )

    return parser


def resolve_config(args: argparse.Namespace, settings: Settings) -> FormatterConfig:
    """Merge options with precedence: CLI > environment > config file > defaults."""
    config_path = args.config
    if not config_path:
        config_path = find_config_file(args.paths[0] if args.paths else ".")

    config = load_config(config_path)
    logger.info(f"Using config: {config_path or 'defaults'}")

    # Ignore entries in a config file are relative to that file, not the cwd
    if config_path and config.ignore:
        config.ignore = anchor_paths(config.ignore, config_path)

    if settings.project:
        config.project = settings.project
    if settings.ignore:
        config.ignore = settings.ignore
    if settings.no_color:
        config.color = False

    if args.project:
        config.project = split_prefixes(args.project)
    if args.ignore:
        config.ignore = split_prefixes(args.ignore)
    if args.exts:
        config.extensions = split_prefixes(args.exts)
    if args.dry_run:
        config.dry_run = True
    if args.quiet:
        config.quiet = True
    if args.no_color:
        config.color = False
    if args.format:
        config.format = args.format
    if args.jobs is not None:
        config.jobs = args.jobs

    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings()
    except ValidationError as e:
        parser.error(f"invalid GOIMPFMT_* environment setting: {e}")
    setup_logging(args.verbose, settings.log_level)

    config = resolve_config(args, settings)

    if args.write_config:
        save_config(config, args.write_config)
        logger.info(f"Configuration written to {args.write_config}")
        return EXIT_CLEAN

    if not args.paths:
        parser.error("at least one path is required")
    if not config.project:
        parser.error("no project prefix given (use --project, GOIMPFMT_PROJECT_RAW or a config file)")

    matcher = Matcher(config.project)
    logger.info(f"Local import prefixes: {', '.join(matcher.prefixes)}")

    file_filter = FileFilter(
        extensions=config.extensions,
        excluded_dirs=config.excluded_dirs,
        ignore=config.ignore,
    )
    files = collect_files(args.paths, file_filter)
    logger.info(f"Found {len(files)} files to format")

    jobs = config.jobs
    if jobs == 0:
        jobs = min(4, len(files), os.cpu_count() or 1)

    reports = run_parallel(files, matcher, jobs, config.dry_run)

    if not config.quiet:
        if config.format == "json":
            print(format_json(reports, dry_run=config.dry_run))
        else:
            color = config.color and sys.stdout.isatty()
            print(format_pretty(reports, color=color, dry_run=config.dry_run))

    return exit_code(reports)


if __name__ == "__main__":
    sys.exit(main())
