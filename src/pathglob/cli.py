"""
Command-line interface for pathglob.

Validates a glob pattern, then matches a path against it::

    pathglob '/usr/**/[bc]a?/*.txt' /usr/share/bar/notes.txt

Exit codes: 0 when the path matches, 1 when it doesn't, 2 when the pattern
(or the command line) is invalid.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

import yaml

from .engine import GlobEngine
from .loader import load_profile
from .models import PatternError
from .profile import BUILTIN_PROFILES, DEFAULT_PROFILE, PlatformProfile

logger = logging.getLogger(__name__)

EXIT_MATCH = 0
EXIT_MISMATCH = 1
EXIT_INVALID = 2


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure logging based on verbosity level.

    Args:
        verbose: Enable verbose (DEBUG) logging
        quiet: Enable quiet mode (WARNING+ only)
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _resolve_profile(value: str | None) -> PlatformProfile:
    if value is None:
        return DEFAULT_PROFILE
    if value.lower() in BUILTIN_PROFILES:
        return BUILTIN_PROFILES[value.lower()]
    return load_profile(Path(value))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathglob",
        description="Match a file path against a glob pattern",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # '*' stays within one directory level
  pathglob '/Users/*/Documents' /Users/alice/Documents

  # '**' crosses directory levels
  pathglob '/usr/**/*.txt' /usr/share/doc/notes.txt

  # Match Windows paths
  pathglob --profile windows 'C/**/*.dll' 'C\\Windows\\System32\\kernel32.dll'
        """,
    )
    parser.add_argument("pattern", help="Glob pattern (always uses '/' as separator)")
    parser.add_argument("path", help="Path to match against the pattern")
    parser.add_argument(
        "-p",
        "--profile",
        help="Platform profile: 'posix', 'windows' or a YAML profile file (default: host platform)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output (DEBUG level)"
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Quiet mode (warnings and errors only)"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Exit code (see module docstring)
    """
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        profile = _resolve_profile(args.profile)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Cannot load profile {args.profile}: {e}")
        return EXIT_INVALID

    engine = GlobEngine(profile)
    try:
        engine.check(args.pattern)
    except PatternError as e:
        print(f"{e}.", file=sys.stderr)
        return EXIT_INVALID

    outcome = engine.match(args.pattern, args.path)
    if outcome.matched:
        print(f"Pattern {args.pattern} matches path {args.path}")
        return EXIT_MATCH

    print(
        f"Pattern {args.pattern} mismatches at position {outcome.consumed + 1} in path {args.path}"
    )
    return EXIT_MISMATCH


if __name__ == "__main__":
    sys.exit(main())
