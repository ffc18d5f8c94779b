#!/usr/bin/env python3
"""
fileref CLI

Reads text containing file references (stack traces, compiler output, log
lines), finds the referenced files in the workspace, and prints where they
are.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from exporters import to_goto, to_json, to_text
from scanner.builder import locate
from scanner.errors import FileRefError
from settings import Settings, load_settings

logger = logging.getLogger("fileref")


def parse_args(args=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="fileref",
        description="Find the files referenced by a stack trace or log excerpt.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pbpaste | fileref                     # Resolve against the current directory
  fileref trace.txt -r ~/src/app        # Read a file, search another root
  fileref trace.txt -p /app/ -p /srv/   # Strip container prefixes first
  fileref trace.txt -f json             # Machine-readable output
  $EDITOR $(fileref trace.txt --first -f goto)
        """,
    )

    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="File to read references from (default: stdin)",
    )

    parser.add_argument(
        "-r", "--root",
        action="append",
        default=None,
        help="Workspace root to search (repeatable; default: current directory)",
    )

    parser.add_argument(
        "-p", "--strip-prefix",
        action="append",
        default=None,
        help="Path prefix to strip before resolving (repeatable)",
    )

    parser.add_argument(
        "-c", "--config",
        type=str,
        default=None,
        help="Config file (default: ./.fileref.yaml if present)",
    )

    parser.add_argument(
        "-f", "--format",
        choices=["text", "json", "goto"],
        default="text",
        help="Output format (default: text)",
    )

    parser.add_argument(
        "--first",
        action="store_true",
        help="Only resolve the first reference found",
    )

    parser.add_argument(
        "--keep-order",
        action="store_true",
        help="List references in the order they appear (text output lists the last one first)",
    )

    parser.add_argument(
        "--show-missing",
        action="store_true",
        help="Also list references that could not be resolved in text output "
             "(json output always includes them, with a null 'resolved')",
    )

    parser.add_argument(
        "--exclude-dir",
        nargs="+",
        default=None,
        help="Additional directory names to skip while searching",
    )

    parser.add_argument(
        "--max-results",
        type=int,
        default=None,
        help="Maximum number of search matches per reference",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Log resolution steps to stderr (-vv for debug detail)",
    )

    return parser.parse_args(args)


def setup_logging(verbosity: int) -> None:
    """Send log records to stderr at a level chosen by -v flags."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def read_input(source: str) -> str:
    """Read text from a file path, or stdin for '-'."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8", errors="replace")


def merge_settings(settings: Settings, parsed: argparse.Namespace) -> Settings:
    """Apply command line flags on top of file settings."""
    if parsed.root:
        settings.roots = list(parsed.root)
    if parsed.strip_prefix:
        settings.strip_prefixes = settings.strip_prefixes + list(parsed.strip_prefix)
    if parsed.exclude_dir:
        settings.exclude_dirs = settings.exclude_dirs | set(parsed.exclude_dir)
    if parsed.max_results is not None:
        if parsed.max_results > 0:
            settings.max_results = parsed.max_results
        else:
            logger.warning("Ignoring --max-results %d", parsed.max_results)
    if not settings.roots:
        settings.roots = ["."]
    return settings


def main(args=None):
    """Main entry point."""
    parsed = parse_args(args)
    setup_logging(parsed.verbose)

    try:
        config_path = Path(parsed.config) if parsed.config else None
        settings = merge_settings(load_settings(config_path), parsed)
    except FileRefError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    roots: List[str] = []
    for root in settings.roots:
        root_path = Path(root).expanduser().resolve()
        if not root_path.is_dir():
            print(f"Error: '{root}' is not a directory", file=sys.stderr)
            return 1
        roots.append(str(root_path))

    try:
        text = read_input(parsed.input)
    except OSError as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return 1

    if not text.strip():
        print("No text to scan", file=sys.stderr)
        return 1

    try:
        resolved = locate(
            text,
            roots,
            strip_prefixes=settings.strip_prefixes,
            exclude_dirs=settings.exclude_dirs,
            max_results=settings.max_results,
            first_only=parsed.first,
        )
    except FileRefError as e:
        print(f"Error resolving references: {e}", file=sys.stderr)
        return 1

    if not resolved:
        print("No file references found", file=sys.stderr)
        return 1

    found = [item for item in resolved if item.found]
    if not found:
        print("No valid file references found", file=sys.stderr)

    if parsed.format == "json":
        output = to_json(resolved)
    elif parsed.format == "goto":
        output = to_goto(resolved)
    else:  # text (default)
        output = to_text(
            resolved,
            strip_prefixes=settings.strip_prefixes,
            newest_first=not parsed.keep_order,
            include_missing=parsed.show_missing,
        )

    if output:
        print(output)

    return 0 if found else 1


if __name__ == "__main__":
    sys.exit(main())
