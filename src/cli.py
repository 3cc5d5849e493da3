"""
Command-line interface for checking JavaScript files for redundant assignments.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

import esprima

from frontend import LintResult, lint_source
from parser import error_from_exception
from reporter import FORMATS, format_report

logger = logging.getLogger("redundant_assign")

EXIT_CLEAN = 0
EXIT_FINDINGS = 1
EXIT_USAGE = 2


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _lint_file(path: Path, args: argparse.Namespace) -> LintResult:
    source = path.read_text(encoding="utf-8")
    logger.debug("checking %s", path)
    return lint_source(
        source,
        source_name=str(path),
        tolerant=not args.strict,
        source_type="module" if args.module else "script",
    )


def check_command(args: argparse.Namespace) -> int:
    results: List[LintResult] = []
    unreadable = False
    for name in args.inputs:
        input_path = Path(name)
        if not input_path.is_file():
            sys.stderr.write(f"ERROR: Input file not found: {input_path}\n")
            unreadable = True
            continue
        try:
            results.append(_lint_file(input_path, args))
        except (OSError, UnicodeDecodeError) as exc:
            sys.stderr.write(f"ERROR: Failed to read {input_path}: {exc}\n")
            unreadable = True
        except esprima.Error as exc:
            # Strict parsing stops at the first syntax error of this file only.
            results.append(
                LintResult(
                    source_name=str(input_path),
                    parse_errors=[error_from_exception(exc)],
                    diagnostics=[],
                )
            )

    sys.stdout.write(format_report(results, args.format))
    if unreadable:
        return EXIT_USAGE
    return EXIT_CLEAN if all(result.clean for result in results) else EXIT_FINDINGS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="redundant-assign",
        description="Report variables declared or assigned only to be returned",
    )
    subparsers = parser.add_subparsers(dest="command")

    check_parser = subparsers.add_parser("check", help="Check JavaScript files")
    check_parser.add_argument("inputs", nargs="+", help="Paths to JavaScript files")
    check_parser.add_argument(
        "--format",
        choices=FORMATS,
        default="text",
        help="Output format for diagnostics (default: text)",
    )
    check_parser.add_argument(
        "--strict",
        action="store_true",
        help="Disable tolerant parsing; stop at the first syntax error.",
    )
    check_parser.add_argument(
        "--module",
        action="store_true",
        help="Parse inputs as ES modules (enables import/export syntax).",
    )
    check_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each checked file and finding to stderr.",
    )
    check_parser.set_defaults(func=check_command)

    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return EXIT_USAGE
    _configure_logging(args.verbose)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
