"""
Command-line interface for reporting the scopes declared in a JavaScript file.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

import esprima

from emitter import EmitOptions, emit_report
from frontend import FrontEndResult, run_frontend


def _format_location(line: int | None, column: int | None) -> str:
    if line is None:
        return ""
    if column is None:
        return f":{line}"
    return f":{line}:{column}"


def _print_diagnostics(messages: List[str]) -> None:
    for message in messages:
        sys.stderr.write(message + "\n")


def _collect_diagnostics(frontend_result: FrontEndResult, *, strict: bool) -> List[str]:
    level = "ERROR" if strict else "WARNING"
    source_name = frontend_result.parse.source_name
    diagnostics: List[str] = []
    for error in frontend_result.parse.errors:
        loc = _format_location(error.line, error.column)
        diagnostics.append(f"{level} {source_name}{loc}: {error.description}")
    return diagnostics


def scan_command(args: argparse.Namespace) -> int:
    input_path = Path(args.input).resolve()
    if not input_path.exists():
        sys.stderr.write(f"ERROR: Input file not found: {input_path}\n")
        return 1

    try:
        source = input_path.read_text(encoding="utf-8")
    except OSError as exc:
        sys.stderr.write(f"ERROR: Failed to read {input_path}: {exc}\n")
        return 1

    source_type = "module" if args.module else "script"

    try:
        frontend_result = run_frontend(
            source,
            source_name=str(input_path),
            tolerant=not args.strict,
            source_type=source_type,
        )
    except esprima.Error as exc:
        sys.stderr.write(f"ERROR {input_path}: {exc}\n")
        return 1

    if not frontend_result.has_ast:
        sys.stderr.write("ERROR: Parsing failed; no AST produced.\n")
        _print_diagnostics(_collect_diagnostics(frontend_result, strict=True))
        return 1

    report = emit_report(
        frontend_result, EmitOptions(format="json" if args.json else "text")
    )
    if args.out:
        output_path = Path(args.out)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(report, encoding="utf-8")
    else:
        sys.stdout.write(report)

    _print_diagnostics(_collect_diagnostics(frontend_result, strict=args.strict))

    has_errors = args.strict and bool(frontend_result.parse.errors)
    return 1 if has_errors else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="estree-scope", description="Report the names declared in each JavaScript scope"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log scope pushes and pops to stderr."
    )
    subparsers = parser.add_subparsers(dest="command")

    scan_parser = subparsers.add_parser("scan", help="Report the scopes of a single JS file")
    scan_parser.add_argument("input", help="Path to the JavaScript file")
    scan_parser.add_argument("--out", help="Write the report to this file instead of stdout")
    scan_parser.add_argument("--json", action="store_true", help="Emit the report as JSON.")
    scan_parser.add_argument(
        "--strict",
        action="store_true",
        help="Disable tolerant parsing and fail on any parse error.",
    )
    scan_parser.add_argument(
        "--module",
        action="store_true",
        help="Parse the input as an ES module (enables import/export syntax).",
    )
    scan_parser.set_defaults(func=scan_command)

    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    if not hasattr(args, "func"):
        parser.print_help()
        return 1
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
