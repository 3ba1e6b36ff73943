"""Command-line interface for utf8guard."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import utf8guard
from utf8guard.validator import ValidationResult, validate, validate_quick


def _describe(name: str, result: ValidationResult, minimal: bool) -> str:
    if minimal:
        return "valid" if result.ok else result.error.label
    if result.ok:
        return f"{name}: valid, {result.codepoint_count} codepoints"
    return (
        f"{name}: {result.error.label} at byte {result.offset}"
        f" after {result.codepoint_count} codepoints"
    )


def main(argv: list[str] | None = None) -> None:
    """Run the ``utf8guard`` command-line tool.

    Exits with status 1 if any input is unreadable or not valid UTF-8.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(description="Check that files are valid UTF-8.")
    parser.add_argument("files", nargs="*", help="Files to check")
    parser.add_argument(
        "--quick",
        action="store_true",
        help="Only check byte structure; accept overlong and out-of-range sequences",
    )
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the error kind"
    )
    parser.add_argument(
        "--version", action="version", version=f"utf8guard {utf8guard.__version__}"
    )

    args = parser.parse_args(argv)
    check = validate_quick if args.quick else validate
    failed = False

    if args.files:
        for filepath in args.files:
            try:
                data = Path(filepath).read_bytes()
            except OSError as e:
                print(f"utf8guard: {filepath}: {e}", file=sys.stderr)
                failed = True
                continue
            result = check(data)
            failed = failed or not result.ok
            print(_describe(filepath, result, args.minimal))
    else:
        result = check(sys.stdin.buffer.read())
        failed = not result.ok
        print(_describe("stdin", result, args.minimal))

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
