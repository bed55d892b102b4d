"""Command-line driver: ``jsclean [options] [files]``.

Each named file is formatted in place.  A changed file is written to a
temporary file in the same directory first; the original is then renamed to
``<name>.bak`` (replacing any previous backup, skipped with ``--no-backup``)
and the temporary file moved into place, so a failed run never leaves a
half-written file behind.  Without file arguments, stdin is formatted to
stdout.

Exit status is 0 on success and 1 if any file failed, or with ``--check``,
if any file would be reformatted.
"""

from __future__ import annotations

import argparse
import logging
import os
import shutil
import sys
import tempfile
from collections.abc import Sequence
from pathlib import Path

from jsclean import __version__
from jsclean.config import FormatOptions
from jsclean.errors import JSCleanError
from jsclean.formatter import Formatter

__all__ = ["build_parser", "main", "options_from_args"]

logger = logging.getLogger(__name__)

# (flag, FormatOptions field, help)
_RULE_FLAGS = (
    ("--no-cap-comments", "cap_comments", "don't capitalize comments"),
    ("--no-exact-equals", "exact_equals", "don't replace == with ==="),
    ("--no-extra-braces", "extra_braces", "don't add optional braces"),
    ("--no-semicolons", "semicolons", "omit semicolons"),
    ("--no-separate-vars", "separate_vars", "don't separate variable declarations"),
    ("--no-sort-cases", "sort_cases", "don't sort cases"),
    ("--no-sort-functions", "sort_functions", "don't sort functions and methods"),
    ("--no-sort-properties", "sort_properties", "don't sort object properties"),
    ("--no-trailing-break", "trailing_break", "don't add trailing break to final case"),
)


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        n = 0
    if n < 1:
        msg = f"expected a positive integer, got {value!r}"
        raise argparse.ArgumentTypeError(msg)
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsclean",
        usage="%(prog)s [options] [files]",
        description="Reformat JavaScript source into a canonical style.",
    )
    parser.add_argument("files", nargs="*", type=Path, help="files to format in place (default: stdin to stdout)")
    rules = parser.add_argument_group("rules")
    for flag, dest, help_text in _RULE_FLAGS:
        rules.add_argument(flag, dest=dest, action="store_false", help=help_text)
    rules.add_argument(
        "--strip-braces",
        action="store_true",
        help="remove braces around single statements (implies --no-extra-braces)",
    )
    parser.add_argument("-n", "--no-backup", dest="backup", action="store_false", help="don't make .bak files")
    parser.add_argument("-s", "--spaces", type=_positive_int, metavar="N", help="indent with N spaces")
    parser.add_argument("--check", action="store_true", help="report files that would change, write nothing")
    parser.add_argument("--fail-fast", action="store_true", help="stop at the first file that fails")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def options_from_args(args: argparse.Namespace) -> FormatOptions:
    """Translate parsed arguments into ``FormatOptions``."""
    values = {dest: getattr(args, dest) for _, dest, _ in _RULE_FLAGS}
    if args.strip_braces:
        values["extra_braces"] = False
        values["strip_braces"] = True
    if args.spaces:
        values["indent"] = " " * args.spaces
    return FormatOptions(**values)


def _rewrite(path: Path, output: str, backup: bool) -> None:
    fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(output)
        shutil.copymode(path, tmp)
        if backup:
            os.replace(path, path.with_name(path.name + ".bak"))
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise


def _format_files(files: Sequence[Path], formatter: Formatter, args: argparse.Namespace) -> int:
    status = 0
    for path in files:
        try:
            text = path.read_bytes().decode("utf-8")
            result = formatter.format(text)
            logger.debug("formatted %s in %.1f ms", path, result.computation_time_ms)
            if not result.changed:
                continue
            if args.check:
                status = 1
            else:
                _rewrite(path, result.output, args.backup)
            print(path)
        except (OSError, UnicodeDecodeError, JSCleanError) as exc:
            print(f"{path}: {exc}", file=sys.stderr)
            status = 1
            if args.fail_fast:
                break
    return status


def _format_stdin(formatter: Formatter) -> int:
    try:
        result = formatter.format(sys.stdin.read())
    except (OSError, UnicodeDecodeError, JSCleanError) as exc:
        print(f"<stdin>: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(result.output)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; returns the process exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    formatter = Formatter(options_from_args(args))
    if args.files:
        return _format_files(args.files, formatter, args)
    return _format_stdin(formatter)


if __name__ == "__main__":
    sys.exit(main())
