"""
tabfields CLI - Command-line interface for delimited record editing.

Commands:
  tabfields show       - Read lines and write them back normalized
  tabfields count      - Print the field count of each line
  tabfields replace    - Replace a field on every line
  tabfields insert     - Insert a field on every line
  tabfields remove     - Remove a field from every line
  tabfields append     - Append a field to every line
  tabfields edit-char  - Overwrite one character of a field on every line
  tabfields join       - Join each pair of consecutive lines
  tabfields view       - Browse a delimited file in the terminal

Every command reads the given file, or stdin when no file is given, and
writes the result to stdout.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Callable

from tabfields.delimited import FieldsIO
from tabfields.fields import Fields
from tabfields.layout import DEFAULT_DELIMITER, DELIMITER_ENV_VAR, resolve_delimiter


def _io_for(args: argparse.Namespace) -> FieldsIO:
    """Build a FieldsIO from --delimiter, then $TABFIELDS_DELIMITER, then tab."""
    name = args.delimiter or os.environ.get(DELIMITER_ENV_VAR, "") or DEFAULT_DELIMITER
    try:
        return FieldsIO(resolve_delimiter(name))
    except (TypeError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _read_input(io: FieldsIO, args: argparse.Namespace, count: int | None = None) -> list[Fields]:
    if args.path:
        path = Path(args.path)
        if not path.is_file():
            print(f"Error: File not found: {args.path}", file=sys.stderr)
            sys.exit(1)
        return io.read_path(path, count)
    if count is None:
        return list(io.iter_fields(sys.stdin))
    return io.read_many(sys.stdin, count)


def _write_output(io: FieldsIO, records: list[Fields]) -> None:
    if io.format_many(sys.stdout, records) or len(records) > 1:
        sys.stdout.write("\n")


def _apply_each(args: argparse.Namespace, edit: Callable[[Fields], None]) -> None:
    """Apply edit to every record, stopping at the first out-of-range index."""
    io = _io_for(args)
    records = _read_input(io, args)
    for line_number, fields in enumerate(records, start=1):
        try:
            edit(fields)
        except (IndexError, ValueError) as e:
            print(f"Error: line {line_number}: {e}", file=sys.stderr)
            sys.exit(1)
    _write_output(io, records)


def cmd_show(args: argparse.Namespace) -> None:
    """Read lines and write them back with empty fields collapsed."""
    if args.lines is not None and args.lines < 0:
        print("Error: --lines cannot be negative", file=sys.stderr)
        sys.exit(1)
    io = _io_for(args)
    _write_output(io, _read_input(io, args, args.lines))


def cmd_count(args: argparse.Namespace) -> None:
    """Print the number of fields on each line."""
    io = _io_for(args)
    for fields in _read_input(io, args):
        print(len(fields))


def cmd_replace(args: argparse.Namespace) -> None:
    _apply_each(args, lambda fields: fields.replace(args.index, args.value))


def cmd_insert(args: argparse.Namespace) -> None:
    _apply_each(args, lambda fields: fields.insert(args.index, args.value))


def cmd_remove(args: argparse.Namespace) -> None:
    _apply_each(args, lambda fields: fields.remove(args.index))


def cmd_append(args: argparse.Namespace) -> None:
    _apply_each(args, lambda fields: fields.append(args.value))


def cmd_edit_char(args: argparse.Namespace) -> None:
    """Overwrite one character of a field in place."""

    def edit(fields: Fields) -> None:
        with fields.get_mutable(args.index) as field:
            field[args.position] = args.char

    _apply_each(args, edit)


def cmd_join(args: argparse.Namespace) -> None:
    """Join line 1 with line 2, line 3 with line 4, and so on."""
    io = _io_for(args)
    records = _read_input(io, args)
    joined: list[Fields] = []
    for i in range(0, len(records), 2):
        first = records[i]
        if i + 1 < len(records):
            first.append_all(records[i + 1])
        joined.append(first)
    _write_output(io, joined)


def cmd_view(args: argparse.Namespace) -> None:
    """Browse a delimited file in the terminal."""
    if not args.path:
        print("Error: view needs a file path", file=sys.stderr)
        sys.exit(1)
    io = _io_for(args)
    try:
        from tabfields.tui.viewer import run_viewer
    except ImportError:
        print(
            "TUI viewer requires the 'textual' package.\n"
            "Install it with: pip install \"tabfields[tui]\"",
            file=sys.stderr,
        )
        sys.exit(1)
    run_viewer(args.path, delimiter=io.delimiter)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="tabfields",
        description="tabfields - parse, edit and write delimited text lines.",
    )
    from tabfields import __version__
    parser.add_argument("--version", action="version", version=f"tabfields {__version__}")
    sub = parser.add_subparsers(dest="command")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-d", "--delimiter",
        help=f"Field delimiter: one character or tab/comma/space/pipe/semicolon "
             f"(default: ${DELIMITER_ENV_VAR} or tab)",
    )
    common.add_argument("path", nargs="?", default=None, help="Input file (default: stdin)")

    # show
    p_show = sub.add_parser("show", parents=[common], help="Read lines and write them back normalized")
    p_show.add_argument("-n", "--lines", type=int, default=None, help="Read at most this many lines")

    # count
    sub.add_parser("count", parents=[common], help="Print the field count of each line")

    # replace
    p_replace = sub.add_parser("replace", parents=[common], help="Replace a field on every line")
    p_replace.add_argument("-i", "--index", type=int, required=True, help="Field index (0-based)")
    p_replace.add_argument("-v", "--value", required=True, help="New field value")

    # insert
    p_insert = sub.add_parser("insert", parents=[common], help="Insert a field before INDEX on every line")
    p_insert.add_argument("-i", "--index", type=int, required=True, help="Field index (0-based)")
    p_insert.add_argument("-v", "--value", required=True, help="New field value")

    # remove
    p_remove = sub.add_parser("remove", parents=[common], help="Remove a field from every line")
    p_remove.add_argument("-i", "--index", type=int, required=True, help="Field index (0-based)")

    # append
    p_append = sub.add_parser("append", parents=[common], help="Append a field to every line")
    p_append.add_argument("-v", "--value", required=True, help="New field value")

    # edit-char
    p_edit = sub.add_parser("edit-char", parents=[common], help="Overwrite one character of a field")
    p_edit.add_argument("-i", "--index", type=int, required=True, help="Field index (0-based)")
    p_edit.add_argument("-p", "--position", type=int, default=0, help="Character position (default: 0)")
    p_edit.add_argument("-c", "--char", required=True, help="Replacement character")

    # join
    sub.add_parser("join", parents=[common], help="Join each pair of consecutive lines")

    # view
    sub.add_parser("view", parents=[common], help="Browse a delimited file (TUI)")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(0)

    commands = {
        "show": cmd_show,
        "count": cmd_count,
        "replace": cmd_replace,
        "insert": cmd_insert,
        "remove": cmd_remove,
        "append": cmd_append,
        "edit-char": cmd_edit_char,
        "join": cmd_join,
        "view": cmd_view,
    }

    commands[args.command](args)


if __name__ == "__main__":
    main()
