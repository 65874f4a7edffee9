"""
Delimited line layout
=====================

Layout:
    <field><delim><field><delim><field>      <- one record per line
    <field><delim><field>
    ...

Design Decisions:
    - One delimiter character per reader/writer, fixed at construction
    - Tab by default (TSV-like), any other single character allowed
    - No quoting and no escaping: a field can never contain the delimiter
    - Empty fields are dropped on parse, so "a\\t\\tb" reads as ["a", "b"]
    - Records are separated by "\\n"; the writer never emits a trailing one
    - A trailing "\\r" is stripped on read so CRLF files parse the same
"""

from __future__ import annotations

DEFAULT_DELIMITER = "\t"
LINE_TERMINATOR = "\n"

# Characters that can never act as a field delimiter
FORBIDDEN_DELIMITERS = frozenset({"\n", "\r"})

# Environment variable consulted by the CLI when no --delimiter is given
DELIMITER_ENV_VAR = "TABFIELDS_DELIMITER"

# Names accepted wherever a delimiter is read from user input
DELIMITER_ALIASES = {
    "tab": "\t",
    "\\t": "\t",
    "comma": ",",
    "space": " ",
    "pipe": "|",
    "semicolon": ";",
}


def validate_delimiter(delimiter: str) -> str:
    """Return the delimiter unchanged, or raise ValueError if it is unusable."""
    if not isinstance(delimiter, str):
        raise TypeError(f"Delimiter must be a str, got {type(delimiter).__name__}")
    if len(delimiter) != 1:
        raise ValueError(
            f"Delimiter must be exactly one character, got {delimiter!r}"
        )
    if delimiter in FORBIDDEN_DELIMITERS:
        raise ValueError(f"Line terminator cannot be used as a delimiter: {delimiter!r}")
    return delimiter


def resolve_delimiter(name: str) -> str:
    """Resolve a user-supplied delimiter name or literal character."""
    return validate_delimiter(DELIMITER_ALIASES.get(name.lower(), name))


def strip_line_terminator(line: str) -> str:
    """Strip one trailing "\\n" (and a "\\r" before it) from a raw line."""
    if line.endswith(LINE_TERMINATOR):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line
