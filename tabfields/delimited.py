"""
FieldsIO - Reader and writer sharing one delimiter.
"""

from __future__ import annotations

from tabfields.layout import DEFAULT_DELIMITER, validate_delimiter
from tabfields.reader import FieldsReader
from tabfields.writer import FieldsWriter


class FieldsIO(FieldsReader, FieldsWriter):
    """
    Converts between delimited text and Fields in both directions.

    Usage:
        io = FieldsIO(",")
        fields = io.parse_line("a,b")
        fields.append("c")
        io.format_line(fields)  # "a,b,c"

    Holds no state besides the delimiter, so one instance can be reused
    for any number of reads and writes.
    """

    def __init__(self, delimiter: str = DEFAULT_DELIMITER) -> None:
        self._delimiter = validate_delimiter(delimiter)

    def __repr__(self) -> str:
        return f"FieldsIO(delimiter={self._delimiter!r})"
