"""
Fields Reader - Parses delimited text lines into Fields.

Parsing never fails on content:
  - Every occurrence of the delimiter splits the line
  - Zero-length fields are dropped, so leading, trailing and repeated
    delimiters collapse instead of producing "" fields
  - Reading past the end of a stream yields fewer records, not an error
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, TextIO

from tabfields.fields import Fields
from tabfields.layout import DEFAULT_DELIMITER, strip_line_terminator, validate_delimiter


class FieldsReader:
    """
    Line-oriented reader for delimited text.

    Usage:
        reader = FieldsReader("\\t")
        fields = reader.parse_line("a\\tb\\tc")

        with open("data.tsv", encoding="utf-8") as f:
            header = reader.read_one(f)
            rows = reader.read_many(f, 100)
    """

    def __init__(self, delimiter: str = DEFAULT_DELIMITER) -> None:
        self._delimiter = validate_delimiter(delimiter)

    @property
    def delimiter(self) -> str:
        return self._delimiter

    def parse_line(self, text: str) -> Fields:
        """Split text on the delimiter, keeping only non-empty fields."""
        return Fields(field for field in text.split(self._delimiter) if field)

    def read_one(self, stream: TextIO) -> Fields:
        """Read and parse one line. An exhausted stream gives empty Fields."""
        return self.parse_line(strip_line_terminator(stream.readline()))

    def read_many(self, stream: TextIO, count: int) -> list[Fields]:
        """Read up to count lines, stopping early at end of stream."""
        if count < 0:
            raise ValueError(f"Line count cannot be negative: {count}")
        output: list[Fields] = []
        while len(output) < count:
            line = stream.readline()
            if not line:
                break
            output.append(self.parse_line(strip_line_terminator(line)))
        return output

    def iter_fields(self, stream: TextIO) -> Iterator[Fields]:
        """Lazily yield one Fields per line until the stream is exhausted."""
        while True:
            line = stream.readline()
            if not line:
                return
            yield self.parse_line(strip_line_terminator(line))

    def read_path(self, path: str | Path, count: int | None = None) -> list[Fields]:
        """Read a UTF-8 file into a list of Fields (all lines unless count is given)."""
        with open(path, "r", encoding="utf-8", newline="") as f:
            if count is None:
                return list(self.iter_fields(f))
            return self.read_many(f, count)
