"""
Fields Writer - Serializes Fields back to delimited text.

Output rules:
  - Fields are joined by the delimiter, never followed by one
  - Records are separated by a line terminator, never followed by one
  - An empty record writes nothing; an empty batch writes nothing
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Iterable, TextIO

from tabfields.fields import Fields
from tabfields.layout import DEFAULT_DELIMITER, LINE_TERMINATOR, validate_delimiter


class FieldsWriter:

    def __init__(self, delimiter: str = DEFAULT_DELIMITER) -> None:
        self._delimiter = validate_delimiter(delimiter)

    @property
    def delimiter(self) -> str:
        return self._delimiter

    def format_line(self, fields: Fields) -> str:
        """Return fields joined by the delimiter. Pure — does not mutate the input."""
        return self._delimiter.join(fields)

    def format_lines(self, batch: Iterable[Fields]) -> str:
        """Return every record joined by the line terminator, no trailing one."""
        return LINE_TERMINATOR.join(self.format_line(fields) for fields in batch)

    def format_one(self, stream: TextIO, fields: Fields) -> int:
        """Write one record to stream. Returns characters written."""
        text = self.format_line(fields)
        if text:
            stream.write(text)
        return len(text)

    def format_many(self, stream: TextIO, batch: Iterable[Fields]) -> int:
        """Write records separated by line terminators. Returns characters written."""
        written = 0
        for i, fields in enumerate(batch):
            if i:
                stream.write(LINE_TERMINATOR)
                written += len(LINE_TERMINATOR)
            written += self.format_one(stream, fields)
        return written

    def write_path(self, batch: Iterable[Fields], path: str | Path) -> int:
        """Write records to a file atomically. Returns characters written.

        Writes to a temp file in the target directory, fsyncs, then renames
        over the target so it is never left half written.
        """
        data = self.format_lines(batch)
        dir_name = os.path.dirname(os.path.abspath(path)) or "."
        fd, tmp_path = tempfile.mkstemp(dir=dir_name, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, path)
        except Exception:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise
        return len(data)
