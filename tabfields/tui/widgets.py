"""tabfields TUI Widgets - Panels for the record viewer."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.message import Message
from textual.widgets import DataTable, Label, Static

from tabfields.fields import Fields


class RecordTable(DataTable):
    """Grid of records, one row per line, one column per field position."""

    DEFAULT_CSS = """
    RecordTable {
        border: solid $accent;
        height: 1fr;
    }
    """

    class RecordSelected(Message):
        """Fired when the cursor lands on a record."""

        def __init__(self, record_index: int) -> None:
            self.record_index = record_index
            super().__init__()

    def __init__(self, records: list[Fields], **kwargs) -> None:
        super().__init__(cursor_type="row", zebra_stripes=True, **kwargs)
        self._records = records

    def on_mount(self) -> None:
        width = max((len(r) for r in self._records), default=0)
        self.add_columns(*(str(i) for i in range(width)))
        for row, record in enumerate(self._records):
            # Text cells keep field content from being read as markup;
            # short records are padded so every row has the same width
            values = record.to_list() + [""] * (width - len(record))
            cells = [Text(value) for value in values]
            self.add_row(*cells, label=str(row + 1))

    def on_data_table_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        if 0 <= event.cursor_row < len(self._records):
            self.post_message(self.RecordSelected(event.cursor_row))


class RecordPanel(Static):
    """Sidebar listing the fields of the highlighted record."""

    DEFAULT_CSS = """
    RecordPanel {
        width: 36;
        border: solid $accent;
        padding: 1;
        overflow-y: auto;
    }
    RecordPanel .record-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._title: Label | None = None
        self._body: Static | None = None

    def compose(self) -> ComposeResult:
        self._title = Label("No record", classes="record-title")
        self._body = Static("")
        yield self._title
        yield self._body

    def show_record(self, line_number: int, record: Fields) -> None:
        if self._title:
            self._title.update(f"Line {line_number} ({len(record)} fields)")
        if self._body:
            lines = [f"{i}: {value}" for i, value in enumerate(record)]
            self._body.update(Text("\n".join(lines) or "(empty)"))
