"""tabfields TUI Viewer - Table of records with a field sidebar."""

from __future__ import annotations

import sys
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Footer, Header

from tabfields.delimited import FieldsIO
from tabfields.fields import Fields
from tabfields.layout import DEFAULT_DELIMITER
from tabfields.tui.widgets import RecordPanel, RecordTable


class FieldsViewerApp(App):
    """TUI viewer for delimited files."""

    TITLE = "tabfields"
    CSS = """
    #main-area {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("j", "next_record", "Next", show=True),
        Binding("k", "prev_record", "Prev", show=True),
    ]

    def __init__(self, path: str | Path, delimiter: str = DEFAULT_DELIMITER, **kwargs) -> None:
        super().__init__(**kwargs)
        self._path = Path(path)
        self._io = FieldsIO(delimiter)
        self._records: list[Fields] = []

    def compose(self) -> ComposeResult:
        self._records = self._io.read_path(self._path)
        self.title = f"tabfields - {self._path.name}"

        yield Header()
        with Horizontal(id="main-area"):
            yield RecordTable(self._records, id="records")
            yield RecordPanel(id="record")
        yield Footer()

    def on_mount(self) -> None:
        if self._records:
            self.query_one("#record", RecordPanel).show_record(1, self._records[0])
        self.query_one("#records", RecordTable).focus()

    def on_record_table_record_selected(self, event: RecordTable.RecordSelected) -> None:
        record = self._records[event.record_index]
        self.query_one("#record", RecordPanel).show_record(event.record_index + 1, record)

    def action_next_record(self) -> None:
        self.query_one("#records", RecordTable).action_cursor_down()

    def action_prev_record(self) -> None:
        self.query_one("#records", RecordTable).action_cursor_up()


def run_viewer(path: str | Path, delimiter: str = DEFAULT_DELIMITER) -> None:
    """Launch the TUI viewer."""
    path = Path(path)
    if not path.is_file():
        print(f"Error: File not found: {path}", file=sys.stderr)
        sys.exit(1)

    app = FieldsViewerApp(path, delimiter=delimiter)
    app.run()
