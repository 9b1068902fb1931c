"""Textual full-screen table for choosing packages to upgrade.

The app owns the only :class:`~npm_pick.core.selection.SelectionState`
and feeds every bound key through :func:`~npm_pick.core.selection.update`.
Cursor movement is left to the ``DataTable`` widget; its highlight
events are mirrored into the state.  The app exits with the final
state as its return value.
"""

from __future__ import annotations

from collections.abc import Sequence

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import DataTable, Footer

from npm_pick.core.models import OutdatedEntry
from npm_pick.core.selection import SelectionState, update
from npm_pick.utils.constants import TABLE_COLUMNS

SELECTED_COLUMN: str = TABLE_COLUMNS[0][0]


class PickerApp(App[SelectionState]):
    """Browse outdated packages, toggle with space, confirm with enter."""

    TITLE = "npm-pick"
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    DataTable {
        height: 1fr;
        border: solid $secondary;
    }
    DataTable > .datatable--header {
        text-style: none;
    }
    DataTable > .datatable--cursor {
        color: rgb(255, 255, 175);
        background: rgb(95, 0, 255);
        text-style: none;
    }
    """

    BINDINGS = [
        Binding("space", "dispatch('space')", "Toggle", priority=True),
        Binding("enter", "dispatch('enter')", "Upgrade", priority=True),
        Binding("q", "dispatch('q')", "Quit", priority=True),
        Binding("escape", "dispatch('escape')", "Quit", show=False, priority=True),
        Binding("ctrl+c", "dispatch('ctrl+c')", "Quit", show=False, priority=True),
    ]

    def __init__(self, entries: Sequence[OutdatedEntry]) -> None:
        super().__init__()
        self._state: SelectionState = SelectionState.initial(entries)

    @property
    def state(self) -> SelectionState:
        return self._state

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def compose(self) -> ComposeResult:
        yield DataTable(cursor_type="row", zebra_stripes=False)
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one(DataTable)
        for title, width in TABLE_COLUMNS:
            table.add_column(title, width=width, key=title)
        for row in self._state.rows():
            table.add_row(*row, key=row[1])
        table.focus()

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def on_data_table_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        self._state = self._state.move_to(event.cursor_row)

    def action_dispatch(self, key: str) -> None:
        self._state = update(self._state, key)
        if self._state.finished:
            self.exit(self._state)
            return
        self._render_markers()

    def _render_markers(self) -> None:
        """Rewrite the selected-marker cell of every row."""
        table = self.query_one(DataTable)
        for marker, name, *_ in self._state.rows():
            table.update_cell(name, SELECTED_COLUMN, marker)
