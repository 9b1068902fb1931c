"""Selection state machine for the interactive picker.

The state is a frozen value; every key event produces a new state via
:func:`update`.  The Textual app in the CLI layer owns the only
reference, so nothing here needs locking or copying.

States
------
``BROWSING`` (initial) → ``CONFIRMED`` on enter, ``CANCELLED`` on
``q`` / ``ctrl+c`` / ``escape``.  Both terminal states ignore further
events.
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass, replace

from npm_pick.core.models import OutdatedEntry
from npm_pick.utils.constants import MARKER

Row = tuple[str, str, str, str, str]
"""``(selected, name, current, latest, dev)`` cells for one table row."""

TOGGLE_KEYS: frozenset[str] = frozenset({"space"})
CONFIRM_KEYS: frozenset[str] = frozenset({"enter"})
CANCEL_KEYS: frozenset[str] = frozenset({"q", "ctrl+c", "escape"})
_MOVES: dict[str, int] = {"up": -1, "down": 1}


class Status(enum.Enum):
    BROWSING = "browsing"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


@dataclass(frozen=True, slots=True)
class SelectionState:
    """Snapshot of the picker: rows, chosen names, cursor and status."""

    entries: tuple[OutdatedEntry, ...]
    selected: frozenset[str] = frozenset()
    cursor: int = 0
    status: Status = Status.BROWSING

    @classmethod
    def initial(cls, entries: Sequence[OutdatedEntry]) -> SelectionState:
        return cls(entries=tuple(entries))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def finished(self) -> bool:
        return self.status is not Status.BROWSING

    @property
    def current(self) -> OutdatedEntry | None:
        """Entry under the cursor, or ``None`` for an empty list."""
        if not self.entries:
            return None
        return self.entries[self.cursor]

    def rows(self) -> list[Row]:
        return render_rows(self.entries, self.selected)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def move_to(self, row: int) -> SelectionState:
        """Place the cursor on *row*, clamped to the entry range."""
        if self.finished:
            return self
        last = max(len(self.entries) - 1, 0)
        return replace(self, cursor=min(max(row, 0), last))

    def move(self, delta: int) -> SelectionState:
        return self.move_to(self.cursor + delta)

    def toggle(self, name: str) -> SelectionState:
        """Flip membership of *name*; unknown names are ignored."""
        if self.finished or all(entry.name != name for entry in self.entries):
            return self
        return replace(self, selected=self.selected ^ {name})

    def toggle_current(self) -> SelectionState:
        entry = self.current
        if entry is None:
            return self
        return self.toggle(entry.name)

    def confirm(self) -> SelectionState:
        if self.finished:
            return self
        return replace(self, status=Status.CONFIRMED)

    def cancel(self) -> SelectionState:
        if self.finished:
            return self
        return replace(self, status=Status.CANCELLED)


def update(state: SelectionState, key: str) -> SelectionState:
    """Apply one key event and return the resulting state.

    Keys follow Textual naming (``"space"``, ``"enter"``, ``"escape"``,
    ``"ctrl+c"``).  Unknown keys leave the state unchanged.
    """
    if key in TOGGLE_KEYS:
        return state.toggle_current()
    if key in CONFIRM_KEYS:
        return state.confirm()
    if key in CANCEL_KEYS:
        return state.cancel()
    if key in _MOVES:
        return state.move(_MOVES[key])
    return state


def render_rows(
    entries: Sequence[OutdatedEntry],
    selected: frozenset[str] | set[str],
) -> list[Row]:
    """Project entries plus selection into table cells."""
    return [
        (
            MARKER if entry.name in selected else "",
            entry.name,
            entry.current,
            entry.latest,
            MARKER if entry.is_dev else "",
        )
        for entry in entries
    ]
