"""Entry point for the interactive picker.

Textual is imported lazily so ``--help`` and ``--version`` work without
it; any start-up failure is mapped to
:class:`~npm_pick.exceptions.PickerError`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from npm_pick.core.models import OutdatedEntry
from npm_pick.core.selection import SelectionState
from npm_pick.exceptions import EnvironmentError, NpmPickError, PickerError


def _import_picker_app() -> type[Any]:
    """Import the Textual app class lazily."""
    try:
        from npm_pick.cli.picker_app import PickerApp
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "textual is not installed. Install with: pip install textual",
        ) from exc
    return PickerApp


def run_picker(entries: Sequence[OutdatedEntry]) -> SelectionState:
    """Show the picker and block until the user confirms or cancels.

    Returns
    -------
    SelectionState
        Terminal state: ``CONFIRMED`` with the chosen names, or
        ``CANCELLED``.

    Raises
    ------
    PickerError
        If the terminal UI fails to start or crashes.
    """
    app_class = _import_picker_app()
    app = app_class(entries)

    try:
        result: SelectionState | None = app.run()
    except NpmPickError:
        raise
    except Exception as exc:
        raise PickerError(f"Error running program: {exc}") from exc

    if app.return_code:
        raise PickerError(
            f"Error running program (exit status {app.return_code}).",
        )
    if result is None:
        return app.state.cancel()
    return result
