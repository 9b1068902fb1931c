"""CLI console helpers with optional Rich support.

Rich is imported lazily so bootstrap paths (``--help``, ``--version``)
keep working when it is not installed.  Everything user-facing goes to
stderr; npm's own output owns stdout during installs.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Any

from npm_pick.exceptions import EnvironmentError, NpmPickError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True, highlight=False)


def escape_markup(text: str) -> str:
	"""Escape Rich markup in *text*; unchanged when Rich is absent."""
	try:
		from rich.markup import escape
	except ModuleNotFoundError:
		return text
	return escape(text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)

	def command(self, argv: Sequence[str]) -> None:
		"""Echo a command line before it runs, shell-prompt style."""
		self.print(f"\n[bold]>[/bold] {escape_markup(' '.join(argv))}")

	def error(self, exc: NpmPickError) -> None:
		"""Render a domain error and its optional hint."""
		self.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
		if exc.hint:
			self.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")


console = _ConsoleProxy()
