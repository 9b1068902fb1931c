"""CLI application entry point for npm-pick.

This module is the **sole error boundary** for the entire application.
It catches :class:`~npm_pick.exceptions.NpmPickError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here; all work is delegated to the core/service
  and infrastructure layers.
* ``print()`` is forbidden outside the CLI layer; the console proxy is used
  exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from npm_pick.cli import exit_codes
from npm_pick.cli.console import console, escape_markup
from npm_pick.exceptions import NpmPickError
from npm_pick.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser.

    The tool takes no operational arguments; it always works on the
    ``package.json`` in the current directory.
    """
    parser = argparse.ArgumentParser(
        prog="npm-pick",
        description=(
            "Interactively pick outdated npm dependencies and upgrade them "
            "to their latest versions."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


# ---------------------------------------------------------------------------
# Upgrade workflow
# ---------------------------------------------------------------------------

def _handle_upgrade() -> int:
    """Run the fetch → classify → pick → install workflow.

    Flow:
    1. Query npm for outdated packages.
    2. Read runtime dependency names from package.json and classify.
    3. Let the user pick packages in the full-screen table.
    4. On confirm, install runtime then dev groups at ``@latest``.
    """
    from npm_pick.cli.picker import run_picker
    from npm_pick.core.install_service import InstallService
    from npm_pick.core.outdated_service import OutdatedService
    from npm_pick.core.selection import Status
    from npm_pick.infra.manifest import read_runtime_dependencies
    from npm_pick.infra.npm_cli import NpmInstaller, NpmOutdatedSource
    from npm_pick.utils.constants import NPM_EXECUTABLE

    console.print("[bold]Checking for outdated packages…[/bold]")
    outdated_service = OutdatedService(NpmOutdatedSource())
    entries = outdated_service.list_outdated(read_runtime_dependencies())

    if not entries:
        console.print("[bold green]All dependencies are up to date.[/bold green]")
        return exit_codes.SUCCESS

    state = run_picker(entries)
    if state.status is not Status.CONFIRMED:
        return exit_codes.SUCCESS

    if not state.selected:
        console.print("[dim]Nothing selected.[/dim]")
        return exit_codes.SUCCESS

    install_service = InstallService(NpmInstaller())
    plan = install_service.install(
        state.selected,
        state.entries,
        on_invoke=lambda specs, dev: console.command(
            [NPM_EXECUTABLE, *NpmInstaller.build_args(specs, dev=dev)],
        ),
    )

    console.print(
        f"\n[bold green]Upgrade complete.[/bold green]  "
        f"{len(plan)} package(s) updated.",
    )
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the npm-pick CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    parser.parse_args(argv)
    return _handle_upgrade()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except NpmPickError as exc:
        console.error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
