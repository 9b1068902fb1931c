"""Infrastructure: locate npm before spawning it.

npm ships with Node.js and, on Windows, is a ``npm.cmd`` batch shim
rather than an executable.  :func:`shutil.which` honours ``PATHEXT`` and
returns the shim's full path, which :func:`subprocess.run` can start
without ``shell=True``.  Resolving the path here keeps the adapters in
:mod:`npm_pick.infra.npm_cli` free of per-platform argv handling.

Nothing in this module installs Node.js or prints; a missing npm becomes
a :class:`~npm_pick.exceptions.PackageManagerNotFoundError` whose hint
lists the usual install commands for the current OS.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from npm_pick.exceptions import PackageManagerNotFoundError
from npm_pick.utils.constants import NPM_EXECUTABLE

_NODE_DOWNLOAD_URL = "https://nodejs.org/en/download"

# Keyed by ``platform.system().lower()``.
_NODE_INSTALL_COMMANDS: dict[str, tuple[str, ...]] = {
    "windows": (
        "winget install OpenJS.NodeJS.LTS",
        "choco install nodejs-lts",
    ),
    "linux": (
        "sudo apt install nodejs npm",
        "sudo dnf install nodejs npm",
        "sudo pacman -S nodejs npm",
    ),
    "darwin": ("brew install node",),
}


@dataclass(frozen=True, slots=True)
class NpmStatus:
    """Where npm lives, or how to get it.

    ``path`` is the resolved launcher (``npm`` or ``npm.cmd``) when
    ``found`` is true.  ``install_commands`` is only populated when npm
    is missing.
    """

    found: bool
    path: Path | None
    install_commands: tuple[str, ...]


def detect_npm(executable: str = NPM_EXECUTABLE) -> NpmStatus:
    """Resolve *executable* on PATH without running it."""
    resolved = shutil.which(executable)
    if resolved is None:
        return NpmStatus(
            found=False,
            path=None,
            install_commands=_platform_install_commands(),
        )
    return NpmStatus(found=True, path=Path(resolved), install_commands=())


def require_npm(executable: str = NPM_EXECUTABLE) -> Path:
    """Return the npm launcher path or raise :class:`PackageManagerNotFoundError`.

    Called before every npm invocation so a Node.js install removed
    mid-session is reported the same way as one that never existed.
    """
    status = detect_npm(executable)
    if status.found and status.path is not None:
        return status.path

    hint = None
    if status.install_commands:
        hint = "\n".join(
            [
                "Install Node.js (npm is bundled with it) using one of:",
                *(f"  {cmd}" for cmd in status.install_commands),
            ]
        )
    raise PackageManagerNotFoundError(
        f"{executable} is not installed or not on PATH.",
        hint=hint,
    )


def _platform_install_commands() -> tuple[str, ...]:
    system = platform.system().lower()
    return _NODE_INSTALL_COMMANDS.get(
        system,
        (f"Please install Node.js from {_NODE_DOWNLOAD_URL}",),
    )
