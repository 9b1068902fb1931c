"""npm-backed implementations of the core protocols.

This module is the **only** place in the codebase that spawns npm.
``OSError`` and ``json`` exceptions are caught here and re-raised as
typed :class:`~npm_pick.exceptions.NpmPickError` subclasses.

* :class:`NpmOutdatedSource` satisfies
  :class:`~npm_pick.core.protocols.OutdatedQuerySource`.
* :class:`NpmInstaller` satisfies
  :class:`~npm_pick.core.protocols.PackageInstaller`.
"""

from __future__ import annotations

import json
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from npm_pick.exceptions import (
    InstallFailedError,
    OutdatedQueryError,
    PackageManagerNotFoundError,
    append_npm_version_suggestion,
)
from npm_pick.infra.npm_detector import require_npm
from npm_pick.utils.constants import (
    DEV_FLAG,
    INSTALL_VERB,
    NPM_EXECUTABLE,
    OUTDATED_ARGS,
)


class _NpmCommand:
    """Shared executable resolution for npm-backed adapters."""

    def __init__(
        self,
        cwd: Path | None = None,
        executable: str = NPM_EXECUTABLE,
    ) -> None:
        self._cwd: Path | None = cwd
        self._executable: str = executable

    def _argv(self, *args: str) -> list[str]:
        return [str(require_npm(self._executable)), *args]

    def _not_found(self, exc: OSError) -> PackageManagerNotFoundError:
        return PackageManagerNotFoundError(
            f"Could not run {self._executable}: {exc}",
        )


class NpmOutdatedSource(_NpmCommand):
    """Concrete :class:`OutdatedQuerySource` running ``npm outdated --json``.

    Usage::

        source = NpmOutdatedSource()
        report = source.fetch_outdated()
    """

    def fetch_outdated(self) -> dict[str, Any]:
        """Run the outdated query and decode its standard output.

        The exit status is ignored: npm exits 1 whenever something is
        outdated.

        Raises
        ------
        OutdatedQueryError
            When standard output is not a JSON object.
        PackageManagerNotFoundError
            When npm cannot be started.
        """
        try:
            proc = subprocess.run(
                self._argv(*OUTDATED_ARGS),
                cwd=self._cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as exc:
            raise self._not_found(exc) from exc

        output = proc.stdout
        try:
            report: Any = json.loads(output)
        except json.JSONDecodeError as exc:
            raise OutdatedQueryError(
                "Couldn't parse npm outdated output.",
                hint=append_npm_version_suggestion(
                    f"Raw output:\n{output or proc.stderr}",
                ),
            ) from exc

        if not isinstance(report, dict):
            raise OutdatedQueryError(
                "npm outdated returned an unexpected data structure.",
                hint=append_npm_version_suggestion(f"Raw output:\n{output}"),
            )
        return report


class NpmInstaller(_NpmCommand):
    """Concrete :class:`PackageInstaller` running ``npm i [-D] ...``.

    Standard output and error are inherited so npm writes straight to the
    terminal.
    """

    @staticmethod
    def build_args(specs: Sequence[str], *, dev: bool) -> list[str]:
        """Return npm arguments (without the executable)."""
        args = [INSTALL_VERB]
        if dev:
            args.append(DEV_FLAG)
        args.extend(specs)
        return args

    def install(self, specs: Sequence[str], *, dev: bool) -> None:
        """Run one install and raise on a non-zero exit status.

        Raises
        ------
        InstallFailedError
            When npm exits with a failure status.
        PackageManagerNotFoundError
            When npm cannot be started.
        """
        try:
            proc = subprocess.run(
                self._argv(*self.build_args(specs, dev=dev)),
                cwd=self._cwd,
                check=False,
            )
        except OSError as exc:
            raise self._not_found(exc) from exc

        if proc.returncode != 0:
            group = "dev dependencies" if dev else "dependencies"
            raise InstallFailedError(
                f"Error occurred updating {group} "
                f"(npm exited with status {proc.returncode}).",
                returncode=proc.returncode,
                hint="See the npm output above for details.",
            )
