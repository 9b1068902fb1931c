"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol


class OutdatedQuerySource(Protocol):
    """Contract for backends reporting outdated packages.

    Any object that implements :meth:`fetch_outdated` with the correct
    signature satisfies this protocol structurally.
    """

    def fetch_outdated(self) -> dict[str, Any]:
        """Return the decoded outdated report.

        The mapping is keyed by package name; each value is expected to
        be a dict carrying ``"current"``, ``"wanted"`` and ``"latest"``
        version strings.  Shape validation is the caller's job.

        Raises
        ------
        OutdatedQueryError
            When the backend output is not decodable.
        PackageManagerNotFoundError
            When the backend executable is missing.
        """
        ...  # pragma: no cover


class PackageInstaller(Protocol):
    """Contract for package install backends."""

    def install(self, specs: Sequence[str], *, dev: bool) -> None:
        """Install *specs* (``name@tag`` strings) in one invocation.

        Parameters
        ----------
        specs:
            Non-empty sequence of package specifiers.
        dev:
            Record the packages as development dependencies.

        Raises
        ------
        InstallFailedError
            When the install exits with a failure status.
        """
        ...  # pragma: no cover
