"""Domain models for npm-pick.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and zero dependencies
on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Outdated package
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class OutdatedEntry:
    """One outdated dependency as reported by ``npm outdated``."""

    name: str
    """Package name, unique within a fetch."""

    current: str
    """Installed version, or ``""`` when the package is not installed."""

    latest: str
    """Latest version published under the ``latest`` dist-tag."""

    is_dev: bool
    """``True`` when the name is not a declared runtime dependency."""


# ---------------------------------------------------------------------------
# Install partition
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InstallPlan:
    """Selected package names split into runtime and dev groups.

    Both groups keep display order (ascending by name).
    """

    runtime: tuple[str, ...]
    dev: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.runtime) + len(self.dev)

    def __bool__(self) -> bool:
        return len(self) > 0
