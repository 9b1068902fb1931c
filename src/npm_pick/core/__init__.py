"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem, subprocess or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from npm_pick.core.classifier import classify
from npm_pick.core.install_service import InstallService
from npm_pick.core.models import InstallPlan, OutdatedEntry
from npm_pick.core.outdated_service import OutdatedService
from npm_pick.core.protocols import OutdatedQuerySource, PackageInstaller
from npm_pick.core.selection import SelectionState, Status, render_rows, update

__all__: list[str] = [
    "InstallPlan",
    "InstallService",
    "OutdatedEntry",
    "OutdatedQuerySource",
    "OutdatedService",
    "PackageInstaller",
    "SelectionState",
    "Status",
    "classify",
    "render_rows",
    "update",
]
