"""Fixed configuration values shared across layers.

npm-pick has no configuration file; everything tunable lives here as a
module-level constant so each value is defined exactly once.
"""

from __future__ import annotations

MANIFEST_FILENAME: str = "package.json"
"""Project manifest, resolved relative to the project directory."""

NPM_EXECUTABLE: str = "npm"
"""Name of the package-manager binary looked up on PATH."""

OUTDATED_ARGS: tuple[str, ...] = ("outdated", "--json")
"""Arguments for the outdated-report query."""

INSTALL_VERB: str = "i"
DEV_FLAG: str = "-D"

LATEST_TAG: str = "latest"
"""Dist-tag every selected package is pinned to."""

MARKER: str = "x"
"""Cell text for the selected and dev-dependency columns."""

# (title, width) per table column, in display order.
TABLE_COLUMNS: tuple[tuple[str, int], ...] = (
    ("?", 4),
    ("Name", 30),
    ("Current", 10),
    ("Latest", 10),
    ("Dev Dep", 7),
)
