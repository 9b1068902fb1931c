"""Infrastructure layer — external system integration.

This layer wraps all interaction with npm, the filesystem and the
operating system.  Every raw ``OSError`` / JSON exception must be caught
here and re-raised as a :class:`~npm_pick.exceptions.NpmPickError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from npm_pick.infra.manifest import manifest_path, read_runtime_dependencies
from npm_pick.infra.npm_cli import NpmInstaller, NpmOutdatedSource
from npm_pick.infra.npm_detector import NpmStatus, detect_npm, require_npm

__all__: list[str] = [
    "NpmInstaller",
    "NpmOutdatedSource",
    "NpmStatus",
    "detect_npm",
    "manifest_path",
    "read_runtime_dependencies",
    "require_npm",
]
