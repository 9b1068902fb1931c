"""Infrastructure: read declared runtime dependencies from ``package.json``.

``OSError`` and ``json.JSONDecodeError`` are caught here and re-raised as
:class:`~npm_pick.exceptions.ManifestError`.
"""

from __future__ import annotations

import json
from pathlib import Path

from npm_pick.exceptions import ManifestError
from npm_pick.utils.constants import MANIFEST_FILENAME


def manifest_path(project_dir: Path | None = None) -> Path:
    """Return the manifest location inside *project_dir* (default: cwd)."""
    return (project_dir or Path.cwd()) / MANIFEST_FILENAME


def read_runtime_dependencies(project_dir: Path | None = None) -> frozenset[str]:
    """Return the names listed under ``dependencies``.

    A missing or ``null`` ``dependencies`` field yields an empty set.

    Raises
    ------
    ManifestError
        If the file cannot be read, is not JSON, is not a JSON object,
        or has a non-object ``dependencies`` field.
    """
    path = manifest_path(project_dir)

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestError(
            f"Couldn't read {path}: {exc.strerror or exc}",
            hint="Run npm-pick from the directory containing package.json.",
        ) from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Couldn't parse {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestError(f"Couldn't parse {path}: top level is not an object.")

    dependencies = data.get("dependencies")
    if dependencies is None:
        return frozenset()
    if not isinstance(dependencies, dict):
        raise ManifestError(
            f"Couldn't parse {path}: 'dependencies' is not an object.",
        )
    return frozenset(dependencies)
