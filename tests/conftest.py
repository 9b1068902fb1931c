"""Shared pytest configuration for the npm-pick test suite.

Guidelines
----------
* No test spawns a real npm process; ``subprocess.run`` and
  ``shutil.which`` are replaced at the infra boundary.
* Core tests must be pure — no side effects.
* Manifests are written under ``tmp_path``.
"""

from __future__ import annotations
