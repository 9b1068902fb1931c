"""Core outdated service — validates the outdated report and classifies it.

Depends on a :class:`~npm_pick.core.protocols.OutdatedQuerySource`
injected at construction time, keeping the core free of any subprocess
or JSON handling.

Guarantees
----------
* Pure orchestration — no I/O, no ``print()``, no filesystem access.
* Only :class:`~npm_pick.exceptions.NpmPickError` subclasses escape.
* Output order is deterministic (ascending by name).
"""

from __future__ import annotations

import json
from collections.abc import Collection
from typing import Any

from npm_pick.core.classifier import classify
from npm_pick.core.models import OutdatedEntry
from npm_pick.core.protocols import OutdatedQuerySource
from npm_pick.exceptions import (
    NpmPickError,
    OutdatedQueryError,
    append_npm_version_suggestion,
)


class OutdatedService:
    """Stateless service turning an outdated report into entries.

    Parameters
    ----------
    source:
        Any object satisfying the :class:`OutdatedQuerySource` protocol.
    """

    def __init__(self, source: OutdatedQuerySource) -> None:
        self._source: OutdatedQuerySource = source

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def list_outdated(self, runtime_names: Collection[str]) -> list[OutdatedEntry]:
        """Fetch, validate and classify outdated packages.

        Parameters
        ----------
        runtime_names:
            Names declared under ``dependencies`` in the manifest.

        Raises
        ------
        OutdatedQueryError
            If the report does not have the expected structure.
        """
        report = self._fetch()
        versions = [
            self._parse_versions(name, raw) for name, raw in report.items()
        ]
        return classify(versions, runtime_names)

    # ------------------------------------------------------------------
    # Source delegation (safe boundary)
    # ------------------------------------------------------------------

    def _fetch(self) -> dict[str, Any]:
        """Call the source and ensure only our exceptions escape."""
        try:
            report = self._source.fetch_outdated()
        except NpmPickError:
            raise
        except Exception as exc:
            raise OutdatedQueryError(
                f"Unexpected outdated-query error: {exc}",
            ) from exc

        if not isinstance(report, dict):
            raise OutdatedQueryError(
                "npm outdated returned an unexpected data structure.",
                hint=append_npm_version_suggestion(
                    f"Raw output: {json.dumps(report)}",
                ),
            )
        return report

    # ------------------------------------------------------------------
    # Raw-dict → (name, current, latest) (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def _parse_versions(name: str, raw: object) -> tuple[str, str, str]:
        """Validate one report value and extract its version strings.

        ``current`` is absent (or ``null``) for declared-but-uninstalled
        packages and maps to ``""``; ``latest`` is required.
        """
        if not isinstance(raw, dict):
            raise OutdatedQueryError(
                f"Unexpected outdated entry for {name!r}.",
                hint=append_npm_version_suggestion(
                    f"Raw entry: {json.dumps(raw)}",
                ),
            )

        current = raw.get("current")
        if current is None:
            current = ""
        latest = raw.get("latest")
        if not isinstance(current, str) or not isinstance(latest, str):
            raise OutdatedQueryError(
                f"Missing or malformed versions for {name!r}.",
                hint=append_npm_version_suggestion(
                    f"Raw entry: {json.dumps(raw)}",
                ),
            )
        return name, current, latest
