"""Pure dependency classification and ordering.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.

Pipeline order (enforced by :func:`classify`):

1. **Label** — ``is_dev`` is true for any name absent from the runtime
   dependency set (peer and optional dependencies included).
2. **Sort** — ascending by package name.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Sequence

from npm_pick.core.models import OutdatedEntry


# ---------------------------------------------------------------------------
# 1. Label
# ---------------------------------------------------------------------------

def label_entries(
    versions: Iterable[tuple[str, str, str]],
    runtime_names: Collection[str],
) -> list[OutdatedEntry]:
    """Build entries from ``(name, current, latest)`` triples."""
    return [
        OutdatedEntry(
            name=name,
            current=current,
            latest=latest,
            is_dev=name not in runtime_names,
        )
        for name, current, latest in versions
    ]


# ---------------------------------------------------------------------------
# 2. Sort
# ---------------------------------------------------------------------------

def sort_entries(entries: Sequence[OutdatedEntry]) -> list[OutdatedEntry]:
    """Sort entries by name ascending."""
    return sorted(entries, key=lambda entry: entry.name)


# ---------------------------------------------------------------------------
# Composite pipeline
# ---------------------------------------------------------------------------

def classify(
    versions: Iterable[tuple[str, str, str]],
    runtime_names: Collection[str],
) -> list[OutdatedEntry]:
    """Run the label → sort pipeline."""
    return sort_entries(label_entries(versions, runtime_names))
