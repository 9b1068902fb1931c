"""Custom exception hierarchy for npm-pick.

All exceptions that cross layer boundaries must inherit from
:class:`NpmPickError`.  Raw ``OSError``, ``subprocess`` and JSON
exceptions must NEVER propagate beyond the infrastructure layer; they
are caught and re-raised as a typed subclass defined here.

Hierarchy
---------
NpmPickError
├── ManifestError
├── OutdatedQueryError
├── InstallFailedError
├── PickerError
├── PackageManagerNotFoundError
└── EnvironmentError
"""

from __future__ import annotations


class NpmPickError(Exception):
    """Base exception for all npm-pick errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Manifest --------------------------------------------------------------

class ManifestError(NpmPickError):
    """Raised when ``package.json`` is missing or cannot be parsed."""


# --- npm outdated ----------------------------------------------------------

class OutdatedQueryError(NpmPickError):
    """Raised when ``npm outdated --json`` output has an unexpected shape."""


# --- npm install -----------------------------------------------------------

class InstallFailedError(NpmPickError):
    """Raised when an ``npm install`` invocation exits with a failure."""

    def __init__(
        self,
        message: str,
        *,
        returncode: int | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.returncode: int | None = returncode


# --- Interactive picker ----------------------------------------------------

class PickerError(NpmPickError):
    """Raised when the interactive selection table cannot be started."""


# --- Environment / tooling -------------------------------------------------

class PackageManagerNotFoundError(NpmPickError):
    """Raised when the ``npm`` executable cannot be located on PATH."""


class EnvironmentError(NpmPickError):
    """Raised when a required Python UI dependency is not available."""


def append_npm_version_suggestion(hint: str) -> str:
    """Append npm version guidance to an existing hint text.

    The suggestion is appended only once and preserves the original
    hint content verbatim.
    """
    marker = "Check your npm version:"
    if marker in hint:
        return hint
    return "\n".join(
        (
            hint,
            marker,
            "    npm --version",
        )
    )
