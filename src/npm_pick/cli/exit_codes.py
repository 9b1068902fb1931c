"""Exit-code constants used by the CLI layer.

Every exit path uses one of these values rather than a literal integer.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — upgrade finished, nothing outdated, or picker cancelled."""

GENERAL_ERROR: int = 1
"""A known NpmPickError was caught. User-facing message was displayed."""

KEYBOARD_INTERRUPT: int = 130
"""Ctrl+C outside the picker.  Follows POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""
