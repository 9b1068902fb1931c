"""npm-pick — interactive picker for upgrading outdated npm dependencies.

Wraps ``npm outdated`` and ``npm install`` with a strict layered
architecture and a full-screen Textual selection table.
"""

from npm_pick.version import __version__

__all__: list[str] = ["__version__"]
