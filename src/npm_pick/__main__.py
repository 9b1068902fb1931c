"""Allow ``python -m npm_pick`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m npm_pick`` behaves identically to the ``npm-pick`` console
script.
"""

from __future__ import annotations

from npm_pick.cli.app import cli

if __name__ == "__main__":
    cli()
