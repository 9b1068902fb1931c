"""Core install service — partitions a selection and drives installs.

Delegates the actual install to a
:class:`~npm_pick.core.protocols.PackageInstaller` injected at
construction time.  It is responsible for:

* Splitting the selection into runtime and dev groups.
* Building ``name@latest`` specifiers.
* Invoking the installer once per non-empty group, runtime first.
* Ensuring only :class:`~npm_pick.exceptions.NpmPickError` subclasses
  escape.

Guarantees
----------
* Pure orchestration — no I/O, no ``print()``.
* Sequential: the dev group is never attempted after a runtime failure.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Sequence

from npm_pick.core.models import InstallPlan, OutdatedEntry
from npm_pick.core.protocols import PackageInstaller
from npm_pick.exceptions import InstallFailedError, NpmPickError
from npm_pick.utils.constants import LATEST_TAG


class InstallService:
    """Stateless service that upgrades the selected packages.

    Parameters
    ----------
    installer:
        Any object satisfying the :class:`PackageInstaller` protocol.
    """

    def __init__(self, installer: PackageInstaller) -> None:
        self._installer: PackageInstaller = installer

    # ------------------------------------------------------------------
    # Plan construction (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def build_plan(
        selected: Collection[str],
        entries: Sequence[OutdatedEntry],
    ) -> InstallPlan:
        """Partition *selected* by each entry's ``is_dev`` flag.

        Names without a matching entry are dropped.
        """
        runtime: list[str] = []
        dev: list[str] = []
        for entry in entries:
            if entry.name not in selected:
                continue
            (dev if entry.is_dev else runtime).append(entry.name)
        return InstallPlan(runtime=tuple(runtime), dev=tuple(dev))

    @staticmethod
    def build_specs(names: Sequence[str]) -> list[str]:
        """Pin every name to the ``latest`` dist-tag."""
        return [f"{name}@{LATEST_TAG}" for name in names]

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def install(
        self,
        selected: Collection[str],
        entries: Sequence[OutdatedEntry],
        *,
        on_invoke: Callable[[list[str], bool], None] | None = None,
    ) -> InstallPlan:
        """Install the selection and return the executed plan.

        Parameters
        ----------
        selected:
            Names chosen in the picker.
        entries:
            The classified outdated entries.
        on_invoke:
            Optional callable receiving ``(specs, dev)`` right before each
            installer call.

        Raises
        ------
        InstallFailedError
            When an install fails; later groups are skipped.
        """
        plan = self.build_plan(selected, entries)
        for names, dev in ((plan.runtime, False), (plan.dev, True)):
            if not names:
                continue
            specs = self.build_specs(names)
            if on_invoke is not None:
                on_invoke(specs, dev)
            self._run(specs, dev=dev)
        return plan

    # ------------------------------------------------------------------
    # Installer delegation (safe boundary)
    # ------------------------------------------------------------------

    def _run(self, specs: list[str], *, dev: bool) -> None:
        try:
            self._installer.install(specs, dev=dev)
        except NpmPickError:
            raise
        except Exception as exc:
            raise InstallFailedError(
                f"Unexpected install error: {exc}",
            ) from exc
