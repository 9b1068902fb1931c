"""Tests for the CLI workflow and error boundary (cli/app.py).

npm is replaced by a scripted ``subprocess.run`` and the picker by a
function returning a prepared state, so the full fetch → classify →
pick → install path runs without a terminal or a Node toolchain.
"""

from __future__ import annotations

import json
import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from npm_pick.cli import exit_codes
from npm_pick.cli.app import cli, main
from npm_pick.core.models import OutdatedEntry
from npm_pick.core.selection import SelectionState
from npm_pick.exceptions import InstallFailedError, ManifestError, OutdatedQueryError
from npm_pick.infra import npm_cli

NPM = "/usr/bin/npm"

OUTDATED = {
    "a": {"current": "1.0.0", "wanted": "1.2.0", "latest": "2.0.0"},
    "b": {"current": "0.1.0", "wanted": "0.1.0", "latest": "0.2.0"},
}


class _FakeNpm:
    """Scripted stand-in for ``subprocess.run`` covering both npm verbs."""

    def __init__(self, outdated: dict[str, Any], install_codes: Sequence[int] = ()) -> None:
        self._outdated = outdated
        self._install_codes = list(install_codes)
        self.calls: list[list[str]] = []

    @property
    def installs(self) -> list[list[str]]:
        return [argv[1:] for argv in self.calls if argv[1] == "i"]

    def __call__(self, argv: list[str], **_kwargs: Any) -> subprocess.CompletedProcess[str]:
        self.calls.append(list(argv))
        if argv[1] == "outdated":
            return subprocess.CompletedProcess(
                argv, 1, stdout=json.dumps(self._outdated), stderr="",
            )
        code = self._install_codes.pop(0) if self._install_codes else 0
        return subprocess.CompletedProcess(argv, code)


def _picker(*names: str, confirm: bool = True) -> Callable[[Sequence[OutdatedEntry]], SelectionState]:
    """Build a ``run_picker`` replacement that selects *names*."""

    def run(entries: Sequence[OutdatedEntry]) -> SelectionState:
        state = SelectionState.initial(entries)
        for name in names:
            state = state.toggle(name)
        return state.confirm() if confirm else state.cancel()

    return run


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    (tmp_path / "package.json").write_text(
        json.dumps({"dependencies": {"a": "1.0.0"}}), encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(npm_cli, "require_npm", lambda executable: Path(NPM))
    return tmp_path


def _use_npm(monkeypatch: pytest.MonkeyPatch, fake: _FakeNpm) -> _FakeNpm:
    monkeypatch.setattr(npm_cli.subprocess, "run", fake)
    return fake


# ---------------------------------------------------------------------------
# Workflow
# ---------------------------------------------------------------------------

class TestUpgradeWorkflow:
    def test_picker_receives_classified_entries(
        self, project: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        _use_npm(monkeypatch, _FakeNpm(OUTDATED))
        seen: list[Sequence[OutdatedEntry]] = []

        def run(entries: Sequence[OutdatedEntry]) -> SelectionState:
            seen.append(entries)
            return SelectionState.initial(entries).cancel()

        with patch("npm_pick.cli.picker.run_picker", side_effect=run):
            assert main([]) == exit_codes.SUCCESS

        assert [(e.name, e.is_dev) for e in seen[0]] == [("a", False), ("b", True)]

    def test_only_dev_selected(self, project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        fake = _use_npm(monkeypatch, _FakeNpm(OUTDATED))

        with patch("npm_pick.cli.picker.run_picker", side_effect=_picker("b")):
            assert main([]) == exit_codes.SUCCESS

        assert fake.installs == [["i", "-D", "b@latest"]]

    def test_runtime_and_dev_selected(
        self, project: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        fake = _use_npm(monkeypatch, _FakeNpm(OUTDATED))

        with patch("npm_pick.cli.picker.run_picker", side_effect=_picker("b", "a")):
            assert main([]) == exit_codes.SUCCESS

        assert fake.installs == [["i", "a@latest"], ["i", "-D", "b@latest"]]

    def test_cancel_installs_nothing(self, project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        fake = _use_npm(monkeypatch, _FakeNpm(OUTDATED))

        with patch("npm_pick.cli.picker.run_picker", side_effect=_picker("a", confirm=False)):
            assert main([]) == exit_codes.SUCCESS

        assert fake.installs == []

    def test_confirm_with_empty_selection(
        self, project: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        fake = _use_npm(monkeypatch, _FakeNpm(OUTDATED))

        with patch("npm_pick.cli.picker.run_picker", side_effect=_picker()):
            assert main([]) == exit_codes.SUCCESS

        assert fake.installs == []

    def test_nothing_outdated_skips_picker(
        self, project: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        _use_npm(monkeypatch, _FakeNpm({}))

        with patch("npm_pick.cli.picker.run_picker") as mock_picker:
            assert main([]) == exit_codes.SUCCESS

        mock_picker.assert_not_called()

    def test_runtime_failure_skips_dev_group(
        self, project: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        fake = _use_npm(monkeypatch, _FakeNpm(OUTDATED, install_codes=[1]))

        with patch("npm_pick.cli.picker.run_picker", side_effect=_picker("a", "b")):
            with pytest.raises(InstallFailedError):
                main([])

        assert fake.installs == [["i", "a@latest"]]

    def test_missing_manifest(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(npm_cli, "require_npm", lambda executable: Path(NPM))
        _use_npm(monkeypatch, _FakeNpm(OUTDATED))

        with pytest.raises(ManifestError):
            main([])


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def _exit_code(self) -> int | str | None:
        with pytest.raises(SystemExit) as exc_info:
            cli()
        return exc_info.value.code

    def test_success(self) -> None:
        with patch("npm_pick.cli.app.main", return_value=exit_codes.SUCCESS):
            assert self._exit_code() == exit_codes.SUCCESS

    def test_domain_error_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        err = ManifestError("Couldn't read package.json", hint="cd into the project")
        with patch("npm_pick.cli.app.main", side_effect=err):
            assert self._exit_code() == exit_codes.GENERAL_ERROR

        stderr = capsys.readouterr().err
        assert "Couldn't read package.json" in stderr
        assert "cd into the project" in stderr

    def test_bracketed_raw_output_is_printed_literally(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        err = OutdatedQueryError(
            "Couldn't parse npm outdated output.",
            hint="Raw output:\nnpm ERR! [/usr/lib/node] failed",
        )
        with patch("npm_pick.cli.app.main", side_effect=err):
            assert self._exit_code() == exit_codes.GENERAL_ERROR

        stderr = capsys.readouterr().err
        assert "Couldn't parse npm outdated output." in stderr
        assert "[/usr/lib/node] failed" in stderr

    def test_install_failure_exits_one(
        self, project: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        _use_npm(monkeypatch, _FakeNpm(OUTDATED, install_codes=[1]))
        monkeypatch.setattr("sys.argv", ["npm-pick"])

        with patch("npm_pick.cli.picker.run_picker", side_effect=_picker("a", "b")):
            assert self._exit_code() == exit_codes.GENERAL_ERROR

    def test_keyboard_interrupt(self) -> None:
        with patch("npm_pick.cli.app.main", side_effect=KeyboardInterrupt):
            assert self._exit_code() == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error(self) -> None:
        with patch("npm_pick.cli.app.main", side_effect=RuntimeError("bug")):
            assert self._exit_code() == exit_codes.UNEXPECTED_ERROR

    def test_unexpected_error_with_brackets(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("npm_pick.cli.app.main", side_effect=RuntimeError("[/tmp] boom")):
            assert self._exit_code() == exit_codes.UNEXPECTED_ERROR

        assert "[/tmp] boom" in capsys.readouterr().err
