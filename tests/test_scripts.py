"""
Tests for the command-line scripts.

Scripts live outside the package, so they are loaded by path.
"""

import importlib.util
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from tradejournal.core.errors import ReadFailed
from tradejournal.store import ProfileStore

SCRIPTS_DIR = Path(__file__).parent.parent / "scripts"

runner = CliRunner()


def load_script(name: str):
    spec = importlib.util.spec_from_file_location(f"script_{name}", SCRIPTS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def profile_cli(monkeypatch, tmp_path):
    monkeypatch.setenv("TRADEJOURNAL_DB_PATH", str(tmp_path / "journal.db"))
    monkeypatch.delenv("TRADEJOURNAL_CONFIG", raising=False)
    return load_script("profile")


class TestProfileScript:
    def test_set_then_show(self, profile_cli):
        result = runner.invoke(profile_cli.app, ["set", "Alice", "USD"])
        assert result.exit_code == 0

        result = runner.invoke(profile_cli.app, ["show"])
        assert result.exit_code == 0
        assert "Alice" in result.output

    def test_show_without_profile(self, profile_cli):
        result = runner.invoke(profile_cli.app, ["show"])

        assert result.exit_code == 1
        assert "No profile yet" in result.output

    @patch.object(ProfileStore, "fetch_profile", side_effect=ReadFailed("schema mismatch"))
    def test_show_read_failure_reported(self, mock_fetch, profile_cli):
        """A failed read gives a message and exit code 1, not a traceback."""
        result = runner.invoke(profile_cli.app, ["show"])

        assert result.exit_code == 1
        assert "Failed to load profile" in result.output
        assert not isinstance(result.exception, ReadFailed)
