"""
Tests for the command line entry point and persistent settings.

Usage:
    pytest tests/test_cli.py
"""

import io
import json
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import main
from heatpath.settings import DEFAULT_SETTINGS, load_settings, save_settings
from tests.grids import CORRIDOR_GRID, EXAMPLE_GRID


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run each CLI test in an empty directory so config.json is isolated."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def write_grid(directory: Path, text: str, name: str = "input.txt") -> Path:
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return path


def test_all_policies_by_default(workdir, capsys):
    path = write_grid(workdir, EXAMPLE_GRID)

    assert main.main([str(path)]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == ["bounded_run: 102", "minimum_run: 94"]


def test_single_policy(workdir, capsys):
    path = write_grid(workdir, CORRIDOR_GRID)

    assert main.main([str(path), "--policy", "minimum_run"]) == 0
    assert capsys.readouterr().out.strip() == "minimum_run: 71"


def test_unreachable_is_reported(workdir, capsys):
    path = write_grid(workdir, "7\n")

    assert main.main([str(path), "-p", "minimum_run"]) == 0
    assert capsys.readouterr().out.strip() == "minimum_run: unreachable"


def test_show_path(workdir, capsys):
    path = write_grid(workdir, "19\n11\n")

    assert main.main([str(path), "-p", "bounded_run", "--show-path"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["bounded_run: 2", "19", "v>"]


def test_reads_stdin(workdir, capsys, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO(EXAMPLE_GRID))

    assert main.main(["-", "-p", "bounded_run"]) == 0
    assert capsys.readouterr().out.strip() == "bounded_run: 102"


def test_invalid_grid_exit_code(workdir, capsys):
    path = write_grid(workdir, "12\n3x\n")

    assert main.main([str(path)]) == 1
    assert capsys.readouterr().out == ""


def test_missing_file_exit_code(workdir):
    assert main.main([str(workdir / "missing.txt")]) == 1


def test_unknown_policy_is_usage_error(workdir):
    with pytest.raises(SystemExit) as excinfo:
        main.main(["input.txt", "--policy", "teleport"])
    assert excinfo.value.code == 2


def test_list_policies(workdir, capsys):
    assert main.main(["--list-policies"]) == 0
    out = capsys.readouterr().out
    assert "bounded_run:" in out
    assert "minimum_run:" in out


def test_save_settings_persists_policy(workdir, capsys):
    path = write_grid(workdir, CORRIDOR_GRID)

    assert main.main([str(path), "-p", "minimum_run", "--save-settings"]) == 0
    saved = json.loads((workdir / "config.json").read_text(encoding="utf-8"))
    assert saved["policy_name"] == "minimum_run"
    assert saved["debug_enabled"] is False
    capsys.readouterr()

    # Saved policy applies when no flag is given
    assert main.main([str(path)]) == 0
    assert capsys.readouterr().out.strip() == "minimum_run: 71"


def test_saved_input_path_used(workdir, capsys):
    path = write_grid(workdir, EXAMPLE_GRID)
    save_settings({"input_path": str(path), "policy_name": "bounded_run"}, workdir / "config.json")

    assert main.main([]) == 0
    assert capsys.readouterr().out.strip() == "bounded_run: 102"


def test_load_settings_defaults_when_missing(tmp_path):
    assert load_settings(tmp_path / "config.json") == DEFAULT_SETTINGS


def test_load_settings_defaults_when_invalid(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS

    path.write_text("[1, 2]", encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS


def test_settings_round_trip_merges_defaults(tmp_path):
    path = tmp_path / "config.json"
    save_settings({"policy_name": "minimum_run"}, path)

    loaded = load_settings(path)
    assert loaded["policy_name"] == "minimum_run"
    assert loaded["debug_enabled"] is False
    assert loaded["input_path"] is None


def test_saved_unknown_policy_exit_code(workdir, capsys):
    path = write_grid(workdir, EXAMPLE_GRID)
    save_settings({"policy_name": "teleport"}, workdir / "config.json")

    assert main.main([str(path)]) == 1
    assert capsys.readouterr().out == ""
