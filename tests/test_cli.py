"""Tests for the command-line entry point."""

import json
import logging

import pytest

from battle import main

BATTLE_1 = """\
#######
#.G...#
#...EG#
#.#.#G#
#..G#E#
#.....#
#######
"""


@pytest.fixture
def map_file(tmp_path):
    path = tmp_path / "battle.txt"
    path.write_text(BATTLE_1)
    return str(path)


def use_cli_logging(monkeypatch):
    """Drop pytest's capture handlers so main() installs its own on stdout."""
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)


def test_run_battle(map_file, capsys):
    """Test the default battle report."""
    main([map_file])

    out = capsys.readouterr().out
    assert "Winner: goblin" in out
    assert "Outcome: 47 * 590 = 27730" in out


def test_info_logs_go_to_stdout(map_file, capsys, monkeypatch):
    """Test that progress logs are printed with the text report."""
    use_cli_logging(monkeypatch)
    main([map_file])

    out = capsys.readouterr().out
    assert "[INFO] Battle over" in out


def test_json_report(map_file, capsys, monkeypatch):
    """Test that JSON output is the only thing on stdout."""
    use_cli_logging(monkeypatch)
    main([map_file, "--json"])

    report = json.loads(capsys.readouterr().out)
    assert report["outcome"] == 27730
    assert report["winner"] == "goblin"


def test_find_power(map_file, capsys):
    """Test the flawless-victory search from the command line."""
    main([map_file, "--find-power"])

    out = capsys.readouterr().out
    assert "Elf attack power: 15" in out
    assert "Outcome: 29 * 172 = 4988" in out


def test_render_final_map(map_file, capsys):
    """Test that --render prints the final map."""
    main([map_file, "--render"])

    out = capsys.readouterr().out
    assert "#######" in out
    assert "G(200)" in out


def test_find_power_render(map_file, capsys):
    """Test that --render shows the winning trial's final map."""
    main([map_file, "--find-power", "--render"])

    out = capsys.readouterr().out
    assert "#######" in out
    assert "E(" in out
    assert "G(" not in out
    assert "Elf attack power: 15" in out


def test_missing_map_file(tmp_path, capsys):
    """Test that an unreadable map exits with status 1."""
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "missing.txt")])

    assert excinfo.value.code == 1
    assert "Error" in capsys.readouterr().out


def test_invalid_map(tmp_path, capsys):
    """Test that a malformed map exits with status 1."""
    path = tmp_path / "bad.txt"
    path.write_text("#####\n#E?G#\n#####\n")

    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])

    assert excinfo.value.code == 1
    assert "invalid map" in capsys.readouterr().out


def test_invalid_power_rejected(map_file):
    """Test that argparse rejects non-positive powers."""
    with pytest.raises(SystemExit) as excinfo:
        main([map_file, "--elf-power", "0"])

    assert excinfo.value.code == 2
