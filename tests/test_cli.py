"""Tests for the python -m birds_and_cliffs entry point."""

import logging

import pytest

from birds_and_cliffs import __main__ as cli
from birds_and_cliffs.log import GameMarkupFormatter


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch):
    """Keep the CLI from replacing pytest's log handlers."""
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)


def test_play_reports_a_winner(capsys):
    code = cli.main(["play", "--roster", "AB", "--squares", "30", "--seed", "3"])
    out = capsys.readouterr().out
    assert code == 0
    assert "wins after" in out
    assert "square   30" in out


def test_play_from_config_with_overrides(tmp_path, capsys):
    path = tmp_path / "game.toml"
    path.write_text('roster = "XY"\ntrack_length = 40\ncliff_squares = [7]\n')
    code = cli.main(["play", "--config", str(path), "--roster", "PQR", "--seed", "1"])
    out = capsys.readouterr().out
    assert code == 0
    for name in "PQR":
        assert f"  {name} " in out
    assert "X " not in out


def test_play_max_turns_without_winner(capsys):
    code = cli.main(["play", "--squares", "150", "--max-turns", "2", "--seed", "0"])
    assert code == 0
    assert "No winner after 2 turns." in capsys.readouterr().out


def test_invalid_track_length_exits_with_error(capsys):
    code = cli.main(["play", "--squares", "5"])
    err = capsys.readouterr().err
    assert code == 1
    assert "Track length" in err


def test_missing_config_file(tmp_path, capsys):
    code = cli.main(["play", "--config", str(tmp_path / "nope.toml")])
    assert code == 1
    assert "Config file not found" in capsys.readouterr().err


def test_chart_option_writes_png(tmp_path, capsys):
    out = tmp_path / "game.png"
    code = cli.main(["play", "--squares", "20", "--seed", "5", "--chart", str(out)])
    assert code == 0
    assert out.exists()
    assert "Chart saved" in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    assert cli.main([]) == 0
    assert "usage" in capsys.readouterr().out


# ── log formatting ───────────────────────────────────────────────────

def _record(message: str, level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord("birds_and_cliffs.game", level, __file__, 1, message, None, None)


def test_formatter_colours_event_keyword():
    text = GameMarkupFormatter().format(_record("Move: A 1->6 (rolled 5)"))
    assert text == "[bold green]Move[/bold green]: A 1->6 (rolled 5)"


def test_formatter_escapes_brackets_and_flags_warnings():
    text = GameMarkupFormatter().format(_record("Squares [12] overlap", logging.WARNING))
    assert text == r"[bold red]Squares \[12] overlap[/bold red]"
