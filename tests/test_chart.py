"""Tests for birds_and_cliffs.chart."""

from birds_and_cliffs.chart import make_position_chart, position_series
from birds_and_cliffs.game import GameSystem


def _played_game() -> GameSystem:
    game = GameSystem("AB", 30, cliff_squares=[10])
    game.roll_dice(2, 3)    # A: 6
    game.roll_dice(4, 5)    # B: 10 → cliff → 1
    game.roll_dice(6, 6)    # A: 18 → bird → 27
    return game


def test_position_series_starts_at_square_one():
    series = position_series(_played_game().history)
    assert series["A"] == ([0, 1, 3], [1, 6, 27])
    assert series["B"] == ([0, 2], [1, 1])


def test_chart_is_written(tmp_path):
    game = _played_game()
    out = tmp_path / "positions.png"
    path = make_position_chart(game.history, game.track_length, output_path=str(out))
    assert path == str(out)
    assert out.exists()
    assert out.stat().st_size > 0


def test_chart_with_empty_history(tmp_path):
    out = tmp_path / "empty.png"
    make_position_chart([], 30, output_path=str(out))
    assert out.exists()
