"""Tests for birds_and_cliffs.config."""

import msgspec
import pytest

from birds_and_cliffs.config import GameConfig
from birds_and_cliffs.errors import InvalidSetupError


def _write(tmp_path, text: str):
    path = tmp_path / "game.toml"
    path.write_text(text)
    return path


def test_defaults():
    config = GameConfig()
    assert config.roster == "RGB"
    assert config.track_length == 90
    assert config.charge_squares == []
    assert config.seed is None


def test_from_toml(tmp_path):
    path = _write(tmp_path, (
        'roster = "XYZ"\n'
        "track_length = 40\n"
        "charge_squares = [5, 12]\n"
        "cliff_squares = [20]\n"
        "seed = 3\n"
    ))
    config = GameConfig.from_toml(path)
    assert config.roster == "XYZ"
    assert config.track_length == 40
    assert config.charge_squares == [5, 12]
    assert config.cliff_squares == [20]
    assert config.seed == 3
    assert config.max_turns == 500


def test_to_layout_and_build_game(tmp_path):
    config = GameConfig.from_toml(_write(tmp_path, (
        'roster = "AB"\n'
        "track_length = 30\n"
        "charge_squares = [5]\n"
        "cliff_squares = [10]\n"
    )))
    layout = config.to_layout()
    assert layout.charge_squares == frozenset({5})
    assert layout.cliff_squares == frozenset({10})

    game = config.build_game()
    assert game.track_length == 30
    assert game.next_player_name() == "A"
    assert game.is_valid_player("B")


def test_out_of_range_track_fails_on_build(tmp_path):
    config = GameConfig.from_toml(_write(tmp_path, "track_length = 200\n"))
    with pytest.raises(InvalidSetupError):
        config.build_game()


def test_wrong_type_rejected(tmp_path):
    with pytest.raises(msgspec.ValidationError):
        GameConfig.from_toml(_write(tmp_path, 'track_length = "long"\n'))
