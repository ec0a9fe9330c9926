"""TOML-backed game configuration using msgspec."""

from __future__ import annotations

from pathlib import Path

import msgspec

from birds_and_cliffs.board import BoardLayout
from birds_and_cliffs.game import GameSystem, TurnObserver
from birds_and_cliffs.runner import MAX_TURNS


class GameConfig(msgspec.Struct):
    """
    Everything needed to set up one game.

    Example ``game.toml``::

        roster = "RGB"
        track_length = 90
        charge_squares = [14, 33]
        cliff_squares = [22, 47, 71]
    """

    # One character per player, in play order
    roster: str = "RGB"
    track_length: int = 90
    charge_squares: list[int] = msgspec.field(default_factory=list)
    cliff_squares: list[int] = msgspec.field(default_factory=list)

    # Runner settings
    seed: int | None = None
    max_turns: int = MAX_TURNS

    @classmethod
    def from_toml(cls, path: str | Path) -> GameConfig:
        """Load configuration from a TOML file path."""
        with Path(path).open("rb") as f:
            return msgspec.toml.decode(f.read(), type=cls)

    def to_layout(self) -> BoardLayout:
        return BoardLayout(
            self.track_length,
            frozenset(self.charge_squares),
            frozenset(self.cliff_squares),
        )

    def build_game(self, observer: TurnObserver | None = None) -> GameSystem:
        return GameSystem.from_layout(self.roster, self.to_layout(), observer=observer)
