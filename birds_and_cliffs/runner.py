"""Dice sources and a loop that plays a game to the end."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterable, Protocol

from birds_and_cliffs.board import MAX_DIE, MIN_DIE
from birds_and_cliffs.game import GameSystem

logger = logging.getLogger(__name__)

MAX_TURNS = 500  # safety valve for boards where nobody can finish


class DiceSource(Protocol):
    def roll(self) -> tuple[int, int]: ...


class RandomDice:
    """Two fair six-sided dice."""

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)

    def roll(self) -> tuple[int, int]:
        return (
            self._rng.randint(MIN_DIE, MAX_DIE),
            self._rng.randint(MIN_DIE, MAX_DIE),
        )


class ScriptedDice:
    """Replays a fixed sequence of rolls, for tests and replays."""

    def __init__(self, rolls: Iterable[tuple[int, int]]):
        self._rolls = list(rolls)
        self._idx = 0

    def roll(self) -> tuple[int, int]:
        if self._idx >= len(self._rolls):
            raise IndexError(f"Scripted dice exhausted after {self._idx} rolls.")
        roll = self._rolls[self._idx]
        self._idx += 1
        return roll


@dataclass
class GameResult:
    winner: str | None  # None when the turn limit was hit
    reason: str  # "win" | "max_turns"
    turns: int = 0


def play_game(
    game: GameSystem,
    dice: DiceSource,
    max_turns: int = MAX_TURNS,
) -> GameResult:
    """Roll for whoever is next until somebody wins or *max_turns* rolls pass."""
    while not game.is_game_over():
        if game.turn_number >= max_turns:
            logger.warning("No winner after %d turns; stopping.", game.turn_number)
            return GameResult(winner=None, reason="max_turns", turns=game.turn_number)
        game.roll_dice(*dice.roll())

    return GameResult(winner=game.winner_name(), reason="win", turns=game.turn_number)
