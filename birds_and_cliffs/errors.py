"""Exceptions raised when a caller breaks a game precondition."""

from __future__ import annotations


class GameError(Exception):
    """Base class for every rule-engine error."""


class InvalidSetupError(GameError, ValueError):
    """Bad roster or board layout handed to the constructor."""


class InvalidDiceError(GameError, ValueError):
    def __init__(self, points_1: int, points_2: int):
        super().__init__(f"Invalid dice: ({points_1}, {points_2}). Each die must be 1–6.")
        self.points = (points_1, points_2)


class PlayerNotFoundError(GameError, KeyError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"No player named {self.name!r}."


class GameOverError(GameError, RuntimeError):
    """Raised for moves after the game ended, or winner queries before it ends."""
