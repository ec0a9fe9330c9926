"""A single token on the track."""

from __future__ import annotations

from dataclasses import dataclass

from birds_and_cliffs.board import START_SQUARE


@dataclass
class Player:
    """Mutable per-player state: where the token is and how many turns it owes."""

    name: str
    square: int = START_SQUARE
    charges: int = 0

    def has_name(self, candidate: str) -> bool:
        return self.name == candidate

    def set_square(self, square: int) -> None:
        self.square = square

    def has_charges(self) -> bool:
        return self.charges > 0

    def set_charges(self, charges: int) -> None:
        """Overwrite the pending charges (landing twice does not stack)."""
        self.charges = charges

    def pay_charge(self) -> None:
        if self.charges <= 0:
            raise ValueError(f"Player {self.name} has no charges to pay.")
        self.charges -= 1
