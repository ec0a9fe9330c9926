"""Board layout and square-effect rules for Birds & Cliffs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from birds_and_cliffs.errors import InvalidSetupError

START_SQUARE = 1
MIN_TRACK_LENGTH = 10
MAX_TRACK_LENGTH = 150

BIRD_INTERVAL = 9    # birds sit on every multiple of 9 and jump 9 ahead
CHARGE_TURNS = 2     # turns skipped after landing on a charge square

MIN_DIE = 1
MAX_DIE = 6


def is_die_valid(points: int) -> bool:
    if not isinstance(points, int) or isinstance(points, bool):
        return False
    return MIN_DIE <= points <= MAX_DIE


def is_dice_valid(points_1: int, points_2: int) -> bool:
    return is_die_valid(points_1) and is_die_valid(points_2)


def is_track_length_valid(track_length: int) -> bool:
    return MIN_TRACK_LENGTH <= track_length <= MAX_TRACK_LENGTH


class SquareEffect(str, Enum):
    NONE = "none"
    BIRD = "bird"
    CLIFF = "cliff"
    CHARGE = "charge"


@dataclass(frozen=True)
class BoardLayout:
    """Track length plus the fixed sets of special squares."""

    track_length: int
    charge_squares: frozenset[int] = frozenset()
    cliff_squares: frozenset[int] = frozenset()

    def __post_init__(self) -> None:
        if not is_track_length_valid(self.track_length):
            raise InvalidSetupError(
                f"Track length must be between {MIN_TRACK_LENGTH} and "
                f"{MAX_TRACK_LENGTH}, got {self.track_length}."
            )
        # Accept any iterable of squares from callers
        object.__setattr__(self, "charge_squares", frozenset(self.charge_squares))
        object.__setattr__(self, "cliff_squares", frozenset(self.cliff_squares))

    def is_bird_square(self, square: int) -> bool:
        return (
            square % BIRD_INTERVAL == 0
            and square > 1
            and square < self.track_length
        )

    def is_cliff_square(self, square: int) -> bool:
        return square in self.cliff_squares

    def is_charge_square(self, square: int) -> bool:
        return square in self.charge_squares

    def effect_at(self, square: int) -> SquareEffect:
        """First matching effect, checked bird, then cliff, then charge."""
        if self.is_bird_square(square):
            return SquareEffect.BIRD
        if self.is_cliff_square(square):
            return SquareEffect.CLIFF
        if self.is_charge_square(square):
            return SquareEffect.CHARGE
        return SquareEffect.NONE


@dataclass(frozen=True)
class Landing:
    """What happens when a token at *start* moves *total* squares."""

    start: int
    total: int
    candidate: int
    effect: SquareEffect
    final_square: int
    charges_due: int = 0
    reached_end: bool = False


def resolve_landing(layout: BoardLayout, start: int, total: int) -> Landing:
    """Compute where a move ends up after square effects and the end check.

    Does NOT mutate anything; the game commits the result.
    """
    candidate = start + total
    effect = layout.effect_at(candidate)
    square = candidate
    charges_due = 0

    if effect is SquareEffect.BIRD:
        # May overshoot the last square; the end check below catches it
        square = candidate + BIRD_INTERVAL
    elif effect is SquareEffect.CLIFF:
        square = max(start - total, START_SQUARE)
    elif effect is SquareEffect.CHARGE:
        charges_due = CHARGE_TURNS

    reached_end = square >= layout.track_length
    if reached_end:
        square = layout.track_length

    return Landing(
        start=start,
        total=total,
        candidate=candidate,
        effect=effect,
        final_square=square,
        charges_due=charges_due,
        reached_end=reached_end,
    )
