"""Game system: owns the roster and resolves each dice roll into a turn."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Protocol

from birds_and_cliffs.board import (
    BIRD_INTERVAL,
    BoardLayout,
    Landing,
    SquareEffect,
    is_dice_valid,
    resolve_landing,
)
from birds_and_cliffs.errors import (
    GameOverError,
    InvalidDiceError,
    InvalidSetupError,
    PlayerNotFoundError,
)
from birds_and_cliffs.player import Player

logger = logging.getLogger(__name__)


# ── Game status ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class InProgress:
    active_index: int


@dataclass(frozen=True)
class GameOver:
    winner_index: int


# ── Structured types ────────────────────────────────────────────────

@dataclass(frozen=True)
class TurnRecord:
    """Record of a single resolved roll."""

    turn_number: int
    player: str
    dice: tuple[int, int]
    start: int
    candidate: int
    effect: SquareEffect
    end: int
    game_over: bool = False
    skipped: tuple[str, ...] = ()  # players who paid a charge after this roll

    @property
    def total(self) -> int:
        return self.dice[0] + self.dice[1]


class TurnObserver(Protocol):
    """Receives a record for every resolved roll."""

    def on_turn(self, record: TurnRecord) -> None: ...


@dataclass
class ListObserver:
    records: list[TurnRecord] = field(default_factory=list)

    def on_turn(self, record: TurnRecord) -> None:
        self.records.append(record)


# ── Game system ─────────────────────────────────────────────────────

def _players_from_roster(roster: str) -> tuple[Player, ...]:
    """One player per roster character, in play order."""
    if not roster:
        raise InvalidSetupError("Roster must name at least one player.")
    if len(set(roster)) != len(roster):
        raise InvalidSetupError(f"Roster {roster!r} repeats a player name.")
    return tuple(Player(name) for name in roster)


class GameSystem:
    """One game on a single linear track.

    Turn order is roster order, wrapping. Players owing charges are
    skipped (paying one charge per skip) when the turn passes to them.
    """

    def __init__(
        self,
        roster: str,
        track_length: int,
        charge_squares: Iterable[int] = (),
        cliff_squares: Iterable[int] = (),
        observer: TurnObserver | None = None,
    ):
        self.layout = BoardLayout(
            track_length, frozenset(charge_squares), frozenset(cliff_squares),
        )
        self.players = _players_from_roster(roster)
        self._index_by_name = {p.name: i for i, p in enumerate(self.players)}
        self.status: InProgress | GameOver = InProgress(active_index=0)
        self.turn_number = 0
        self.history: list[TurnRecord] = []
        self.observer = observer

        overlap = self.layout.charge_squares & self.layout.cliff_squares
        if overlap:
            logger.warning(
                "Squares %s are both charge and cliff squares; cliff wins.",
                sorted(overlap),
            )

    @classmethod
    def from_layout(
        cls,
        roster: str,
        layout: BoardLayout,
        observer: TurnObserver | None = None,
    ) -> GameSystem:
        return cls(
            roster,
            layout.track_length,
            layout.charge_squares,
            layout.cliff_squares,
            observer=observer,
        )

    @property
    def track_length(self) -> int:
        return self.layout.track_length

    # ── queries ──

    def _player(self, name: str) -> Player:
        index = self._index_by_name.get(name)
        if index is None:
            raise PlayerNotFoundError(name)
        return self.players[index]

    def next_player_name(self) -> str:
        """Player whose turn it is; the winner once the game is over."""
        status = self.status
        if isinstance(status, GameOver):
            return self.players[status.winner_index].name
        return self.players[status.active_index].name

    def player_square(self, name: str) -> int:
        return self._player(name).square

    def is_valid_player(self, name: str) -> bool:
        return name in self._index_by_name

    def is_game_over(self) -> bool:
        return isinstance(self.status, GameOver)

    def can_roll_dice(self, name: str) -> bool:
        return not self._player(name).has_charges()

    def winner_name(self) -> str:
        status = self.status
        if not isinstance(status, GameOver):
            raise GameOverError("Game is not over yet; there is no winner.")
        return self.players[status.winner_index].name

    @staticmethod
    def is_dice_valid(points_1: int, points_2: int) -> bool:
        return is_dice_valid(points_1, points_2)

    # ── turn resolution ──

    def roll_dice(self, points_1: int, points_2: int) -> TurnRecord:
        """Move the active player by the dice total and pass the turn on.

        Raises InvalidDiceError or GameOverError without touching state.
        """
        if not is_dice_valid(points_1, points_2):
            raise InvalidDiceError(points_1, points_2)
        status = self.status
        if isinstance(status, GameOver):
            raise GameOverError(
                f"Game is over; {self.players[status.winner_index].name} won."
            )
        mover_index = status.active_index
        mover = self.players[mover_index]

        landing = resolve_landing(self.layout, mover.square, points_1 + points_2)
        self.turn_number += 1
        self._log_landing(mover, landing)

        if landing.charges_due:
            mover.set_charges(landing.charges_due)
        mover.set_square(landing.final_square)

        skipped: tuple[str, ...] = ()
        if landing.reached_end:
            # Winner keeps the turn; the game is frozen from here
            self.status = GameOver(winner_index=mover_index)
            logger.info("Win: %s reached square %d", mover.name, landing.final_square)
        else:
            self.status, skipped = self._advance_from(mover_index)

        record = TurnRecord(
            turn_number=self.turn_number,
            player=mover.name,
            dice=(points_1, points_2),
            start=landing.start,
            candidate=landing.candidate,
            effect=landing.effect,
            end=landing.final_square,
            game_over=landing.reached_end,
            skipped=skipped,
        )
        self.history.append(record)
        if self.observer is not None:
            self.observer.on_turn(record)
        return record

    def _advance_from(self, index: int) -> tuple[InProgress, tuple[str, ...]]:
        """Next player in order, charging a skipped turn to everyone who owes one."""
        skipped: list[str] = []
        index = (index + 1) % len(self.players)
        while self.players[index].has_charges():
            player = self.players[index]
            player.pay_charge()
            skipped.append(player.name)
            logger.debug(
                "Skip: %s pays a charge (%d left)", player.name, player.charges,
            )
            index = (index + 1) % len(self.players)
        return InProgress(active_index=index), tuple(skipped)

    def _log_landing(self, mover: Player, landing: Landing) -> None:
        logger.info(
            "Move: %s %d->%d (rolled %d)",
            mover.name, landing.start, landing.candidate, landing.total,
        )
        if landing.effect is SquareEffect.BIRD:
            logger.info("Bird: %s flies to %d", mover.name, landing.candidate + BIRD_INTERVAL)
        elif landing.effect is SquareEffect.CLIFF:
            logger.info("Cliff: %s falls back to %d", mover.name, landing.final_square)
        elif landing.effect is SquareEffect.CHARGE:
            logger.info(
                "Charge: %s must skip %d turns", mover.name, landing.charges_due,
            )
