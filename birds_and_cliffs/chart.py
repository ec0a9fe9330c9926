"""Plot each player's square over the course of a game."""

from __future__ import annotations

from typing import Sequence

import matplotlib
matplotlib.use("Agg")  # non-interactive backend

import matplotlib.pyplot as plt

from birds_and_cliffs.board import START_SQUARE
from birds_and_cliffs.game import TurnRecord


def position_series(history: Sequence[TurnRecord]) -> dict[str, tuple[list[int], list[int]]]:
    """Map player name → (turn numbers, square after that turn).

    Every series starts at turn 0 on the start square.
    """
    series: dict[str, tuple[list[int], list[int]]] = {}
    for record in history:
        turns, squares = series.setdefault(record.player, ([0], [START_SQUARE]))
        turns.append(record.turn_number)
        squares.append(record.end)
    return series


def make_position_chart(
    history: Sequence[TurnRecord],
    track_length: int,
    output_path: str = "positions.png",
    title: str = "Birds & Cliffs: squares per turn",
) -> str:
    """Draw a step line per player and mark the finish square.

    Returns the path to the saved PNG.
    """
    series = position_series(history)

    fig, ax = plt.subplots(figsize=(10, 5))
    for name, (turns, squares) in series.items():
        ax.step(turns, squares, where="post", label=name, linewidth=2)

    ax.axhline(track_length, color="#999999", linestyle="--", linewidth=1)
    ax.set_xlabel("Turn")
    ax.set_ylabel("Square")
    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.set_ylim(bottom=0, top=track_length + 5)
    if series:
        ax.legend(loc="upper left")

    plt.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
