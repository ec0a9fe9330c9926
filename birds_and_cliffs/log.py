"""Console logging with Rich markup for game events."""

from __future__ import annotations

import logging
import re

from rich.logging import RichHandler

COLOR = {
    "move": "bold green",
    "bird": "bold cyan",
    "cliff": "bold red",
    "charge": "bold yellow",
    "win": "bold magenta",
    "skip": "dim",
    "warning": "bold red",
}

KEYWORD_PATTERN = re.compile(r"^(Move|Bird|Cliff|Charge|Skip|Win):")


class GameMarkupFormatter(logging.Formatter):
    """Colour the leading event keyword of engine messages."""

    def format(self, record: logging.LogRecord) -> str:
        # Plain text so square brackets in messages are not read as markup
        message = record.getMessage().replace("[", r"\[")

        match = KEYWORD_PATTERN.match(message)
        if match:
            keyword = match.group(1)
            style = COLOR[keyword.lower()]
            message = f"[{style}]{keyword}[/{style}]:{message[match.end():]}"

        if record.levelno >= logging.WARNING:
            message = f"[{COLOR['warning']}]{message}[/{COLOR['warning']}]"
        return message


def configure_logging(level: int = logging.INFO) -> None:
    logger = logging.getLogger()
    logger.setLevel(level)
    handler = RichHandler(markup=True, show_path=False, show_time=False)
    handler.setFormatter(GameMarkupFormatter())
    logger.handlers.clear()
    logger.addHandler(handler)
