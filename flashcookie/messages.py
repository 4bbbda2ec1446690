"""One-time flash message model."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass
from typing import NamedTuple


class Level(enum.IntEnum):
    """Severity of a flash message, least to most severe."""

    DEBUG = 0
    INFO = 1
    SUCCESS = 2
    WARNING = 3
    ERROR = 4

    @property
    def label(self) -> str:
        """Lowercase name, handy as a CSS class."""
        return self.name.lower()


class FlashMessage(NamedTuple):
    level: Level
    text: str


@dataclass(frozen=True)
class Flash:
    """
    Ordered, immutable collection of flash messages.

    Pushing returns a new instance; the original is left untouched:

        flash = Flash().success("Saved").warning("Quota almost reached")
    """

    messages: tuple[FlashMessage, ...] = ()

    def push(self, level: Level | int, text: str) -> Flash:
        """Return a copy with ``(level, text)`` appended."""
        if not isinstance(text, str):
            raise TypeError(f"flash text must be str, not {type(text).__name__}")
        if isinstance(level, bool) or not isinstance(level, int):
            raise TypeError(f"flash level must be a Level, not {type(level).__name__}")
        return Flash(self.messages + (FlashMessage(Level(level), text),))

    def debug(self, text: str) -> Flash:
        return self.push(Level.DEBUG, text)

    def info(self, text: str) -> Flash:
        return self.push(Level.INFO, text)

    def success(self, text: str) -> Flash:
        return self.push(Level.SUCCESS, text)

    def warning(self, text: str) -> Flash:
        return self.push(Level.WARNING, text)

    def error(self, text: str) -> Flash:
        return self.push(Level.ERROR, text)

    def is_empty(self) -> bool:
        return not self.messages

    def __iter__(self) -> Iterator[FlashMessage]:
        return iter(self.messages)

    def __len__(self) -> int:
        return len(self.messages)
