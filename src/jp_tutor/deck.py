"""Deck tracking: random selection without replacement and completion."""
import logging
import random
from enum import Enum

from jp_tutor.errors import DeckNotInProgress

logger = logging.getLogger(__name__)


class DeckState(str, Enum):
    EMPTY = "empty"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class DeckTracker:
    """Characters available for the current configuration and those already shown.

    ``used`` keeps insertion order for display. A character that cannot form a
    question can be excluded, which shrinks ``available`` without counting as used.
    """

    def __init__(self, characters=()):
        self.available: list[str] = []
        self.used: list[str] = []
        self._used_set: set[str] = set()
        if characters:
            self.initialize(characters)

    def initialize(self, characters) -> None:
        # dict.fromkeys drops duplicates and keeps first-seen order
        self.available = list(dict.fromkeys(characters))
        self.used = []
        self._used_set = set()
        logger.debug("Deck initialized with %d characters", len(self.available))

    @property
    def state(self) -> DeckState:
        if not self.available:
            return DeckState.EMPTY
        if len(self.used) >= len(self.available):
            return DeckState.COMPLETED
        return DeckState.IN_PROGRESS

    @property
    def is_completed(self) -> bool:
        return self.state == DeckState.COMPLETED

    def remaining(self) -> list[str]:
        return [c for c in self.available if c not in self._used_set]

    def pick_next(self, rng: random.Random | None = None) -> str:
        """Pick an unused character uniformly at random. Does not mark it used."""
        if self.state != DeckState.IN_PROGRESS:
            raise DeckNotInProgress(f"Cannot pick from a deck that is {self.state.value}")
        remaining = self.remaining()
        return (rng or random).choice(remaining)

    def mark_used(self, character: str) -> None:
        if character not in self.available:
            raise ValueError(f"{character!r} is not in the deck")
        if character in self._used_set:
            raise ValueError(f"{character!r} was already used")
        self.used.append(character)
        self._used_set.add(character)
        logger.debug("Used %s (%d/%d)", character, len(self.used), len(self.available))

    def exclude(self, character: str) -> None:
        """Drop an unused character from the deck."""
        if character in self._used_set:
            raise ValueError(f"{character!r} was already used")
        if character in self.available:
            self.available.remove(character)
            logger.info("Excluded %s from deck, %d remain", character, len(self.available))

    def reset(self) -> None:
        self.used = []
        self._used_set = set()

    def progress(self) -> tuple[int, int]:
        return len(self.used), len(self.available)
