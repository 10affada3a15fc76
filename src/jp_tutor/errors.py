"""Exceptions raised by the quiz engine and its collaborators."""


class TutorError(Exception):
    """Base class for recoverable tutor errors."""


class InvalidConfiguration(TutorError):
    """Quiz type, mode or level combination is not allowed."""


class CatalogUnavailable(TutorError):
    """A character list could not be produced by the kanji service."""


class EntryLookupFailed(TutorError):
    def __init__(self, character: str, reason: str = ""):
        self.character = character
        super().__init__(f"Failed to fetch kanji data for {character}" + (f": {reason}" if reason else ""))


class NoReadingAvailable(TutorError):
    def __init__(self, character: str):
        self.character = character
        super().__init__(f"Kanji {character} has no readings")


class ChatServiceFailure(TutorError):
    """The chat model could not produce a reply."""


class DeckNotInProgress(TutorError):
    """A pick was requested from a deck that is empty or completed."""
