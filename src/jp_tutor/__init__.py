"""Japanese kana and kanji quiz with a vocabulary chatbot."""

__version__ = "0.1.0"
