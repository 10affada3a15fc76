"""Data classes for the quiz domain model."""
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class QuizType(str, Enum):
    HIRAGANA = "hiragana"
    KATAKANA = "katakana"
    KANJI = "kanji"


class QuizMode(str, Enum):
    CHARACTER_TO_ROMAJI = "character-to-romaji"
    ROMAJI_TO_CHARACTER = "romaji-to-character"
    MEANING_TO_CHARACTER = "meaning-to-character"


JLPT_LEVELS = (1, 2, 3, 4, 5)
KANJI_GRADES = (1, 2, 3, 4, 5, 6, 8)


@dataclass
class CatalogEntry:
    character: str
    romaji: str = ""
    meanings: list[str] = field(default_factory=list)
    on_readings: list[str] = field(default_factory=list)
    kun_readings: list[str] = field(default_factory=list)
    name_readings: list[str] = field(default_factory=list)
    grade: Optional[int] = None
    jlpt: Optional[int] = None
    placeholder: bool = False  # stands in for an entry the service could not return

    @property
    def has_reading(self) -> bool:
        return bool(self.name_readings or self.on_readings)

    @property
    def is_quizzable(self) -> bool:
        """True when the entry has a meaning and a name or on reading."""
        return bool(self.meanings) and self.has_reading


@dataclass
class QuizConfig:
    quiz_type: QuizType = QuizType.HIRAGANA
    quiz_mode: QuizMode = QuizMode.CHARACTER_TO_ROMAJI
    jlpt_level: Optional[int] = None
    kanji_grade: Optional[int] = None

    @property
    def key(self) -> str:
        return f"{self.quiz_type.value}|{self.quiz_mode.value}|{self.jlpt_level or ''}|{self.kanji_grade or ''}"


@dataclass(frozen=True)
class Question:
    character: str  # deck character this question was built from
    prompt: str
    expected_answer: str
    quiz_type: QuizType
    meaning: Optional[str] = None
    reading: Optional[str] = None
    meanings: tuple[str, ...] = ()
    on_readings: tuple[str, ...] = ()
    kun_readings: tuple[str, ...] = ()
    name_readings: tuple[str, ...] = ()


def calculate_accuracy(correct: int, total: int) -> int:
    """Whole-number percentage, rounding halves up. Zero when nothing was answered."""
    if total <= 0:
        return 0
    return math.floor(correct / total * 100 + 0.5)


@dataclass
class SessionStats:
    correct: int = 0
    incorrect: int = 0
    total: int = 0

    def record(self, is_correct: bool) -> None:
        self.total += 1
        if is_correct:
            self.correct += 1
        else:
            self.incorrect += 1

    def accuracy(self) -> int:
        return calculate_accuracy(self.correct, self.total)

    def reset(self) -> None:
        self.correct = 0
        self.incorrect = 0
        self.total = 0
