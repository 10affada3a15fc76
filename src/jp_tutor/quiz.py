"""Quiz session engine: configuration, deck progression and answer recording."""
import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from jp_tutor.catalog import DEFAULT_FETCH_WORKERS, Catalog, load_catalog
from jp_tutor.checker import generate_feedback, is_correct
from jp_tutor.deck import DeckState, DeckTracker
from jp_tutor.errors import InvalidConfiguration, NoReadingAvailable
from jp_tutor.models import (
    JLPT_LEVELS, KANJI_GRADES, CatalogEntry, Question, QuizConfig, QuizMode, QuizType, SessionStats,
)
from jp_tutor.questions import build_question

logger = logging.getLogger(__name__)

_UNSET = object()


@dataclass
class QuizSession:
    config: QuizConfig = field(default_factory=QuizConfig)
    deck: DeckTracker = field(default_factory=DeckTracker)
    stats: SessionStats = field(default_factory=SessionStats)
    catalog: Optional[Catalog] = None
    current: Optional[Question] = None
    answered: bool = False
    completed: bool = False


@dataclass(frozen=True)
class AnswerResult:
    correct: bool
    feedback: str
    question: Question


def configure(session: QuizSession, quiz_type=None, quiz_mode=None, jlpt_level=_UNSET, kanji_grade=_UNSET) -> QuizConfig:
    """Apply a configuration change and drop the current deck.

    JLPT level and kanji grade exclude each other: setting one clears the
    other. Kana quizzes carry no level filter and fall back to
    character-to-romaji when meaning-to-character was selected. Stats are kept.
    """
    config = session.config
    new_type = QuizType(quiz_type) if quiz_type is not None else config.quiz_type
    new_mode = QuizMode(quiz_mode) if quiz_mode is not None else config.quiz_mode
    jlpt = config.jlpt_level if jlpt_level is _UNSET else jlpt_level
    grade = config.kanji_grade if kanji_grade is _UNSET else kanji_grade

    set_jlpt = jlpt_level is not _UNSET and jlpt_level is not None
    set_grade = kanji_grade is not _UNSET and kanji_grade is not None
    if set_jlpt and set_grade:
        raise InvalidConfiguration("Choose a JLPT level or a kanji grade, not both")
    if set_jlpt:
        grade = None
    elif set_grade:
        jlpt = None
    if jlpt is not None and jlpt not in JLPT_LEVELS:
        raise InvalidConfiguration(f"JLPT level must be one of {JLPT_LEVELS}")
    if grade is not None and grade not in KANJI_GRADES:
        raise InvalidConfiguration(f"Kanji grade must be one of {KANJI_GRADES}")

    if new_type != QuizType.KANJI:
        if new_mode == QuizMode.MEANING_TO_CHARACTER:
            if quiz_mode is not None:
                raise InvalidConfiguration("Meaning → Character is only available for kanji")
            new_mode = QuizMode.CHARACTER_TO_ROMAJI
        jlpt = grade = None

    session.config = QuizConfig(new_type, new_mode, jlpt, grade)
    session.deck = DeckTracker()
    session.catalog = None
    session.current = None
    session.answered = False
    session.completed = False
    logger.info("Configuration changed to %s", session.config.key)
    return session.config


def apply_catalog(session: QuizSession, config_key: str, entries: list[CatalogEntry], client=None) -> bool:
    """Install a loaded catalog unless the configuration changed meanwhile."""
    if config_key != session.config.key:
        logger.info("Discarding catalog for stale configuration %s", config_key)
        return False
    session.catalog = Catalog(session.config, entries, client)
    session.deck.initialize(session.catalog.characters)
    session.current = None
    session.answered = False
    session.completed = False
    return True


def load_deck(session: QuizSession, client=None, workers: int = DEFAULT_FETCH_WORKERS) -> bool:
    key = session.config.key
    entries = load_catalog(session.config, client, workers)
    return apply_catalog(session, key, entries, client)


def next_question(session: QuizSession, rng: random.Random | None = None) -> Question | None:
    """Build the next question, or None once the deck is used up.

    Kanji without a usable reading are excluded from the deck and another
    character is picked; they never count as used.
    """
    session.current = None
    session.answered = False
    while session.deck.state == DeckState.IN_PROGRESS:
        character = session.deck.pick_next(rng)
        entry = session.catalog.entry(character)
        try:
            question = build_question(entry, session.config.quiz_type, session.config.quiz_mode)
        except NoReadingAvailable as e:
            logger.info("%s, trying another", e)
            session.deck.exclude(character)
            continue
        session.deck.mark_used(character)
        session.current = question
        return question
    session.completed = session.deck.state == DeckState.COMPLETED
    if session.completed:
        logger.info("All %d characters completed", len(session.deck.available))
    return None


def submit_answer(session: QuizSession, user_input: str) -> AnswerResult | None:
    """Check an answer to the current question and record it once.

    Blank input and repeat submissions are ignored.
    """
    question = session.current
    if question is None or session.answered or not user_input.strip():
        return None
    correct = is_correct(user_input, question.expected_answer, question.quiz_type, session.config.quiz_mode)
    session.stats.record(correct)
    session.answered = True
    return AnswerResult(correct, generate_feedback(correct, question, session.config.quiz_mode), question)


def reset_stats(session: QuizSession) -> None:
    session.stats.reset()


def reset_deck(session: QuizSession) -> None:
    """Start the same deck over without reloading or touching stats."""
    session.deck.reset()
    session.current = None
    session.answered = False
    session.completed = False


def restart(session: QuizSession, client=None, workers: int = DEFAULT_FETCH_WORKERS) -> bool:
    """Start a new quiz: clear stats and reload the deck for the current configuration."""
    session.stats.reset()
    reset_deck(session)
    return load_deck(session, client, workers)
