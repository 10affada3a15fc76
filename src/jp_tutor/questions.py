"""Turn a catalog entry into a question for the active quiz type and mode."""
from jp_tutor.errors import NoReadingAvailable
from jp_tutor.models import CatalogEntry, Question, QuizMode, QuizType

UNKNOWN = "Unknown"
MAX_MEANINGS = 3


def display_reading(entry: CatalogEntry) -> str | None:
    """Name reading first, then on reading, "name (on)" when both exist."""
    name = entry.name_readings[0] if entry.name_readings else None
    on = entry.on_readings[0] if entry.on_readings else None
    if name and on:
        return f"{name} ({on})"
    return name or on


def build_question(entry: CatalogEntry, quiz_type: QuizType, quiz_mode: QuizMode) -> Question:
    if quiz_type != QuizType.KANJI:
        if quiz_mode == QuizMode.ROMAJI_TO_CHARACTER:
            return Question(entry.character, entry.romaji, entry.character, quiz_type)
        return Question(entry.character, entry.character, entry.romaji, quiz_type)

    if entry.placeholder:
        return Question(
            entry.character, entry.character, UNKNOWN, quiz_type, meaning=UNKNOWN, reading=UNKNOWN,
        )

    reading = display_reading(entry)
    if reading is None:
        raise NoReadingAvailable(entry.character)
    meaning = ", ".join(entry.meanings[:MAX_MEANINGS])
    extras = dict(
        meaning=meaning,
        reading=reading,
        meanings=tuple(entry.meanings),
        on_readings=tuple(entry.on_readings),
        kun_readings=tuple(entry.kun_readings),
        name_readings=tuple(entry.name_readings),
    )
    if quiz_mode == QuizMode.MEANING_TO_CHARACTER:
        return Question(entry.character, meaning, entry.character, quiz_type, **extras)
    if quiz_mode == QuizMode.ROMAJI_TO_CHARACTER:
        return Question(entry.character, reading, entry.character, quiz_type, **extras)
    return Question(entry.character, entry.character, meaning, quiz_type, **extras)


def get_quiz_mode_label(quiz_mode: QuizMode, quiz_type: QuizType) -> str:
    if quiz_mode == QuizMode.CHARACTER_TO_ROMAJI:
        return "Character → Meaning" if quiz_type == QuizType.KANJI else "Character → Romaji"
    if quiz_mode == QuizMode.ROMAJI_TO_CHARACTER:
        return "Reading → Character" if quiz_type == QuizType.KANJI else "Romaji → Character"
    if quiz_mode == QuizMode.MEANING_TO_CHARACTER:
        return "Meaning → Character"
    return ""


def get_answer_label(quiz_mode: QuizMode, quiz_type: QuizType) -> str:
    """What the learner is asked to type."""
    if quiz_mode == QuizMode.CHARACTER_TO_ROMAJI:
        return "meaning" if quiz_type == QuizType.KANJI else "romaji"
    return "character"
