# tests/test_questions.py
import pytest

from jp_tutor.errors import NoReadingAvailable
from jp_tutor.models import CatalogEntry, QuizMode, QuizType
from jp_tutor.questions import (
    build_question, display_reading, get_answer_label, get_quiz_mode_label,
)

A = CatalogEntry("あ", romaji="a")
KANJI = CatalogEntry(
    "日",
    meanings=["day", "sun", "Japan", "counter for days"],
    on_readings=["ニチ", "ジツ"],
    kun_readings=["ひ", "-び", "-か"],
    name_readings=["あ", "あき"],
)


def test_kana_character_to_romaji():
    q = build_question(A, QuizType.HIRAGANA, QuizMode.CHARACTER_TO_ROMAJI)
    assert (q.character, q.prompt, q.expected_answer) == ("あ", "あ", "a")
    assert q.quiz_type == QuizType.HIRAGANA
    assert q.meaning is None


def test_kana_romaji_to_character():
    q = build_question(CatalogEntry("シ", romaji="shi"), QuizType.KATAKANA, QuizMode.ROMAJI_TO_CHARACTER)
    assert (q.prompt, q.expected_answer) == ("shi", "シ")


def test_kanji_meaning_mode_uses_top_three_meanings():
    q = build_question(KANJI, QuizType.KANJI, QuizMode.CHARACTER_TO_ROMAJI)
    assert q.prompt == "日"
    assert q.expected_answer == "day, sun, Japan"
    assert q.meanings == ("day", "sun", "Japan", "counter for days")
    assert q.kun_readings == ("ひ", "-び", "-か")
    assert q.reading == "あ (ニチ)"


def test_kanji_reading_mode():
    q = build_question(KANJI, QuizType.KANJI, QuizMode.ROMAJI_TO_CHARACTER)
    assert q.prompt == "あ (ニチ)"
    assert q.expected_answer == "日"


def test_kanji_meaning_to_character():
    q = build_question(KANJI, QuizType.KANJI, QuizMode.MEANING_TO_CHARACTER)
    assert q.prompt == "day, sun, Japan"
    assert q.expected_answer == "日"


def test_display_reading_preference():
    assert display_reading(CatalogEntry("x", name_readings=["ねこ"])) == "ねこ"
    assert display_reading(CatalogEntry("x", on_readings=["スイ", "ズイ"])) == "スイ"
    assert display_reading(CatalogEntry("x", name_readings=["き"], on_readings=["モク"])) == "き (モク)"
    assert display_reading(CatalogEntry("x", kun_readings=["こ.む"])) is None


@pytest.mark.parametrize("mode", list(QuizMode))
def test_kanji_without_reading_raises(mode):
    entry = CatalogEntry("込", meanings=["crowded"], kun_readings=["こ.む"])
    with pytest.raises(NoReadingAvailable) as exc:
        build_question(entry, QuizType.KANJI, mode)
    assert exc.value.character == "込"


def test_placeholder_entry_builds_unknown_question():
    entry = CatalogEntry("謎", meanings=["Unknown"], placeholder=True)
    q = build_question(entry, QuizType.KANJI, QuizMode.ROMAJI_TO_CHARACTER)
    assert (q.prompt, q.expected_answer) == ("謎", "Unknown")


def test_build_is_deterministic():
    assert build_question(KANJI, QuizType.KANJI, QuizMode.CHARACTER_TO_ROMAJI) == \
        build_question(KANJI, QuizType.KANJI, QuizMode.CHARACTER_TO_ROMAJI)


def test_mode_labels():
    assert get_quiz_mode_label(QuizMode.CHARACTER_TO_ROMAJI, QuizType.KANJI) == "Character → Meaning"
    assert get_quiz_mode_label(QuizMode.CHARACTER_TO_ROMAJI, QuizType.HIRAGANA) == "Character → Romaji"
    assert get_quiz_mode_label(QuizMode.ROMAJI_TO_CHARACTER, QuizType.KANJI) == "Reading → Character"
    assert get_quiz_mode_label(QuizMode.ROMAJI_TO_CHARACTER, QuizType.KATAKANA) == "Romaji → Character"
    assert get_quiz_mode_label(QuizMode.MEANING_TO_CHARACTER, QuizType.KANJI) == "Meaning → Character"


def test_answer_labels():
    assert get_answer_label(QuizMode.CHARACTER_TO_ROMAJI, QuizType.KANJI) == "meaning"
    assert get_answer_label(QuizMode.CHARACTER_TO_ROMAJI, QuizType.HIRAGANA) == "romaji"
    assert get_answer_label(QuizMode.MEANING_TO_CHARACTER, QuizType.KANJI) == "character"
