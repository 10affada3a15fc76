# tests/test_integration.py
"""End-to-end test of the core workflow."""
from unittest.mock import Mock

from conftest import FakeKanjiClient, INU, MIZU, NEKO, NO_READING
from jp_tutor.dashboard import get_session_summary
from jp_tutor.kanji_api import KanjiClient
from jp_tutor.models import QuizMode, QuizType
from jp_tutor.quiz import (
    QuizSession, configure, load_deck, next_question, reset_stats, restart, submit_answer,
)
from jp_tutor.settings import Settings


def test_full_session_workflow():
    """Play a kana deck, switch to kanji, finish it and start over."""
    session = QuizSession()
    assert load_deck(session)
    assert len(session.deck.available) == 104

    # A few hiragana questions
    for _ in range(3):
        q = next_question(session)
        submit_answer(session, q.expected_answer)
    q = next_question(session)
    submit_answer(session, "not-a-kana")
    assert session.stats.correct == 3
    assert session.stats.total == 4
    assert session.stats.accuracy() == 75

    # Switch to JLPT N5 kanji; the score carries over
    client = FakeKanjiClient(
        entries=[NEKO, INU, MIZU, NO_READING],
        lists={"jlpt-5": ["猫", "犬", "水", "々"]},
    )
    configure(session, QuizType.KANJI, QuizMode.MEANING_TO_CHARACTER, jlpt_level=5)
    assert load_deck(session, client, workers=2)
    assert session.stats.total == 4
    seen = []
    while (q := next_question(session)) is not None:
        seen.append(q.character)
        assert submit_answer(session, q.character).correct
    assert sorted(seen) == sorted(["猫", "犬", "水"])
    assert session.completed
    assert "々" not in session.deck.available

    summary = get_session_summary(session)
    assert summary["total"] == 7
    assert summary["correct"] == 6
    assert summary["accuracy"] == 86
    assert summary["label"] == "Great job!"
    assert summary["progress"] == 100.0

    # Reset score only, then restart the whole quiz
    reset_stats(session)
    assert session.stats.total == 0
    assert session.completed
    assert restart(session, client, workers=2)
    assert not session.completed
    assert session.deck.used == []
    assert set(session.deck.available) == {"猫", "犬", "水", "々"}


def test_kanji_client_caches_between_sessions(tmp_db):
    """A second client on the same cache file needs no network."""
    response = Mock(ok=True, status_code=200)
    response.json.return_value = {
        "kanji": "猫", "meanings": ["cat"], "on_readings": ["ビョウ"],
        "kun_readings": ["ねこ"], "name_readings": [], "grade": 8, "jlpt": 2,
    }
    session = Mock()
    session.get.return_value = response
    settings = Settings(KANJI_API_BASE="https://kanji.test/v1")

    first = KanjiClient(settings=settings, cache_path=tmp_db, session=session)
    assert first.fetch_kanji("猫").meanings == ["cat"]

    offline = Mock()
    offline.get.side_effect = AssertionError("network used")
    second = KanjiClient(settings=settings, cache_path=tmp_db, session=offline)
    entry = second.fetch_kanji("猫")
    assert entry.on_readings == ["ビョウ"]
    assert session.get.call_count == 1
