import pytest
from types import SimpleNamespace
from unittest.mock import patch

from jp_tutor.app import SessionExitRequested, cmd_cache, cmd_chat, run_quiz_session, session_prompt
from jp_tutor.cache import get_cache_info, set_cached
from jp_tutor.db import init_db
from jp_tutor.models import CatalogEntry
from jp_tutor.quiz import QuizSession, apply_catalog


def _kana_session():
    session = QuizSession()
    apply_catalog(session, session.config.key, [CatalogEntry("あ", romaji="a"), CatalogEntry("い", romaji="i")])
    return session


def test_session_exit_requested_is_exception():
    with pytest.raises(SessionExitRequested):
        raise SessionExitRequested()


def test_session_prompt_raises_on_q():
    with patch("jp_tutor.app.Prompt.ask", return_value="q"):
        with pytest.raises(SessionExitRequested):
            session_prompt("test prompt")


def test_session_prompt_raises_on_menu():
    with patch("jp_tutor.app.Prompt.ask", return_value=" MENU "):
        with pytest.raises(SessionExitRequested):
            session_prompt("test prompt")


def test_session_prompt_returns_normal_input():
    with patch("jp_tutor.app.Prompt.ask", return_value="ka"):
        assert session_prompt("test prompt") == "ka"


def test_run_quiz_session_completes_deck():
    session = _kana_session()

    def answer(*args, **kwargs):
        return session.current.expected_answer

    with patch("jp_tutor.app.Prompt.ask", side_effect=answer):
        run_quiz_session(session)
    assert session.completed
    assert session.stats.correct == 2
    assert session.stats.total == 2


def test_run_quiz_session_ignores_blank_input():
    session = _kana_session()
    answers = iter(["", "wrong", "   ", "wrong"])
    with patch("jp_tutor.app.Prompt.ask", side_effect=lambda *a, **k: next(answers)):
        run_quiz_session(session)
    assert session.stats.total == 2
    assert session.stats.correct == 0


def test_run_quiz_session_exits_on_q_and_resumes():
    """Leaving mid-deck keeps the unanswered question for the next visit."""
    session = _kana_session()
    with patch("jp_tutor.app.Prompt.ask", side_effect=["wrong", "q"]):
        with pytest.raises(SessionExitRequested):
            run_quiz_session(session)
    pending = session.current
    assert pending is not None and not session.answered
    assert session.stats.total == 1

    with patch("jp_tutor.app.Prompt.ask", side_effect=[pending.expected_answer]):
        run_quiz_session(session)
    assert session.completed
    assert session.stats.correct == 1
    assert session.stats.total == 2


def test_run_quiz_session_empty_deck():
    session = QuizSession()
    with patch("jp_tutor.app.Prompt.ask") as mock_ask:
        run_quiz_session(session)
    mock_ask.assert_not_called()
    assert not session.completed


def test_cmd_cache_disabled():
    with patch("jp_tutor.app.Prompt.ask") as mock_ask:
        cmd_cache(SimpleNamespace(cache_path=None))
    mock_ask.assert_not_called()


def test_cmd_cache_clears_on_confirm(tmp_db):
    init_db(tmp_db)
    set_cached(tmp_db, "kanji_猫", {"kanji": "猫"})
    with patch("jp_tutor.app.Prompt.ask", return_value="y"):
        cmd_cache(SimpleNamespace(cache_path=tmp_db))
    assert get_cache_info(tmp_db)["total_items"] == 0


def test_cmd_cache_keeps_on_decline(tmp_db):
    init_db(tmp_db)
    set_cached(tmp_db, "kanji_猫", {"kanji": "猫"})
    with patch("jp_tutor.app.Prompt.ask", return_value="n"):
        cmd_cache(SimpleNamespace(cache_path=tmp_db))
    assert get_cache_info(tmp_db)["total_items"] == 1


def test_cmd_chat_relays_until_q():
    replies = []
    chat = SimpleNamespace(
        settings=SimpleNamespace(gemini_api_key="k"), reply=lambda m: replies.append(m) or "ok",
    )
    with patch("jp_tutor.app.Prompt.ask", side_effect=["猫", "", "犬", "q"]):
        with pytest.raises(SessionExitRequested):
            cmd_chat(chat)
    assert replies == ["猫", "犬"]
