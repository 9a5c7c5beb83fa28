"""Tests for pages/1_Lesson.py – the lesson page, with the API stubbed."""

from __future__ import annotations

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from lingo_ui import api_client

LESSON_PAGE = str(Path(__file__).resolve().parents[1] / "frontend" / "pages" / "1_Lesson.py")


def quiz_response(hearts: int, subscription=None) -> dict:
    return {
        "lesson_id": 1,
        "initial_hearts": hearts,
        "initial_percentage": 0.0,
        "initial_lesson_challenges": [
            {
                "id": 1,
                "lesson_id": 1,
                "type": "SELECT",
                "question": "Which one is 'the man'?",
                "order": 1,
                "completed": False,
                "options": [{"id": 1, "challenge_id": 1, "text": "el hombre", "correct": True}],
            }
        ],
        "user_subscription": subscription,
    }


@pytest.fixture()
def open_lesson(monkeypatch):
    def _open(hearts: int, subscription=None) -> AppTest:
        monkeypatch.setattr(
            api_client, "get_quiz", lambda lesson_id, token: quiz_response(hearts, subscription)
        )
        at = AppTest.from_file(LESSON_PAGE)
        at.session_state["access_token"] = "tok"
        at.run()
        assert not at.exception
        return at

    return _open


def hearts_modal_open(at: AppTest) -> bool:
    return at.session_state["modal_stores"].hearts.is_open


class TestHeartsModal:
    def test_opens_when_out_of_hearts(self, open_lesson):
        at = open_lesson(hearts=0)
        assert hearts_modal_open(at) is True

    def test_no_thanks_dismisses(self, open_lesson):
        at = open_lesson(hearts=0)
        at.button(key="hearts-modal-close").click().run()
        assert hearts_modal_open(at) is False
        assert "hearts-modal-close" not in {b.key for b in at.button}

    def test_stays_closed_with_hearts(self, open_lesson):
        at = open_lesson(hearts=2)
        assert hearts_modal_open(at) is False

    def test_stays_closed_for_subscribers(self, open_lesson):
        at = open_lesson(hearts=0, subscription={"is_active": True})
        assert hearts_modal_open(at) is False


class TestPracticeModal:
    def test_opened_from_button(self, open_lesson):
        at = open_lesson(hearts=2)
        at.button(key="open-practice-modal").click().run()
        assert at.session_state["modal_stores"].practice.is_open is True
