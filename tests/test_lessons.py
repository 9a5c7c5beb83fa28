"""Tests for the quiz loading service and the lessons API."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from lingo_api.db.models import ChallengeProgress, UserProgress, UserSubscription
from lingo_api.db.models.user_progress import DEFAULT_HEARTS
from lingo_api.services.quiz import lesson_percentage


@pytest.fixture()
def learner(make_user, db):
    user = make_user()
    db.session.add(UserProgress(user_id=user.id, hearts=3))
    db.session.commit()
    return user


def _complete(db, user, challenge, completed=True):
    db.session.add(
        ChallengeProgress(user_id=user.id, challenge_id=challenge.id, completed=completed)
    )
    db.session.commit()


# ---------------------------------------------------------------------------
# lesson_percentage
# ---------------------------------------------------------------------------

class TestLessonPercentage:
    def test_empty_lesson(self):
        result = lesson_percentage([])
        assert result == 0
        assert isinstance(result, float)

    def test_none_completed(self):
        assert lesson_percentage([{"completed": False}, {"completed": False}]) == 0

    def test_partial(self):
        challenges = [{"completed": True}, {"completed": False}, {"completed": False}, {"completed": True}]
        assert lesson_percentage(challenges) == 50

    def test_all_completed(self):
        assert lesson_percentage([{"completed": True}]) == 100


# ---------------------------------------------------------------------------
# UserSubscription.is_active
# ---------------------------------------------------------------------------

class TestSubscriptionActive:
    def test_no_period_end(self):
        assert UserSubscription(user_id="u").is_active is False

    def test_future_period_end(self, future):
        assert UserSubscription(user_id="u", current_period_end=future).is_active is True

    def test_within_grace_day(self):
        now = datetime(2024, 5, 2, 12, 0, tzinfo=timezone.utc)
        sub = UserSubscription(user_id="u", current_period_end=now - timedelta(hours=12))
        assert sub.is_active_at(now) is True

    def test_after_grace_day(self):
        now = datetime(2024, 5, 2, 12, 0, tzinfo=timezone.utc)
        sub = UserSubscription(user_id="u", current_period_end=now - timedelta(days=2))
        assert sub.is_active_at(now) is False

    def test_naive_datetime_treated_as_utc(self):
        now = datetime(2024, 5, 2, 12, 0, tzinfo=timezone.utc)
        sub = UserSubscription(user_id="u", current_period_end=datetime(2024, 5, 10))
        assert sub.is_active_at(now) is True


# ---------------------------------------------------------------------------
# GET /api/lessons/<id>/quiz
# ---------------------------------------------------------------------------

class TestQuizEndpoint:
    def test_requires_token(self, client, lesson_with_challenges):
        r = client.get(f"/api/lessons/{lesson_with_challenges.id}/quiz")
        assert r.status_code == 401

    def test_unknown_lesson(self, client, learner, auth_headers):
        r = client.get("/api/lessons/999/quiz", headers=auth_headers(learner.id))
        assert r.status_code == 404
        assert r.get_json()["error"] == "lesson not found"

    def test_user_without_progress(self, client, make_user, auth_headers, lesson_with_challenges):
        user = make_user()
        r = client.get(
            f"/api/lessons/{lesson_with_challenges.id}/quiz", headers=auth_headers(user.id)
        )
        assert r.status_code == 404

    def test_initial_state(self, client, learner, auth_headers, lesson_with_challenges):
        r = client.get(
            f"/api/lessons/{lesson_with_challenges.id}/quiz", headers=auth_headers(learner.id)
        )
        assert r.status_code == 200
        body = r.get_json()
        assert body["lesson_id"] == lesson_with_challenges.id
        assert body["initial_hearts"] == 3
        assert body["initial_percentage"] == 0
        assert body["user_subscription"] is None

    def test_challenges_ordered_with_options(
        self, client, learner, auth_headers, lesson_with_challenges
    ):
        r = client.get(
            f"/api/lessons/{lesson_with_challenges.id}/quiz", headers=auth_headers(learner.id)
        )
        challenges = r.get_json()["initial_lesson_challenges"]
        assert [c["order"] for c in challenges] == [1, 2]
        assert challenges[0]["question"] == "'hola'"
        assert [o["text"] for o in challenges[0]["options"]] == ["hello", "goodbye"]
        assert challenges[0]["options"][0]["audio_src"] == "/es_hola.mp3"
        assert all(c["completed"] is False for c in challenges)

    def test_completion_and_percentage(
        self, client, db, learner, auth_headers, lesson_with_challenges
    ):
        first = next(c for c in lesson_with_challenges.challenges if c.order == 1)
        _complete(db, learner, first)
        r = client.get(
            f"/api/lessons/{lesson_with_challenges.id}/quiz", headers=auth_headers(learner.id)
        )
        body = r.get_json()
        assert [c["completed"] for c in body["initial_lesson_challenges"]] == [True, False]
        assert body["initial_percentage"] == 50

    def test_incomplete_progress_row_is_not_completion(
        self, client, db, learner, auth_headers, lesson_with_challenges
    ):
        first = next(c for c in lesson_with_challenges.challenges if c.order == 1)
        _complete(db, learner, first, completed=False)
        r = client.get(
            f"/api/lessons/{lesson_with_challenges.id}/quiz", headers=auth_headers(learner.id)
        )
        assert r.get_json()["initial_percentage"] == 0

    def test_other_users_progress_ignored(
        self, client, db, make_user, learner, auth_headers, lesson_with_challenges
    ):
        other = make_user()
        for challenge in lesson_with_challenges.challenges:
            _complete(db, other, challenge)
        r = client.get(
            f"/api/lessons/{lesson_with_challenges.id}/quiz", headers=auth_headers(learner.id)
        )
        assert r.get_json()["initial_percentage"] == 0

    def test_active_subscription(
        self, client, db, learner, auth_headers, lesson_with_challenges, future
    ):
        db.session.add(UserSubscription(user_id=learner.id, current_period_end=future))
        db.session.commit()
        r = client.get(
            f"/api/lessons/{lesson_with_challenges.id}/quiz", headers=auth_headers(learner.id)
        )
        assert r.get_json()["user_subscription"] == {"is_active": True}

    def test_expired_subscription(self, client, db, learner, auth_headers, lesson_with_challenges):
        expired = datetime.now(timezone.utc) - timedelta(days=10)
        db.session.add(UserSubscription(user_id=learner.id, current_period_end=expired))
        db.session.commit()
        r = client.get(
            f"/api/lessons/{lesson_with_challenges.id}/quiz", headers=auth_headers(learner.id)
        )
        assert r.get_json()["user_subscription"] == {"is_active": False}


# ---------------------------------------------------------------------------
# POST /api/lessons/progress
# ---------------------------------------------------------------------------

class TestStartProgress:
    def test_creates_with_default_hearts(self, client, make_user, auth_headers, db):
        user = make_user()
        r = client.post("/api/lessons/progress", headers=auth_headers(user.id))
        assert r.status_code == 201
        assert r.get_json()["hearts"] == DEFAULT_HEARTS
        assert db.session.get(UserProgress, user.id).points == 0

    def test_existing_progress_untouched(self, client, learner, auth_headers):
        r = client.post("/api/lessons/progress", headers=auth_headers(learner.id))
        assert r.status_code == 200
        assert r.get_json()["hearts"] == 3


class TestErrors:
    def test_unknown_route_is_json(self, client):
        r = client.get("/api/nope")
        assert r.status_code == 404
        assert r.get_json() == {"error": "not found"}
