"""Shared fixtures: a Flask app on TestingConfig with a fresh in-memory database."""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone

import pytest
from flask_jwt_extended import create_access_token

from lingo_api import create_app
from lingo_api.extensions import db as _db
from lingo_api.services.admin import ADMIN_USER_IDS


@pytest.fixture()
def app():
    app = create_app("testing")
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def db(app):
    return _db


@pytest.fixture()
def make_user(db):
    from lingo_api.db.models import User

    def _make(user_id: str | None = None, email: str | None = None) -> User:
        user = User(
            id=user_id or str(uuid.uuid4()),
            email=email or f"{uuid.uuid4().hex[:8]}@lingo.test",
        )
        user.set_password("password123")
        db.session.add(user)
        db.session.commit()
        return user

    return _make


@pytest.fixture()
def auth_headers():
    def _headers(user_id: str) -> dict:
        return {"Authorization": f"Bearer {create_access_token(identity=user_id)}"}

    return _headers


@pytest.fixture()
def admin_id() -> str:
    return next(iter(ADMIN_USER_IDS))


@pytest.fixture()
def lesson_with_challenges(db):
    """Lesson 'Greetings' with two challenges inserted out of order."""
    from lingo_api.db.models import Challenge, ChallengeOption, Lesson

    lesson = Lesson(title="Greetings", order=1)
    second = Challenge(type="SELECT", question="Which one is 'the man'?", order=2)
    first = Challenge(type="ASSIST", question="'hola'", order=1)
    second.options = [
        ChallengeOption(text="el hombre", correct=True),
        ChallengeOption(text="la mujer", correct=False),
    ]
    first.options = [
        ChallengeOption(text="hello", correct=True, audio_src="/es_hola.mp3"),
        ChallengeOption(text="goodbye", correct=False),
    ]
    lesson.challenges = [second, first]
    db.session.add(lesson)
    db.session.commit()
    return lesson


@pytest.fixture()
def future():
    return datetime.now(timezone.utc) + timedelta(days=30)
