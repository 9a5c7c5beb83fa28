"""
Quiz loading.

Public API
----------
    get_lesson(lesson_id) -> Lesson | None
    get_user_progress(user_id) -> UserProgress | None
    get_or_create_user_progress(user_id) -> (UserProgress, created)
    get_user_subscription(user_id) -> UserSubscription | None
    lesson_percentage(challenges) -> float
    build_quiz_payload(lesson, user_id, progress) -> dict

The payload returned by build_quiz_payload is what the lesson page hands to
the quiz view:
    lesson_id                 : int
    initial_hearts            : int
    initial_percentage        : float – share of completed challenges, 0-100
    initial_lesson_challenges : list[dict] – ordered by challenge.order, each
                                with "completed" and "options"
    user_subscription         : {"is_active": bool} | None
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from lingo_api.db.models.challenge import Challenge, ChallengeOption
from lingo_api.db.models.lesson import Lesson
from lingo_api.db.models.user_progress import DEFAULT_HEARTS, UserProgress
from lingo_api.db.models.user_subscription import UserSubscription
from lingo_api.extensions import db

log = logging.getLogger(__name__)


# ── Lookups ───────────────────────────────────────────────────────────────────

def get_lesson(lesson_id: int) -> Lesson | None:
    return db.session.get(Lesson, lesson_id)


def get_user_progress(user_id: str) -> UserProgress | None:
    return db.session.get(UserProgress, user_id)


def get_or_create_user_progress(user_id: str) -> Tuple[UserProgress, bool]:
    progress = get_user_progress(user_id)
    if progress is not None:
        return progress, False

    progress = UserProgress(user_id=user_id, hearts=DEFAULT_HEARTS, points=0)
    db.session.add(progress)
    db.session.commit()
    log.info("created progress for user=%s", user_id)
    return progress, True


def get_user_subscription(user_id: str) -> UserSubscription | None:
    return UserSubscription.query.filter_by(user_id=user_id).first()


# ── Derived values ────────────────────────────────────────────────────────────

def _is_completed(challenge: Challenge, user_id: str) -> bool:
    rows = challenge.progress.filter_by(user_id=user_id).all()
    return bool(rows) and all(row.completed for row in rows)


def lesson_percentage(challenges: List[dict]) -> float:
    if not challenges:
        return 0.0
    done = sum(1 for c in challenges if c["completed"])
    return done / len(challenges) * 100


# ── Serialisation ─────────────────────────────────────────────────────────────

def _option_to_dict(option: ChallengeOption) -> dict:
    return {
        "id":          option.id,
        "challenge_id": option.challenge_id,
        "text":        option.text,
        "correct":     option.correct,
        "image_src":   option.image_src,
        "audio_src":   option.audio_src,
    }


def _challenge_to_dict(challenge: Challenge, user_id: str) -> dict:
    return {
        "id":        challenge.id,
        "lesson_id": challenge.lesson_id,
        "type":      challenge.type,
        "question":  challenge.question,
        "order":     challenge.order,
        "completed": _is_completed(challenge, user_id),
        "options":   [_option_to_dict(o) for o in challenge.options],
    }


def _subscription_to_dict(subscription: UserSubscription | None) -> dict | None:
    if subscription is None:
        return None
    return {"is_active": subscription.is_active}


def build_quiz_payload(lesson: Lesson, user_id: str, progress: UserProgress) -> dict:
    challenges = [_challenge_to_dict(c, user_id) for c in lesson.challenges]
    return {
        "lesson_id":                 lesson.id,
        "initial_hearts":            progress.hearts,
        "initial_percentage":        lesson_percentage(challenges),
        "initial_lesson_challenges": challenges,
        "user_subscription":         _subscription_to_dict(get_user_subscription(user_id)),
    }
