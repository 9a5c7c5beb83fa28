"""
Lessons API

Endpoints
---------
GET   /api/lessons/<lesson_id>/quiz   – initial quiz state for the caller
POST  /api/lessons/progress           – start progress (hearts) for the caller

All routes require a valid JWT access token (Bearer in Authorization header).
"""

from __future__ import annotations

import logging

from flask import Blueprint, jsonify
from flask_jwt_extended import get_jwt_identity, jwt_required

from lingo_api.services.quiz import (
    build_quiz_payload,
    get_lesson,
    get_or_create_user_progress,
    get_user_progress,
)

log = logging.getLogger(__name__)

lessons_bp = Blueprint("lessons", __name__, url_prefix="/api/lessons")


# ── GET /api/lessons/<lesson_id>/quiz ─────────────────────────────────────────

@lessons_bp.get("/<int:lesson_id>/quiz")
@jwt_required()
def get_quiz(lesson_id: int):
    """
    Return everything the quiz view is constructed with.

    Response (JSON):
        lesson_id, initial_hearts, initial_percentage,
        initial_lesson_challenges, user_subscription
    """
    user_id = get_jwt_identity()

    lesson = get_lesson(lesson_id)
    if lesson is None:
        log.warning("quiz requested for unknown lesson=%s by user=%s", lesson_id, user_id)
        return jsonify({"error": "lesson not found"}), 404

    progress = get_user_progress(user_id)
    if progress is None:
        return jsonify({"error": "no progress for user, start a course first"}), 404

    return jsonify(build_quiz_payload(lesson, user_id, progress)), 200


# ── POST /api/lessons/progress ────────────────────────────────────────────────

@lessons_bp.post("/progress")
@jwt_required()
def start_progress():
    """Create the caller's progress row with full hearts if it does not exist."""
    user_id = get_jwt_identity()
    progress, created = get_or_create_user_progress(user_id)
    body = {
        "user_id": progress.user_id,
        "hearts":  progress.hearts,
        "points":  progress.points,
    }
    return jsonify(body), 201 if created else 200
