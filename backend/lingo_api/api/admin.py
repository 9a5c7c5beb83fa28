"""
Admin API

Endpoints
---------
GET  /api/admin/me        – whether the caller is on the admin allowlist
GET  /api/admin/lessons   – lesson overview (admins only)
"""

from __future__ import annotations

from flask import Blueprint, jsonify

from lingo_api.db.models.lesson import Lesson
from lingo_api.services.admin import admin_required, is_admin

admin_bp = Blueprint("admin", __name__, url_prefix="/api/admin")


@admin_bp.get("/me")
def me():
    return jsonify({"is_admin": is_admin()}), 200


@admin_bp.get("/lessons")
@admin_required
def list_lessons():
    lessons = Lesson.query.order_by(Lesson.order.asc(), Lesson.id.asc()).all()
    return jsonify(
        [
            {
                "id":              lesson.id,
                "title":           lesson.title,
                "order":           lesson.order,
                "challenge_count": len(lesson.challenges),
            }
            for lesson in lessons
        ]
    ), 200
