"""
Auth API — the identity provider for the rest of the app.

Endpoints
---------
POST  /api/auth/register   – create an account, returns token pair
POST  /api/auth/login      – exchange credentials for a token pair
POST  /api/auth/refresh    – new access token from a refresh token
GET   /api/auth/me         – the signed-in user (with admin flag)

Token identity is the user id; lingo_api.services.admin reads it back.
"""

import logging
import uuid

from flask import Blueprint, request, jsonify
from flask_jwt_extended import (
    create_access_token,
    create_refresh_token,
    jwt_required,
    get_jwt_identity,
)
from lingo_api.extensions import db
from lingo_api.db.models.user import User
from lingo_api.services.admin import is_allowed

log = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__, url_prefix="/api/auth")

_MIN_PASSWORD_LENGTH = 8


# ── Register ────────────────────────────────────────────────────────────────

@auth_bp.post("/register")
def register():
    email, password, data = _read_credentials()
    username = (data.get("username") or "").strip() or None

    if not email or not password:
        return jsonify({"error": "email and password are required"}), 400
    if len(password) < _MIN_PASSWORD_LENGTH:
        return jsonify(
            {"error": f"password must be at least {_MIN_PASSWORD_LENGTH} characters"}
        ), 400

    if User.query.filter_by(email=email).first():
        return jsonify({"error": "email already registered"}), 409
    if username and User.query.filter_by(username=username).first():
        return jsonify({"error": "username already taken"}), 409

    user = User(id=str(uuid.uuid4()), email=email, username=username)
    user.set_password(password)
    db.session.add(user)
    db.session.commit()
    log.info("registered user=%s", user.id)

    return jsonify({"message": "Account created", **_issue_tokens(user)}), 201


# ── Login ────────────────────────────────────────────────────────────────────

@auth_bp.post("/login")
def login():
    email, password, _ = _read_credentials()

    if not email or not password:
        return jsonify({"error": "email and password are required"}), 400

    user = User.query.filter_by(email=email).first()
    if not user or not user.check_password(password):
        return jsonify({"error": "invalid credentials"}), 401
    if not user.is_active:
        return jsonify({"error": "account is disabled"}), 403

    return jsonify(_issue_tokens(user)), 200


# ── Refresh ──────────────────────────────────────────────────────────────────

@auth_bp.post("/refresh")
@jwt_required(refresh=True)
def refresh():
    access_token = create_access_token(identity=get_jwt_identity())
    return jsonify({"access_token": access_token}), 200


# ── Me ───────────────────────────────────────────────────────────────────────

@auth_bp.get("/me")
@jwt_required()
def me():
    user = db.session.get(User, get_jwt_identity())
    if not user:
        return jsonify({"error": "user not found"}), 404
    return jsonify({"user": _user_dict(user)}), 200


# ── Helpers ──────────────────────────────────────────────────────────────────

def _read_credentials():
    data = request.get_json(silent=True) or {}
    email = (data.get("email") or "").strip().lower()
    password = data.get("password") or ""
    return email, password, data


def _issue_tokens(user: User) -> dict:
    return {
        "access_token": create_access_token(identity=user.id),
        "refresh_token": create_refresh_token(identity=user.id),
        "user": _user_dict(user),
    }


def _user_dict(user: User) -> dict:
    return {
        "id": user.id,
        "email": user.email,
        "username": user.username,
        "created_at": user.created_at.isoformat(),
        "is_active": user.is_active,
        "is_admin": is_allowed(user.id),
    }
