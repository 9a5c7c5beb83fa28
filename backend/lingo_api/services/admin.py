"""
Admin allowlist.

Public API
----------
    is_admin() -> bool            – checks the caller of the current request
    is_allowed(user_id) -> bool   – checks an identity directly
    admin_required                – view decorator, 403 for non-admins

The caller identity comes from the JWT in the current request. A request
without a token is simply "not admin"; it is not treated as an error.
"""

from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify
from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request

log = logging.getLogger(__name__)

ADMIN_USER_IDS = frozenset({"3f1c9a52-7d4e-4b8a-9c61-2e5d0f8b7a13"})


def is_allowed(user_id: str | None) -> bool:
    if not user_id:
        return False
    return user_id in ADMIN_USER_IDS


def current_user_id() -> str | None:
    """Identity of the caller, or None when no access token was sent."""
    verify_jwt_in_request(optional=True)
    return get_jwt_identity()


def is_admin() -> bool:
    return is_allowed(current_user_id())


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        user_id = current_user_id()
        if not is_allowed(user_id):
            log.info("admin access denied for user=%s", user_id)
            return jsonify({"error": "admin access required"}), 403
        return view(*args, **kwargs)

    return wrapper
