"""
api_client.py — single HTTP client for all frontend → Flask communication.
Reads API_BASE_URL from .env (falls back to localhost:5000).
Callers pass the JWT access token kept in st.session_state.
"""
import os
import requests
from dotenv import load_dotenv

load_dotenv()

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000")


class APIError(Exception):
    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.status_code = status_code


def _headers(token: str | None = None) -> dict:
    h = {"Content-Type": "application/json"}
    if token:
        h["Authorization"] = f"Bearer {token}"
    return h


def _raise(resp: requests.Response) -> None:
    if not resp.ok:
        try:
            msg = resp.json().get("error", resp.text)
        except ValueError:
            msg = resp.text
        raise APIError(msg, resp.status_code)


# ── Auth ─────────────────────────────────────────────────────────────────────

def register(email: str, password: str, username: str | None = None) -> dict:
    resp = requests.post(
        f"{API_BASE_URL}/api/auth/register",
        json={"email": email, "password": password, "username": username},
        headers=_headers(),
        timeout=10,
    )
    _raise(resp)
    return resp.json()


def login(email: str, password: str) -> dict:
    resp = requests.post(
        f"{API_BASE_URL}/api/auth/login",
        json={"email": email, "password": password},
        headers=_headers(),
        timeout=10,
    )
    _raise(resp)
    return resp.json()


def refresh_token(refresh_tok: str) -> str:
    resp = requests.post(
        f"{API_BASE_URL}/api/auth/refresh",
        headers=_headers(refresh_tok),
        timeout=10,
    )
    _raise(resp)
    return resp.json()["access_token"]


def get_me(access_token: str) -> dict:
    return authed_get("/api/auth/me", access_token)["user"]


# ── Lessons ──────────────────────────────────────────────────────────────────

def get_quiz(lesson_id: int, access_token: str) -> dict:
    return authed_get(f"/api/lessons/{lesson_id}/quiz", access_token)


def start_progress(access_token: str) -> dict:
    return authed_post("/api/lessons/progress", access_token, {})


# ── Admin ────────────────────────────────────────────────────────────────────

def check_admin(access_token: str) -> bool:
    return bool(authed_get("/api/admin/me", access_token).get("is_admin"))


def list_admin_lessons(access_token: str) -> list:
    return authed_get("/api/admin/lessons", access_token)


# ── Generic authenticated helpers ────────────────────────────────────────────

def authed_get(path: str, access_token: str, params: dict | None = None):
    resp = requests.get(
        f"{API_BASE_URL}{path}",
        headers=_headers(access_token),
        params=params,
        timeout=30,
    )
    _raise(resp)
    return resp.json()


def authed_post(path: str, access_token: str, payload: dict):
    resp = requests.post(
        f"{API_BASE_URL}{path}",
        json=payload,
        headers=_headers(access_token),
        timeout=30,
    )
    _raise(resp)
    return resp.json()
