"""1_Lesson.py — Lesson quiz: header with progress and hearts."""
import streamlit as st

from lingo_ui.api_client import APIError, get_quiz
from lingo_ui.modals import render_hearts_modal, render_practice_modal
from lingo_ui.models import QuizPayload
from lingo_ui.quiz import Quiz, clear_session
from lingo_ui.stores import get_modal_stores

st.set_page_config(page_title="Lesson", page_icon="📚", layout="wide")

# ── Auth guard ─────────────────────────────────────────────────────────────
if not st.session_state.get("access_token"):
    st.warning("Please sign in first.")
    st.page_link("pages/0_Login.py", label="👉 Go to Login")
    st.stop()

modals = get_modal_stores(st.session_state)

# ── Lesson picker ──────────────────────────────────────────────────────────
lesson_id = st.number_input("Lesson", min_value=1, step=1, value=1)

previous = st.session_state.get("current_lesson_id")
if previous is not None and previous != lesson_id:
    clear_session(st.session_state, previous)
st.session_state["current_lesson_id"] = lesson_id

try:
    payload = QuizPayload.from_dict(get_quiz(int(lesson_id), st.session_state["access_token"]))
except APIError as e:
    st.error(str(e))
    st.stop()

quiz = Quiz.from_payload(payload, state=st.session_state)
quiz.render()

quiz.prompt_hearts_modal(modals.hearts)

render_hearts_modal(modals.hearts)
render_practice_modal(modals.practice)

# ── Challenges ──────────────────────────────────────────────────────────────
if not quiz.challenges:
    st.info("This lesson has no challenges yet.")

for challenge in quiz.challenges:
    mark = "✅" if challenge.completed else "⬜"
    with st.expander(f"{mark} {challenge.question}", expanded=not challenge.completed):
        for option in challenge.options:
            st.markdown(f"- {option.text}")

if st.button("What is practice?", key="open-practice-modal"):
    modals.practice.open()
    st.rerun()
