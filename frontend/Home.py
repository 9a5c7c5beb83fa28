"""
Home.py — Entry point of the Lingo Streamlit app.
Checks for a valid JWT; redirects to login if missing.
Shows the learner dashboard when authenticated.
"""
import streamlit as st

from lingo_ui.api_client import APIError, check_admin, start_progress

st.set_page_config(
    page_title="Lingo",
    page_icon="🦉",
    layout="wide",
)

# ── Custom CSS ─────────────────────────────────────────────────────────────
st.markdown(
    """
    <style>
    @import url('https://fonts.googleapis.com/css2?family=Nunito:wght@400;600;800&display=swap');

    html, body, [class*="css"] {
        font-family: 'Nunito', system-ui, sans-serif;
    }

    .dash-card {
        border: 2px solid #E5E7EB;
        border-radius: 14px;
        padding: 1.4rem 1.6rem;
    }
    .dash-card h3 { margin-bottom: 0.4rem; }
    .dash-card p  { color: #6B7280; margin: 0; font-size: 0.9rem; }

    .badge {
        display: inline-block;
        background: #22C55E;
        color: #FFFFFF;
        border-radius: 6px;
        padding: 0.15rem 0.6rem;
        font-size: 0.75rem;
        font-weight: 700;
        margin-left: 0.5rem;
    }
    div.stButton > button {
        background: #22C55E;
        color: #FFFFFF;
        border: none;
        border-bottom: 4px solid #16A34A;
        border-radius: 12px;
        font-weight: 800;
    }
    </style>
    """,
    unsafe_allow_html=True,
)


# ── Auth guard ─────────────────────────────────────────────────────────────────
def _require_auth():
    if not st.session_state.get("access_token"):
        st.warning("Please sign in to start learning.")
        st.page_link("pages/0_Login.py", label="👉 Go to Login")
        st.stop()


_require_auth()

token = st.session_state["access_token"]
user = st.session_state["user"]
display_name = user.get("username") or user["email"]

if "is_admin" not in st.session_state:
    try:
        st.session_state["is_admin"] = check_admin(token)
    except APIError:
        st.session_state["is_admin"] = False

# ── Sidebar ────────────────────────────────────────────────────────────────────
with st.sidebar:
    badge = "<span class='badge'>ADMIN</span>" if st.session_state["is_admin"] else ""
    st.markdown(
        f"<div style='color:#6B7280;font-size:0.8rem;margin-bottom:0.3rem'>Signed in as</div>"
        f"<div style='font-weight:700'>{display_name}{badge}</div>"
        f"<div style='color:#6B7280;font-size:0.75rem'>{user['email']}</div>",
        unsafe_allow_html=True,
    )
    st.divider()
    if st.button("Sign Out", key="sidebar-logout"):
        for k in list(st.session_state.keys()):
            st.session_state.pop(k, None)
        st.rerun()

# ── Dashboard header ──────────────────────────────────────────────────────────
st.markdown(f"## 👋 Welcome back, **{display_name}**")
st.divider()

col_learn, col_start = st.columns(2)

with col_learn:
    st.markdown(
        """
        <div class="dash-card">
          <h3>📚 Lessons</h3>
          <p>Pick up where you left off.</p>
        </div>
        """,
        unsafe_allow_html=True,
    )
    st.page_link("pages/1_Lesson.py", label="Continue learning →")

with col_start:
    st.markdown(
        """
        <div class="dash-card">
          <h3>❤️ Hearts</h3>
          <p>New here? Start your progress with a full set of hearts.</p>
        </div>
        """,
        unsafe_allow_html=True,
    )
    if st.button("Start learning", key="start-progress"):
        try:
            progress = start_progress(token)
            st.success(f"You have {progress['hearts']} hearts. Good luck!")
        except APIError as e:
            st.error(str(e))
