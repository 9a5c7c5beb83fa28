"""
0_Login.py — Sign in & create account.
This is page 0 in the Streamlit sidebar so it always appears first.
"""
import streamlit as st
from lingo_ui.api_client import login, register, APIError

st.set_page_config(page_title="Lingo — Login", page_icon="🦉", layout="centered")

# ── Redirect if already logged in ────────────────────────────────────────────
if st.session_state.get("access_token"):
    st.success("You are already logged in.")
    st.page_link("Home.py", label="Go to Dashboard →")
    st.stop()


def _sign_in(data: dict) -> None:
    st.session_state["access_token"] = data["access_token"]
    st.session_state["refresh_token"] = data["refresh_token"]
    st.session_state["user"] = data["user"]
    st.session_state["is_admin"] = bool(data["user"].get("is_admin"))


st.markdown("## 🦉 Lingo")
st.caption("Learn, practice and master new languages.")

tab_login, tab_register = st.tabs(["Sign In", "Create Account"])

# ── LOGIN ─────────────────────────────────────────────────────────────────────
with tab_login:
    with st.form("login_form"):
        email = st.text_input("Email", placeholder="you@example.com")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Sign In")

    if submitted:
        if not email or not password:
            st.error("Please fill in both fields.")
        else:
            try:
                _sign_in(login(email.strip().lower(), password))
                st.rerun()
            except APIError as e:
                st.error(str(e))

# ── REGISTER ──────────────────────────────────────────────────────────────────
with tab_register:
    with st.form("register_form"):
        r_email = st.text_input("Email", placeholder="you@example.com", key="r_email")
        r_username = st.text_input("Username (optional)", key="r_username")
        r_password = st.text_input("Password (min 8 chars)", type="password", key="r_pass")
        r_confirm = st.text_input("Confirm Password", type="password", key="r_confirm")
        r_submitted = st.form_submit_button("Create Account")

    if r_submitted:
        if not r_email or not r_password:
            st.error("Email and password are required.")
        elif r_password != r_confirm:
            st.error("Passwords do not match.")
        elif len(r_password) < 8:
            st.error("Password must be at least 8 characters.")
        else:
            try:
                _sign_in(
                    register(
                        r_email.strip().lower(),
                        r_password,
                        r_username.strip() or None,
                    )
                )
                st.rerun()
            except APIError as e:
                st.error(str(e))
