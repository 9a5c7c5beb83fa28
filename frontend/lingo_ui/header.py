"""Lesson header: exit button, progress bar and hearts."""
import streamlit as st


def render_header(hearts: int, percentage: float, has_active_subscription: bool) -> None:
    col_exit, col_progress, col_hearts = st.columns([1, 10, 2])

    with col_exit:
        if st.button("✖", key="exit-lesson", help="Exit lesson"):
            st.switch_page("Home.py")

    with col_progress:
        # st.progress only accepts 0..100
        st.progress(min(max(int(percentage), 0), 100))

    with col_hearts:
        hearts_label = "∞" if has_active_subscription else str(hearts)
        st.markdown(
            f"<div style='color:#F43F5E;font-weight:700;font-size:1.1rem'>❤️ {hearts_label}</div>",
            unsafe_allow_html=True,
        )
