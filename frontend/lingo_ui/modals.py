"""Hearts and practice modals, drawn while their store is open."""
import streamlit as st

from lingo_ui.stores import ModalStore


def render_hearts_modal(store: ModalStore) -> None:
    if not store.is_open:
        return

    with st.container(border=True):
        st.markdown("### 💔 You ran out of hearts!")
        st.markdown(
            "<p style='color:#A7B0C0'>Get Pro for unlimited hearts, or purchase them in the store.</p>",
            unsafe_allow_html=True,
        )
        col_upgrade, col_dismiss = st.columns(2)
        with col_upgrade:
            if st.button("Get unlimited hearts", key="hearts-modal-upgrade"):
                store.close()
                st.switch_page("Home.py")
        with col_dismiss:
            if st.button("No thanks", key="hearts-modal-close"):
                store.close()
                st.rerun()


def render_practice_modal(store: ModalStore) -> None:
    if not store.is_open:
        return

    with st.container(border=True):
        st.markdown("### 🏋️ Practice lesson")
        st.markdown(
            "<p style='color:#A7B0C0'>Use practice lessons to regain hearts and points. "
            "You cannot lose hearts or points in practice lessons.</p>",
            unsafe_allow_html=True,
        )
        if st.button("I understand", key="practice-modal-close"):
            store.close()
            st.rerun()
