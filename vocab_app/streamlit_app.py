"""
Vocabulary Trainer - Main App

Streamlit UI for spaced-repetition practice of words and verbs.

Run with:
    streamlit run vocab_app/streamlit_app.py
"""

import streamlit as st

from vocab_app.router import PAGES
from vocab_app.state import ensure_session_state, init_database
from vocab_core.config import configure_logging


# ---- Page Setup ----

st.set_page_config(
    page_title="Vocabulary Trainer",
    page_icon="📚",
    layout="centered"
)

configure_logging()
init_database()
ensure_session_state()


# ---- Main App ----

def main():
    """Main app entry point."""
    tabs = st.tabs([page.title for page in PAGES])
    for tab, page in zip(tabs, PAGES):
        with tab:
            page.render()


if __name__ == "__main__":
    main()
