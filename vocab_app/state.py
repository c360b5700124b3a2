"""
Streamlit session state and database initialization helpers.
"""

from __future__ import annotations

import streamlit as st

from vocab_core import (
    AudioPlayback,
    SessionController,
    is_audio_only,
    should_autoplay,
)
from vocab_core.config import get_default_user_id, get_store_backend
from vocab_core.store import build_store, init_db


def init_database() -> None:
    """
    Initialize database schema (cached per Streamlit server).
    """
    @st.cache_resource
    def _init_database() -> None:
        if get_store_backend() == "sql":
            init_db()

    _init_database()


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.
    """
    if "user_id" not in st.session_state:
        st.session_state.user_id = get_default_user_id()
    if "controller" not in st.session_state:
        st.session_state.controller = None
    if "question_token" not in st.session_state:
        st.session_state.question_token = 0
    if "show_result" not in st.session_state:
        st.session_state.show_result = False
    if "answer_correct" not in st.session_state:
        st.session_state.answer_correct = False
    if "audio_only" not in st.session_state:
        st.session_state.audio_only = False
    if "audio_playback" not in st.session_state:
        st.session_state.audio_playback = AudioPlayback()
    if "autoplay_pending" not in st.session_state:
        st.session_state.autoplay_pending = False
    if "persist_warning" not in st.session_state:
        st.session_state.persist_warning = None


def get_controller() -> SessionController:
    """
    Get the session controller for this browser session, creating it on
    first use.
    """
    if st.session_state.controller is None:
        store = build_store(st.session_state.user_id)
        st.session_state.controller = SessionController(store)
    return st.session_state.controller


def begin_question(controller: SessionController) -> None:
    """
    Reset per-question UI state for the controller's current item.
    """
    st.session_state.question_token += 1
    st.session_state.show_result = False
    st.session_state.answer_correct = False

    config = controller.current_config
    item = controller.current_item
    if item is None or config is None:
        st.session_state.audio_only = False
        st.session_state.audio_playback = AudioPlayback()
        st.session_state.autoplay_pending = False
        return

    st.session_state.audio_only = is_audio_only(config, item, controller.rng)
    st.session_state.audio_playback = AudioPlayback(config.audio_play_limit)
    st.session_state.autoplay_pending = should_autoplay(config)
