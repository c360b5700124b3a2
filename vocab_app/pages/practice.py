"""
Practice page rendering.
"""

from __future__ import annotations

import streamlit as st

from vocab_app.state import begin_question, get_controller
from vocab_app.ui import (
    render_question,
    render_result,
    render_session_complete,
    render_session_stats,
)
from vocab_core import FetchFailure, PracticeFilters, SessionController, SessionState, check_answer
from vocab_core.config import is_test_mode


def render_practice_page() -> None:
    """
    Render the practice flow (intro or active session).
    """
    controller = get_controller()
    if controller.state == SessionState.PRESENTING:
        _render_active_session(controller)
    else:
        _render_intro_screen(controller)

    if is_test_mode():
        st.caption("TEST MODE - Using test_vocab_trainer")


def _load_category_options(controller: SessionController) -> dict[str, str]:
    list_categories = getattr(controller.store, "list_categories", None)
    if list_categories is None:
        return {}
    try:
        categories = list_categories()
    except FetchFailure as exc:
        st.warning(f"Could not load categories: {exc}")
        return {}
    return {category["name"]: category["id"] for category in categories}


def _render_intro_screen(controller: SessionController) -> None:
    st.title("📚 Vocabulary Practice")
    if is_test_mode():
        st.warning("⚠️ **TEST MODE** - Using test_vocab_trainer (set TEST_MODE=false in .env for production)")

    if controller.stats.total_practiced > 0 or controller.last_error is not None:
        render_session_complete(controller)

    st.markdown("### Choose what to practice")
    col1, col2 = st.columns(2)
    with col1:
        include_words = st.checkbox("Words", value=controller.filters.include_words)
    with col2:
        include_verbs = st.checkbox("Verbs", value=controller.filters.include_verbs)

    category_options = _load_category_options(controller)
    selected_names = []
    if category_options:
        selected_names = st.multiselect(
            "Categories",
            list(category_options),
            help="Leave empty to practice all categories",
        )

    if not include_words and not include_verbs:
        st.info("Select words, verbs or both.")
        return

    if st.button("Start Practice", type="primary", use_container_width=True):
        filters = PracticeFilters(
            category_ids=frozenset(category_options[name] for name in selected_names),
            include_words=include_words,
            include_verbs=include_verbs,
        )
        with st.spinner("Loading practice items..."):
            controller.start(filters)
        begin_question(controller)
        if controller.is_complete:
            render_session_complete(controller)
        else:
            st.rerun()


def _render_active_session(controller: SessionController) -> None:
    if render_session_stats(controller):
        controller.end()
        begin_question(controller)
        st.rerun()

    if st.session_state.persist_warning:
        st.warning(st.session_state.persist_warning)

    item = controller.current_item
    config = controller.current_config

    if not st.session_state.show_result:
        answer = render_question(item, config)
        if answer is not None:
            st.session_state.answer_correct = check_answer(item, config, answer)
            st.session_state.show_result = True
            st.rerun()

        if st.button("Skip", use_container_width=True):
            controller.skip()
            begin_question(controller)
            st.rerun()
        return

    render_result(item, config, st.session_state.answer_correct)
    st.markdown("<br>", unsafe_allow_html=True)
    if st.button("Continue", type="primary", use_container_width=True):
        result = controller.submit_answer(st.session_state.answer_correct)
        if result is not None and result.persist_error is not None:
            st.session_state.persist_warning = (
                f"Progress not saved yet ({result.persist_error}); it will be retried."
            )
        elif result is not None:
            st.session_state.persist_warning = None
        begin_question(controller)
        st.rerun()
