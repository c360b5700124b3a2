"""
Session Statistics UI

Renders progress metrics and controls.
"""

import streamlit as st

from vocab_core import SessionController


def render_session_stats(controller: SessionController) -> bool:
    """
    Render session metrics and exit button.

    Returns:
        True if quit button was clicked, False otherwise
    """
    stats = controller.stats
    col1, col2, col3, col4, col5 = st.columns([2, 2, 2, 2, 1])

    with col1:
        st.metric("Correct", stats.correct)
    with col2:
        st.metric("Incorrect", stats.incorrect)
    with col3:
        st.metric("Accuracy", f"{stats.accuracy:.0f}%")
    with col4:
        st.metric("Pool", controller.total_items)
    with col5:
        st.markdown("<br>", unsafe_allow_html=True)  # Align with metrics
        if st.button("❌", help="Quit session", use_container_width=True):
            return True

    st.divider()
    return False


def render_session_complete(controller: SessionController) -> None:
    """Render completion message for an ended or empty session."""
    stats = controller.stats
    if stats.total_practiced > 0:
        st.success(f"🎉 Session complete! You practiced {stats.total_practiced} items.")
        st.info(f"Correct: {stats.correct} · Incorrect: {stats.incorrect} · Accuracy: {stats.accuracy:.0f}%")
    elif controller.last_error is not None:
        st.warning("Could not load practice items. Check your connection and try again.")
    else:
        st.info("No items match the selected filters.")
