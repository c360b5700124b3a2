"""
Pool overview page rendering.
"""

from __future__ import annotations

import streamlit as st

from vocab_app.state import get_controller
from vocab_core.analytics import build_pool_overview, pool_dataframe


def render_overview_page() -> None:
    controller = get_controller()

    st.subheader("Practice Pool")
    st.caption(f"User: {st.session_state.user_id}")

    if controller.total_items == 0:
        st.info("Start a practice session to see its pool here.")
        return

    overview = build_pool_overview(controller.pool)

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Items", f"{overview.total:,}")
    with col2:
        st.metric("Words / Verbs", f"{overview.words} / {overview.verbs}")
    with col3:
        st.metric("Never Practiced", f"{overview.never_practiced:,}")
    with col4:
        st.metric("Avg. Score", f"{overview.average_score:.1f}")

    st.markdown("### Items per Level")
    st.bar_chart(overview.level_counts.rename("items").to_frame())

    st.markdown("### Up Next")
    st.caption("Lowest effective score first; the next question is drawn from the top five.")
    st.dataframe(pool_dataframe(controller.pool).head(20), hide_index=True, use_container_width=True)
