"""
Translation Question UI

Renders the current question, the answer form and the result card.
"""

from __future__ import annotations

from typing import Optional

import streamlit as st

from vocab_app.ui.flashcard import render_flashcard
from vocab_app.ui.flashcard_style import (
    AUDIO_ONLY_STYLE,
    CORRECT_STYLE,
    INCORRECT_STYLE,
    QUESTION_STYLE,
)
from vocab_core import (
    AudioPlayback,
    ItemType,
    PracticeItem,
    QuestionConfig,
    build_prompt,
)


def _render_audio(item: PracticeItem, playback: AudioPlayback, autoplay: bool) -> None:
    if not item.audio_url:
        st.caption("🔈 No recording for this item")
        return

    if autoplay and playback.register_play():
        st.audio(item.audio_url, autoplay=True)
        return

    label = "🔊 Play" if playback.can_play else "🔇 No replays left"
    if st.button(label, disabled=not playback.can_play, key=f"play_{st.session_state.question_token}"):
        if playback.register_play():
            st.audio(item.audio_url, autoplay=True)


def render_question(item: PracticeItem, config: QuestionConfig) -> Optional[str]:
    """
    Render the question card and answer form.

    Returns:
        The submitted answer text, or None if nothing was submitted
    """
    prompt = build_prompt(item, config)
    kind = "Word" if item.type == ItemType.WORD else "Verb"
    corner = f"Level {config.level} · {kind} · Score {item.learning_score}"

    if st.session_state.audio_only:
        render_flashcard(
            main_text=f"Listen and translate to {prompt.answer_language.name}",
            corner_text=corner,
            style=AUDIO_ONLY_STYLE,
        )
    else:
        subtitle_parts = []
        if config.show_plural_form and item.plural_form:
            subtitle_parts.append(f"Plural: {item.plural_form}")
        if config.show_examples and item.example_sentence:
            subtitle_parts.append(f'"{item.example_sentence}"')
        render_flashcard(
            main_text=prompt.shown_text,
            subtitle=" · ".join(subtitle_parts),
            corner_text=corner,
            style=QUESTION_STYLE,
        )

    autoplay = st.session_state.autoplay_pending
    st.session_state.autoplay_pending = False
    _render_audio(item, st.session_state.audio_playback, autoplay)

    st.caption(f"Translate to **{prompt.answer_language.name}**")
    with st.form(key=f"answer_form_{st.session_state.question_token}", clear_on_submit=False):
        answer = st.text_input(
            "Answer",
            placeholder=f"Type your answer in {prompt.answer_language.name}...",
            label_visibility="collapsed",
        )
        submitted = st.form_submit_button("Check", type="primary", use_container_width=True)

    return answer if submitted else None


def render_result(item: PracticeItem, config: QuestionConfig, is_correct: bool) -> None:
    """Render the result card after an answer was checked."""
    prompt = build_prompt(item, config)
    render_flashcard(
        main_text=prompt.expected_answer,
        subtitle="Correct!" if is_correct else f"{prompt.shown_text} → {prompt.expected_answer}",
        corner_text="✓" if is_correct else "✗",
        style=CORRECT_STYLE if is_correct else INCORRECT_STYLE,
    )
