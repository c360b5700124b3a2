"""
Flashcard UI Component

Question and result cards are plain HTML blocks; every piece of item text
is escaped before it is embedded.
"""

from __future__ import annotations

from html import escape

import streamlit as st

from vocab_app.ui.flashcard_style import CARD_LAYOUT, MUTED_COLOR, QUESTION_STYLE, FlashcardStyle


def _badge(text: str) -> str:
    if not text:
        return ""
    return (
        '<span style="position: absolute; top: 12px; right: 18px; '
        f'font-size: 0.85em; color: {MUTED_COLOR};">{escape(text)}</span>'
    )


def _hint(text: str, style: FlashcardStyle) -> str:
    if not text:
        return ""
    font_style = "italic" if style.hint_italic else "normal"
    return (
        f'<p style="margin: 14px 0 0; font-size: 1.15em; color: {MUTED_COLOR}; '
        f'font-style: {font_style}; overflow-wrap: anywhere;">{escape(text)}</p>'
    )


def render_flashcard(
    main_text: str,
    subtitle: str = "",
    corner_text: str = "",
    style: FlashcardStyle | None = None,
) -> None:
    """
    Render a card with a headline, an optional hint line and a corner badge.

    Args:
        main_text: Word shown to the user (or the audio-only instruction)
        subtitle: Plural form, example sentence or correction
        corner_text: Level / type / score badge
        style: Card preset (default: question card)
    """
    style = style or QUESTION_STYLE
    headline = (
        f'<h1 style="margin: 0; font-size: {style.text_size}; color: {style.text_color}; '
        f'line-height: 1.3; overflow-wrap: anywhere;">{escape(main_text)}</h1>'
    )
    st.markdown(
        f'<div style="{CARD_LAYOUT} background-color: {style.background}; '
        f'border-left: 6px solid {style.accent};">'
        f"{_badge(corner_text)}{headline}{_hint(subtitle, style)}</div>",
        unsafe_allow_html=True,
    )
