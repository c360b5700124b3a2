"""
Card presets for questions and answer feedback.
"""

from __future__ import annotations

from dataclasses import dataclass


CARD_LAYOUT = (
    "padding: 32px 24px; border-radius: 14px; min-height: 200px; "
    "display: flex; flex-direction: column; align-items: center; "
    "justify-content: center; position: relative; text-align: center;"
)
MUTED_COLOR = "#6b6b6b"


@dataclass(frozen=True)
class FlashcardStyle:
    """Colors and sizes for one kind of card."""
    background: str
    accent: str                 # left border; marks question vs. outcome
    text_size: str = "2.4em"
    text_color: str = "#1f1f1f"
    hint_italic: bool = True


QUESTION_STYLE = FlashcardStyle(background="#f0f2f6", accent="#4a6cf7")

# Prompt text is an instruction, not the word itself
AUDIO_ONLY_STYLE = FlashcardStyle(
    background="#f0f2f6",
    accent="#9b59b6",
    text_size="1.4em",
    text_color=MUTED_COLOR,
)

CORRECT_STYLE = FlashcardStyle(
    background="#e7f6ec",
    accent="#2e9d5b",
    text_size="2.1em",
    hint_italic=False,
)

INCORRECT_STYLE = FlashcardStyle(
    background="#fdecec",
    accent="#d64545",
    text_size="2.1em",
    hint_italic=False,
)
