"""UI Components for the Vocabulary Trainer"""

from vocab_app.ui.flashcard import render_flashcard
from vocab_app.ui.question import render_question, render_result
from vocab_app.ui.session_stats import render_session_stats, render_session_complete

__all__ = [
    "render_flashcard",
    "render_question",
    "render_result",
    "render_session_stats",
    "render_session_complete",
]
