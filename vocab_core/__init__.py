"""
Vocabulary practice scheduling engine.

Picks which word or verb to practice next, scores items by time-decayed
priority, derives a difficulty level from the learning score and builds the
question configuration for that level.

Quick start:
    from vocab_core import SessionController, PracticeFilters
    from vocab_core.store import build_store

    controller = SessionController(build_store(user_id))
    controller.start(PracticeFilters(include_verbs=False))
    controller.submit_answer(is_correct=True)
"""

# Score model
from vocab_core.scoring import (
    apply_score_change,
    count_bonus,
    decay_points,
    effective_score,
    get_question_level,
    priority_key,
)

# Question configs and answers
from vocab_core.question_config import (
    AudioPlayback,
    QuestionConfig,
    generate_question_config,
    is_audio_only,
    should_autoplay,
)
from vocab_core.answers import QuestionPrompt, build_prompt, check_answer

# Items, pool and session
from vocab_core.constants import ItemType, QuestionDirection
from vocab_core.items import Language, PracticeFilters, PracticeItem, ScoreUpdate
from vocab_core.pool import ItemPool
from vocab_core.session_controller import (
    AnswerResult,
    ItemStore,
    SessionController,
    SessionState,
    SessionStats,
)

# Errors
from vocab_core.errors import FetchFailure, PersistFailure, VocabTrainerError


__all__ = [
    # Score model
    "apply_score_change",
    "count_bonus",
    "decay_points",
    "effective_score",
    "get_question_level",
    "priority_key",

    # Question configs
    "AudioPlayback",
    "QuestionConfig",
    "generate_question_config",
    "is_audio_only",
    "should_autoplay",
    "QuestionPrompt",
    "build_prompt",
    "check_answer",

    # Items and session
    "ItemType",
    "QuestionDirection",
    "Language",
    "PracticeFilters",
    "PracticeItem",
    "ScoreUpdate",
    "ItemPool",
    "AnswerResult",
    "ItemStore",
    "SessionController",
    "SessionState",
    "SessionStats",

    # Errors
    "FetchFailure",
    "PersistFailure",
    "VocabTrainerError",
]
