"""
Question prompts and answer checking.
"""

from __future__ import annotations

from dataclasses import dataclass

from vocab_core.constants import QuestionDirection
from vocab_core.items import Language, PracticeItem
from vocab_core.question_config import QuestionConfig


@dataclass(frozen=True)
class QuestionPrompt:
    """What the user sees and what they are expected to type."""
    shown_text: str
    expected_answer: str
    shown_language: Language
    answer_language: Language


def build_prompt(item: PracticeItem, config: QuestionConfig) -> QuestionPrompt:
    """
    Resolve which side of the pair is shown for the config's direction.
    """
    if config.direction == QuestionDirection.TARGET_TO_SOURCE:
        return QuestionPrompt(
            shown_text=item.target_text,
            expected_answer=item.translation_text,
            shown_language=item.target_language,
            answer_language=item.source_language,
        )
    return QuestionPrompt(
        shown_text=item.translation_text,
        expected_answer=item.target_text,
        shown_language=item.source_language,
        answer_language=item.target_language,
    )


def normalize_answer(text: str) -> str:
    return text.strip().lower()


def check_answer(item: PracticeItem, config: QuestionConfig, answer: str) -> bool:
    """
    Compare a typed answer with the expected one.

    Case and surrounding whitespace are ignored. The plural form of a word
    is accepted as well.
    """
    given = normalize_answer(answer)
    if not given:
        return False
    if given == normalize_answer(build_prompt(item, config).expected_answer):
        return True
    return bool(item.plural_form) and given == normalize_answer(item.plural_form)
