"""
Question Config Generator

Derives presentation parameters (direction, hints, audio policy) from an
item's difficulty level. Levels 1-4 introduce 50/50 random choices drawn
from an injectable random source.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional
import random

from vocab_core.constants import (
    AUDIO_ONLY_MIN_LEVEL,
    AUTOPLAY_MAX_LEVEL,
    LEVEL_4_AUDIO_PLAY_LIMIT,
    MAX_LEVEL,
    QuestionDirection,
)
from vocab_core.items import PracticeItem


@dataclass(frozen=True)
class QuestionConfig:
    """
    Presentation parameters for one question.
    """
    level: int
    direction: QuestionDirection = QuestionDirection.TARGET_TO_SOURCE
    show_examples: bool = True
    show_plural_form: bool = True
    audio_auto_play: bool = True
    audio_play_limit: Optional[int] = None  # None = unlimited replays


_DEFAULT_RNG = random.Random()


def _coin(rng: random.Random) -> bool:
    return rng.random() < 0.5


def _random_direction(rng: random.Random) -> QuestionDirection:
    if _coin(rng):
        return QuestionDirection.TARGET_TO_SOURCE
    return QuestionDirection.SOURCE_TO_TARGET


def _random_plural(has_plural: bool, rng: random.Random) -> bool:
    # No draw is consumed when there is nothing to show
    return _coin(rng) if has_plural else False


def generate_question_config(
    level: int,
    has_plural: bool,
    rng: Optional[random.Random] = None
) -> QuestionConfig:
    """
    Build the question config for a difficulty level.

    Level | direction | examples | plural           | audio limit
    0     | target    | yes      | yes              | unlimited
    1     | target    | no       | 50/50 if plural  | unlimited
    2     | 50/50     | no       | 50/50 if plural  | unlimited
    3     | 50/50     | no       | no               | unlimited
    4     | 50/50     | no       | no               | 1

    Random draws happen in table order (plural before direction).

    Args:
        level: Difficulty level 0-4
        has_plural: Whether the item has a plural form to show
        rng: Random source (default: shared module instance)

    Returns:
        QuestionConfig for this question
    """
    if not 0 <= level <= MAX_LEVEL:
        raise ValueError(f"Unknown question level: {level}")

    rng = rng or _DEFAULT_RNG
    base = QuestionConfig(level=level)

    if level == 0:
        return base

    if level == 1:
        return replace(
            base,
            show_examples=False,
            show_plural_form=_random_plural(has_plural, rng),
        )

    if level == 2:
        show_plural = _random_plural(has_plural, rng)
        return replace(
            base,
            show_examples=False,
            show_plural_form=show_plural,
            direction=_random_direction(rng),
        )

    if level == 3:
        return replace(
            base,
            show_examples=False,
            show_plural_form=False,
            direction=_random_direction(rng),
        )

    return replace(
        base,
        show_examples=False,
        show_plural_form=False,
        direction=_random_direction(rng),
        audio_play_limit=LEVEL_4_AUDIO_PLAY_LIMIT,
    )


# ---- Presentation Helpers ----

def is_audio_only(
    config: QuestionConfig,
    item: PracticeItem,
    rng: Optional[random.Random] = None
) -> bool:
    """
    Decide whether the question is presented by audio alone (text hidden).

    Only possible from level 3, for target-to-source questions on items
    with recorded audio; then a 50/50 draw decides.
    """
    if config.level < AUDIO_ONLY_MIN_LEVEL:
        return False
    if config.direction != QuestionDirection.TARGET_TO_SOURCE or not item.audio_url:
        return False
    return _coin(rng or _DEFAULT_RNG)


def should_autoplay(config: QuestionConfig) -> bool:
    """Autoplay is requested at every level but only honoured up to level 3."""
    return config.audio_auto_play and config.level <= AUTOPLAY_MAX_LEVEL


class AudioPlayback:
    """
    Replay counter for a single question.
    """

    def __init__(self, limit: Optional[int] = None):
        self.limit = limit
        self.plays = 0

    @property
    def can_play(self) -> bool:
        return self.limit is None or self.plays < self.limit

    def register_play(self) -> bool:
        """
        Count one playback.

        Returns:
            True if the playback was allowed, False once the limit is reached
        """
        if not self.can_play:
            return False
        self.plays += 1
        return True
