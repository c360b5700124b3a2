"""
Score Model - Priority and Difficulty

Pure functions computing how urgently an item should be practiced and how
hard its next question should be.

Key concepts:
- Learning score: persisted proficiency, +5 per correct answer, -3 per
  incorrect one, never below 0
- Effective score: learning score adjusted for time since last practice and
  practice count. Lower effective score = practiced sooner
- Level: difficulty tier 0-4 derived from the learning score
"""

from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional
import math

from vocab_core.constants import (
    COUNT_BONUS_CAP,
    COUNT_BONUS_PER_PRACTICE,
    CORRECT_SCORE_CHANGE,
    DECAY_PERIOD_HOURS,
    INCORRECT_SCORE_CHANGE,
    LEVEL_THRESHOLDS,
    MAX_LEVEL,
    MIN_LEARNING_SCORE,
    NEVER_PRACTICED_OFFSET,
)
from vocab_core.items import PracticeItem


def utc_now() -> datetime:
    """Default clock."""
    return datetime.now(timezone.utc)


def as_utc(timestamp: datetime) -> datetime:
    """Treat naive timestamps (e.g. read back from SQLite) as UTC."""
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp


def decay_points(last_practiced: datetime, now: Optional[datetime] = None) -> int:
    """
    One point of decay per full day since the last practice.

    Args:
        last_practiced: When the item was last answered
        now: Reference time (default: current UTC time)

    Returns:
        Number of whole decay periods elapsed (0 for future timestamps)
    """
    now = as_utc(now or utc_now())
    hours_since = (now - as_utc(last_practiced)).total_seconds() / 3600.0
    return max(0, math.floor(hours_since / DECAY_PERIOD_HOURS))


def count_bonus(practice_count: int) -> int:
    """Bonus for frequently practiced items, capped at COUNT_BONUS_CAP."""
    return min(practice_count * COUNT_BONUS_PER_PRACTICE, COUNT_BONUS_CAP)


def effective_score(
    learning_score: int,
    last_practiced: Optional[datetime],
    practice_count: int,
    now: Optional[datetime] = None
) -> int:
    """
    Calculate the time-decayed priority score of an item.

    Formula:
    - never practiced: -1000 + learning_score
    - otherwise: learning_score - days_since_practice + min(2 * count, 20)

    Args:
        learning_score: Persisted learning score
        last_practiced: Timestamp of last answer, or None if never practiced
        practice_count: Number of completed answers
        now: Reference time (default: current UTC time)

    Returns:
        Effective score (lower = higher priority)
    """
    if last_practiced is None:
        return NEVER_PRACTICED_OFFSET + learning_score

    return learning_score - decay_points(last_practiced, now) + count_bonus(practice_count)


def item_effective_score(item: PracticeItem, now: Optional[datetime] = None) -> int:
    return effective_score(item.learning_score, item.last_practiced, item.practice_count, now)


def priority_key(item: PracticeItem, now: Optional[datetime] = None) -> tuple[int, int]:
    """
    Sort key for the practice pool.

    Never-practiced items come first regardless of arithmetic, then
    everything is ordered by effective score.
    """
    practiced = 0 if item.never_practiced else 1
    return (practiced, item_effective_score(item, now))


def get_question_level(learning_score: int) -> int:
    """
    Map a learning score to a difficulty level.

    <5 -> 0, <15 -> 1, <30 -> 2, <50 -> 3, otherwise 4.
    """
    for upper_bound, level in LEVEL_THRESHOLDS:
        if learning_score < upper_bound:
            return level
    return MAX_LEVEL


def score_change(is_correct: bool) -> int:
    return CORRECT_SCORE_CHANGE if is_correct else INCORRECT_SCORE_CHANGE


def apply_score_change(old_score: int, is_correct: bool) -> int:
    """New learning score after an answer, floored at zero."""
    return max(MIN_LEARNING_SCORE, old_score + score_change(is_correct))
