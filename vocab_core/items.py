"""
Practice Items - Uniform view of words and verbs

A practice item is the scheduling-relevant projection of a persisted word or
verb record. Both kinds share one shape; `type` tells them apart.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional

from vocab_core.constants import ItemType


@dataclass(frozen=True)
class Language:
    """Language descriptor attached to an item."""
    code: str
    name: str


@dataclass(frozen=True)
class ScoreUpdate:
    """
    Learning fields written back to the store after an answer.
    """
    learning_score: int
    last_practiced: datetime
    practice_count: int


@dataclass(frozen=True)
class PracticeItem:
    """
    A word or verb in the practice pool.

    Only learning_score, last_practiced and practice_count change during a
    session; everything else is fixed for the item's lifetime.
    """
    id: str
    type: ItemType
    target_text: str
    translation_text: str
    source_language: Language
    target_language: Language

    # Learning state
    learning_score: int = 0
    last_practiced: Optional[datetime] = None  # None = never practiced
    practice_count: int = 0

    # Presentation extras
    plural_form: Optional[str] = None
    example_sentence: Optional[str] = None
    audio_url: Optional[str] = None  # None = UI falls back to speech synthesis

    categories: frozenset[str] = field(default_factory=frozenset)

    @property
    def key(self) -> tuple[str, str]:
        """Identity within the pool; ids are only unique per type."""
        return (self.type.value, self.id)

    @property
    def has_plural(self) -> bool:
        return bool(self.plural_form)

    @property
    def never_practiced(self) -> bool:
        return self.last_practiced is None

    def with_update(self, update: ScoreUpdate) -> PracticeItem:
        """Return a copy carrying the given learning fields."""
        return replace(
            self,
            learning_score=update.learning_score,
            last_practiced=update.last_practiced,
            practice_count=update.practice_count,
        )


@dataclass(frozen=True)
class PracticeFilters:
    """
    Which records are eligible for a practice session.

    An empty category_ids set means every category.
    """
    category_ids: frozenset[str] = frozenset()
    include_words: bool = True
    include_verbs: bool = True

    def matches(self, item: PracticeItem) -> bool:
        if item.type == ItemType.WORD and not self.include_words:
            return False
        if item.type == ItemType.VERB and not self.include_verbs:
            return False
        if self.category_ids and not (item.categories & self.category_ids):
            return False
        return True
