"""
Pydantic models for raw word/verb records returned by a store.

Stores hand back plain dicts shaped like the persisted rows; these models
validate them and project them into PracticeItems.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter, field_validator

from vocab_core.constants import ItemType
from vocab_core.items import Language, PracticeItem


class LanguageRecord(BaseModel):
    """Language descriptor (code + display name)."""
    code: str
    name: str

    def to_language(self) -> Language:
        return Language(code=self.code, name=self.name)


class CategoryRecord(BaseModel):
    """Category tag attached to a word or verb."""
    id: str
    name: str = ""
    color: Optional[str] = None


class _LearningRecord(BaseModel):
    """Fields shared by word and verb records."""
    id: str
    translation: str
    audio_url: Optional[str] = None
    learning_score: int = Field(default=0, ge=0)
    last_practiced: Optional[datetime] = None
    practice_count: int = Field(default=0, ge=0)
    source_language: LanguageRecord
    target_language: LanguageRecord
    categories: list[CategoryRecord] = Field(default_factory=list)

    @field_validator("last_practiced")
    @classmethod
    def _ensure_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        # SQLite and some drivers hand back naive timestamps
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    def _category_ids(self) -> frozenset[str]:
        return frozenset(category.id for category in self.categories)


class WordRecord(_LearningRecord):
    """A persisted vocabulary word."""
    type: Literal["word"] = "word"
    word: str
    plural_form: Optional[str] = None
    example_sentence: Optional[str] = None

    def to_practice_item(self) -> PracticeItem:
        return PracticeItem(
            id=self.id,
            type=ItemType.WORD,
            target_text=self.word,
            translation_text=self.translation,
            plural_form=self.plural_form or None,
            example_sentence=self.example_sentence or None,
            audio_url=self.audio_url or None,
            learning_score=self.learning_score,
            last_practiced=self.last_practiced,
            practice_count=self.practice_count,
            source_language=self.source_language.to_language(),
            target_language=self.target_language.to_language(),
            categories=self._category_ids(),
        )


class VerbRecord(_LearningRecord):
    """A persisted verb (infinitive + translation)."""
    type: Literal["verb"] = "verb"
    infinitive: str
    is_irregular: bool = False

    def to_practice_item(self) -> PracticeItem:
        # Verbs carry no plural form or example sentence
        return PracticeItem(
            id=self.id,
            type=ItemType.VERB,
            target_text=self.infinitive,
            translation_text=self.translation,
            audio_url=self.audio_url or None,
            learning_score=self.learning_score,
            last_practiced=self.last_practiced,
            practice_count=self.practice_count,
            source_language=self.source_language.to_language(),
            target_language=self.target_language.to_language(),
            categories=self._category_ids(),
        )


ItemRecord = Annotated[Union[WordRecord, VerbRecord], Field(discriminator="type")]

_RECORD_ADAPTER = TypeAdapter(ItemRecord)
_RECORDS_ADAPTER = TypeAdapter(list[ItemRecord])


def parse_record(raw: Any) -> Union[WordRecord, VerbRecord]:
    """
    Validate a raw store record.

    Raises:
        pydantic.ValidationError: if the record is not a mapping, is
            malformed, or its type is neither "word" nor "verb"
    """
    return _RECORD_ADAPTER.validate_python(raw)


def project_records(records: Any) -> list[PracticeItem]:
    """
    Validate raw records and project them into practice items.

    Raises:
        pydantic.ValidationError: if `records` is not a list of valid records
    """
    return [record.to_practice_item() for record in _RECORDS_ADAPTER.validate_python(records)]
