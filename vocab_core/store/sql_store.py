"""
SQL-backed item store.

Reads practice-eligible words and verbs for one user and writes answer
outcomes back to their rows.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from vocab_core.constants import ItemType
from vocab_core.errors import FetchFailure, PersistFailure
from vocab_core.items import PracticeFilters, ScoreUpdate
from vocab_core.store.database import get_session_factory
from vocab_core.store.models import Category, Language, Verb, Word


logger = logging.getLogger(__name__)

_MODELS = {
    ItemType.WORD: Word,
    ItemType.VERB: Verb,
}


def _language_record(language: Language) -> dict:
    return {"code": language.code, "name": language.name}


def _category_records(categories: list[Category]) -> list[dict]:
    return [
        {"id": category.id, "name": category.name, "color": category.color}
        for category in categories
    ]


def _learning_fields(row: Union[Word, Verb]) -> dict:
    return {
        "id": row.id,
        "translation": row.translation,
        "audio_url": row.audio_url,
        "learning_score": row.learning_score,
        "last_practiced": row.last_practiced,
        "practice_count": row.practice_count,
        "source_language": _language_record(row.source_language),
        "target_language": _language_record(row.target_language),
        "categories": _category_records(row.categories),
    }


def word_to_record(word: Word) -> dict:
    return {
        **_learning_fields(word),
        "type": ItemType.WORD.value,
        "word": word.word,
        "plural_form": word.plural_form,
        "example_sentence": word.example_sentence,
    }


def verb_to_record(verb: Verb) -> dict:
    return {
        **_learning_fields(verb),
        "type": ItemType.VERB.value,
        "infinitive": verb.infinitive,
        "is_irregular": verb.is_irregular,
    }


class SqlItemStore:
    """
    Item store over the SQL vocabulary tables.

    Args:
        user_id: Owner whose words and verbs are practiced
        session_factory: Session factory (default: configured database)
    """

    def __init__(self, user_id: str, session_factory: Optional[sessionmaker] = None):
        self.user_id = user_id
        self.session_factory = session_factory or get_session_factory()

    def _query(self, model, filters: PracticeFilters):
        query = select(model).where(model.user_id == self.user_id)
        if filters.category_ids:
            query = query.where(
                model.categories.any(Category.id.in_(sorted(filters.category_ids)))
            )
        return query

    def fetch_eligible_items(self, filters: PracticeFilters) -> list[dict]:
        """
        Get raw records for all words/verbs matching the filters.

        Raises:
            FetchFailure: if the database query fails
        """
        records: list[dict] = []
        try:
            with self.session_factory() as session:
                if filters.include_words:
                    words = session.scalars(self._query(Word, filters)).unique().all()
                    records.extend(word_to_record(word) for word in words)
                if filters.include_verbs:
                    verbs = session.scalars(self._query(Verb, filters)).unique().all()
                    records.extend(verb_to_record(verb) for verb in verbs)
        except SQLAlchemyError as exc:
            raise FetchFailure(f"Could not load practice items: {exc}") from exc

        logger.debug("Fetched %d records for user %s", len(records), self.user_id)
        return records

    def persist_outcome(self, item_id: str, item_type: ItemType, update: ScoreUpdate) -> None:
        """
        Write updated learning fields to the word or verb row.

        Raises:
            PersistFailure: if the row is missing or the write fails
        """
        model = _MODELS[ItemType(item_type)]
        try:
            with self.session_factory() as session:
                row = session.get(model, item_id)
                if row is None or row.user_id != self.user_id:
                    raise PersistFailure(f"{model.__name__} {item_id} not found", item_id=item_id)
                row.learning_score = update.learning_score
                row.last_practiced = update.last_practiced
                row.practice_count = update.practice_count
                session.commit()
        except SQLAlchemyError as exc:
            raise PersistFailure(f"Could not save outcome: {exc}", item_id=item_id) from exc

    def list_categories(self) -> list[dict]:
        """
        Get the user's categories for filter menus, sorted by name.

        Raises:
            FetchFailure: if the database query fails
        """
        try:
            with self.session_factory() as session:
                categories = session.scalars(
                    select(Category)
                    .where(Category.user_id == self.user_id)
                    .order_by(Category.name)
                ).all()
                return _category_records(categories)
        except SQLAlchemyError as exc:
            raise FetchFailure(f"Could not load categories: {exc}") from exc
