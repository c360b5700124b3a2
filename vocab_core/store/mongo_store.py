"""
MongoDB-backed item store.

Words and verbs live in separate collections; each document embeds its
languages and categories:

    {"id": ..., "user_id": ..., "word": "huis", "translation": "house",
     "source_language": {"code": "en", "name": "English"},
     "target_language": {"code": "nl", "name": "Dutch"},
     "categories": [{"id": ..., "name": "Home"}],
     "learning_score": 0, "last_practiced": None, "practice_count": 0}
"""

from __future__ import annotations

import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from vocab_core.config import get_mongo_db_name, get_mongo_uri
from vocab_core.constants import ItemType
from vocab_core.errors import FetchFailure, PersistFailure
from vocab_core.items import PracticeFilters, ScoreUpdate


logger = logging.getLogger(__name__)

COLLECTIONS = {
    ItemType.WORD: "words",
    ItemType.VERB: "verbs",
}

# Global connection pool (reused across requests)
_client: Optional[MongoClient] = None


# ---- Connection Management ----

def get_database() -> Database:
    """
    Get the vocabulary database.

    Uses a persistent client that's reused across requests to avoid a cold
    start on every query.
    """
    global _client

    if _client is None:
        _client = MongoClient(
            get_mongo_uri(),
            maxPoolSize=10,  # Connection pool size
            minPoolSize=1,   # Keep at least 1 connection alive
            maxIdleTimeMS=60000  # Keep connections alive for 60 seconds
        )
    return _client[get_mongo_db_name()]


class MongoItemStore:
    """
    Item store over the `words` and `verbs` collections.

    Args:
        user_id: Owner whose words and verbs are practiced
        database: Database handle (default: configured MongoDB)
    """

    def __init__(self, user_id: str, database: Optional[Database] = None):
        self.user_id = user_id
        self.database = database if database is not None else get_database()

    def _query(self, filters: PracticeFilters) -> dict:
        query: dict = {"user_id": self.user_id}
        if filters.category_ids:
            query["categories.id"] = {"$in": sorted(filters.category_ids)}
        return query

    def fetch_eligible_items(self, filters: PracticeFilters) -> list[dict]:
        """
        Get raw records for all words/verbs matching the filters.

        Raises:
            FetchFailure: if a query fails
        """
        wanted = []
        if filters.include_words:
            wanted.append(ItemType.WORD)
        if filters.include_verbs:
            wanted.append(ItemType.VERB)

        records: list[dict] = []
        try:
            for item_type in wanted:
                collection = self.database[COLLECTIONS[item_type]]
                for doc in collection.find(self._query(filters), {"_id": 0}):
                    records.append({**doc, "type": item_type.value})
        except PyMongoError as exc:
            raise FetchFailure(f"Could not load practice items: {exc}") from exc

        logger.debug("Fetched %d documents for user %s", len(records), self.user_id)
        return records

    def persist_outcome(self, item_id: str, item_type: ItemType, update: ScoreUpdate) -> None:
        """
        Write updated learning fields to the word or verb document.

        Raises:
            PersistFailure: if no document matched or the write fails
        """
        collection = self.database[COLLECTIONS[ItemType(item_type)]]
        try:
            result = collection.update_one(
                {"id": item_id, "user_id": self.user_id},
                {"$set": {
                    "learning_score": update.learning_score,
                    "last_practiced": update.last_practiced,
                    "practice_count": update.practice_count,
                }}
            )
        except PyMongoError as exc:
            raise PersistFailure(f"Could not save outcome: {exc}", item_id=item_id) from exc

        if result.matched_count == 0:
            raise PersistFailure(f"{ItemType(item_type).value} {item_id} not found", item_id=item_id)

    def list_categories(self) -> list[dict]:
        """
        Get all categories used by the user's words and verbs, sorted by name.

        Raises:
            FetchFailure: if the aggregation fails
        """
        pipeline = [
            {"$match": {"user_id": self.user_id}},
            {"$unwind": "$categories"},
            {"$group": {"_id": "$categories.id", "name": {"$first": "$categories.name"}}},
        ]
        found: dict[str, str] = {}
        try:
            for collection_name in COLLECTIONS.values():
                for doc in self.database[collection_name].aggregate(pipeline):
                    found.setdefault(doc["_id"], doc.get("name", ""))
        except PyMongoError as exc:
            raise FetchFailure(f"Could not load categories: {exc}") from exc

        return sorted(
            ({"id": category_id, "name": name} for category_id, name in found.items()),
            key=lambda category: category["name"]
        )
