from datetime import datetime, timedelta, timezone

import pytest

from vocab_core import FetchFailure, ItemType, Language, PersistFailure, PracticeItem


NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)

ENGLISH = {"code": "en", "name": "English"}
DUTCH = {"code": "nl", "name": "Dutch"}


class ScriptedRandom:
    """random.Random stand-in returning queued values."""

    def __init__(self, randoms=(), indexes=()):
        self.randoms = list(randoms)
        self.indexes = list(indexes)

    def random(self):
        return self.randoms.pop(0) if self.randoms else 0.0

    def randrange(self, stop):
        index = self.indexes.pop(0) if self.indexes else 0
        assert 0 <= index < stop
        return index


class FakeStore:
    """In-memory store recording every persisted outcome."""

    def __init__(self, records=None, fail_fetch=False, fail_persist=False):
        self.records = list(records or [])
        self.fail_fetch = fail_fetch
        self.fail_persist = fail_persist
        self.persisted = []
        self.fetch_calls = []

    def fetch_eligible_items(self, filters):
        self.fetch_calls.append(filters)
        if self.fail_fetch:
            raise FetchFailure("store unavailable")
        return [dict(record) for record in self.records]

    def persist_outcome(self, item_id, item_type, update):
        if self.fail_persist:
            raise PersistFailure("write rejected", item_id=item_id)
        self.persisted.append((item_id, item_type, update))


class Clock:
    """Mutable clock for tests that move time forward."""

    def __init__(self, now=NOW):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


def make_record(item_id, item_type="word", score=0, last_practiced=None, count=0, **extra):
    record = {
        "id": item_id,
        "type": item_type,
        "translation": f"{item_id}-translation",
        "learning_score": score,
        "last_practiced": last_practiced,
        "practice_count": count,
        "source_language": ENGLISH,
        "target_language": DUTCH,
        "categories": [],
    }
    if item_type == "verb":
        record["infinitive"] = f"{item_id}-infinitive"
    else:
        record["word"] = f"{item_id}-word"
    record.update(extra)
    return record


def make_item(item_id, score=0, last_practiced=None, count=0, item_type=ItemType.WORD, **extra):
    fields = {
        "target_text": f"{item_id}-target",
        "translation_text": f"{item_id}-translation",
        "source_language": Language(**ENGLISH),
        "target_language": Language(**DUTCH),
    }
    fields.update(extra)
    return PracticeItem(
        id=item_id,
        type=item_type,
        learning_score=score,
        last_practiced=last_practiced,
        practice_count=count,
        **fields,
    )


@pytest.fixture
def clock():
    return Clock()
