"""
Tests for the practice session controller.

Tests cover:
- Session start with populated, empty and failing stores
- Answer submission updating pool, stats and store
- Skip leaving scores and stats untouched
- Persist failures keeping local state and retrying on flush
- Overlapping answers being ignored
"""

from datetime import timedelta

import pytest

from vocab_core import (
    ItemType,
    PracticeFilters,
    SessionController,
    SessionState,
    SessionStats,
)
from tests.conftest import NOW, FakeStore, ScriptedRandom, make_record


@pytest.fixture
def records():
    return [
        make_record("huis", score=20, last_practiced=NOW - timedelta(hours=30), count=4),
        make_record("lopen", item_type="verb", score=40, last_practiced=NOW - timedelta(hours=1), count=9),
    ]


def _controller(store, clock, **kwargs):
    return SessionController(store, rng=ScriptedRandom(), clock=clock, **kwargs)


class TestStart:

    def test_presents_first_item(self, records, clock):
        controller = _controller(FakeStore(records), clock)

        assert controller.start() == SessionState.PRESENTING
        assert controller.total_items == 2
        assert controller.current_item.id == "huis"
        # score 20 -> level 2
        assert controller.current_config.level == 2

    def test_empty_store_is_idle(self, clock):
        controller = _controller(FakeStore([]), clock)

        assert controller.start() == SessionState.IDLE
        assert controller.current_item is None
        assert controller.current_config is None
        assert controller.is_complete is True

    def test_fetch_failure_gives_empty_pool(self, records, clock):
        store = FakeStore(records, fail_fetch=True)
        controller = _controller(store, clock)

        assert controller.start() == SessionState.IDLE
        assert controller.total_items == 0
        assert controller.last_error is not None

    def test_malformed_record_gives_empty_pool(self, records, clock):
        records.append({"id": "broken", "type": "word"})
        controller = _controller(FakeStore(records), clock)

        assert controller.start() == SessionState.IDLE
        assert controller.total_items == 0

    def test_filters_passed_to_store(self, records, clock):
        store = FakeStore(records)
        controller = _controller(store, clock)
        filters = PracticeFilters(include_verbs=False)

        controller.start(filters)

        assert store.fetch_calls == [filters]
        assert controller.filters == filters
        assert [item.id for item in controller.pool] == ["huis"]

    def test_restart_resets_stats(self, records, clock):
        controller = _controller(FakeStore(records), clock)
        controller.start()
        controller.submit_answer(True)

        controller.start()

        assert controller.stats == SessionStats()


class TestSubmitAnswer:

    def test_correct_answer(self, records, clock):
        store = FakeStore(records)
        controller = _controller(store, clock)
        controller.start()

        result = controller.submit_answer(True)

        assert result.update.learning_score == 25
        assert result.update.practice_count == 5
        assert result.update.last_practiced == NOW
        assert result.persisted is True
        assert result.item.learning_score == 25
        assert controller.pool.get("huis").learning_score == 25
        assert store.persisted == [("huis", ItemType.WORD, result.update)]
        assert controller.pending == []

    def test_incorrect_answer(self, records, clock):
        controller = _controller(FakeStore(records), clock)
        controller.start()

        result = controller.submit_answer(False)

        assert result.update.learning_score == 17
        assert controller.stats.incorrect == 1

    def test_loads_next_item(self, records, clock):
        controller = _controller(FakeStore(records), clock)
        controller.start()

        controller.submit_answer(True)

        assert controller.state == SessionState.PRESENTING
        assert controller.current_item is not None

    def test_pool_size_unchanged(self, records, clock):
        controller = _controller(FakeStore(records), clock)
        controller.start()

        for is_correct in (True, False, True, True):
            controller.submit_answer(is_correct)

        assert controller.total_items == 2

    def test_stats_accuracy(self, clock):
        records = [make_record(f"w{n}") for n in range(3)]
        controller = _controller(FakeStore(records), clock)
        controller.start()

        for is_correct in [True] * 7 + [False] * 3:
            controller.submit_answer(is_correct)

        assert controller.stats.correct == 7
        assert controller.stats.incorrect == 3
        assert controller.stats.total_practiced == 10
        assert controller.stats.accuracy == 70

    def test_submit_when_idle_is_ignored(self, clock):
        controller = _controller(FakeStore([]), clock)
        controller.start()

        assert controller.submit_answer(True) is None
        assert controller.stats.total_practiced == 0

    def test_overlapping_submit_ignored(self, records, clock):
        class ReentrantStore(FakeStore):
            nested = "not called"

            def persist_outcome(self, item_id, item_type, update):
                self.nested = controller.submit_answer(True)
                super().persist_outcome(item_id, item_type, update)

        store = ReentrantStore(records)
        controller = _controller(store, clock)
        controller.start()

        result = controller.submit_answer(True)

        assert result is not None
        assert store.nested is None
        assert controller.stats.total_practiced == 1
        assert len(store.persisted) == 1


class TestSkip:

    def test_skip_changes_nothing(self, records, clock):
        store = FakeStore(records)
        controller = _controller(store, clock)
        controller.start()
        before = controller.pool.items

        controller.skip()

        assert controller.pool.items == before
        assert controller.stats == SessionStats()
        assert store.persisted == []
        assert controller.state == SessionState.PRESENTING

    def test_skip_can_pick_another_item(self, records, clock):
        controller = SessionController(
            FakeStore(records), rng=ScriptedRandom(indexes=[0, 1]), clock=clock
        )
        controller.start()
        assert controller.current_item.id == "huis"

        controller.skip()

        assert controller.current_item.id == "lopen"

    def test_skip_when_idle(self, clock):
        controller = _controller(FakeStore([]), clock)
        controller.start()
        controller.skip()
        assert controller.state == SessionState.IDLE


class TestPersistence:

    def test_persist_failure_keeps_local_update(self, records, clock):
        store = FakeStore(records, fail_persist=True)
        controller = _controller(store, clock)
        controller.start()

        result = controller.submit_answer(True)

        assert result.persisted is False
        assert result.persist_error is not None
        assert result.persist_error.item_id == "huis"
        assert controller.pool.get("huis").learning_score == 25
        assert controller.stats.correct == 1
        assert len(controller.pending) == 1
        assert controller.last_error is result.persist_error

    def test_flush_retries_failed_outcome(self, records, clock):
        store = FakeStore(records, fail_persist=True)
        controller = _controller(store, clock)
        controller.start()
        result = controller.submit_answer(True)

        store.fail_persist = False
        assert controller.flush_pending() == []

        assert controller.pending == []
        assert store.persisted == [("huis", ItemType.WORD, result.update)]

    def test_deferred_persistence(self, records, clock):
        store = FakeStore(records)
        controller = _controller(store, clock, persist_immediately=False)
        controller.start()

        result = controller.submit_answer(False)

        assert result.persisted is False
        assert result.persist_error is None
        assert store.persisted == []
        assert len(controller.pending) == 1

        controller.end()

        assert len(store.persisted) == 1
        assert controller.state == SessionState.IDLE

    def test_refetch_keeps_stats_and_sees_store_changes(self, records, clock):
        store = FakeStore(records)
        controller = _controller(store, clock)
        controller.start()
        controller.submit_answer(True)

        store.records.append(make_record("fiets"))
        controller.refetch()

        assert controller.total_items == 3
        assert controller.stats.total_practiced == 1
        # never practiced items come first
        assert controller.current_item.id == "fiets"


class FlakyStore(FakeStore):
    """Fails persist calls according to a plan, one entry per call."""

    def __init__(self, records, failure_plan):
        super().__init__(records)
        self.failure_plan = list(failure_plan)

    def persist_outcome(self, item_id, item_type, update):
        self.fail_persist = self.failure_plan.pop(0) if self.failure_plan else False
        super().persist_outcome(item_id, item_type, update)


class TestPendingQueue:

    def test_retry_writes_latest_update_only(self, clock):
        store = FlakyStore([make_record("a", score=20, count=4)], [True, True, False, False])
        controller = _controller(store, clock)
        controller.start()

        first = controller.submit_answer(True)
        second = controller.submit_answer(True)

        assert first.persist_error is not None
        assert second.persist_error is not None
        assert len(controller.pending) == 1

        assert controller.flush_pending() == []
        assert controller.flush_pending() == []

        local = controller.pool.get("a")
        assert local.learning_score == 30
        assert [update.learning_score for _, _, update in store.persisted] == [30]
        assert store.persisted[-1][2].practice_count == local.practice_count == 6
        assert controller.pending == []

    def test_queue_holds_one_entry_per_item(self, clock):
        store = FakeStore([make_record("a"), make_record("b")], fail_persist=True)
        controller = _controller(store, clock)
        controller.start()

        for _ in range(6):
            controller.submit_answer(False)

        assert len(controller.pending) <= 2
        assert len({outcome.key for outcome in controller.pending}) == len(controller.pending)

    def test_error_reported_for_current_answer_only(self, clock):
        records = [make_record("a"), make_record("b", score=40, last_practiced=NOW, count=10)]
        store = FlakyStore(records, [True, True, False])
        controller = SessionController(store, rng=ScriptedRandom(indexes=[0, 1]), clock=clock)
        controller.start()

        first = controller.submit_answer(True)
        assert first.item.id == "a"
        assert first.persist_error is not None

        # The queued "a" fails again; "b" itself is written
        second = controller.submit_answer(True)
        assert second.item.id == "b"
        assert second.persist_error is None
        assert second.persisted is True
        assert [outcome.item_id for outcome in controller.pending] == ["a"]


class TestMalformedFetch:

    @pytest.mark.parametrize("payload", [None, "garbage", ["garbage"], [None]])
    def test_unusable_payload_gives_empty_pool(self, clock, payload):
        class OddStore(FakeStore):
            def fetch_eligible_items(self, filters):
                return payload

        controller = _controller(OddStore(), clock)

        assert controller.start() == SessionState.IDLE
        assert controller.total_items == 0
        assert controller.last_error is not None
        assert controller.is_complete is True

    def test_record_without_type_rejected(self, clock):
        record = make_record("a")
        del record["type"]
        controller = _controller(FakeStore([record]), clock)

        assert controller.start() == SessionState.IDLE


class TestSessionFlags:

    def test_not_complete_before_start(self, clock):
        controller = _controller(FakeStore([]), clock)
        assert controller.is_complete is False

        controller.start()
        assert controller.is_complete is True

    def test_skip_ignored_while_answer_in_progress(self, records, clock):
        class SkippingStore(FakeStore):
            def persist_outcome(self, item_id, item_type, update):
                controller.skip()
                super().persist_outcome(item_id, item_type, update)

        store = SkippingStore(records)
        controller = SessionController(
            store, rng=ScriptedRandom(indexes=[0, 0, 1]), clock=clock
        )
        controller.start()

        result = controller.submit_answer(True)

        # The skip consumed no selection draw and left the answered item intact
        assert result.item.id == "huis"
        assert store.persisted[0][0] == "huis"
        assert controller.rng.indexes == [1]
