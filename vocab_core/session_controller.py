"""
Practice session lifecycle.

Orchestrates pool fetch, next-item selection, answer submission and
session statistics. Answers update the local pool first; the write-back to
the store is queued and flushed separately so a failing store never blocks
the session.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Optional, Protocol
import logging
import random
import threading

from pydantic import ValidationError

from vocab_core.constants import ItemType
from vocab_core.errors import FetchFailure, PersistFailure
from vocab_core.items import PracticeFilters, PracticeItem, ScoreUpdate
from vocab_core.pool import ItemPool
from vocab_core.question_config import QuestionConfig, generate_question_config
from vocab_core.scoring import get_question_level, utc_now


logger = logging.getLogger(__name__)


class ItemStore(Protocol):
    """Persistence collaborator used by the controller."""

    def fetch_eligible_items(self, filters: PracticeFilters) -> list[dict]:
        ...

    def persist_outcome(self, item_id: str, item_type: ItemType, update: ScoreUpdate) -> None:
        ...


class SessionState(str, Enum):
    IDLE = "idle"               # No item loaded (not started, or empty pool)
    PRESENTING = "presenting"   # Current item and config set


@dataclass
class SessionStats:
    """Answer counts for one practice session (skips not counted)."""
    correct: int = 0
    incorrect: int = 0
    total_practiced: int = 0

    @property
    def accuracy(self) -> float:
        """Percentage of correct answers, 0 when nothing was answered."""
        if self.total_practiced == 0:
            return 0.0
        return self.correct * 100 / self.total_practiced

    def record(self, is_correct: bool) -> None:
        if is_correct:
            self.correct += 1
        else:
            self.incorrect += 1
        self.total_practiced += 1


@dataclass(frozen=True)
class PendingOutcome:
    """A score update waiting to be written to the store."""
    item_id: str
    item_type: ItemType
    update: ScoreUpdate

    @property
    def key(self) -> tuple[ItemType, str]:
        return (self.item_type, self.item_id)


@dataclass(frozen=True)
class AnswerResult:
    """What submit_answer did; persist_error is set on a failed write."""
    item: PracticeItem
    update: ScoreUpdate
    persisted: bool
    persist_error: Optional[PersistFailure] = None


class SessionController:
    """
    One practice session over an exclusively owned item pool.

    Args:
        store: Store providing eligible records and accepting outcomes
        rng: Random source for selection and question configs
        clock: Returns the current (aware) time
        persist_immediately: Flush each outcome right after answering; when
            False, outcomes wait for flush_pending() or end()
    """

    def __init__(
        self,
        store: ItemStore,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], datetime]] = None,
        persist_immediately: bool = True
    ):
        self.store = store
        self.rng = rng or random.Random()
        self.clock = clock or utc_now
        self.persist_immediately = persist_immediately

        self.pool = ItemPool(clock=self.clock, rng=self.rng)
        self.stats = SessionStats()
        self.state = SessionState.IDLE
        self.current_item: Optional[PracticeItem] = None
        self.current_config: Optional[QuestionConfig] = None
        self.started = False
        self.last_error: Optional[Exception] = None

        # Latest unwritten update per item; newer answers replace older ones
        self._pending: dict[tuple[ItemType, str], PendingOutcome] = {}

        self._filters = PracticeFilters()
        self._answer_lock = threading.Lock()

    # ---- Read-only views ----

    @property
    def total_items(self) -> int:
        return len(self.pool)

    @property
    def is_complete(self) -> bool:
        """True when a started session has nothing to present (empty pool)."""
        return self.started and self.state == SessionState.IDLE and self.current_item is None

    @property
    def pending(self) -> list[PendingOutcome]:
        """Outcomes not yet written to the store, oldest first."""
        return list(self._pending.values())

    @property
    def filters(self) -> PracticeFilters:
        return self._filters

    # ---- Lifecycle ----

    def start(self, filters: Optional[PracticeFilters] = None) -> SessionState:
        """
        Start a new session: fetch eligible items, build the pool and load
        the first question.
        """
        self._filters = filters or PracticeFilters()
        self.stats = SessionStats()
        self.last_error = None
        self.started = True
        self._load_pool()
        self.load_next_item()
        return self.state

    def refetch(self) -> SessionState:
        """Rebuild the pool with the current filters, keeping session stats."""
        self._load_pool()
        self.load_next_item()
        return self.state

    def _load_pool(self) -> None:
        filters = self._filters
        try:
            records = self.store.fetch_eligible_items(filters)
            self.pool = ItemPool.from_records(
                records, filters=filters, clock=self.clock, rng=self.rng
            )
        except (FetchFailure, ValidationError) as exc:
            logger.warning("Failed to fetch practice items, using empty pool: %s", exc)
            self.last_error = exc
            self.pool = ItemPool(clock=self.clock, rng=self.rng)
            return
        logger.info("Loaded %d practice items", len(self.pool))

    def load_next_item(self) -> None:
        """
        Select the next item and build its question config, or go idle.
        """
        item = self.pool.select_next()
        if item is None:
            self.current_item = None
            self.current_config = None
            self.state = SessionState.IDLE
            return

        level = get_question_level(item.learning_score)
        self.current_item = item
        self.current_config = generate_question_config(level, item.has_plural, self.rng)
        self.state = SessionState.PRESENTING

    def end(self) -> None:
        """End the session, flushing any queued outcomes."""
        self.flush_pending()
        self.current_item = None
        self.current_config = None
        self.state = SessionState.IDLE

    # ---- Answers ----

    def submit_answer(self, is_correct: bool) -> Optional[AnswerResult]:
        """
        Record an answer for the current item and move to the next one.

        Returns:
            AnswerResult, or None if no item is presented or another answer
            is still being processed
        """
        if not self._answer_lock.acquire(blocking=False):
            logger.warning("Answer ignored: previous answer still in progress")
            return None
        try:
            if self.state != SessionState.PRESENTING or self.current_item is None:
                return None

            item = self.current_item
            update = self.pool.apply_answer_outcome(item.id, is_correct, item.type)
            self.stats.record(is_correct)
            outcome = PendingOutcome(item.id, item.type, update)
            self._pending.pop(outcome.key, None)
            self._pending[outcome.key] = outcome

            persist_error = None
            if self.persist_immediately:
                persist_error = self._flush().get(outcome.key)

            self.load_next_item()
            return AnswerResult(
                item=item.with_update(update),
                update=update,
                persisted=self.persist_immediately and persist_error is None,
                persist_error=persist_error,
            )
        finally:
            self._answer_lock.release()

    def skip(self) -> None:
        """Move to another item without touching scores or stats."""
        if not self._answer_lock.acquire(blocking=False):
            return
        try:
            if self.state != SessionState.PRESENTING:
                return
            self.load_next_item()
        finally:
            self._answer_lock.release()

    # ---- Persistence ----

    def flush_pending(self) -> list[PersistFailure]:
        """
        Write queued outcomes to the store.

        Failed writes stay queued for the next flush; local scores are never
        rolled back. Only the latest update per item is ever written.

        Returns:
            The failures from this flush (empty if everything was written)
        """
        return list(self._flush().values())

    def _flush(self) -> dict[tuple[ItemType, str], PersistFailure]:
        failures: dict[tuple[ItemType, str], PersistFailure] = {}

        for outcome in list(self._pending.values()):
            try:
                self.store.persist_outcome(outcome.item_id, outcome.item_type, outcome.update)
            except PersistFailure as exc:
                logger.warning("Failed to persist outcome for %s: %s", outcome.item_id, exc)
                if exc.item_id is None:
                    exc.item_id = outcome.item_id
                failures[outcome.key] = exc
                continue
            # A newer answer may have replaced this entry meanwhile
            if self._pending.get(outcome.key) is outcome:
                del self._pending[outcome.key]

        if failures:
            self.last_error = list(failures.values())[-1]
        return failures
