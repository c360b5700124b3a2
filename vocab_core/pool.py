"""
Item Pool - Session working set ordered by priority.

The pool holds every practice-eligible word and verb for one session,
sorted ascending by effective score. Selection picks uniformly among the
top few items so the single most urgent item is not shown over and over.
"""

from __future__ import annotations
from datetime import datetime
from typing import Callable, Iterator, Optional
import logging
import random

from vocab_core.constants import SELECTION_WINDOW, ItemType
from vocab_core.items import PracticeFilters, PracticeItem, ScoreUpdate
from vocab_core.schemas import project_records
from vocab_core.scoring import apply_score_change, priority_key, utc_now


logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class ItemPool:
    """
    Launch-scoped pool of practice items.

    Items are replaced (never removed) when their learning fields change;
    the whole pool is re-sorted after every update because `now` moves the
    decay term of every item.
    """

    def __init__(
        self,
        items: Optional[list[PracticeItem]] = None,
        clock: Optional[Clock] = None,
        rng: Optional[random.Random] = None,
        window: int = SELECTION_WINDOW
    ):
        self._clock = clock or utc_now
        self._rng = rng or random.Random()
        self.window = window
        self._items: list[PracticeItem] = list(items or [])
        self.sort()

    @classmethod
    def from_records(
        cls,
        records: list[dict],
        filters: Optional[PracticeFilters] = None,
        clock: Optional[Clock] = None,
        rng: Optional[random.Random] = None,
    ) -> ItemPool:
        """
        Build a pool from raw store records.

        Raises:
            pydantic.ValidationError: if any record is malformed
        """
        items = project_records(records)
        if filters is not None:
            items = [item for item in items if filters.matches(item)]
        return cls(items, clock=clock, rng=rng)

    # ---- Ordering ----

    def sort(self) -> None:
        """Re-sort all items by their current effective score (stable)."""
        now = self._clock()
        self._items.sort(key=lambda item: priority_key(item, now))

    @property
    def items(self) -> tuple[PracticeItem, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[PracticeItem]:
        return iter(list(self._items))

    # ---- Lookup ----

    def _index_of(self, item_id: str, item_type: Optional[ItemType] = None) -> int:
        matches = [
            index for index, item in enumerate(self._items)
            if item.id == item_id and (item_type is None or item.type == item_type)
        ]
        if not matches:
            raise KeyError(item_id)
        if len(matches) > 1:
            raise ValueError(f"Item id {item_id!r} is ambiguous; pass item_type")
        return matches[0]

    def get(self, item_id: str, item_type: Optional[ItemType] = None) -> PracticeItem:
        return self._items[self._index_of(item_id, item_type)]

    # ---- Selection ----

    def select_next(self) -> Optional[PracticeItem]:
        """
        Pick the next item to present.

        Returns:
            One of the `window` lowest-score items chosen uniformly, or None
            if the pool is empty
        """
        if not self._items:
            return None
        candidates = min(self.window, len(self._items))
        selected = self._items[self._rng.randrange(candidates)]
        logger.debug("Selected %s %s from top %d", selected.type.value, selected.id, candidates)
        return selected

    # ---- Updates ----

    def apply_answer_outcome(
        self,
        item_id: str,
        is_correct: bool,
        item_type: Optional[ItemType] = None
    ) -> ScoreUpdate:
        """
        Apply an answer to an item's learning fields and re-sort the pool.

        Args:
            item_id: Id of the answered item
            is_correct: Whether the answer was right
            item_type: Needed when a word and a verb share the id

        Returns:
            The updated learning fields (to be persisted)
        """
        index = self._index_of(item_id, item_type)
        item = self._items[index]

        update = ScoreUpdate(
            learning_score=apply_score_change(item.learning_score, is_correct),
            last_practiced=self._clock(),
            practice_count=item.practice_count + 1,
        )
        self._items[index] = item.with_update(update)
        self.sort()
        return update
