"""
Metric computations for the pool overview page.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional

import pandas as pd

from vocab_core.constants import MAX_LEVEL, ItemType
from vocab_core.items import PracticeItem
from vocab_core.scoring import get_question_level, item_effective_score, utc_now


POOL_COLUMNS = [
    "id",
    "type",
    "target_text",
    "learning_score",
    "level",
    "effective_score",
    "practice_count",
    "never_practiced",
]


@dataclass(frozen=True)
class PoolOverview:
    """
    Precomputed summary of a practice pool.
    """
    total: int
    words: int
    verbs: int
    never_practiced: int
    average_score: float
    level_counts: pd.Series


def pool_dataframe(items: Iterable[PracticeItem], now: Optional[datetime] = None) -> pd.DataFrame:
    """
    One row per item with its scheduling-relevant values.
    """
    now = now or utc_now()
    rows = [
        {
            "id": item.id,
            "type": item.type.value,
            "target_text": item.target_text,
            "learning_score": item.learning_score,
            "level": get_question_level(item.learning_score),
            "effective_score": item_effective_score(item, now),
            "practice_count": item.practice_count,
            "never_practiced": item.never_practiced,
        }
        for item in items
    ]
    return pd.DataFrame(rows, columns=POOL_COLUMNS)


def level_distribution(pool_df: pd.DataFrame) -> pd.Series:
    """
    Item count per level, with every level 0-4 present.
    """
    levels = pd.RangeIndex(0, MAX_LEVEL + 1, name="level")
    if pool_df.empty:
        return pd.Series(0, index=levels, dtype="int64")
    return pool_df["level"].value_counts().reindex(levels, fill_value=0).astype("int64")


def build_pool_overview(items: Iterable[PracticeItem], now: Optional[datetime] = None) -> PoolOverview:
    """
    Build all values needed by the overview page.
    """
    pool_df = pool_dataframe(items, now)
    if pool_df.empty:
        return PoolOverview(
            total=0,
            words=0,
            verbs=0,
            never_practiced=0,
            average_score=0.0,
            level_counts=level_distribution(pool_df),
        )

    return PoolOverview(
        total=len(pool_df),
        words=int((pool_df["type"] == ItemType.WORD.value).sum()),
        verbs=int((pool_df["type"] == ItemType.VERB.value).sum()),
        never_practiced=int(pool_df["never_practiced"].sum()),
        average_score=float(pool_df["learning_score"].mean()),
        level_counts=level_distribution(pool_df),
    )
