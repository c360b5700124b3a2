"""
Tests for pool overview metrics.
"""

from datetime import timedelta

from vocab_core import ItemType
from vocab_core.analytics import (
    POOL_COLUMNS,
    build_pool_overview,
    level_distribution,
    pool_dataframe,
)
from tests.conftest import NOW, make_item


def _items():
    return [
        make_item("a", score=0),
        make_item("b", score=7, last_practiced=NOW - timedelta(days=2), count=1),
        make_item("c", score=31, last_practiced=NOW, count=6, item_type=ItemType.VERB),
        make_item("d", score=60, last_practiced=NOW, count=12),
    ]


def test_pool_dataframe_columns_and_scores():
    df = pool_dataframe(_items(), now=NOW)
    assert list(df.columns) == POOL_COLUMNS
    assert df.set_index("id")["effective_score"].to_dict() == {
        "a": -1000,
        "b": 7 - 2 + 2,
        "c": 31 + 12,
        "d": 60 + 20,
    }


def test_empty_pool():
    overview = build_pool_overview([], now=NOW)
    assert overview.total == 0
    assert overview.average_score == 0.0
    assert overview.level_counts.tolist() == [0, 0, 0, 0, 0]


def test_level_distribution_has_every_level():
    counts = level_distribution(pool_dataframe(_items(), now=NOW))
    assert list(counts.index) == [0, 1, 2, 3, 4]
    assert counts.tolist() == [1, 1, 0, 1, 1]


def test_overview_counts():
    overview = build_pool_overview(_items(), now=NOW)
    assert overview.total == 4
    assert overview.words == 3
    assert overview.verbs == 1
    assert overview.never_practiced == 1
    assert overview.average_score == 24.5
