"""
Tests for the CSV import script.
"""

import pandas as pd
import pytest
from sqlalchemy import create_engine, func, select
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from scripts.import_vocabulary import get_or_create_language, import_rows, parse_categories
from vocab_core.store import init_db
from vocab_core.store.models import Category, Verb, Word


USER = "importer"


@pytest.fixture
def session():
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    init_db(engine)
    session = sessionmaker(bind=engine, expire_on_commit=False)()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def languages(session):
    return (
        get_or_create_language(session, "en", "English"),
        get_or_create_language(session, "nl", "Dutch"),
    )


def _count(session, model):
    return session.scalar(select(func.count()).select_from(model))


def test_parse_categories():
    assert parse_categories("Food, Home ,,") == ["Food", "Home"]
    assert parse_categories(None) == []


def test_language_reused(session, languages):
    assert get_or_create_language(session, "nl", "Nederlands") is languages[1]


def test_import_rows(session, languages):
    df = pd.DataFrame([
        {"type": "word", "text": "huis", "translation": "house", "plural_form": "huizen", "categories": "Home"},
        {"type": "verb", "text": "eten", "translation": "to eat", "plural_form": None, "categories": "Food, Home"},
        {"type": "word", "text": "huis", "translation": "house", "plural_form": None, "categories": None},
        {"type": "word", "text": "", "translation": "empty", "plural_form": None, "categories": None},
        {"type": "phrase", "text": "dank je", "translation": "thanks", "plural_form": None, "categories": None},
    ])

    summary = import_rows(df, session, USER, *languages)

    assert (summary.words, summary.verbs, summary.duplicates, summary.skipped) == (1, 1, 1, 2)
    word = session.scalars(select(Word)).one()
    assert word.plural_form == "huizen"
    assert word.target_language.code == "nl"
    verb = session.scalars(select(Verb)).one()
    assert sorted(category.name for category in verb.categories) == ["Food", "Home"]
    assert _count(session, Category) == 2


def test_missing_columns(session, languages):
    with pytest.raises(ValueError):
        import_rows(pd.DataFrame([{"text": "huis"}]), session, USER, *languages)


def test_dry_run_writes_nothing(session, languages):
    df = pd.DataFrame([{"text": "fiets", "translation": "bicycle"}])

    summary = import_rows(df, session, USER, *languages, dry_run=True)

    assert summary.words == 1
    assert _count(session, Word) == 0
