"""
Import words and verbs from CSV into the SQL vocabulary database.

CSV columns:
    type              "word" or "verb" (default: word)
    text              word or verb infinitive in the target language
    translation       translation in the source language
    plural_form       optional, words only
    example_sentence  optional, words only
    audio_url         optional
    categories        optional, comma-separated category names

Usage:
    python -m scripts.import_vocabulary data/vocabulary.csv \
        --source-code en --source-name English \
        --target-code nl --target-name Dutch [--user-id ID] [--dry-run]
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pandas as pd
from sqlalchemy import select
from sqlalchemy.orm import Session

from vocab_core.config import get_default_user_id
from vocab_core.constants import ItemType
from vocab_core.store.database import get_session, init_db
from vocab_core.store.models import Category, Language, Verb, Word


REQUIRED_COLUMNS = ("text", "translation")


@dataclass
class ImportSummary:
    words: int = 0
    verbs: int = 0
    duplicates: int = 0
    skipped: int = 0


def _cell(row: pd.Series, column: str) -> Optional[str]:
    """Read an optional text cell; blanks and NaN become None."""
    value = row.get(column)
    if value is None or pd.isna(value):
        return None
    text = str(value).strip()
    return text or None


def parse_categories(value: Optional[str]) -> list[str]:
    """Parse comma-separated category names from CSV."""
    if not value:
        return []
    names = [name.strip() for name in value.split(",")]
    return [name for name in names if name]


def get_or_create_language(session: Session, code: str, name: str) -> Language:
    language = session.scalars(select(Language).where(Language.code == code)).first()
    if language is None:
        language = Language(code=code, name=name, is_system=False)
        session.add(language)
        session.flush()
    return language


def get_or_create_category(session: Session, user_id: str, name: str, cache: dict[str, Category]) -> Category:
    if name in cache:
        return cache[name]
    category = session.scalars(
        select(Category).where(Category.user_id == user_id, Category.name == name)
    ).first()
    if category is None:
        category = Category(user_id=user_id, name=name)
        session.add(category)
        session.flush()
    cache[name] = category
    return category


def _exists(session: Session, model, text_column, user_id: str, text: str) -> bool:
    return session.scalars(
        select(model.id).where(model.user_id == user_id, text_column == text)
    ).first() is not None


def import_rows(
    df: pd.DataFrame,
    session: Session,
    user_id: str,
    source: Language,
    target: Language,
    dry_run: bool = False
) -> ImportSummary:
    """
    Insert CSV rows as words/verbs for a user.

    Rows missing text or translation are skipped; rows whose text already
    exists for the user are counted as duplicates.
    """
    missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
    if missing:
        raise ValueError(f"CSV is missing required columns: {', '.join(missing)}")

    summary = ImportSummary()
    categories: dict[str, Category] = {}

    for _, row in df.iterrows():
        text = _cell(row, "text")
        translation = _cell(row, "translation")
        if not text or not translation:
            summary.skipped += 1
            continue

        try:
            item_type = ItemType((_cell(row, "type") or ItemType.WORD.value).lower())
        except ValueError:
            print(f"  ⚠ Unknown type for {text!r}, skipping")
            summary.skipped += 1
            continue

        model, text_column = (Word, Word.word) if item_type == ItemType.WORD else (Verb, Verb.infinitive)
        if _exists(session, model, text_column, user_id, text):
            summary.duplicates += 1
            continue

        common = dict(
            user_id=user_id,
            source_language_id=source.id,
            target_language_id=target.id,
            translation=translation,
            audio_url=_cell(row, "audio_url"),
            categories=[
                get_or_create_category(session, user_id, name, categories)
                for name in parse_categories(_cell(row, "categories"))
            ],
        )
        if item_type == ItemType.WORD:
            session.add(Word(
                word=text,
                plural_form=_cell(row, "plural_form"),
                example_sentence=_cell(row, "example_sentence"),
                **common,
            ))
            summary.words += 1
        else:
            session.add(Verb(infinitive=text, **common))
            summary.verbs += 1

        # Make the new row visible to the duplicate check of later rows
        session.flush()

    if dry_run:
        session.rollback()
    else:
        session.commit()
    return summary


def import_vocabulary(
    csv_path: Path,
    source_code: str,
    source_name: str,
    target_code: str,
    target_name: str,
    user_id: str,
    dry_run: bool = False
) -> ImportSummary:
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {csv_path}")

    df = pd.read_csv(csv_path)
    print(f"Loaded {len(df)} rows from {csv_path}")

    init_db()
    session = get_session()
    try:
        source = get_or_create_language(session, source_code, source_name)
        target = get_or_create_language(session, target_code, target_name)
        summary = import_rows(df, session, user_id, source, target, dry_run=dry_run)
    finally:
        session.close()

    print(f"\n{'='*60}")
    print("Import complete!")
    print(f"{'='*60}")
    print(f"Words imported:     {summary.words}")
    print(f"Verbs imported:     {summary.verbs}")
    print(f"Duplicates skipped: {summary.duplicates}")
    print(f"Incomplete rows:    {summary.skipped}")
    if dry_run:
        print("\n⚠ DRY RUN MODE - No changes were made to the database")
    return summary


def main():
    parser = argparse.ArgumentParser(
        description="Import words and verbs from CSV into the vocabulary database"
    )
    parser.add_argument("csv_path", type=Path, help="CSV file to import")
    parser.add_argument("--source-code", required=True, help="Source (known) language code, e.g. en")
    parser.add_argument("--source-name", required=True, help="Source language name, e.g. English")
    parser.add_argument("--target-code", required=True, help="Target (learned) language code, e.g. nl")
    parser.add_argument("--target-name", required=True, help="Target language name, e.g. Dutch")
    parser.add_argument("--user-id", default=None, help="Owner of the records (default: DEFAULT_USER_ID)")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Don't actually write to the database"
    )

    args = parser.parse_args()

    import_vocabulary(
        csv_path=args.csv_path,
        source_code=args.source_code,
        source_name=args.source_name,
        target_code=args.target_code,
        target_name=args.target_name,
        user_id=args.user_id or get_default_user_id(),
        dry_run=args.dry_run,
    )


if __name__ == "__main__":
    main()
