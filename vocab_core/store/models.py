"""
SQLAlchemy ORM Models for the vocabulary database.

Words and verbs carry their own learning state (score, last practice,
practice count); categories and languages are shared lookup tables.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


word_categories = Table(
    "word_categories",
    Base.metadata,
    Column("word_id", String(36), ForeignKey("words.id", ondelete="CASCADE"), primary_key=True),
    Column("category_id", String(36), ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True),
)

verb_categories = Table(
    "verb_categories",
    Base.metadata,
    Column("verb_id", String(36), ForeignKey("verbs.id", ondelete="CASCADE"), primary_key=True),
    Column("category_id", String(36), ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True),
)


class Language(Base):
    """
    A language words can be translated from or to.

    System languages (user_id NULL) are shared by all users.
    """
    __tablename__ = "languages"

    id = Column(String(36), primary_key=True, default=_new_id)
    user_id = Column(String(255), nullable=True)
    name = Column(String(255), nullable=False)
    code = Column(String(20), nullable=False)  # BCP 47 code, also used for speech synthesis
    is_system = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    def __repr__(self):
        return f"<Language({self.code}, {self.name})>"


class Category(Base):
    """User-defined category; categories may nest via parent_id."""
    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=_new_id)
    user_id = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    parent_id = Column(String(36), ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)
    color = Column(String(20), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    def __repr__(self):
        return f"<Category({self.id}, {self.name})>"


class Word(Base):
    """
    A vocabulary word with its translation and learning state.
    """
    __tablename__ = "words"

    id = Column(String(36), primary_key=True, default=_new_id)
    user_id = Column(String(255), nullable=False, index=True)
    source_language_id = Column(String(36), ForeignKey("languages.id"), nullable=False)
    target_language_id = Column(String(36), ForeignKey("languages.id"), nullable=False)

    word = Column(String(255), nullable=False)
    translation = Column(String(255), nullable=False)
    plural_form = Column(String(255), nullable=True)
    example_sentence = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    image_url = Column(String(1024), nullable=True)
    audio_url = Column(String(1024), nullable=True)

    # Learning state
    learning_score = Column(Integer, nullable=False, default=0)
    last_practiced = Column(DateTime(timezone=True), nullable=True)
    practice_count = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    source_language = relationship("Language", foreign_keys=[source_language_id], lazy="joined")
    target_language = relationship("Language", foreign_keys=[target_language_id], lazy="joined")
    categories = relationship("Category", secondary=word_categories, lazy="selectin")

    def __repr__(self):
        return f"<Word({self.id}, {self.word})>"


class Verb(Base):
    """
    A verb (infinitive) with its translation and learning state.
    """
    __tablename__ = "verbs"

    id = Column(String(36), primary_key=True, default=_new_id)
    user_id = Column(String(255), nullable=False, index=True)
    source_language_id = Column(String(36), ForeignKey("languages.id"), nullable=False)
    target_language_id = Column(String(36), ForeignKey("languages.id"), nullable=False)

    infinitive = Column(String(255), nullable=False)
    translation = Column(String(255), nullable=False)
    is_irregular = Column(Boolean, nullable=False, default=False)
    notes = Column(Text, nullable=True)
    audio_url = Column(String(1024), nullable=True)

    # Learning state
    learning_score = Column(Integer, nullable=False, default=0)
    last_practiced = Column(DateTime(timezone=True), nullable=True)
    practice_count = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    source_language = relationship("Language", foreign_keys=[source_language_id], lazy="joined")
    target_language = relationship("Language", foreign_keys=[target_language_id], lazy="joined")
    categories = relationship("Category", secondary=verb_categories, lazy="selectin")

    def __repr__(self):
        return f"<Verb({self.id}, {self.infinitive})>"
