"""Pydantic models for imported flashcard collections.

Both models are frozen: a collection is built in one step by an importer and
handed to the caller as-is. ``created_at`` serializes as ``createdAt`` so a
dumped collection is itself a valid JSON import document.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Flashcard(BaseModel):
    """Simple question/answer flashcard with a unique id."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    question: str
    answer: str


class FlashcardCollection(BaseModel):
    """A titled, non-empty set of flashcards with provenance metadata."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    source: str
    cards: list[Flashcard] = Field(min_length=1)
    created_at: datetime = Field(alias="createdAt")
