"""JSON flashcard import.

Accepts either a bare array of ``{question, answer}`` objects or an object
with a ``cards`` array and optional ``title``, ``source`` and ``createdAt``.
Decoding happens in two steps: ``json.loads`` into a generic document, then
explicit shape checks that map every violation onto the import error
taxonomy. A single bad card fails the whole import.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError

from app.core.logging import get_logger
from app.modules.flashcards.capabilities import Clock, IdFactory, new_id, utc_now
from app.modules.flashcards.errors import (
    FlashcardImportError,
    MalformedInputError,
    NoCardsFoundError,
    UnsupportedFormatError,
)
from app.modules.flashcards.models import CardEntry, Flashcard, FlashcardCollection
from app.modules.flashcards.models.documents import created_at_adapter
from app.modules.flashcards.title import default_source, derive_title

logger = get_logger(__name__)


def _reject_constant(name: str) -> Any:
    # NaN / Infinity are not JSON
    raise ValueError(f"Non-standard JSON constant: {name}")


def _decode(text: str) -> Any:
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise MalformedInputError("Invalid JSON") from exc


def _card_entry(raw: Any) -> CardEntry:
    try:
        return CardEntry.model_validate(raw)
    except ValidationError as exc:
        raise MalformedInputError("Invalid JSON card fields") from exc


def _non_blank(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None


def _created_at(value: Any, clock: Clock) -> datetime:
    if not value:
        return clock()
    try:
        parsed = created_at_adapter.validate_python(value)
    except ValidationError as exc:
        raise MalformedInputError("Invalid createdAt date") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _require_cards(cards: list[Flashcard]) -> None:
    if not cards:
        raise NoCardsFoundError("No cards found")


def _from_array(
    data: list[Any], file_name: str, id_factory: IdFactory, clock: Clock
) -> FlashcardCollection:
    cards: list[Flashcard] = []
    for item in data:
        if not isinstance(item, dict):
            raise MalformedInputError("Invalid JSON card")
        entry = _card_entry(item)
        cards.append(Flashcard(id=id_factory(), question=entry.question, answer=entry.answer))
    _require_cards(cards)
    return FlashcardCollection(
        title=derive_title(file_name),
        source=default_source(file_name),
        cards=cards,
        created_at=clock(),
    )


def _from_object(
    data: dict[str, Any], file_name: str, id_factory: IdFactory, clock: Clock
) -> FlashcardCollection:
    raw_cards = data.get("cards")
    if not isinstance(raw_cards, list):
        raise MalformedInputError("Missing cards array")

    title = _non_blank(data.get("title")) or derive_title(file_name)

    cards: list[Flashcard] = []
    for raw in raw_cards:
        entry = _card_entry(raw)
        cards.append(
            Flashcard(
                id=entry.supplied_id or id_factory(),
                question=entry.question,
                answer=entry.answer,
            )
        )
    _require_cards(cards)

    return FlashcardCollection(
        title=title,
        source=_non_blank(data.get("source")) or default_source(file_name),
        cards=cards,
        created_at=_created_at(data.get("createdAt"), clock),
    )


def import_from_json(
    text: str,
    file_name: str,
    *,
    id_factory: IdFactory = new_id,
    clock: Clock = utc_now,
) -> FlashcardCollection:
    """Parse a JSON import document into a ``FlashcardCollection``.

    Raises:
        MalformedInputError: invalid JSON, a non-object array element, a card
            without string ``question``/``answer``, a missing ``cards`` array
            or an unparseable ``createdAt``.
        UnsupportedFormatError: the top-level value is not an array or object.
        NoCardsFoundError: the document holds zero cards.
    """
    log_extra = {"file_name": file_name, "import_format": "json"}
    try:
        data = _decode(text)
        if isinstance(data, list):
            collection = _from_array(data, file_name, id_factory, clock)
        elif isinstance(data, dict):
            collection = _from_object(data, file_name, id_factory, clock)
        else:
            raise UnsupportedFormatError("Unsupported JSON format")
    except FlashcardImportError as exc:
        logger.warning("JSON import of %s failed: %s", file_name, exc, extra=log_extra)
        raise

    logger.info(
        "Imported %d cards from %s", len(collection.cards), file_name, extra=log_extra
    )
    return collection
