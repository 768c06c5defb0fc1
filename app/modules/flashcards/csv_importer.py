"""CSV flashcard import.

The header row must start with ``question,answer`` (case-insensitive); extra
columns are ignored. Rows with an empty question or answer are dropped rather
than failing the import.

Lines and fields are found with small character-scanning state machines
instead of the ``csv`` module or a regular expression, so that quoted commas,
quoted newlines, ``""`` escapes and unterminated quotes all behave the same
way in both passes.
"""

from __future__ import annotations

from app.core.logging import get_logger
from app.modules.flashcards.capabilities import Clock, IdFactory, new_id, utc_now
from app.modules.flashcards.errors import (
    EmptyInputError,
    FlashcardImportError,
    InvalidHeaderError,
    NoCardsFoundError,
)
from app.modules.flashcards.models import Flashcard, FlashcardCollection
from app.modules.flashcards.title import default_source, derive_title

logger = get_logger(__name__)

QUOTE = '"'
ESCAPED_QUOTE = '""'
DELIMITER = ","
BOM = "\ufeff"
REQUIRED_HEADER = ("question", "answer")
INVALID_HEADER_MESSAGE = "Invalid CSV headers. Expected: Question,Answer"


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def split_lines(text: str) -> list[str]:
    """Split CSV text into logical lines.

    A newline inside a quoted field belongs to the field, not the line
    boundary. Quote characters are kept in the output so ``parse_row`` can
    see them; only the terminating newlines are dropped.
    """
    text = normalize_newlines(text)
    lines: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == QUOTE:
            if in_quotes and text.startswith(ESCAPED_QUOTE, i):
                current.append(ESCAPED_QUOTE)
                i += 2
                continue
            in_quotes = not in_quotes
            current.append(ch)
        elif ch == "\n" and not in_quotes:
            lines.append("".join(current))
            current = []
        else:
            current.append(ch)
        i += 1
    if current:
        lines.append("".join(current))
    return lines


def _unquote(field: str) -> str:
    if len(field) >= 2 and field.startswith(QUOTE) and field.endswith(QUOTE):
        field = field[1:-1].replace(ESCAPED_QUOTE, QUOTE)
    return field.strip()


def parse_row(line: str) -> list[str]:
    """Split one logical line into trimmed fields.

    Commas only separate fields outside quotes. A field wrapped in quotes
    loses them and has ``""`` unescaped. An unterminated quote swallows the
    rest of the line into one field, left as written.
    """
    raw_fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == QUOTE:
            if in_quotes and line.startswith(ESCAPED_QUOTE, i):
                current.append(ESCAPED_QUOTE)
                i += 2
                continue
            in_quotes = not in_quotes
            current.append(ch)
        elif ch == DELIMITER and not in_quotes:
            raw_fields.append("".join(current))
            current = []
        else:
            current.append(ch)
        i += 1
    raw_fields.append("".join(current))
    return [_unquote(field) for field in raw_fields]


def field_at(row: list[str], index: int) -> str:
    """Positional field access; missing trailing fields read as empty."""
    return row[index] if index < len(row) else ""


def _read_header(line: str) -> list[str]:
    header = parse_row(line)
    first = header[0]
    # A BOM hides the opening quote from parse_row
    if first.startswith(BOM):
        header[0] = _unquote(first[len(BOM):])
    return [cell.lower() for cell in header]


def _parse(
    text: str, file_name: str, id_factory: IdFactory, clock: Clock
) -> FlashcardCollection:
    lines = [line for line in split_lines(text) if line.strip()]
    if not lines:
        raise EmptyInputError("Empty CSV")

    header = _read_header(lines[0])
    if tuple(header[: len(REQUIRED_HEADER)]) != REQUIRED_HEADER:
        raise InvalidHeaderError(INVALID_HEADER_MESSAGE)

    cards: list[Flashcard] = []
    skipped = 0
    for line in lines[1:]:
        row = parse_row(line)
        question = field_at(row, 0)
        answer = field_at(row, 1)
        if not question or not answer:
            skipped += 1
            continue
        cards.append(Flashcard(id=id_factory(), question=question, answer=answer))

    if skipped:
        logger.debug(
            "Skipped %d incomplete rows in %s",
            skipped,
            file_name,
            extra={"file_name": file_name, "import_format": "csv"},
        )
    if not cards:
        raise NoCardsFoundError("No cards found")

    return FlashcardCollection(
        title=derive_title(file_name),
        source=default_source(file_name),
        cards=cards,
        created_at=clock(),
    )


def import_from_csv(
    text: str,
    file_name: str,
    *,
    id_factory: IdFactory = new_id,
    clock: Clock = utc_now,
) -> FlashcardCollection:
    """Parse CSV text into a ``FlashcardCollection``.

    Raises:
        EmptyInputError: no non-blank lines.
        InvalidHeaderError: header does not start with question,answer.
        NoCardsFoundError: every data row was incomplete.
    """
    log_extra = {"file_name": file_name, "import_format": "csv"}
    try:
        collection = _parse(text, file_name, id_factory, clock)
    except FlashcardImportError as exc:
        logger.warning("CSV import of %s failed: %s", file_name, exc, extra=log_extra)
        raise

    logger.info(
        "Imported %d cards from %s", len(collection.cards), file_name, extra=log_extra
    )
    return collection
