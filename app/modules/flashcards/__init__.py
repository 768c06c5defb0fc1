"""Flashcards module exports."""

from .models.flashcards import Flashcard, FlashcardCollection
from .errors import (
    FlashcardImportError,
    MalformedInputError,
    UnsupportedFormatError,
    EmptyInputError,
    InvalidHeaderError,
    NoCardsFoundError,
)
from .title import derive_title
from .json_importer import import_from_json
from .csv_importer import import_from_csv, parse_row, split_lines
from .main import FlashcardImporter, detect_format

__all__ = [
    "Flashcard",
    "FlashcardCollection",
    "FlashcardImportError",
    "MalformedInputError",
    "UnsupportedFormatError",
    "EmptyInputError",
    "InvalidHeaderError",
    "NoCardsFoundError",
    "derive_title",
    "import_from_json",
    "import_from_csv",
    "parse_row",
    "split_lines",
    "FlashcardImporter",
    "detect_format",
]
