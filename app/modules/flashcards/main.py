"""Flashcards import service class and simple module entrypoint.

Provides a high-level class bundling the id and clock capabilities with both
importers, so API handlers and the CLI pick a format in one place.
"""

from __future__ import annotations

from pathlib import PurePath
from typing import Literal

from app.modules.flashcards.capabilities import Clock, IdFactory, new_id, utc_now
from app.modules.flashcards.csv_importer import import_from_csv
from app.modules.flashcards.errors import UnsupportedFormatError
from app.modules.flashcards.json_importer import import_from_json
from app.modules.flashcards.models import FlashcardCollection

ImportFormat = Literal["json", "csv"]

SUPPORTED_FORMATS: tuple[str, ...] = ("json", "csv")


def detect_format(file_name: str) -> ImportFormat:
    """Pick an importer from the file extension (case-insensitive)."""
    suffix = PurePath(file_name).suffix.lower().lstrip(".")
    if suffix == "json":
        return "json"
    if suffix == "csv":
        return "csv"
    raise UnsupportedFormatError(f"Unsupported file type: {suffix or file_name}")


class FlashcardImporter:
    """Imports JSON or CSV flashcard text with injected id and clock sources."""

    def __init__(
        self, *, id_factory: IdFactory = new_id, clock: Clock = utc_now
    ) -> None:
        self.id_factory = id_factory
        self.clock = clock

    def from_json(self, text: str, file_name: str) -> FlashcardCollection:
        return import_from_json(
            text, file_name, id_factory=self.id_factory, clock=self.clock
        )

    def from_csv(self, text: str, file_name: str) -> FlashcardCollection:
        return import_from_csv(
            text, file_name, id_factory=self.id_factory, clock=self.clock
        )

    def import_text(
        self, text: str, file_name: str, fmt: str | None = None
    ) -> FlashcardCollection:
        """Import ``text`` using ``fmt`` or, when omitted, the file extension."""
        if fmt is None:
            fmt = detect_format(file_name)
        fmt = fmt.lower()
        if fmt == "json":
            return self.from_json(text, file_name)
        if fmt == "csv":
            return self.from_csv(text, file_name)
        raise UnsupportedFormatError(f"Unsupported file type: {fmt}")
