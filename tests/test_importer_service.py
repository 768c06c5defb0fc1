import json

import pytest

from app.modules.flashcards.errors import UnsupportedFormatError
from app.modules.flashcards.main import detect_format


@pytest.mark.parametrize(
    "file_name, expected",
    [("deck.json", "json"), ("DECK.JSON", "json"), ("notes.csv", "csv"), ("a.b.Csv", "csv")],
)
def test_detect_format(file_name, expected):
    assert detect_format(file_name) == expected


@pytest.mark.parametrize("file_name", ["deck.txt", "deck", "deck.tsv"])
def test_detect_format_rejects_unknown(file_name):
    with pytest.raises(UnsupportedFormatError, match="Unsupported file type"):
        detect_format(file_name)


def test_import_text_dispatches_on_extension(importer):
    from_json = importer.import_text(json.dumps([{"question": "Q", "answer": "A"}]), "a.json")
    from_csv = importer.import_text("question,answer\nQ,A", "b.csv")

    assert from_json.source == "Imported: a.json"
    assert from_csv.source == "Imported: b.csv"
    assert [c.id for c in from_json.cards + from_csv.cards] == ["card-1", "card-2"]


def test_explicit_format_overrides_extension(importer):
    collection = importer.import_text("question,answer\nQ,A", "export.txt", "CSV")
    assert collection.title == "export"


def test_unknown_explicit_format(importer):
    with pytest.raises(UnsupportedFormatError):
        importer.import_text("x", "deck.csv", "xml")
