"""Default collection titles derived from file names."""

from __future__ import annotations

import re

DEFAULT_TITLE = "Imported Flashcards"

_EXTENSION_RE = re.compile(r"\.[^.]+$")
_SEPARATOR_RE = re.compile(r"[_-]+")


def derive_title(file_name: str) -> str:
    """Turn ``my-set.json`` into ``my set``.

    Falls back to ``DEFAULT_TITLE`` when nothing readable is left.
    """
    base = _EXTENSION_RE.sub("", file_name)
    return _SEPARATOR_RE.sub(" ", base).strip() or DEFAULT_TITLE


def default_source(file_name: str) -> str:
    return f"Imported: {file_name}"
