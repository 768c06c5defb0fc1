"""
Flashcard import failures.

Every failure is terminal for the call that raised it. ``str(error)`` is the
human-readable reason meant to be shown to the user verbatim; ``code`` is a
stable identifier callers can branch on.
"""


class FlashcardImportError(Exception):
    """
    Base exception for all import failures.

    Callers that only need to surface the reason can catch this class.
    """

    code = "import_error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class MalformedInputError(FlashcardImportError):
    """
    Raised for JSON syntax errors and missing or mistyped required fields.
    """

    code = "malformed_input"


class UnsupportedFormatError(FlashcardImportError):
    """
    Raised when the input is of a kind no importer accepts.

    Example: a JSON document whose top-level value is a number.
    """

    code = "unsupported_format"


class EmptyInputError(FlashcardImportError):
    """Raised when CSV text has no non-blank lines."""

    code = "empty_input"


class InvalidHeaderError(FlashcardImportError):
    """Raised when the CSV header does not start with question,answer."""

    code = "invalid_header"


class NoCardsFoundError(FlashcardImportError):
    """
    Raised when structurally valid input yields zero usable cards.
    """

    code = "no_cards_found"
