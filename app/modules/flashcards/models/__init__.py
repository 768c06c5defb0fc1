from .flashcards import Flashcard, FlashcardCollection
from .documents import CardEntry

__all__ = [
    "Flashcard",
    "FlashcardCollection",
    "CardEntry",
]
