"""
Library catalog models.

Pydantic models for the two entities tracked by the catalog:
- Book: catalog items keyed by ISBN
- Patron: library members with an append-only borrowing history
"""

from .book import Book
from .patron import Patron

__all__ = [
    "Book",
    "Patron",
]
