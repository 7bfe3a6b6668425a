"""
Inventory management for the library catalog.

The InventoryManager owns two pieces of state:

1. The catalog: a mapping from ISBN to Book. Insertion ordered, so searches
   return books in the order they were first added.
2. The borrowed set: ISBNs currently checked out.

Each catalogued ISBN is either available or borrowed. A successful checkout
moves it to borrowed, a successful return moves it back. Operations that find
nothing to do report it with a False return or a silent no-op instead of
raising; the only exception that escapes is InvalidArgumentError from a search
with an unknown search kind.

The manager knows nothing about patrons. Recording who borrowed a book is a
separate call on the PatronManager.
"""

import logging

from .events import CatalogEvent, CatalogEventType, EventSink, discard_event
from .models.book import Book
from .observability import trace_catalog_operation
from .search import SearchKind, get_search_strategy

module_logger = logging.getLogger(__name__)


class InventoryManager:
    """
    In-memory book catalog with checkout tracking.

    Args:
        event_sink: Callable receiving a CatalogEvent for every state change
        logger: Logger for the free-text activity log (defaults to the module logger)
        clear_borrowed_on_remove: Whether remove_book() also clears the
            book's borrowed flag
    """

    def __init__(
        self,
        event_sink: EventSink | None = None,
        logger: logging.Logger | None = None,
        clear_borrowed_on_remove: bool = True,
    ):
        self._books: dict[str, Book] = {}
        self._borrowed: set[str] = set()
        self._emit = event_sink or discard_event
        self._logger = logger or module_logger
        self.clear_borrowed_on_remove = clear_borrowed_on_remove

    def _record(self, event_type: CatalogEventType, isbn: str, message: str) -> None:
        self._logger.info(message)
        self._emit(CatalogEvent(event_type=event_type, isbn=isbn, message=message))

    # =========================================================================
    # CATALOG MAINTENANCE
    # =========================================================================

    def add_book(self, book: Book) -> None:
        """Add a book, silently replacing any book with the same ISBN."""
        with trace_catalog_operation("inventory", "add_book", isbn=book.isbn):
            replaced = book.isbn in self._books
            self._books[book.isbn] = book
            if replaced:
                self._logger.debug("Replaced existing catalog entry for %s", book.isbn)
            self._record(CatalogEventType.BOOK_ADDED, book.isbn, f"Added book: {book}")

    def remove_book(self, isbn: str) -> None:
        """
        Remove a book from the catalog.

        Unknown ISBNs are ignored without logging. When clear_borrowed_on_remove
        is set the book's borrowed flag is dropped too; otherwise a book re-added
        under the same ISBN still counts as borrowed.
        """
        with trace_catalog_operation("inventory", "remove_book", isbn=isbn):
            removed = self._books.pop(isbn, None)
            if removed is None:
                return
            if self.clear_borrowed_on_remove and isbn in self._borrowed:
                self._borrowed.discard(isbn)
                self._logger.debug("Cleared borrowed flag of removed book %s", isbn)
            self._record(CatalogEventType.BOOK_REMOVED, isbn, f"Removed book: {removed}")

    def update_book(self, isbn: str, title: str, author: str, publication_year: int) -> bool:
        """
        Overwrite the descriptive fields of a catalogued book.

        Returns:
            True if the book was updated, False if the ISBN is unknown

        Raises:
            ValidationError: If a value has the wrong type; the book is left as it was
        """
        with trace_catalog_operation("inventory", "update_book", isbn=isbn):
            book = self._books.get(isbn)
            if book is None:
                return False
            book.update(title, author, publication_year)
            self._record(CatalogEventType.BOOK_UPDATED, isbn, f"Updated book: {book}")
            return True

    # =========================================================================
    # LOOKUP & SEARCH
    # =========================================================================

    def get_book(self, isbn: str) -> Book | None:
        return self._books.get(isbn)

    def list_books(self) -> list[Book]:
        """Snapshot of the catalog in insertion order."""
        return list(self._books.values())

    def search_books(self, kind: str | SearchKind, query: str) -> list[Book]:
        """
        Search the catalog on a single field.

        Args:
            kind: "title", "author" or "isbn" (any letter case)
            query: Exact value to match

        Returns:
            Matching books in catalog order

        Raises:
            InvalidArgumentError: If kind is not a recognized search kind
        """
        strategy = get_search_strategy(kind)
        return strategy.search(self.list_books(), query)

    # =========================================================================
    # CIRCULATION
    # =========================================================================

    def checkout_book(self, isbn: str) -> bool:
        """
        Mark a book as borrowed.

        Returns:
            True if the book is catalogued and was available, False otherwise
        """
        with trace_catalog_operation("inventory", "checkout_book", isbn=isbn):
            if isbn not in self._books or isbn in self._borrowed:
                return False
            self._borrowed.add(isbn)
            self._record(
                CatalogEventType.BOOK_CHECKED_OUT,
                isbn,
                f"Checked out book: {self._books[isbn]}",
            )
            return True

    def return_book(self, isbn: str) -> bool:
        """
        Clear a book's borrowed flag.

        The borrowed set is authoritative: a borrowed ISBN that is no longer in
        the catalog can still be returned.

        Returns:
            True if the ISBN was borrowed, False otherwise
        """
        with trace_catalog_operation("inventory", "return_book", isbn=isbn):
            if isbn not in self._borrowed:
                return False
            self._borrowed.remove(isbn)
            book = self._books.get(isbn)
            self._record(
                CatalogEventType.BOOK_RETURNED,
                isbn,
                f"Returned book: {book if book is not None else isbn}",
            )
            return True

    def is_available(self, isbn: str) -> bool:
        """True if the book is catalogued and not borrowed."""
        return isbn in self._books and isbn not in self._borrowed

    def is_borrowed(self, isbn: str) -> bool:
        return isbn in self._borrowed

    @property
    def borrowed_isbns(self) -> list[str]:
        return sorted(self._borrowed)

    def __len__(self) -> int:
        return len(self._books)

    def __contains__(self, isbn: object) -> bool:
        return isbn in self._books
