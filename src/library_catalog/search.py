"""
Search strategies for the library catalog.

Each strategy answers one question: which of these books match the query on a
single field? Matching is exact, never substring or fuzzy:

- title and author compare case-insensitively
- isbn compares case-sensitively, since ISBNs are opaque tokens

get_search_strategy() maps a search kind token ("title", "author", "isbn") to
its strategy and rejects anything else with InvalidArgumentError.
"""

import enum
from abc import ABC, abstractmethod
from collections.abc import Iterable

from .errors import InvalidArgumentError
from .models.book import Book


class SearchKind(str, enum.Enum):
    """Fields a catalog search can match against."""

    TITLE = "title"
    AUTHOR = "author"
    ISBN = "isbn"


class SearchStrategy(ABC):
    """Pure filter over a collection of books."""

    kind: SearchKind

    @abstractmethod
    def matches(self, book: Book, query: str) -> bool:
        """Return True if the book matches the query."""

    def search(self, books: Iterable[Book], query: str) -> list[Book]:
        """Return the matching books in the iteration order of ``books``."""
        return [book for book in books if self.matches(book, query)]


class SearchByTitle(SearchStrategy):
    kind = SearchKind.TITLE

    def matches(self, book: Book, query: str) -> bool:
        return book.title.casefold() == query.casefold()


class SearchByAuthor(SearchStrategy):
    kind = SearchKind.AUTHOR

    def matches(self, book: Book, query: str) -> bool:
        return book.author.casefold() == query.casefold()


class SearchByIsbn(SearchStrategy):
    kind = SearchKind.ISBN

    def matches(self, book: Book, query: str) -> bool:
        return book.isbn == query


_STRATEGIES: dict[SearchKind, SearchStrategy] = {
    SearchKind.TITLE: SearchByTitle(),
    SearchKind.AUTHOR: SearchByAuthor(),
    SearchKind.ISBN: SearchByIsbn(),
}


def get_search_strategy(kind: str | SearchKind) -> SearchStrategy:
    """
    Select the search strategy for a search kind.

    Args:
        kind: "title", "author" or "isbn" in any letter case, or a SearchKind

    Returns:
        The shared, stateless strategy instance for that kind

    Raises:
        InvalidArgumentError: If kind is not a recognized search kind
    """
    try:
        search_kind = SearchKind(kind.lower())
    except ValueError as e:
        raise InvalidArgumentError(f"Invalid search type: {kind!r}") from e
    return _STRATEGIES[search_kind]
