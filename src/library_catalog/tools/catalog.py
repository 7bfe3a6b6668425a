"""
Catalog tools for the library catalog MCP server.

These tools let a client maintain and query the catalog:
1. add_book: Add a book or replace the one with the same ISBN
2. remove_book: Remove a book by ISBN
3. update_book: Rewrite title, author and year of a catalogued book
4. search_catalog: Exact-match search by title, author or ISBN
5. check_availability: Ask whether a book can be checked out

Every handler validates its arguments with a Pydantic model, runs against the
shared Library and never raises: failures come back as ``isError`` responses.
"""

import logging
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from ..errors import InvalidArgumentError, NotFoundError
from ..library import get_library
from ..models.book import Book
from .responses import error_response, success_response

logger = logging.getLogger(__name__)


def _book_data(book: Book) -> dict[str, Any]:
    return book.model_dump()


# =============================================================================
# INPUT SCHEMAS
# =============================================================================


class AddBookInput(BaseModel):
    """Input schema for the add_book tool."""

    isbn: str = Field(..., description="ISBN of the book", examples=["9780441172719"])
    title: str = Field(..., description="Title of the book", examples=["Dune"])
    author: str = Field(..., description="Author of the book", examples=["Frank Herbert"])
    publication_year: int = Field(..., description="Year of publication", examples=[1965])


class RemoveBookInput(BaseModel):
    """Input schema for the remove_book tool."""

    isbn: str = Field(..., description="ISBN of the book to remove")


class UpdateBookInput(BaseModel):
    """Input schema for the update_book tool. All descriptive fields are replaced."""

    isbn: str = Field(..., description="ISBN of the book to update")
    title: str = Field(..., description="New title")
    author: str = Field(..., description="New author")
    publication_year: int = Field(..., description="New year of publication")


class SearchCatalogInput(BaseModel):
    """Input schema for the search_catalog tool."""

    search_type: str = Field(
        ...,
        description="Field to match: title, author or isbn (case-insensitive)",
        examples=["title", "author", "isbn"],
    )

    query: str = Field(
        ...,
        description=(
            "Exact value to match. Title and author ignore letter case; ISBN is case-sensitive"
        ),
        examples=["dune", "Frank Herbert", "9780441172719"],
    )


class CheckAvailabilityInput(BaseModel):
    """Input schema for the check_availability tool."""

    isbn: str = Field(..., description="ISBN of the book to check")


# =============================================================================
# HANDLERS
# =============================================================================


async def add_book_handler(arguments: dict[str, Any]) -> dict[str, Any]:
    """Handler for the add_book tool."""
    try:
        params = AddBookInput.model_validate(arguments)
    except ValidationError as e:
        logger.warning("Invalid add_book parameters: %s", e)
        return error_response(f"Invalid add_book parameters: {e}")

    try:
        book = Book(**params.model_dump())
        get_library().inventory.add_book(book)
    except Exception as e:
        logger.exception("Unexpected error in add_book tool")
        return error_response(f"An unexpected error occurred: {e!s}")

    return success_response(f"Added book: {book}", data={"book": _book_data(book)})


async def remove_book_handler(arguments: dict[str, Any]) -> dict[str, Any]:
    """
    Handler for the remove_book tool.

    Removing an unknown ISBN changes nothing; the tool reports it as an error
    so the client knows nothing happened.
    """
    try:
        params = RemoveBookInput.model_validate(arguments)
    except ValidationError as e:
        logger.warning("Invalid remove_book parameters: %s", e)
        return error_response(f"Invalid remove_book parameters: {e}")

    inventory = get_library().inventory
    try:
        book = inventory.get_book(params.isbn)
        if book is None:
            raise NotFoundError(f"No book with ISBN {params.isbn} in the catalog")
        inventory.remove_book(params.isbn)
    except NotFoundError as e:
        logger.info("remove_book failed - %s", e)
        return error_response(str(e))
    except Exception as e:
        logger.exception("Unexpected error in remove_book tool")
        return error_response(f"An unexpected error occurred: {e!s}")

    return success_response(f"Removed book: {book}", data={"book": _book_data(book)})


async def update_book_handler(arguments: dict[str, Any]) -> dict[str, Any]:
    """Handler for the update_book tool."""
    try:
        params = UpdateBookInput.model_validate(arguments)
    except ValidationError as e:
        logger.warning("Invalid update_book parameters: %s", e)
        return error_response(f"Invalid update_book parameters: {e}")

    inventory = get_library().inventory
    try:
        updated = inventory.update_book(
            params.isbn, params.title, params.author, params.publication_year
        )
        if not updated:
            raise NotFoundError(f"No book with ISBN {params.isbn} in the catalog")
    except NotFoundError as e:
        logger.info("update_book failed - %s", e)
        return error_response(str(e))
    except Exception as e:
        logger.exception("Unexpected error in update_book tool")
        return error_response(f"An unexpected error occurred: {e!s}")

    book = inventory.get_book(params.isbn)
    return success_response(f"Updated book: {book}", data={"book": _book_data(book)})


async def search_catalog_handler(arguments: dict[str, Any]) -> dict[str, Any]:
    """
    Handler for the search_catalog tool.

    An unknown search_type is the one catalog operation that raises; the
    handler turns it into an error response listing the accepted types.
    """
    try:
        params = SearchCatalogInput.model_validate(arguments)
    except ValidationError as e:
        logger.warning("Invalid search parameters: %s", e)
        return error_response(f"Invalid search parameters: {e}")

    try:
        books = get_library().inventory.search_books(params.search_type, params.query)
    except InvalidArgumentError as e:
        logger.info("search_catalog rejected search type %r", params.search_type)
        return error_response(f"{e}. Use one of: title, author, isbn")
    except Exception as e:
        logger.exception("Unexpected error in search_catalog tool")
        return error_response(f"An unexpected error occurred: {e!s}")

    if not books:
        text = f"No books found with {params.search_type.lower()} '{params.query}'"
    else:
        lines = [f"Found {len(books)} book(s):"]
        lines.extend(f"- {book}" for book in books)
        text = "\n".join(lines)

    return success_response(
        text,
        data={
            "books": [_book_data(book) for book in books],
            "count": len(books),
        },
    )


async def check_availability_handler(arguments: dict[str, Any]) -> dict[str, Any]:
    """Handler for the check_availability tool."""
    try:
        params = CheckAvailabilityInput.model_validate(arguments)
    except ValidationError as e:
        logger.warning("Invalid check_availability parameters: %s", e)
        return error_response(f"Invalid check_availability parameters: {e}")

    inventory = get_library().inventory
    try:
        in_catalog = params.isbn in inventory
        available = inventory.is_available(params.isbn)
    except Exception as e:
        logger.exception("Unexpected error in check_availability tool")
        return error_response(f"An unexpected error occurred: {e!s}")

    if not in_catalog:
        text = f"Book {params.isbn} is not in the catalog"
    elif available:
        text = f"Book {params.isbn} is available"
    else:
        text = f"Book {params.isbn} is checked out"

    return success_response(
        text,
        data={
            "isbn": params.isbn,
            "in_catalog": in_catalog,
            "available": available,
        },
    )


# =============================================================================
# TOOL REGISTRATION
# =============================================================================

add_book = {
    "name": "add_book",
    "description": (
        "Add a book to the catalog. A book already catalogued under the same ISBN "
        "is replaced."
    ),
    "input_model": AddBookInput,
    "handler": add_book_handler,
}

remove_book = {
    "name": "remove_book",
    "description": "Remove a book from the catalog by ISBN.",
    "input_model": RemoveBookInput,
    "handler": remove_book_handler,
}

update_book = {
    "name": "update_book",
    "description": "Replace the title, author and publication year of a catalogued book.",
    "input_model": UpdateBookInput,
    "handler": update_book_handler,
}

search_catalog = {
    "name": "search_catalog",
    "description": (
        "Search the catalog by exact title, author or ISBN. Title and author "
        "matching ignores letter case; ISBN matching does not."
    ),
    "input_model": SearchCatalogInput,
    "handler": search_catalog_handler,
}

check_availability = {
    "name": "check_availability",
    "description": "Check whether a catalogued book is available for checkout.",
    "input_model": CheckAvailabilityInput,
    "handler": check_availability_handler,
}
