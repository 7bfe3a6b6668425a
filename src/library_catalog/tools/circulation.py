"""
Circulation tools for the library catalog MCP server.

1. checkout_book: Mark a book as borrowed, optionally recording the borrow in
   a patron's history
2. return_book: Clear a book's borrowed flag

The inventory reports a refused checkout or return as False rather than an
exception. These handlers explain the refusal to the client instead.
"""

import logging
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from ..library import get_library
from .responses import error_response, success_response

logger = logging.getLogger(__name__)


# =============================================================================
# CHECKOUT TOOL IMPLEMENTATION
# =============================================================================


class CheckoutBookInput(BaseModel):
    """Input schema for the checkout_book tool."""

    isbn: str = Field(
        ...,
        description="ISBN of the book to check out",
        examples=["9780441172719"],
    )

    patron_id: str | None = Field(
        default=None,
        description=(
            "Optional patron borrowing the book. When given, a successful checkout is "
            "also appended to the patron's borrowing history"
        ),
        examples=["patron_0001"],
    )


async def checkout_book_handler(arguments: dict[str, Any]) -> dict[str, Any]:
    """Handler for the checkout_book tool."""
    try:
        params = CheckoutBookInput.model_validate(arguments)
    except ValidationError as e:
        logger.warning("Invalid checkout parameters: %s", e)
        return error_response(f"Invalid checkout parameters: {e}")

    library = get_library()
    inventory = library.inventory

    try:
        if params.patron_id is None:
            checked_out = inventory.checkout_book(params.isbn)
        else:
            checked_out = library.lend(params.patron_id, params.isbn)
    except Exception as e:
        logger.exception("Unexpected error in checkout_book tool")
        return error_response(f"An unexpected error occurred: {e!s}")

    if not checked_out:
        if params.isbn not in inventory:
            reason = f"No book with ISBN {params.isbn} in the catalog"
        else:
            reason = f"Book {params.isbn} is already checked out"
        logger.info("Checkout refused - %s", reason)
        return error_response(reason)

    book = inventory.get_book(params.isbn)
    message = f"Successfully checked out '{book}'"
    history_recorded = False
    if params.patron_id is not None:
        history_recorded = params.patron_id in library.patrons
        if history_recorded:
            message += f" to patron '{params.patron_id}'"
        else:
            message += f" (patron '{params.patron_id}' is unknown; borrow not recorded)"

    return success_response(
        message,
        data={
            "isbn": params.isbn,
            "patron_id": params.patron_id,
            "history_recorded": history_recorded,
        },
    )


# =============================================================================
# RETURN TOOL IMPLEMENTATION
# =============================================================================


class ReturnBookInput(BaseModel):
    """Input schema for the return_book tool."""

    isbn: str = Field(
        ...,
        description="ISBN of the book being returned",
        examples=["9780441172719"],
    )


async def return_book_handler(arguments: dict[str, Any]) -> dict[str, Any]:
    """Handler for the return_book tool."""
    try:
        params = ReturnBookInput.model_validate(arguments)
    except ValidationError as e:
        logger.warning("Invalid return parameters: %s", e)
        return error_response(f"Invalid return parameters: {e}")

    try:
        returned = get_library().inventory.return_book(params.isbn)
    except Exception as e:
        logger.exception("Unexpected error in return_book tool")
        return error_response(f"An unexpected error occurred: {e!s}")

    if not returned:
        logger.info("Return refused - %s is not checked out", params.isbn)
        return error_response(f"Book {params.isbn} is not checked out")

    return success_response(
        f"Successfully returned book {params.isbn}",
        data={"isbn": params.isbn},
    )


# =============================================================================
# TOOL REGISTRATION
# =============================================================================

checkout_book = {
    "name": "checkout_book",
    "description": (
        "Check out an available book. Optionally pass a patron_id to record the "
        "borrow in that patron's history."
    ),
    "input_model": CheckoutBookInput,
    "handler": checkout_book_handler,
}

return_book = {
    "name": "return_book",
    "description": "Return a checked-out book so it becomes available again.",
    "input_model": ReturnBookInput,
    "handler": return_book_handler,
}
