"""
Patron tools for the library catalog MCP server.

1. add_patron: Register a patron or replace the one with the same id
2. update_patron: Rename a patron
3. record_borrow: Append an ISBN to a patron's borrowing history
4. get_borrow_history: List the ISBNs a patron has borrowed, oldest first

record_borrow is independent of the catalog: it does not check that the ISBN
exists or is checked out.
"""

import logging
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from ..errors import NotFoundError
from ..library import get_library
from ..models.patron import Patron
from .responses import error_response, success_response

logger = logging.getLogger(__name__)


class AddPatronInput(BaseModel):
    """Input schema for the add_patron tool."""

    patron_id: str = Field(..., description="Unique patron id", examples=["patron_0001"])
    name: str = Field(..., description="Full name of the patron", examples=["Jane Doe"])


class UpdatePatronInput(BaseModel):
    """Input schema for the update_patron tool."""

    patron_id: str = Field(..., description="Id of the patron to rename")
    name: str = Field(..., description="New full name")


class RecordBorrowInput(BaseModel):
    """Input schema for the record_borrow tool."""

    patron_id: str = Field(..., description="Id of the borrowing patron")
    isbn: str = Field(..., description="ISBN of the borrowed book")


class BorrowHistoryInput(BaseModel):
    """Input schema for the get_borrow_history tool."""

    patron_id: str = Field(..., description="Id of the patron")


async def add_patron_handler(arguments: dict[str, Any]) -> dict[str, Any]:
    """Handler for the add_patron tool."""
    try:
        params = AddPatronInput.model_validate(arguments)
    except ValidationError as e:
        logger.warning("Invalid add_patron parameters: %s", e)
        return error_response(f"Invalid add_patron parameters: {e}")

    patron = Patron(id=params.patron_id, name=params.name)
    try:
        get_library().patrons.add_patron(patron)
    except Exception as e:
        logger.exception("Unexpected error in add_patron tool")
        return error_response(f"An unexpected error occurred: {e!s}")

    return success_response(
        f"Added patron {patron.name} ({patron.id})",
        data={"patron": patron.model_dump()},
    )


async def update_patron_handler(arguments: dict[str, Any]) -> dict[str, Any]:
    """Handler for the update_patron tool."""
    try:
        params = UpdatePatronInput.model_validate(arguments)
    except ValidationError as e:
        logger.warning("Invalid update_patron parameters: %s", e)
        return error_response(f"Invalid update_patron parameters: {e}")

    patrons = get_library().patrons
    try:
        if not patrons.update_patron(params.patron_id, params.name):
            raise NotFoundError(f"No patron with id {params.patron_id}")
    except NotFoundError as e:
        logger.info("update_patron failed - %s", e)
        return error_response(str(e))
    except Exception as e:
        logger.exception("Unexpected error in update_patron tool")
        return error_response(f"An unexpected error occurred: {e!s}")

    return success_response(
        f"Renamed patron {params.patron_id} to {params.name}",
        data={"patron": patrons.get_patron(params.patron_id).model_dump()},
    )


async def record_borrow_handler(arguments: dict[str, Any]) -> dict[str, Any]:
    """Handler for the record_borrow tool."""
    try:
        params = RecordBorrowInput.model_validate(arguments)
    except ValidationError as e:
        logger.warning("Invalid record_borrow parameters: %s", e)
        return error_response(f"Invalid record_borrow parameters: {e}")

    patrons = get_library().patrons
    try:
        if not patrons.record_borrow(params.patron_id, params.isbn):
            raise NotFoundError(f"No patron with id {params.patron_id}")
    except NotFoundError as e:
        logger.info("record_borrow failed - %s", e)
        return error_response(str(e))
    except Exception as e:
        logger.exception("Unexpected error in record_borrow tool")
        return error_response(f"An unexpected error occurred: {e!s}")

    history = patrons.get_borrow_history(params.patron_id)
    return success_response(
        f"Recorded borrow of {params.isbn} by patron {params.patron_id}",
        data={"patron_id": params.patron_id, "borrowing_history": history},
    )


async def get_borrow_history_handler(arguments: dict[str, Any]) -> dict[str, Any]:
    """
    Handler for the get_borrow_history tool.

    Unknown patrons are not an error; they simply have an empty history.
    """
    try:
        params = BorrowHistoryInput.model_validate(arguments)
    except ValidationError as e:
        logger.warning("Invalid get_borrow_history parameters: %s", e)
        return error_response(f"Invalid get_borrow_history parameters: {e}")

    try:
        history = get_library().patrons.get_borrow_history(params.patron_id)
    except Exception as e:
        logger.exception("Unexpected error in get_borrow_history tool")
        return error_response(f"An unexpected error occurred: {e!s}")

    if history:
        text = f"Patron {params.patron_id} has borrowed: {', '.join(history)}"
    else:
        text = f"Patron {params.patron_id} has no borrowing history"

    return success_response(
        text,
        data={"patron_id": params.patron_id, "borrowing_history": history},
    )


# =============================================================================
# TOOL REGISTRATION
# =============================================================================

add_patron = {
    "name": "add_patron",
    "description": "Register a patron. A patron with the same id is replaced.",
    "input_model": AddPatronInput,
    "handler": add_patron_handler,
}

update_patron = {
    "name": "update_patron",
    "description": "Change the name of a registered patron.",
    "input_model": UpdatePatronInput,
    "handler": update_patron_handler,
}

record_borrow = {
    "name": "record_borrow",
    "description": (
        "Append an ISBN to a patron's borrowing history. Does not check the book "
        "out; use checkout_book for that."
    ),
    "input_model": RecordBorrowInput,
    "handler": record_borrow_handler,
}

get_borrow_history = {
    "name": "get_borrow_history",
    "description": "List the ISBNs a patron has borrowed, oldest first.",
    "input_model": BorrowHistoryInput,
    "handler": get_borrow_history_handler,
}
