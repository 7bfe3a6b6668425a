"""
MCP Tools for the library catalog.

Each tool is a dictionary with a name, a description, the JSON Schema of its
Pydantic input model and an async handler. The server registers every entry
of ``all_tools``.
"""

from .catalog import add_book, check_availability, remove_book, search_catalog, update_book
from .circulation import checkout_book, return_book
from .patrons import add_patron, get_borrow_history, record_borrow, update_patron

all_tools = [
    add_book,
    remove_book,
    update_book,
    search_catalog,
    check_availability,
    checkout_book,
    return_book,
    add_patron,
    update_patron,
    record_borrow,
    get_borrow_history,
]

__all__ = [
    "add_book",
    "add_patron",
    "all_tools",
    "check_availability",
    "checkout_book",
    "get_borrow_history",
    "record_borrow",
    "remove_book",
    "return_book",
    "search_catalog",
    "update_book",
    "update_patron",
]
