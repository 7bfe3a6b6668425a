"""
Library Catalog Package.

An in-memory library catalog and lending tracker.

Key Components:
- models: Pydantic models for books and patrons
- search: Exact-match search strategies and their selector
- inventory: Catalog maintenance and checkout tracking
- patrons: Patron directory and borrowing histories
- library: Facade sharing both managers with the MCP tools
- config: Configuration management with pydantic-settings
- tools: MCP tools exposing the catalog operations
"""

__version__ = "0.1.0"

from .errors import CatalogException, InvalidArgumentError, NotFoundError
from .inventory import InventoryManager
from .library import Library, get_library, reset_library
from .models import Book, Patron
from .patrons import PatronManager
from .search import SearchKind, get_search_strategy

__all__ = [
    "Book",
    "CatalogException",
    "InvalidArgumentError",
    "InventoryManager",
    "Library",
    "NotFoundError",
    "Patron",
    "PatronManager",
    "SearchKind",
    "__version__",
    "get_library",
    "get_search_strategy",
    "reset_library",
]
