"""Test configuration and fixtures for the library catalog.

Every test starts from a clean slate:
1. Configuration and the shared Library singleton are reset around each test
2. logfire is configured once per session with nothing leaving the process
3. Managers are built with an EventRecorder sink so tests can assert on the
   state changes they report
"""

import os
from collections.abc import Generator

import pytest

from library_catalog.config import CatalogConfig, reset_config
from library_catalog.events import EventRecorder
from library_catalog.inventory import InventoryManager
from library_catalog.library import Library, reset_library
from library_catalog.models import Book, Patron
from library_catalog.observability import initialize_observability
from library_catalog.patrons import PatronManager


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "mcp_tools: tests exercising the MCP tool handlers")


@pytest.fixture(scope="session", autouse=True)
def quiet_observability() -> None:
    """Configure logfire so spans stay local during the test run."""
    initialize_observability(
        CatalogConfig(logfire_enabled=True, logfire_send=False, logfire_console=False)
    )


@pytest.fixture(autouse=True)
def reset_singletons() -> Generator[None, None, None]:
    """Reset global configuration and the shared library around each test."""
    reset_config()
    reset_library()
    yield
    reset_config()
    reset_library()


# === Environment Fixtures ===


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Provide an environment without LIBRARY_CATALOG_* variables."""
    original_env = os.environ.copy()

    for key in list(os.environ.keys()):
        if key.startswith("LIBRARY_CATALOG_"):
            del os.environ[key]

    yield

    os.environ.clear()
    os.environ.update(original_env)


# === Catalog Fixtures ===


@pytest.fixture
def events() -> EventRecorder:
    return EventRecorder()


@pytest.fixture
def inventory(events: EventRecorder) -> InventoryManager:
    return InventoryManager(event_sink=events)


@pytest.fixture
def patrons(events: EventRecorder) -> PatronManager:
    return PatronManager(event_sink=events)


@pytest.fixture
def library(events: EventRecorder) -> Library:
    return Library(event_sink=events)


@pytest.fixture
def dune() -> Book:
    return Book(isbn="0001", title="Dune", author="Herbert", publication_year=1965)


@pytest.fixture
def sample_books() -> list[Book]:
    """A small catalog with a shared author and a repeated title."""
    return [
        Book(isbn="0001", title="Dune", author="Herbert", publication_year=1965),
        Book(isbn="0002", title="Dune Messiah", author="Herbert", publication_year=1969),
        Book(isbn="0003", title="The Dispossessed", author="Le Guin", publication_year=1974),
        Book(isbn="0004", title="Dune", author="Anderson", publication_year=2000),
        Book(isbn="isbn-x", title="Solaris", author="Lem", publication_year=1961),
    ]


@pytest.fixture
def stocked_inventory(inventory: InventoryManager, sample_books: list[Book]) -> InventoryManager:
    for book in sample_books:
        inventory.add_book(book)
    return inventory


@pytest.fixture
def jane() -> Patron:
    return Patron(id="patron_0001", name="Jane Doe")
