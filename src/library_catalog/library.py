"""
Library facade.

Bundles one InventoryManager and one PatronManager behind a single object that
the MCP tools share. The two managers stay independent; lend() is simply a
caller that checks a book out and, if that worked, records the borrow in the
patron's history.
"""

import logging

from .config import CatalogConfig, get_config
from .events import EventSink
from .inventory import InventoryManager
from .patrons import PatronManager
from .seed import seed_library

logger = logging.getLogger(__name__)


class Library:
    """A catalog and a patron directory that share one event sink."""

    def __init__(
        self,
        event_sink: EventSink | None = None,
        clear_borrowed_on_remove: bool = True,
    ):
        self.inventory = InventoryManager(
            event_sink=event_sink, clear_borrowed_on_remove=clear_borrowed_on_remove
        )
        self.patrons = PatronManager(event_sink=event_sink)

    @classmethod
    def from_config(cls, config: CatalogConfig, event_sink: EventSink | None = None) -> "Library":
        """Build a library honouring the catalog settings, seeding it if asked."""
        library = cls(
            event_sink=event_sink,
            clear_borrowed_on_remove=config.clear_borrowed_on_remove,
        )
        if config.seed_demo_data:
            seed_library(
                library.inventory,
                library.patrons,
                book_count=config.seed_book_count,
                patron_count=config.seed_patron_count,
                seed=config.seed_random_seed,
            )
        return library

    def lend(self, patron_id: str, isbn: str) -> bool:
        """
        Check a book out and record it in the patron's history.

        The history is only touched when the checkout succeeds. An unknown
        patron does not block the checkout; the borrow just goes unrecorded.

        Returns:
            True if the checkout succeeded
        """
        if not self.inventory.checkout_book(isbn):
            return False
        if not self.patrons.record_borrow(patron_id, isbn):
            logger.warning("Checked out %s for unknown patron %s", isbn, patron_id)
        return True


class _LibraryStore:
    """Internal storage for the shared library instance."""

    _instance: Library | None = None


def get_library() -> Library:
    """Get or create the process-wide library."""
    if _LibraryStore._instance is None:  # type: ignore[reportPrivateUsage]
        _LibraryStore._instance = Library.from_config(get_config())  # type: ignore[reportPrivateUsage]
    return _LibraryStore._instance  # type: ignore[reportPrivateUsage]


def reset_library() -> None:
    """Drop the shared library (useful for testing)."""
    _LibraryStore._instance = None  # type: ignore[reportPrivateUsage]
