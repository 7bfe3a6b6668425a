"""
Patron management for the library catalog.

The PatronManager owns the patron directory and each patron's borrowing
history. It is independent of the inventory: record_borrow() does not check
that the ISBN exists or is checked out, and checking a book out does not touch
any history. Callers that lend a book make both calls themselves.
"""

import logging

from .events import CatalogEvent, CatalogEventType, EventSink, discard_event
from .models.patron import Patron
from .observability import trace_catalog_operation

module_logger = logging.getLogger(__name__)


class PatronManager:
    """In-memory patron directory with borrowing histories."""

    def __init__(self, event_sink: EventSink | None = None, logger: logging.Logger | None = None):
        self._patrons: dict[str, Patron] = {}
        self._emit = event_sink or discard_event
        self._logger = logger or module_logger

    def _record(
        self,
        event_type: CatalogEventType,
        patron_id: str,
        message: str,
        isbn: str | None = None,
    ) -> None:
        self._logger.info(message)
        self._emit(
            CatalogEvent(event_type=event_type, patron_id=patron_id, isbn=isbn, message=message)
        )

    def add_patron(self, patron: Patron) -> None:
        """Add a patron, silently replacing any patron with the same id."""
        with trace_catalog_operation("patrons", "add_patron", patron_id=patron.id):
            self._patrons[patron.id] = patron
            self._record(
                CatalogEventType.PATRON_ADDED,
                patron.id,
                f"Added patron: {patron.name} ({patron.id})",
            )

    def update_patron(self, patron_id: str, name: str) -> bool:
        """
        Rename a patron.

        Returns:
            True if the patron was updated, False if the id is unknown
        """
        with trace_catalog_operation("patrons", "update_patron", patron_id=patron_id):
            patron = self._patrons.get(patron_id)
            if patron is None:
                return False
            patron.name = name
            self._record(
                CatalogEventType.PATRON_UPDATED,
                patron_id,
                f"Updated patron: {name} ({patron_id})",
            )
            return True

    def record_borrow(self, patron_id: str, isbn: str) -> bool:
        """
        Append an ISBN to a patron's borrowing history.

        Returns:
            True if the borrow was recorded, False if the id is unknown
        """
        with trace_catalog_operation(
            "patrons", "record_borrow", patron_id=patron_id, isbn=isbn
        ):
            patron = self._patrons.get(patron_id)
            if patron is None:
                return False
            patron.add_to_history(isbn)
            self._record(
                CatalogEventType.BORROW_RECORDED,
                patron_id,
                f"Recorded borrow of {isbn} by patron {patron_id}",
                isbn=isbn,
            )
            return True

    def get_borrow_history(self, patron_id: str) -> list[str]:
        """Borrowed ISBNs in the order they were recorded; empty for unknown ids."""
        patron = self._patrons.get(patron_id)
        if patron is None:
            return []
        return list(patron.borrowing_history)

    def get_patron(self, patron_id: str) -> Patron | None:
        return self._patrons.get(patron_id)

    def list_patrons(self) -> list[Patron]:
        return list(self._patrons.values())

    def __len__(self) -> int:
        return len(self._patrons)

    def __contains__(self, patron_id: object) -> bool:
        return patron_id in self._patrons
