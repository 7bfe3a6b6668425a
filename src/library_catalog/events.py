"""
Catalog events.

The inventory and patron managers report every state change twice: as a
free-text log line and as a CatalogEvent handed to an injected sink. The sink
is any callable taking one event, so a plain ``list.append`` works, and tests
can assert on what happened without capturing log output.
"""

from collections.abc import Callable
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class CatalogEventType(str, Enum):
    """Kinds of state change reported by the managers."""

    BOOK_ADDED = "book_added"
    BOOK_REMOVED = "book_removed"
    BOOK_UPDATED = "book_updated"
    BOOK_CHECKED_OUT = "book_checked_out"
    BOOK_RETURNED = "book_returned"
    PATRON_ADDED = "patron_added"
    PATRON_UPDATED = "patron_updated"
    BORROW_RECORDED = "borrow_recorded"


class CatalogEvent(BaseModel):
    """A single state change in the catalog or patron directory."""

    event_type: CatalogEventType = Field(..., description="What happened")

    isbn: str | None = Field(
        None,
        description="ISBN of the book involved, if any",
    )

    patron_id: str | None = Field(
        None,
        description="Id of the patron involved, if any",
    )

    message: str = Field(..., description="Human-readable description of the change")

    timestamp: datetime = Field(
        default_factory=datetime.now,
        description="When the change happened",
    )

    model_config = ConfigDict(frozen=True)


EventSink = Callable[[CatalogEvent], None]


def discard_event(event: CatalogEvent) -> None:  # noqa: ARG001
    """Sink that drops every event."""


class EventRecorder:
    """Sink that keeps every event it receives, in order."""

    def __init__(self) -> None:
        self.events: list[CatalogEvent] = []

    def __call__(self, event: CatalogEvent) -> None:
        self.events.append(event)

    def of_type(self, event_type: CatalogEventType) -> list[CatalogEvent]:
        """Return the recorded events of one type."""
        return [event for event in self.events if event.event_type == event_type]

    def clear(self) -> None:
        self.events.clear()

    def __len__(self) -> int:
        return len(self.events)
