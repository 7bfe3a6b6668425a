"""
Patron model for the library catalog.

A patron is identified by an immutable id and carries a mutable display name
plus an append-only borrowing history of ISBNs. The same ISBN may appear in the
history more than once when a patron borrows a book again.
"""

from pydantic import BaseModel, ConfigDict, Field


class Patron(BaseModel):
    """
    Represents a library patron and the books they have borrowed over time.

    History entries are never removed or reordered; add_to_history() is the
    only way the history grows.
    """

    id: str = Field(
        ...,
        description="Unique identifier for the patron",
        frozen=True,
        examples=["patron_0001", "p-42"],
    )

    name: str = Field(
        ...,
        description="Full name of the patron",
        examples=["Jane Doe", "Maria Garcia"],
    )

    borrowing_history: list[str] = Field(
        default_factory=list,
        description="ISBNs borrowed by the patron, oldest first",
        examples=[["0001", "0002", "0001"]],
    )

    def add_to_history(self, isbn: str) -> None:
        """Append an ISBN to the end of the borrowing history."""
        self.borrowing_history.append(isbn)

    @property
    def borrow_count(self) -> int:
        """Total number of recorded borrows, repeats included."""
        return len(self.borrowing_history)

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "id": "patron_0001",
                "name": "Jane Doe",
                "borrowing_history": ["0001", "0002"],
            }
        },
    )
