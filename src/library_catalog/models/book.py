"""
Book model for the library catalog.

A book is located, stored and removed by its ISBN alone, so the ISBN is frozen
once the model is built. Title, author and publication year stay mutable and
are rewritten in place by the inventory's update operation.

The model carries no value rules: empty titles, negative years
and duplicate ISBNs across instances are all accepted. Pydantic still checks
the Python types of each field.
"""

from pydantic import BaseModel, ConfigDict, Field


class Book(BaseModel):
    """
    Represents a book in the library catalog.

    The inventory owns every catalogued instance and is the only component
    expected to mutate one.
    """

    isbn: str = Field(
        ...,
        description="Unique identifier of the book; the catalog key",
        frozen=True,
        examples=["9780441172719", "0001"],
    )

    title: str = Field(
        ...,
        description="The title of the book",
        examples=["Dune", "The Left Hand of Darkness"],
    )

    author: str = Field(
        ...,
        description="Author name as printed on the book",
        examples=["Frank Herbert", "Ursula K. Le Guin"],
    )

    publication_year: int = Field(
        ...,
        description="Year the book was published",
        examples=[1965, 1969],
    )

    def update(self, title: str, author: str, publication_year: int) -> None:
        """
        Overwrite the mutable descriptive fields in place.

        All three values are validated before any is written, so a rejected
        update leaves the book unchanged.

        Raises:
            ValidationError: If any value has the wrong type
        """
        validated = self.model_validate(
            {
                **self.model_dump(),
                "title": title,
                "author": author,
                "publication_year": publication_year,
            }
        )
        self.title = validated.title
        self.author = validated.author
        self.publication_year = validated.publication_year

    def __str__(self) -> str:
        return f"{self.title} by {self.author} ({self.isbn}, {self.publication_year})"

    model_config = ConfigDict(
        # Re-validate types when update() assigns new values
        validate_assignment=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "isbn": "9780441172719",
                "title": "Dune",
                "author": "Frank Herbert",
                "publication_year": 1965,
            }
        },
    )
