"""
Demo data for the library catalog.

Fills an inventory and a patron directory with realistic-looking records
generated by Faker. The output is deterministic for a given seed, which keeps
demo sessions and tests reproducible.
"""

import logging
import random

from faker import Faker

from .inventory import InventoryManager
from .models.book import Book
from .models.patron import Patron
from .patrons import PatronManager

logger = logging.getLogger(__name__)


def generate_isbn13(rng: random.Random) -> str:
    """Generate an ISBN-13 with a valid check digit."""
    prefix = "978"
    group = str(rng.randint(0, 9))
    publisher = str(rng.randint(1000, 9999))
    title = str(rng.randint(1000, 9999))

    isbn_without_check = f"{prefix}{group}{publisher}{title}"
    total = sum(int(digit) * (3 if i % 2 else 1) for i, digit in enumerate(isbn_without_check))
    check_digit = (10 - (total % 10)) % 10
    return f"{isbn_without_check}{check_digit}"


def generate_books(count: int, fake: Faker, rng: random.Random) -> list[Book]:
    """Generate ``count`` books with distinct ISBNs."""
    books: list[Book] = []
    seen: set[str] = set()
    while len(books) < count:
        isbn = generate_isbn13(rng)
        if isbn in seen:
            continue
        seen.add(isbn)
        books.append(
            Book(
                isbn=isbn,
                title=fake.catch_phrase(),
                author=fake.name(),
                publication_year=rng.randint(1850, 2024),
            )
        )
    return books


def generate_patrons(count: int, fake: Faker) -> list[Patron]:
    """Generate ``count`` patrons with sequential ids."""
    return [Patron(id=f"patron_{i:04d}", name=fake.name()) for i in range(1, count + 1)]


def seed_library(
    inventory: InventoryManager,
    patrons: PatronManager,
    book_count: int = 50,
    patron_count: int = 10,
    seed: int = 42,
) -> None:
    """
    Populate an inventory and patron directory with generated records.

    Args:
        inventory: Catalog to fill
        patrons: Patron directory to fill
        book_count: Number of books to add
        patron_count: Number of patrons to add
        seed: Seed for both Faker and the ISBN generator
    """
    fake = Faker()
    fake.seed_instance(seed)
    rng = random.Random(seed)

    for book in generate_books(book_count, fake, rng):
        inventory.add_book(book)
    for patron in generate_patrons(patron_count, fake):
        patrons.add_patron(patron)

    logger.info("Seeded catalog with %d books and %d patrons", book_count, patron_count)
