"""
Tests for the InventoryManager.

These tests cover:
1. Catalog maintenance (add, remove, update)
2. Searching by title, author and ISBN
3. Checkout and return bookkeeping
4. Logging and event reporting of each state change
"""

import logging

import pytest
from pydantic import ValidationError

from library_catalog.errors import InvalidArgumentError
from library_catalog.events import CatalogEventType
from library_catalog.inventory import InventoryManager
from library_catalog.models import Book


class TestCatalogMaintenance:
    def test_add_book(self, inventory, dune):
        inventory.add_book(dune)

        assert inventory.get_book("0001") is dune
        assert "0001" in inventory
        assert len(inventory) == 1

    def test_add_book_overwrites_same_isbn(self, inventory, dune):
        inventory.add_book(dune)
        replacement = Book(isbn="0001", title="Replacement", author="Other", publication_year=2000)

        inventory.add_book(replacement)

        assert inventory.get_book("0001") is replacement
        assert len(inventory) == 1

    def test_remove_book(self, inventory, dune):
        inventory.add_book(dune)

        inventory.remove_book("0001")

        assert inventory.get_book("0001") is None
        assert len(inventory) == 0

    def test_remove_unknown_book_is_silent(self, inventory, events, caplog):
        caplog.set_level(logging.INFO, logger="library_catalog.inventory")

        inventory.remove_book("missing")

        assert len(events) == 0
        assert caplog.records == []

    def test_update_book_in_place(self, inventory, dune):
        inventory.add_book(dune)

        assert inventory.update_book("0001", "Dune", "Frank Herbert", 1966) is True

        assert dune.author == "Frank Herbert"
        assert dune.publication_year == 1966
        assert inventory.get_book("0001") is dune

    def test_rejected_update_leaves_book_unchanged(self, inventory, events, dune):
        inventory.add_book(dune)
        events.clear()

        with pytest.raises(ValidationError):
            inventory.update_book("0001", "New Title", "New Author", "not-a-year")

        assert str(inventory.get_book("0001")) == "Dune by Herbert (0001, 1965)"
        assert len(events) == 0

    def test_update_unknown_book_is_noop(self, inventory, events):
        assert inventory.update_book("missing", "T", "A", 2000) is False
        assert len(inventory) == 0
        assert len(events) == 0

    def test_list_books_preserves_insertion_order(self, stocked_inventory, sample_books):
        assert [b.isbn for b in stocked_inventory.list_books()] == [b.isbn for b in sample_books]

    def test_list_books_is_snapshot(self, stocked_inventory):
        snapshot = stocked_inventory.list_books()
        snapshot.clear()

        assert len(stocked_inventory) == 5


class TestSearchBooks:
    def test_search_by_title_ignores_case(self, stocked_inventory):
        results = stocked_inventory.search_books("title", "DUNE")

        assert [book.isbn for book in results] == ["0001", "0004"]

    def test_search_by_author(self, stocked_inventory):
        results = stocked_inventory.search_books("author", "le guin")

        assert [book.isbn for book in results] == ["0003"]

    def test_search_by_isbn_is_case_sensitive(self, stocked_inventory):
        assert len(stocked_inventory.search_books("isbn", "isbn-x")) == 1
        assert stocked_inventory.search_books("isbn", "ISBN-X") == []

    def test_search_kind_ignores_case(self, stocked_inventory):
        assert len(stocked_inventory.search_books("Author", "Herbert")) == 2

    def test_search_unknown_kind_raises(self, stocked_inventory):
        with pytest.raises(InvalidArgumentError):
            stocked_inventory.search_books("genre", "x")

    def test_search_unknown_kind_raises_on_empty_catalog(self, inventory):
        with pytest.raises(InvalidArgumentError):
            inventory.search_books("genre", "x")

    def test_search_sees_updates(self, stocked_inventory):
        stocked_inventory.update_book("0003", "The Word for World Is Forest", "Le Guin", 1972)

        assert stocked_inventory.search_books("title", "The Dispossessed") == []
        assert len(stocked_inventory.search_books("title", "the word for world is forest")) == 1


class TestCirculation:
    def test_dune_scenario(self, inventory, dune):
        inventory.add_book(dune)

        results = inventory.search_books("title", "dune")
        assert [str(book) for book in results] == ["Dune by Herbert (0001, 1965)"]

        assert inventory.checkout_book("0001") is True
        assert inventory.is_available("0001") is False
        assert inventory.return_book("0001") is True
        assert inventory.is_available("0001") is True

    def test_double_checkout_fails(self, inventory, dune):
        inventory.add_book(dune)

        assert inventory.checkout_book("0001") is True
        assert inventory.checkout_book("0001") is False
        assert inventory.is_borrowed("0001") is True
        assert inventory.is_available("0001") is False

    def test_checkout_unknown_book_fails(self, inventory):
        assert inventory.checkout_book("missing") is False
        assert inventory.borrowed_isbns == []

    def test_return_without_checkout_fails(self, inventory, dune):
        inventory.add_book(dune)

        assert inventory.return_book("0001") is False
        assert inventory.is_available("0001") is True

    def test_double_return_fails(self, inventory, dune):
        inventory.add_book(dune)
        inventory.checkout_book("0001")

        assert inventory.return_book("0001") is True
        assert inventory.return_book("0001") is False

    def test_unknown_isbn_is_unavailable(self, inventory):
        assert inventory.is_available("missing") is False

    def test_borrowed_isbns(self, stocked_inventory):
        stocked_inventory.checkout_book("0003")
        stocked_inventory.checkout_book("0001")

        assert stocked_inventory.borrowed_isbns == ["0001", "0003"]


class TestRemovalOfBorrowedBooks:
    def test_removal_clears_borrowed_flag_by_default(self, inventory, dune):
        inventory.add_book(dune)
        inventory.checkout_book("0001")

        inventory.remove_book("0001")
        inventory.add_book(Book(isbn="0001", title="Dune", author="Herbert", publication_year=1965))

        assert inventory.is_borrowed("0001") is False
        assert inventory.is_available("0001") is True

    def test_removal_can_keep_borrowed_flag(self, dune):
        inventory = InventoryManager(clear_borrowed_on_remove=False)
        inventory.add_book(dune)
        inventory.checkout_book("0001")

        inventory.remove_book("0001")

        assert inventory.is_borrowed("0001") is True
        assert inventory.is_available("0001") is False

        inventory.add_book(Book(isbn="0001", title="Dune", author="Herbert", publication_year=1965))
        assert inventory.is_available("0001") is False

    def test_return_of_removed_book_succeeds_when_flag_kept(self, dune):
        inventory = InventoryManager(clear_borrowed_on_remove=False)
        inventory.add_book(dune)
        inventory.checkout_book("0001")
        inventory.remove_book("0001")

        assert inventory.return_book("0001") is True
        assert inventory.is_borrowed("0001") is False


class TestInventoryReporting:
    def test_events_for_each_state_change(self, inventory, events, dune):
        inventory.add_book(dune)
        inventory.update_book("0001", "Dune", "Frank Herbert", 1965)
        inventory.checkout_book("0001")
        inventory.return_book("0001")
        inventory.remove_book("0001")

        assert [event.event_type for event in events.events] == [
            CatalogEventType.BOOK_ADDED,
            CatalogEventType.BOOK_UPDATED,
            CatalogEventType.BOOK_CHECKED_OUT,
            CatalogEventType.BOOK_RETURNED,
            CatalogEventType.BOOK_REMOVED,
        ]
        assert all(event.isbn == "0001" for event in events.events)
        assert events.events[0].message == "Added book: Dune by Herbert (0001, 1965)"

    def test_refused_operations_emit_nothing(self, inventory, events, dune):
        inventory.add_book(dune)
        events.clear()

        inventory.return_book("0001")
        inventory.checkout_book("missing")
        inventory.checkout_book("0001")
        inventory.checkout_book("0001")

        assert len(events.of_type(CatalogEventType.BOOK_CHECKED_OUT)) == 1
        assert events.of_type(CatalogEventType.BOOK_RETURNED) == []

    def test_log_lines(self, inventory, dune, caplog):
        caplog.set_level(logging.INFO, logger="library_catalog.inventory")

        inventory.add_book(dune)
        inventory.checkout_book("0001")

        messages = [record.getMessage() for record in caplog.records]
        assert "Added book: Dune by Herbert (0001, 1965)" in messages
        assert "Checked out book: Dune by Herbert (0001, 1965)" in messages

    def test_injected_logger(self, dune, caplog):
        custom = logging.getLogger("tests.catalog")
        inventory = InventoryManager(logger=custom)
        caplog.set_level(logging.INFO, logger="tests.catalog")

        inventory.add_book(dune)

        assert [record.name for record in caplog.records] == ["tests.catalog"]

    def test_works_without_sink(self, dune):
        inventory = InventoryManager()
        inventory.add_book(dune)

        assert inventory.checkout_book("0001") is True
