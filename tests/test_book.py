import pytest

from library_patterns.book import Book


def test_new_book_is_available():
    book = Book("El Quijote")
    assert book.title == "El Quijote"
    assert book.borrowed is False

def test_title_is_kept_as_given_and_read_only():
    book = Book("  Dune  ")
    assert book.title == "  Dune  "
    with pytest.raises(AttributeError):
        book.title = "Other"

def test_borrow_then_return_goes_back_to_available():
    book = Book("Dune")
    book.borrow()
    assert book.borrowed is True
    book.return_()
    assert book.borrowed is False

def test_borrow_is_idempotent():
    book = Book("Dune")
    book.borrow()
    book.borrow()
    assert book.borrowed is True

def test_return_on_available_book_is_silently_accepted():
    # Book itself has no guard; the catalog is where returns are checked.
    book = Book("Dune")
    book.return_()
    assert book.borrowed is False

def test_to_dict():
    book = Book("Dune")
    book.borrow()
    assert book.to_dict() == {"title": "Dune", "borrowed": True}
