import logging
from typing import Any, Dict, List, Optional

from library_patterns.book import Book
from library_patterns.notifications import NotificationSink

logger = logging.getLogger(__name__)


class BookNotFoundError(LookupError):
    """Raised when an operation needs a book that is not in the catalog."""

    def __init__(self, title: str) -> None:
        super().__init__(f"Book '{title}' not found.")
        self.title = title


class BookStateError(ValueError):
    """Raised when a book is borrowed twice or returned while available."""

    def __init__(self, book: Book, action: str) -> None:
        state = "already borrowed" if book.borrowed else "not borrowed"
        super().__init__(f"Cannot {action} '{book.title}': book is {state}.")
        self.book = book
        self.action = action


class Catalog:
    """Central registry of books and of the sinks notified about them."""

    _instance: Optional["Catalog"] = None

    def __init__(self) -> None:
        self.books: List[Book] = []
        self.sinks: List[NotificationSink] = []

    # ------------------------- Singleton access ------------------------- #
    @classmethod
    def instance(cls) -> "Catalog":
        """Get or create the process-wide Catalog."""
        if cls._instance is None:
            cls._instance = cls()
            logger.debug("Catalog instance created")
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the process-wide Catalog; the next instance() builds a new one."""
        cls._instance = None

    # ------------------------- Core operations ------------------------- #
    def add_book(self, book: Book) -> None:
        """Add a pre-constructed Book and announce it. Duplicate titles are allowed."""
        self.books.append(book)
        logger.info(f"Book registered: {book.title}")
        self.broadcast(f"New book registered: {book.title}")

    def find_by_title(self, title: str) -> Optional[Book]:
        """Return the first book whose title matches ignoring case, or None."""
        wanted = title.lower()
        for book in self.books:
            if book.title.lower() == wanted:
                return book
        return None

    def list_books(self) -> List[Book]:
        return list(self.books)

    def borrow_book(self, title: str) -> Book:
        book = self._require(title)
        if book.borrowed:
            logger.warning(f"Borrow rejected, '{book.title}' is already borrowed")
            raise BookStateError(book, "borrow")
        book.borrow()
        self.broadcast(f"The book '{book.title}' has been borrowed.")
        return book

    def return_book(self, title: str) -> Book:
        book = self._require(title)
        if not book.borrowed:
            logger.warning(f"Return rejected, '{book.title}' is not borrowed")
            raise BookStateError(book, "return")
        book.return_()
        self.broadcast(f"The book '{book.title}' has been returned.")
        return book

    def get_statistics(self) -> Dict[str, Any]:
        borrowed = sum(1 for b in self.books if b.borrowed)
        return {
            "total_books": len(self.books),
            "borrowed_books": borrowed,
            "available_books": len(self.books) - borrowed,
            "sinks": len(self.sinks),
        }

    # ------------------------- Notifications ------------------------- #
    def register_sink(self, sink: NotificationSink) -> None:
        self.sinks.append(sink)
        logger.debug(f"Sink registered: {sink!r}")

    def broadcast(self, message: str) -> None:
        """Deliver message to every sink in registration order.

        A sink that raises stops the broadcast; the exception reaches the caller.
        """
        logger.debug(f"Broadcasting to {len(self.sinks)} sink(s): {message}")
        for sink in self.sinks:
            sink.receive(message)

    # ------------------------- Helpers ------------------------- #
    def _require(self, title: str) -> Book:
        book = self.find_by_title(title)
        if book is None:
            logger.warning(f"No book titled '{title}' in catalog")
            raise BookNotFoundError(title)
        return book
