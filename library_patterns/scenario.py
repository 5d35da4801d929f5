"""Scripted borrow/return run used by the CLI.

Every collaborator is passed in, so tests can drive the same flow against a
private Catalog instead of the process-wide one.
"""

import logging
from typing import List, Optional, Sequence

from config import settings
from library_patterns.book import Book
from library_patterns.catalog import Catalog
from library_patterns.notifications import Administrator
from library_patterns.services.isbn_adapter import IsbnCodeProvider
from library_patterns.ui_helpers import print_isbn_result

logger = logging.getLogger(__name__)


def run_scenario(
    catalog: Catalog,
    isbn_provider: IsbnCodeProvider,
    admin_names: Optional[Sequence[str]] = None,
    titles: Optional[Sequence[str]] = None,
    target_title: Optional[str] = None,
) -> List[Administrator]:
    """Register administrators and books, print the adapted ISBN, then borrow and return one book.

    Returns the administrators that were registered.
    """
    admin_names = settings.demo_admins if admin_names is None else admin_names
    titles = settings.demo_books if titles is None else titles
    target_title = settings.demo_target_title if target_title is None else target_title

    admins = [Administrator(name) for name in admin_names]
    for admin in admins:
        catalog.register_sink(admin)

    for title in titles:
        catalog.add_book(Book(title))

    print_isbn_result(isbn_provider.get_code())

    book = catalog.find_by_title(target_title)
    if book is not None and not book.borrowed:
        catalog.borrow_book(book.title)

    # Raises BookNotFoundError / BookStateError when the target is missing or was never lent.
    catalog.return_book(target_title)
    logger.info(f"Scenario finished with {len(catalog.books)} book(s)")
    return admins
