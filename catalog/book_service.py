"""
Catalog operations over an in-memory list of books.

Every operation is a single check-then-mutate step and reports its outcome
as a boolean. The reason behind a rejected operation is only visible in the
logs.
"""

from typing import List, Optional

import structlog

from accounts.models import User
from .models import Book

logger = structlog.get_logger(__name__)


class BookService:
    """
    Owns the book catalog and the operations performed against it.
    """

    def __init__(self, books: Optional[List[Book]] = None):
        """
        Initialize the catalog.

        Args:
            books: Backing collection. Anything with list semantics
                (``in``, iteration, ``append``, ``remove``) is accepted.
                A new empty list is used when omitted.
        """
        self.books = books if books is not None else []
        self.logger = logger.bind(component="book_service")

    def search_book(self, keyword: str) -> List[Book]:
        """
        Find books whose title, author or genre contains the keyword.

        Matching is a case-sensitive substring test, so an empty keyword
        matches every book. Results keep catalog order.
        """
        results = [
            book for book in self.books
            if keyword in book.title or keyword in book.author or keyword in book.genre
        ]
        self.logger.debug("Catalog searched", keyword=keyword, matches=len(results))
        return results

    def purchase_book(self, user: User, book: Book) -> bool:
        """
        Sell a catalog book to a user.

        Args:
            user: Buyer; must have a balance of at least the book's price
            book: Book to buy; must be in the catalog

        Returns:
            bool: True if the book was added to the user's purchases and
            the balance charged, False if nothing changed
        """
        if book not in self.books:
            self.logger.info(
                "Purchase rejected",
                username=user.username,
                title=book.title,
                reason="not_in_catalog"
            )
            return False

        if user.balance < book.price:
            self.logger.info(
                "Purchase rejected",
                username=user.username,
                title=book.title,
                reason="insufficient_balance",
                balance=str(user.balance),
                price=str(book.price)
            )
            return False

        user.purchased_books.append(book)
        user.balance = user.balance - book.price

        self.logger.info(
            "Book purchased",
            username=user.username,
            title=book.title,
            price=str(book.price),
            balance=str(user.balance)
        )
        return True

    def add_book_review(self, user: User, book: Book, review: str) -> bool:
        """
        Attach a review to a book the user has bought.

        Review text is stored as given, empty strings included.
        """
        if book not in user.purchased_books:
            self.logger.info(
                "Review rejected",
                username=user.username,
                title=book.title,
                reason="not_purchased"
            )
            return False

        book.reviews.append(review)
        self.logger.info("Review added", username=user.username, title=book.title)
        return True

    def add_book(self, book: Book) -> bool:
        """Add a book unless an equal one is already listed."""
        if book in self.books:
            self.logger.info("Book not added", title=book.title, reason="duplicate")
            return False

        self.books.append(book)
        self.logger.info("Book added", title=book.title, author=book.author)
        return True

    def remove_book(self, book: Book) -> bool:
        """Remove the first listed book equal to ``book``."""
        try:
            self.books.remove(book)
        except ValueError:
            self.logger.info("Book not removed", title=book.title, reason="not_in_catalog")
            return False

        self.logger.info("Book removed", title=book.title, author=book.author)
        return True
