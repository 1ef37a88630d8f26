"""
Main entry point for the bookstore demo.
Seeds a catalog, runs a short customer session and prints the outcome.

Usage:
    python main.py [keyword]
"""

import sys
from decimal import Decimal
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from accounts.models import User
from accounts.user_service import UserService
from catalog.book_service import BookService
from catalog.models import Book
from utilities.config import config
from utilities.logger import setup_logging, get_logger


SAMPLE_BOOKS = [
    Book(title="A Light in the Attic", author="Shel Silverstein", genre="Poetry", price=Decimal("51.77")),
    Book(title="Tipping the Velvet", author="Sarah Waters", genre="Historical Fiction", price=Decimal("53.74")),
    Book(title="Sapiens", author="Yuval Noah Harari", genre="History", price=Decimal("54.23")),
    Book(title="The Requiem Red", author="Brynn Chapman", genre="Young Adult", price=Decimal("22.65")),
    Book(title="Sharp Objects", author="Gillian Flynn", genre="Mystery", price=Decimal("47.82")),
]


def main():
    """Run a demo session against fresh in-memory services."""
    setup_logging(
        log_level=config.log_level,
        log_format=config.log_format,
        log_file=config.get_log_file_path(),
        debug=config.debug
    )

    logger = get_logger(__name__)
    keyword = sys.argv[1] if len(sys.argv) > 1 else ""

    book_service = BookService()
    user_service = UserService()

    for book in SAMPLE_BOOKS:
        book_service.add_book(book.copy(deep=True))
    logger.info("Catalog seeded", books=len(book_service.books))

    user_service.register_user(User(
        username="demo",
        password="demo",
        email="demo@example.com",
        balance=config.demo_balance
    ))
    user = user_service.login_user("demo", "demo")

    matches = book_service.search_book(keyword)
    print(f"🔎 {len(matches)} book(s) matching {keyword!r}")
    for book in matches:
        print(f"   - {book.title} by {book.author} [{book.genre}] {book.price}")

    if not matches:
        return

    book = matches[0]
    if book_service.purchase_book(user, book):
        book_service.add_book_review(user, book, "Great book!")
        print(f"✅ Purchased {book.title!r}, balance left: {user.balance}")
        print(f"   Reviews: {book.reviews}")
    else:
        print(f"❌ Could not purchase {book.title!r} (balance {user.balance}, price {book.price})")


if __name__ == "__main__":
    main()
