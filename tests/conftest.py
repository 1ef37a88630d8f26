"""
Pytest configuration and shared fixtures.
"""

import pytest
from decimal import Decimal

from accounts.models import User
from accounts.user_service import UserService
from catalog.book_service import BookService
from catalog.models import Book


@pytest.fixture
def sample_book():
    """Create a sample book for testing."""
    return Book(
        title="Title1",
        author="Author1",
        genre="Genre1",
        price=Decimal("29.99")
    )


@pytest.fixture
def other_book():
    """Create a second, distinct book for testing."""
    return Book(
        title="Title2",
        author="Author2",
        genre="Genre2",
        price=Decimal("39.99")
    )


@pytest.fixture
def sample_user():
    """Create a user with funds for testing."""
    return User(
        username="jane_doe",
        password="password456",
        email="jane@example.com",
        balance=Decimal("100.00")
    )


@pytest.fixture
def book_service():
    """Create an empty catalog service."""
    return BookService()


@pytest.fixture
def user_service():
    """Create an empty account service."""
    return UserService()
