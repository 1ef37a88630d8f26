"""
Unit tests for the Book model.
Tests validation, defaults and value equality.
"""

import pytest
from decimal import Decimal
from pydantic import ValidationError

from catalog.models import Book


class TestBook:
    """Test cases for Book model."""

    def test_valid_book(self):
        """Test creating a valid book."""
        book = Book(
            title="A Light in the Attic",
            author="Shel Silverstein",
            genre="Poetry",
            price=Decimal("51.77")
        )

        assert book.title == "A Light in the Attic"
        assert book.price == Decimal("51.77")
        assert book.reviews == []

    def test_free_book_allowed(self):
        """Test that a zero price is accepted."""
        book = Book(title="Free", author="Anon", genre="Misc", price=Decimal("0"))

        assert book.price == Decimal("0")

    def test_invalid_negative_price(self):
        """Test validation of negative prices."""
        with pytest.raises(ValidationError) as exc_info:
            Book(title="Test", author="Author", genre="Genre", price=Decimal("-1.00"))

        assert "Price cannot be negative" in str(exc_info.value)

    def test_missing_required_field(self):
        """Test that title, author, genre and price are required."""
        with pytest.raises(ValidationError):
            Book(title="Test", author="Author", price=Decimal("9.99"))

    def test_reviews_not_shared_between_books(self):
        """Test that each book gets its own review list."""
        first = Book(title="A", author="B", genre="C", price=Decimal("1"))
        second = Book(title="A", author="B", genre="C", price=Decimal("1"))

        first.reviews.append("Nice")

        assert second.reviews == []

    def test_equal_fields_mean_equal_books(self, sample_book):
        """Test that books compare by value, not identity."""
        twin = Book(
            title="Title1",
            author="Author1",
            genre="Genre1",
            price=Decimal("29.99")
        )

        assert twin is not sample_book
        assert twin == sample_book
        assert twin in [sample_book]

    def test_any_field_difference_breaks_equality(self, sample_book):
        """Test that every field takes part in equality."""
        assert sample_book != Book(title="Other", author="Author1", genre="Genre1", price=Decimal("29.99"))
        assert sample_book != Book(title="Title1", author="Other", genre="Genre1", price=Decimal("29.99"))
        assert sample_book != Book(title="Title1", author="Author1", genre="Other", price=Decimal("29.99"))
        assert sample_book != Book(title="Title1", author="Author1", genre="Genre1", price=Decimal("1.00"))
        assert sample_book != Book(
            title="Title1", author="Author1", genre="Genre1", price=Decimal("29.99"), reviews=["Meh"]
        )

    def test_json_serialization(self, sample_book):
        """Test JSON serialization of a book."""
        sample_book.reviews.append("Great book!")

        json_data = sample_book.json()
        assert "Title1" in json_data
        assert "29.99" in json_data
        assert "Great book!" in json_data
