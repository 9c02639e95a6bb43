"""
Unit tests for Pydantic models.
Tests data validation, serialization, and edge cases.
"""

import pytest
from pydantic import ValidationError

from api.models import Book, BookCreate, BookUpdate, ErrorResponse


class TestBook:
    """Test cases for Book model."""

    def test_valid_book(self):
        """Test creating a valid book."""
        book = Book(id=1, title="Test Book", author="Test Author")

        assert book.model_dump() == {"id": 1, "title": "Test Book", "author": "Test Author"}

    @pytest.mark.parametrize("book_id", [0, -3])
    def test_id_must_be_positive(self, book_id):
        """Test validation of non-positive ids."""
        with pytest.raises(ValidationError) as exc_info:
            Book(id=book_id, title="Test Book", author="Test Author")

        assert "Input should be greater than 0" in str(exc_info.value)

    def test_book_is_immutable(self):
        """Test that a stored book cannot be changed in place."""
        book = Book(id=1, title="Test Book", author="Test Author")

        with pytest.raises(ValidationError):
            book.id = 2

    def test_books_compare_by_value(self):
        """Test equality of books with the same fields."""
        assert Book(id=1, title="T", author="A") == Book(id=1, title="T", author="A")
        assert Book(id=1, title="T", author="A") != Book(id=2, title="T", author="A")


class TestBookRequests:
    """Test cases for the request body models."""

    @pytest.mark.parametrize("model", [BookCreate, BookUpdate])
    def test_fields_are_optional(self, model):
        """Test that an empty body parses."""
        payload = model()

        assert payload.title is None
        assert payload.author is None
        assert payload.is_blank()

    @pytest.mark.parametrize("fields,blank", [
        ({"title": "", "author": ""}, True),
        ({"title": "T"}, False),
        ({"author": "A"}, False),
        ({"title": "T", "author": "A"}, False),
    ])
    def test_is_blank(self, fields, blank):
        """Test the presence check on title and author."""
        assert BookCreate(**fields).is_blank() is blank

    def test_unknown_fields_are_ignored(self):
        """Test that extra keys are dropped."""
        payload = BookUpdate(id=7, title="T")

        assert payload.model_dump() == {"title": "T", "author": None}

    def test_title_must_be_text(self):
        """Test validation of a non-string title."""
        with pytest.raises(ValidationError):
            BookCreate(title=["a", "b"])


class TestErrorResponse:
    """Test cases for ErrorResponse model."""

    def test_detail_is_optional(self):
        """Test creating an error without detail."""
        error = ErrorResponse(error="Not Found", status_code=404)

        assert error.model_dump() == {"error": "Not Found", "detail": None, "status_code": 404}
