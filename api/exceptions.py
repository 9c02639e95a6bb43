"""
Domain errors raised by the book handlers.
"""


class BookValidationError(ValueError):
    """The request body is missing the fields a book needs."""


class BookNotFoundError(LookupError):
    """No book matches the requested id."""

    def __init__(self, book_id):
        super().__init__(f"Book with ID '{book_id}' not found")
        self.book_id = book_id
