"""
In-memory book store backing the API.
"""

import threading
from typing import Iterable, List, Optional

import structlog

from api.models import Book

logger = structlog.get_logger(__name__)


def default_books() -> List[Book]:
    """Books the service starts with."""
    return [
        Book(id=n, title=f"Book Title {n}", author=f"Book Author {n}")
        for n in range(1, 5)
    ]


class BookStore:
    """Ordered collection of books keyed by id.

    Every operation runs under a single re-entrant lock, so the
    ``max(id) + 1`` assignment in :meth:`insert` stays atomic even when
    handlers are executed from a thread pool.
    """

    def __init__(self, books: Optional[Iterable[Book]] = None):
        self._books: List[Book] = list(books or [])
        self._lock = threading.RLock()

    @classmethod
    def seeded(cls) -> "BookStore":
        """Create a store holding the default books."""
        return cls(default_books())

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def _index_of(self, book_id: int) -> Optional[int]:
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        return None

    def next_id(self) -> int:
        """
        Id the next inserted book will receive.

        This is the highest id in the store plus one, so deleting the
        highest-numbered book makes its id available again.
        """
        with self._lock:
            return max((book.id for book in self._books), default=0) + 1

    def list_books(self) -> List[Book]:
        with self._lock:
            return list(self._books)

    def find_by_id(self, book_id: int) -> Optional[Book]:
        with self._lock:
            index = self._index_of(book_id)
            return self._books[index] if index is not None else None

    def insert(self, title: str, author: str) -> Book:
        with self._lock:
            book = Book(id=self.next_id(), title=title, author=author)
            self._books.append(book)

        logger.debug("Book inserted", book_id=book.id)
        return book

    def replace(
        self,
        book_id: int,
        title: Optional[str] = None,
        author: Optional[str] = None
    ) -> Optional[Book]:
        """
        Replace title and/or author of a book.

        Args:
            book_id: Id of the book to update
            title: New title; ``None`` or empty keeps the current one
            author: New author; ``None`` or empty keeps the current one

        Returns:
            The updated book, or None if no book has that id
        """
        with self._lock:
            index = self._index_of(book_id)
            if index is None:
                return None

            current = self._books[index]
            updated = Book(
                id=current.id,
                title=title if title else current.title,
                author=author if author else current.author,
            )
            self._books[index] = updated

        logger.debug("Book replaced", book_id=book_id)
        return updated

    def remove(self, book_id: int) -> bool:
        with self._lock:
            index = self._index_of(book_id)
            if index is None:
                return False
            del self._books[index]

        logger.debug("Book removed", book_id=book_id)
        return True
