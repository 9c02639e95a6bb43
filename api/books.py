"""
Books API routes.
"""

import re
from typing import List, Optional

import structlog
from fastapi import APIRouter, Body, Depends, HTTPException, Path, Request, Response, status

from api.exceptions import BookNotFoundError, BookValidationError
from api.models import Book, BookCreate, BookUpdate, ErrorResponse
from api.store import BookStore
from utilities.logger import AccessLogger

logger = structlog.get_logger(__name__)
store_log = AccessLogger("api.books")

router = APIRouter(prefix="/books", tags=["Books"])

SERVER_ERROR = {"model": ErrorResponse, "description": "Server Error"}
NOT_FOUND = {"description": "The Book with that specific id was not found"}
BAD_REQUEST = {"description": "The Request Body did not include the required fields"}

BOOK_ID_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)


def get_store(request: Request) -> BookStore:
    """Store attached to the application at startup."""
    return request.app.state.store


def parse_book_id(book_id: str) -> int:
    """
    Turn a path segment into a book id.

    Only plain ASCII digits (optionally signed, surrounding whitespace
    allowed) name a book. Anything else cannot match one, so it is
    reported the same way as an unknown id.
    """
    if not BOOK_ID_PATTERN.fullmatch(book_id):
        raise BookNotFoundError(book_id)
    return int(book_id)


def _internal_error(action: str, error: Exception) -> HTTPException:
    logger.error("Handler failed", action=action, error=str(error), error_type=type(error).__name__)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=str(error)
    )


@router.get(
    "",
    response_model=List[Book],
    summary="Get a list of all Books",
    responses={
        200: {"description": "We receive a list of all the Books"},
        500: SERVER_ERROR,
    },
)
async def list_books(store: BookStore = Depends(get_store)):
    """Return every book in storage order."""
    try:
        return store.list_books()
    except Exception as e:
        raise _internal_error("list books", e)


@router.get(
    "/{book_id}",
    response_model=Book,
    summary="Get a specific Book by id",
    responses={
        200: {"description": "We receive a Book by id"},
        404: NOT_FOUND,
        500: SERVER_ERROR,
    },
)
async def get_book(
    book_id: str = Path(..., description="The Book id"),
    store: BookStore = Depends(get_store)
):
    """Return a single book."""
    try:
        book = store.find_by_id(parse_book_id(book_id))
        if book is None:
            raise BookNotFoundError(book_id)
        return book
    except BookNotFoundError:
        raise
    except Exception as e:
        raise _internal_error("get book", e)


@router.post(
    "",
    response_model=Book,
    summary="Create a new Book",
    responses={
        200: {"description": "The Book was successfully created"},
        400: BAD_REQUEST,
        500: SERVER_ERROR,
    },
)
async def create_book(
    payload: Optional[BookCreate] = Body(None),
    store: BookStore = Depends(get_store)
):
    """
    Create a book and assign it the next id.

    The request is rejected only when both **title** and **author** are
    missing or empty; a book with just one of them is accepted.
    """
    try:
        if payload is None or payload.is_blank():
            raise BookValidationError("title or author is required")

        book = store.insert(payload.title or "", payload.author or "")
        store_log.log_store_operation("create", book.id)
        return book
    except BookValidationError:
        raise
    except Exception as e:
        raise _internal_error("create book", e)


@router.put(
    "/{book_id}",
    response_model=Book,
    summary="Update a specific Book by id",
    responses={
        200: {"description": "The Book was successfully Updated"},
        400: BAD_REQUEST,
        404: NOT_FOUND,
        500: SERVER_ERROR,
    },
)
async def update_book(
    book_id: str = Path(..., description="The Book id"),
    payload: Optional[BookUpdate] = Body(None),
    store: BookStore = Depends(get_store)
):
    """
    Update the title and/or author of a book.

    Fields that are missing or empty keep their stored value.
    """
    try:
        if payload is None:
            raise BookValidationError("request body is required")
        if payload.is_blank():
            raise BookValidationError("title or author is required")

        book = store.replace(parse_book_id(book_id), title=payload.title, author=payload.author)
        if book is None:
            raise BookNotFoundError(book_id)

        store_log.log_store_operation("update", book.id)
        return book
    except (BookValidationError, BookNotFoundError):
        raise
    except Exception as e:
        raise _internal_error("update book", e)


@router.delete(
    "/{book_id}",
    summary="Delete a specific Book by id",
    response_class=Response,
    responses={
        200: {"description": "The Book was successfully Deleted"},
        404: NOT_FOUND,
        500: SERVER_ERROR,
    },
)
async def delete_book(
    book_id: str = Path(..., description="The Book id"),
    store: BookStore = Depends(get_store)
):
    """Remove a book."""
    try:
        book_key = parse_book_id(book_id)
        if not store.remove(book_key):
            raise BookNotFoundError(book_id)

        store_log.log_store_operation("delete", book_key)
        return Response(status_code=status.HTTP_200_OK)
    except BookNotFoundError:
        raise
    except Exception as e:
        raise _internal_error("delete book", e)
