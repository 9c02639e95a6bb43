"""
API models and schemas for the FastAPI application.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.types import PositiveInt


class Book(BaseModel):
    """A single catalog entry."""
    id: PositiveInt = Field(..., description="The generated id of the book")
    title: str = Field(..., description="The title of the book")
    author: str = Field(..., description="The author of the book")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Example Title",
                "author": "Example Author",
            }
        },
    )


class BookFields(BaseModel):
    """Title/author pair as supplied in a request body."""
    title: Optional[str] = Field(None, description="The title of the book")
    author: Optional[str] = Field(None, description="The author of the book")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Example Title",
                "author": "Example Author",
            }
        },
    )

    def is_blank(self) -> bool:
        """True when neither title nor author carries a value."""
        return not self.title and not self.author


class BookCreate(BookFields):
    """Request body for creating a book.

    A book is accepted as long as one of the two fields is filled in.
    """


class BookUpdate(BookFields):
    """Request body for updating a book.

    Empty or missing fields keep the stored value.
    """


class ErrorResponse(BaseModel):
    """Error response model."""
    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Additional error details")
    status_code: int = Field(..., description="HTTP status code")
