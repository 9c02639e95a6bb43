"""
FastAPI main application for the Books API.
"""

import time
from contextlib import asynccontextmanager
from http import HTTPStatus

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api import books
from api.config import config as api_config
from api.exceptions import BookNotFoundError, BookValidationError
from api.models import ErrorResponse
from api.store import BookStore
from utilities.logger import AccessLogger

# Setup logging
logger = structlog.get_logger(__name__)
access_logger = AccessLogger("api.access")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    app.state.store = BookStore.seeded()
    logger.info(
        "The server is running",
        port=api_config.port,
        books=len(app.state.store)
    )

    yield

    # Shutdown
    logger.info("Shutting down Books API")


# Create FastAPI application
app = FastAPI(
    title=api_config.api_title,
    description=api_config.api_description,
    version=api_config.api_version,
    servers=[
        {
            "url": api_config.server_url,
            "description": "development",
        }
    ],
    openapi_tags=[
        {
            "name": "Books",
            "description": "Everything related to Books",
        }
    ],
    swagger_ui_parameters={"syntaxHighlight.theme": api_config.swagger_syntax_theme},
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=api_config.cors_origins,
    allow_credentials=api_config.cors_allow_credentials,
    allow_methods=api_config.cors_allow_methods,
    allow_headers=api_config.cors_allow_headers,
)


@app.middleware("http")
async def access_log_middleware(request: Request, call_next):
    """Write one access line per request."""
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        access_logger.log_request(
            request.method,
            request.url.path,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            (time.perf_counter() - start) * 1000
        )
        raise
    access_logger.log_request(
        request.method,
        request.url.path,
        response.status_code,
        (time.perf_counter() - start) * 1000
    )
    return response


# Exception handlers
@app.exception_handler(BookValidationError)
async def book_validation_handler(request: Request, exc: BookValidationError):
    """Reject the request with an empty 400."""
    return Response(status_code=status.HTTP_400_BAD_REQUEST)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are rejected like missing fields."""
    logger.warning("Request validation failed", path=request.url.path, errors=str(exc.errors()))
    return Response(status_code=status.HTTP_400_BAD_REQUEST)


@app.exception_handler(BookNotFoundError)
async def book_not_found_handler(request: Request, exc: BookNotFoundError):
    """Answer an unknown id with an empty 404."""
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=HTTPStatus(exc.status_code).phrase,
            detail=str(exc.detail) if exc.detail is not None else None,
            status_code=exc.status_code
        ).model_dump(),
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle general exceptions."""
    logger.error("Unhandled exception", error=str(exc), path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(
            error="Internal server error",
            detail=str(exc),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        ).model_dump()
    )


@app.get("/", include_in_schema=False)
async def root():
    """Send visitors to the interactive documentation."""
    return RedirectResponse(url=app.docs_url, status_code=status.HTTP_302_FOUND)


app.include_router(books.router)
