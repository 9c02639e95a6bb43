"""
FastAPI RESTful API for an in-memory book collection.

This module provides:
- CRUD endpoints for books under /books
- Generated OpenAPI documentation served at /docs
"""
