"""
Shared helpers for the Books API: structured logging setup.
"""
