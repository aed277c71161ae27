"""Common module for shared error handling.

Provides the ``AppError`` base class every package error derives from. Each
subclass carries a structured error code, a human-readable message and the
HTTP status code the exception handlers respond with.
"""

from .app_error import AppError

__all__ = ["AppError"]
