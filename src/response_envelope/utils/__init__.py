"""HTTP helpers for serving envelopes from FastAPI applications."""

from .error_handler import register_exception_handlers
from .error_path import get_error_path
from .responses import envelope_response

__all__ = ["envelope_response", "get_error_path", "register_exception_handlers"]
