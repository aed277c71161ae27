"""Declaration of the root package response_envelope."""

from response_envelope.envelope import (
    InvalidArgumentError,
    InvalidStateError,
    ResponseEnvelope,
    WindowParams,
    compute_window,
)
from response_envelope.utils import envelope_response, register_exception_handlers

__all__ = [
    "InvalidArgumentError",
    "InvalidStateError",
    "ResponseEnvelope",
    "WindowParams",
    "compute_window",
    "envelope_response",
    "register_exception_handlers",
]
