"""Global exception handlers answering with failed envelopes."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from response_envelope.common.app_error import AppError
from response_envelope.config.errors import ErrorNames
from response_envelope.envelope import ResponseEnvelope

from .error_path import get_error_path
from .responses import envelope_response

__all__ = ["register_exception_handlers"]


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all global exception handlers to the FastAPI application.

    Registers handlers for:
    - Application errors (AppError), including envelope precondition errors
    - Validation errors (RequestValidationError)
    - Unexpected exceptions

    Every handler answers with a failed envelope whose error code is the HTTP
    status code.

    Args:
        app: The FastAPI application instance to register handlers with.
    """

    @app.exception_handler(AppError)
    def _handle_app_error(_request: Request, exc: AppError) -> JSONResponse:
        """Handle application-specific errors.

        Args:
            request: The incoming HTTP request.
            exc: The application error that was raised.

        Returns:
            JSONResponse: A failed envelope with the error's status code.
        """
        logger.debug("{}: {}", exc.error_code, exc.message, path=get_error_path(exc))
        return _make_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    def _handle_validation_error(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle invalid request parameters.

        Args:
            request: The incoming HTTP request.
            exc: The validation error raised by FastAPI.

        Returns:
            JSONResponse: A 422 failed envelope listing the offending fields.
        """
        fields = ", ".join(
            ".".join(str(part) for part in err.get("loc", ())) for err in exc.errors()
        )
        logger.debug("Validation error: {}", fields)
        return _make_response(
            status.HTTP_422_UNPROCESSABLE_CONTENT, f"Validation error: {fields}"
        )

    @app.exception_handler(Exception)
    def _handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Handle any uncaught exceptions as 500 server errors.

        Args:
            request: The incoming HTTP request.
            exc: The uncaught exception.

        Returns:
            JSONResponse: A 500 failed envelope.
        """
        logger.exception("{}", str(exc), path=get_error_path(exc))
        return _make_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorNames.INTERNAL_SERVER_ERROR
        )


def _make_response(status_code: int, message: str) -> JSONResponse:
    """Create a failed envelope response.

    Args:
        status_code: HTTP status code, also used as error code.
        message: Human-readable error message.

    Returns:
        JSONResponse: The serialized envelope.
    """
    envelope = ResponseEnvelope(
        None,
        success=False,
        status=status_code,
        error={"code": status_code, "message": str(message)},
    )
    return envelope_response(envelope)
