"""Turn envelopes into HTTP responses."""

from collections.abc import Mapping

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from response_envelope.envelope import ResponseEnvelope

__all__ = ["envelope_response"]


def envelope_response(
    envelope: ResponseEnvelope, headers: Mapping[str, str] | None = None
) -> JSONResponse:
    """Serialize the envelope with its own status code."""
    return JSONResponse(
        status_code=envelope.status,
        content=jsonable_encoder(envelope.to_dict()),
        headers=headers,
    )
