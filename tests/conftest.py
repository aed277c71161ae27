"""Common test fixtures for the response envelope."""

import os

os.environ.setdefault("ENV", "testing")

from collections.abc import Generator
from typing import Annotated

import pytest
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from fastapi.testclient import TestClient
from loguru import logger

from response_envelope import (
    ResponseEnvelope,
    WindowParams,
    envelope_response,
    register_exception_handlers,
)

ITEM_COUNT: int = 10


@pytest.fixture
def numbers() -> list[int]:
    """Ten consecutive integers starting at 1."""
    return list(range(1, ITEM_COUNT + 1))


@pytest.fixture
def records() -> list[dict[str, int]]:
    """Mutable records to check that envelopes own their data."""
    return [{"id": i, "value": i * 10} for i in range(1, 6)]


@pytest.fixture
def log_records() -> Generator[list[dict]]:
    """Collect loguru records emitted during a test."""
    collected: list[dict] = []
    handler_id = logger.add(
        lambda message: collected.append(message.record), level="DEBUG"
    )
    yield collected
    logger.remove(handler_id)


@pytest.fixture(name="app")
def app_fixture() -> FastAPI:
    """Create a FastAPI app serving enveloped responses."""
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/items")
    async def list_items(
        window: Annotated[WindowParams, Depends()],
    ) -> JSONResponse:
        envelope = ResponseEnvelope(list(range(1, ITEM_COUNT + 1)), paginate=True)
        return envelope_response(window.apply(envelope))

    @app.get("/plain")
    async def list_plain(
        window: Annotated[WindowParams, Depends()],
    ) -> JSONResponse:
        envelope = ResponseEnvelope(list(range(1, ITEM_COUNT + 1)))
        return envelope_response(window.apply(envelope))

    @app.get("/profile")
    async def profile(
        window: Annotated[WindowParams, Depends()],
    ) -> JSONResponse:
        envelope = ResponseEnvelope({"name": "Ada"}, status=201)
        return envelope_response(window.apply(envelope))

    @app.get("/boom")
    async def boom() -> JSONResponse:
        raise RuntimeError("kaboom")

    return app


@pytest.fixture(name="client")
def client_fixture(app: FastAPI) -> Generator[TestClient]:
    """Create a test client for the FastAPI app.

    Args:
        app: Application fixture.

    Returns:
        TestClient: Configured FastAPI test client.
    """
    with TestClient(
        app, base_url="http://testserver", raise_server_exceptions=False
    ) as client:
        yield client
