"""
Tests for correlation ID propagation and log stamping.
"""

import logging

from fastapi import FastAPI
from fastapi.testclient import TestClient

from backend.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from backend.observability.logger import CorrelationIdFilter
from backend.observability.middleware import CORRELATION_HEADER, CorrelationMiddleware


def build_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(CorrelationMiddleware)

    @app.get("/whoami")
    async def whoami() -> dict:
        return {"correlation_id": get_correlation_id()}

    return app


class TestCorrelationContext:
    def test_set_generates_id(self) -> None:
        token = set_correlation_id()
        try:
            assert len(get_correlation_id()) == 36
        finally:
            clear_correlation_id(token)

        assert get_correlation_id() == ""

    def test_filter_stamps_record(self) -> None:
        record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
        token = set_correlation_id("req-1")
        try:
            CorrelationIdFilter().filter(record)
        finally:
            clear_correlation_id(token)

        assert record.correlation_id == "req-1"

    def test_filter_outside_request(self) -> None:
        record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)

        CorrelationIdFilter().filter(record)

        assert record.correlation_id == "-"


class TestCorrelationMiddleware:
    def test_incoming_id_is_used_and_echoed(self) -> None:
        client = TestClient(build_app())

        response = client.get("/whoami", headers={CORRELATION_HEADER: "abc"})

        assert response.json() == {"correlation_id": "abc"}
        assert response.headers[CORRELATION_HEADER] == "abc"

    def test_missing_id_is_generated(self) -> None:
        client = TestClient(build_app())

        response = client.get("/whoami")

        assert response.headers[CORRELATION_HEADER] == response.json()["correlation_id"]
        assert response.headers[CORRELATION_HEADER]
