"""Unit tests for request correlation"""
import uuid

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from catalog.middleware.correlation_id import (
    MAX_CORRELATION_ID_LENGTH,
    CorrelationIdMiddleware,
    get_correlation_id,
    normalize_correlation_id,
)


def _is_uuid(value):
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


class TestNormalizeCorrelationId:

    def test_keeps_plain_id(self):
        assert normalize_correlation_id("order-42.retry:1") == "order-42.retry:1"

    def test_strips_surrounding_whitespace(self):
        assert normalize_correlation_id("  abc-123 ") == "abc-123"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing_value_is_generated(self, value):
        assert _is_uuid(normalize_correlation_id(value))

    @pytest.mark.parametrize("value", [
        'abc" injected="1',
        "abc def",
        "abc\tdef",
        "{\"level\": \"ERROR\"}",
    ])
    def test_non_id_characters_are_replaced(self, value):
        result = normalize_correlation_id(value)

        assert result != value
        assert _is_uuid(result)

    def test_oversized_value_is_replaced(self):
        value = "a" * (MAX_CORRELATION_ID_LENGTH + 1)

        assert _is_uuid(normalize_correlation_id(value))

    def test_value_at_limit_is_kept(self):
        value = "a" * MAX_CORRELATION_ID_LENGTH

        assert normalize_correlation_id(value) == value


@pytest.fixture
def traced_client():
    app = FastAPI()
    app.add_middleware(CorrelationIdMiddleware, header_name="X-Request-ID")

    @app.get("/seen")
    async def seen():
        return {"correlation_id": get_correlation_id()}

    @app.get("/denied")
    async def denied():
        raise HTTPException(status_code=401, detail="unauthorized access")

    return TestClient(app)


class TestCorrelationIdMiddleware:

    def test_inbound_id_is_bound_and_echoed(self, traced_client):
        response = traced_client.get("/seen", headers={"X-Request-ID": "req-7"})

        assert response.json() == {"correlation_id": "req-7"}
        assert response.headers["X-Request-ID"] == "req-7"

    def test_generated_id_is_bound_and_echoed(self, traced_client):
        response = traced_client.get("/seen")

        generated = response.json()["correlation_id"]
        assert _is_uuid(generated)
        assert response.headers["X-Request-ID"] == generated

    def test_unsafe_inbound_id_is_not_echoed(self, traced_client):
        response = traced_client.get("/seen", headers={"X-Request-ID": "a b"})

        assert response.headers["X-Request-ID"] != "a b"
        assert response.json()["correlation_id"] == response.headers["X-Request-ID"]

    def test_error_responses_carry_id(self, traced_client):
        response = traced_client.get("/denied", headers={"X-Request-ID": "req-8"})

        assert response.status_code == 401
        assert response.headers["X-Request-ID"] == "req-8"

