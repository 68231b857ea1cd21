"""Tests for optional API key auth and request logging middleware."""
import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from trailmix.middleware import OptionalAPIKeyMiddleware, RequestLoggingMiddleware, get_valid_api_keys
from trailmix.middleware.auth import extract_api_key


def _app(api_key_required: bool) -> FastAPI:
    app = FastAPI()
    app.add_middleware(OptionalAPIKeyMiddleware, api_key_required=api_key_required, api_keys={"k1", "k2"})
    app.add_middleware(RequestLoggingMiddleware)

    @app.get("/activities")
    def read():
        return []

    @app.post("/activities")
    def write():
        return {"ok": True}

    @app.post("/metrics")
    def metrics():
        return {}

    return app


def test_get_valid_api_keys():
    assert get_valid_api_keys(" k1, k2 ,,") == {"k1", "k2"}
    assert get_valid_api_keys("") == set()


def test_writes_open_when_not_required():
    client = TestClient(_app(api_key_required=False))
    assert client.post("/activities").status_code == 200


def test_reads_stay_public_when_required():
    client = TestClient(_app(api_key_required=True))
    assert client.get("/activities").status_code == 200


@pytest.mark.parametrize(
    "headers,status",
    [
        ({}, 401),
        ({"X-API-Key": "wrong"}, 401),
        ({"X-API-Key": "k1"}, 200),
        ({"Authorization": "Bearer k2"}, 200),
        ({"Authorization": "Basic k2"}, 401),
    ],
)
def test_writes_need_key_when_required(headers, status):
    client = TestClient(_app(api_key_required=True))
    assert client.post("/activities", headers=headers).status_code == status


def test_exempt_path_skips_auth():
    client = TestClient(_app(api_key_required=True))
    assert client.post("/metrics").status_code == 200


def test_extract_api_key_prefers_header():
    class _Req:
        headers = {"X-API-Key": " k1 ", "Authorization": "Bearer k2"}

    assert extract_api_key(_Req()) == "k1"


def test_request_logging_line(caplog):
    client = TestClient(_app(api_key_required=False))
    with caplog.at_level(logging.INFO, logger="trailmix.middleware.request_logging"):
        r = client.get("/activities?x=1", headers={"X-Request-ID": "req-1"})
    assert r.headers["X-Request-ID"] == "req-1"
    line = next(rec.getMessage() for rec in caplog.records if rec.getMessage().startswith("request "))
    assert "id=req-1" in line
    assert "method=GET" in line
    assert "path=/activities" in line
    assert "query=x=1" in line
    assert "status=200" in line
