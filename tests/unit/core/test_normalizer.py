from __future__ import annotations

from datetime import datetime, timezone

import httpx

from typedhttp.core.codec import BodyCodec
from typedhttp.core.normalizer import normalize_response
from typedhttp.exceptions import DeserializationError
from typedhttp.models import RawResponse

TIMESTAMP = datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_normalize_response_success() -> None:
    raw = RawResponse(
        status_code=200,
        body='{"id": 1}',
        headers={"content-type": ["application/json"]},
        timestamp=TIMESTAMP,
    )
    response = normalize_response(raw, dict[str, int], BodyCodec())
    assert response.status_code == 200
    assert response.body == {"id": 1}
    assert response.raw == '{"id": 1}'
    assert response.headers == {"content-type": ["application/json"]}
    assert response.timestamp == TIMESTAMP
    assert response.exception is None


def test_normalize_response_empty_body() -> None:
    response = normalize_response(RawResponse(status_code=202, body=""), dict, BodyCodec())
    assert response.status_code == 202
    assert response.body is None
    assert response.exception is None


def test_normalize_response_deserialization_error() -> None:
    response = normalize_response(RawResponse(status_code=200, body="[1]"), dict, BodyCodec())
    assert response.status_code == 200
    assert response.body is None
    assert response.raw == "[1]"
    assert isinstance(response.exception, DeserializationError)


def test_normalize_response_keeps_transport_exception() -> None:
    exc = httpx.ConnectError("connection refused")
    response = normalize_response(RawResponse(exception=exc), dict, BodyCodec())
    assert response.status_code is None
    assert response.body is None
    assert response.exception is exc


def test_normalize_response_transport_exception_wins() -> None:
    exc = httpx.ReadTimeout("too slow")
    response = normalize_response(
        RawResponse(status_code=200, body="not json", exception=exc), dict, BodyCodec()
    )
    assert response.exception is exc
