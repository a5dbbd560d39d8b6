r"""Integration tests against httpbin.org.

These tests need network access and are not collected by default. Run
them with ``pytest tests/integration``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from typedhttp import ClientConfig, Header, HttpClient, MultipartPart, Query, RetryPolicy
from typedhttp.status import HttpStatusInterval

if TYPE_CHECKING:
    from pathlib import Path

# Use httpbin.org for real HTTP testing
HTTPBIN_URL = "https://httpbin.org"


@pytest.fixture
def client() -> HttpClient:
    return HttpClient(ClientConfig(base_url=HTTPBIN_URL, connect_timeout=10000, read_timeout=10000))


def test_get_with_queries_and_headers(client: HttpClient) -> None:
    """Test GET request with query parameters and custom headers."""
    response = client.get(
        "get",
        response_type=dict[str, Any],
        queries=[Query("q", "a b")],
        headers=[Header("X-Custom-Header", "test-value")],
    )
    assert response.status_code == 200
    assert response.body["args"] == {"q": "a b"}
    assert response.body["headers"]["X-Custom-Header"] == "test-value"


@pytest.mark.parametrize("method", ["post", "put", "patch"])
def test_json_body(client: HttpClient, method: str) -> None:
    """Test that the JSON body is echoed back."""
    response = getattr(client, method)(method, {"title": "Title"}, response_type=dict[str, Any])
    assert response.status_code == 200
    assert response.body["json"] == {"title": "Title"}


def test_delete(client: HttpClient) -> None:
    """Test DELETE request."""
    assert client.delete("delete").status_code == 200


def test_multipart(client: HttpClient, tmp_path: Path) -> None:
    """Test multipart upload with an inline part and a file part."""
    path = tmp_path.joinpath("image.txt")
    path.write_text("image content")
    response = client.multipart(
        "post",
        [MultipartPart(name="data", body="inline"), MultipartPart(name="image1", file_path=path)],
        response_type=dict[str, Any],
    )
    assert response.status_code == 200
    assert response.body["form"] == {"data": "inline"}
    assert response.body["files"] == {"image1": "image content"}


def test_not_found(client: HttpClient) -> None:
    """Test that an error status is returned, not raised."""
    response = client.get("status/404", response_type=str)
    assert response.status_code == 404
    assert not response.is_successful


def test_retry_exhausted(client: HttpClient) -> None:
    """Test that the last response is returned after the retries."""
    client = HttpClient(
        client.config.merge(
            retry_policy=RetryPolicy(
                retry_count=1, retry_delay=0.1, retry_on_status=HttpStatusInterval.SERVER_ERROR
            )
        )
    )
    assert client.get("status/503").status_code == 503


@pytest.mark.asyncio
async def test_get_async(client: HttpClient) -> None:
    """Test the awaitable form."""
    response = await client.get_async("uuid", response_type=dict[str, str])
    assert response.status_code == 200
    assert "uuid" in response.body
