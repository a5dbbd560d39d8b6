from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import httpx
import pytest

from tests.helpers import RecordingHandler
from typedhttp.core.config import ClientConfig
from typedhttp.transport import HttpxTransport

if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path

BASE_URL = "https://api.example.com"


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def config() -> ClientConfig:
    """Create a client configuration pointing to the fake server."""
    return ClientConfig(base_url=BASE_URL, connect_timeout=1000, read_timeout=1000)


@pytest.fixture
def handler() -> RecordingHandler:
    """Create a handler answering 200 with an empty JSON object."""
    return RecordingHandler([httpx.Response(200, json={})])


@pytest.fixture
def transport(handler: RecordingHandler) -> HttpxTransport:
    """Create a transport sending every request to ``handler``."""
    return HttpxTransport(httpx.MockTransport(handler))


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    """Create a small file to upload."""
    path = tmp_path.joinpath("notes.txt")
    path.write_bytes(b"hello multipart")
    return path
