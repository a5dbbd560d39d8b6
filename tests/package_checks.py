from __future__ import annotations

import logging
import sys

import typedhttp

logger: logging.Logger = logging.getLogger(__name__)

# Use httpbin.org for real HTTP testing
HTTPBIN_URL = "https://httpbin.org"


def check_get() -> None:
    logger.info("Checking get...")
    client = typedhttp.HttpClient(typedhttp.ClientConfig(base_url=HTTPBIN_URL))
    response = client.get("get", response_type=dict)
    assert response.status_code == 200
    assert response.exception is None


def check_post() -> None:
    logger.info("Checking post...")
    client = typedhttp.HttpClient(typedhttp.ClientConfig(base_url=HTTPBIN_URL))
    response = client.post("post", {"key": "value"}, response_type=dict)
    assert response.status_code == 200
    assert response.body["json"] == {"key": "value"}


def main() -> None:
    r"""Run all package checks to validate installation and
    functionality."""
    try:
        check_get()
        check_post()

        logger.info("✅ All package checks passed successfully!")
    except Exception:
        logger.exception("❌ Package check failed")
        sys.exit(1)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
