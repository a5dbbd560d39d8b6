r"""Contains the executor of the HTTP GET requests."""

from __future__ import annotations

__all__ = ["GetExecutor"]

from typedhttp.executors.base import VerbExecutor


class GetExecutor(VerbExecutor):
    r"""Send HTTP GET requests.

    Example:
        ```pycon
        >>> from typedhttp.core.config import ClientConfig
        >>> from typedhttp.executors import GetExecutor
        >>> executor = GetExecutor(ClientConfig(base_url="https://api.example.com"))
        >>> response = executor.process("posts/1", response_type=dict)  # doctest: +SKIP

        ```
    """

    method = "GET"
