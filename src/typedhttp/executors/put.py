r"""Contains the executor of the HTTP PUT requests."""

from __future__ import annotations

__all__ = ["PutExecutor"]

from typedhttp.executors.base import JsonBodyExecutor


class PutExecutor(JsonBodyExecutor):
    r"""Send HTTP PUT requests with a JSON body."""

    method = "PUT"
