r"""Contains the executor of the HTTP POST requests."""

from __future__ import annotations

__all__ = ["PostExecutor"]

from typedhttp.executors.base import JsonBodyExecutor


class PostExecutor(JsonBodyExecutor):
    r"""Send HTTP POST requests with a JSON body."""

    method = "POST"
