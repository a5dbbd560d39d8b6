r"""Contains the executor of the HTTP PATCH requests."""

from __future__ import annotations

__all__ = ["PatchExecutor"]

from typedhttp.executors.base import JsonBodyExecutor


class PatchExecutor(JsonBodyExecutor):
    r"""Send HTTP PATCH requests with a JSON body."""

    method = "PATCH"
