r"""Executors of the supported HTTP methods.

Every executor exposes the same forms: ``execute`` (blocking),
``submit`` (future), ``execute_async`` (awaitable) on raw responses and
``process``, ``process_async`` and ``process_callback`` on typed
responses.
"""

from __future__ import annotations

__all__ = [
    "DeleteExecutor",
    "GetExecutor",
    "JsonBodyExecutor",
    "MultipartExecutor",
    "PatchExecutor",
    "PostExecutor",
    "PutExecutor",
    "VerbExecutor",
]

from typedhttp.executors.base import JsonBodyExecutor, VerbExecutor
from typedhttp.executors.delete import DeleteExecutor
from typedhttp.executors.get import GetExecutor
from typedhttp.executors.multipart import MultipartExecutor
from typedhttp.executors.patch import PatchExecutor
from typedhttp.executors.post import PostExecutor
from typedhttp.executors.put import PutExecutor
