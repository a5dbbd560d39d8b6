r"""Contains the executor of the HTTP DELETE requests."""

from __future__ import annotations

__all__ = ["DeleteExecutor"]

from typedhttp.executors.base import VerbExecutor


class DeleteExecutor(VerbExecutor):
    r"""Send HTTP DELETE requests.

    A ``202 Accepted`` or ``204 No Content`` response without body gives
    a ``Response`` whose body and exception are both ``None``.
    """

    method = "DELETE"
