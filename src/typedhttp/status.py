r"""Contain the HTTP status classes used to configure retries."""

from __future__ import annotations

__all__ = ["HttpStatusInterval"]

from enum import Enum


class HttpStatusInterval(Enum):
    r"""Enumerate the five classes of HTTP status codes.

    Example:
        ```pycon
        >>> from typedhttp.status import HttpStatusInterval
        >>> HttpStatusInterval.SERVER_ERROR.contains(503)
        True
        >>> HttpStatusInterval.SERVER_ERROR.range
        range(500, 600)

        ```
    """

    INFORMATIONAL = range(100, 200)
    SUCCESS = range(200, 300)
    REDIRECTION = range(300, 400)
    CLIENT_ERROR = range(400, 500)
    SERVER_ERROR = range(500, 600)

    @property
    def range(self) -> range:
        return self.value

    def contains(self, status_code: int) -> bool:
        r"""Indicate if the status code belongs to this class."""
        return status_code in self.value
