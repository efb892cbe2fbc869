r"""Exceptions raised by the service HTTP helpers."""

from __future__ import annotations

__all__ = ["ServiceHttpError"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class ServiceHttpError(Exception):
    """Raised when a service opts in to failing on an unsuccessful
    response.

    The helpers of ``HttpMixin`` never raise this exception on their own.
    It is raised by ``raise_for_unsuccessful_response``.

    Args:
        message: Human-readable description of the failure.
        status_code: The HTTP status code of the response, if any.
        response: The response that triggered the error, if any.

    Example:
        ```pycon
        >>> from servicehttp.exceptions import ServiceHttpError
        >>> error = ServiceHttpError("HTTP status code: 404", status_code=404)
        >>> error.status_code
        404
        >>> str(error)
        'HTTP status code: 404'

        ```
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response
