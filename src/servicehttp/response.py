r"""HTTP response classification utilities.

This module provides functions to decide whether a response is
successful and to describe an unsuccessful one in a compact,
log-friendly way.
"""

from __future__ import annotations

__all__ = [
    "discard_body",
    "error_response_details",
    "is_successful_response",
    "raise_for_unsuccessful_response",
]

import logging
from typing import TYPE_CHECKING

from servicehttp.core.config import (
    HTML_DOCUMENT_MARKER,
    SUCCESS_STATUS_MAX,
    SUCCESS_STATUS_MIN,
)
from servicehttp.exceptions import ServiceHttpError

if TYPE_CHECKING:
    import httpx

logger: logging.Logger = logging.getLogger(__name__)


def is_successful_response(response: httpx.Response) -> bool:
    """Indicate if the response has a 2xx status code.

    Args:
        response: The HTTP response to check.

    Returns:
        ``True`` if the status code is between 200 and 299 (inclusive),
            otherwise ``False``.

    Example:
        ```pycon
        >>> import httpx
        >>> from servicehttp.response import is_successful_response
        >>> is_successful_response(httpx.Response(204))
        True
        >>> is_successful_response(httpx.Response(302))
        False

        ```
    """
    return SUCCESS_STATUS_MIN <= response.status_code <= SUCCESS_STATUS_MAX


def discard_body(body: str | None) -> bool:
    """Indicate if a response body looks like an HTML document."""
    return body is not None and HTML_DOCUMENT_MARKER in body


def error_response_details(response: httpx.Response) -> str:
    """Describe a response for error messages.

    The body is appended to the status code unless it looks like an HTML
    document, so full error pages do not end up in logs.

    Args:
        response: The HTTP response to describe.

    Returns:
        ``"HTTP status code: <status>"``, followed by ``", body: <body>"``
            when the body is not an HTML document.

    Example:
        ```pycon
        >>> import httpx
        >>> from servicehttp.response import error_response_details
        >>> error_response_details(httpx.Response(500, text="Internal Error"))
        'HTTP status code: 500, body: Internal Error'
        >>> error_response_details(httpx.Response(404, text="<!DOCTYPE html><html></html>"))
        'HTTP status code: 404'

        ```
    """
    status_code_info = f"HTTP status code: {response.status_code}"
    if discard_body(response.text):
        return status_code_info
    return f"{status_code_info}, body: {response.text}"


def raise_for_unsuccessful_response(response: httpx.Response) -> None:
    """Raise an error if the response is not successful.

    Args:
        response: The HTTP response to check.

    Raises:
        ServiceHttpError: If the status code is outside 200-299. The
            message is built with ``error_response_details``.
    """
    if is_successful_response(response):
        return
    details = error_response_details(response)
    logger.debug(f"Unsuccessful response: {details}")
    raise ServiceHttpError(details, status_code=response.status_code, response=response)
