r"""servicehttp - HTTP helpers for services built on httpx.

This package provides a mixin that gives a service object its own
lazily created ``httpx.Client`` together with small helpers to send
requests through it, classify responses, and shorten URLs.

Key Features:
    - One ``httpx.Client`` per service, created on first use
    - GET, POST and arbitrary-method helpers with optional URL, query
      parameters, headers and body
    - ``on_request`` callback to customize a request before it is sent
    - Response helpers: 2xx detection and compact error details that
      leave HTML error pages out
    - URL shortening with a fallback to the original URL

Example:
    ```pycon
    >>> from servicehttp import Service
    >>> class Webhook(Service):
    ...     def deliver(self):
    ...         response = self.http_post(self.data["url"], self.payload["body"])
    ...         if not self.is_successful_response(response):
    ...             print(self.error_response_details(response))
    ...         return response
    ...
    >>> Webhook({"url": "https://hooks.example.com"}, {"body": "{}"}).deliver()  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "HttpMixin",
    "RequestDescriptor",
    "Service",
    "ServiceHttpError",
    "__version__",
    "error_response_details",
    "is_successful_response",
    "raise_for_unsuccessful_response",
]

from importlib.metadata import PackageNotFoundError, version

from servicehttp.exceptions import ServiceHttpError
from servicehttp.mixin import HttpMixin
from servicehttp.request import RequestDescriptor
from servicehttp.response import (
    error_response_details,
    is_successful_response,
    raise_for_unsuccessful_response,
)
from servicehttp.service import Service

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
