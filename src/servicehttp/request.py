r"""Mutable description of one HTTP request before it is sent.

The helpers of ``HttpMixin`` fill a ``RequestDescriptor`` from their
arguments, hand it to the optional ``on_request`` callback for further
customization, then turn it into an ``httpx.Request``.
"""

from __future__ import annotations

__all__ = ["RequestBody", "RequestDescriptor"]

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx

RequestBody = str | bytes | Mapping[str, Any]


@dataclass
class RequestDescriptor:
    """In-flight representation of one HTTP request.

    Attributes:
        method: The upper-case HTTP method (e.g., "GET", "POST").
        url: The request target. A relative target is resolved against
            the ``base_url`` of the client. ``set_url`` moves query
            parameters embedded in the URL into ``params``. A query string
            assigned directly is merged with ``params`` when sending.
        params: Query parameters added to the request.
        headers: Request headers. Names are case-insensitive.
        body: Optional request body. Strings and bytes are sent verbatim,
            mappings are sent as ``application/x-www-form-urlencoded``.
        auth: Optional authentication for this request only. When unset,
            the authentication configured on the client applies.

    Example:
        ```pycon
        >>> from servicehttp.request import RequestDescriptor
        >>> req = RequestDescriptor(method="GET", url="https://api.example.com/items")
        >>> req.params["page"] = 1
        >>> req.headers["Accept"] = "application/json"
        >>> req.headers["accept"]
        'application/json'

        ```
    """

    method: str
    url: str = ""
    params: dict[str, Any] = field(default_factory=dict)
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    body: RequestBody | None = None
    auth: httpx.Auth | None = None

    def __post_init__(self) -> None:
        self.method = self.method.upper()

    def set_url(self, url: str) -> None:
        """Set the request target.

        Query parameters embedded in ``url`` are moved into ``params``,
        next to the parameters already set. The target keeps no query
        string.

        Args:
            url: The URL to request, absolute or relative.

        Example:
            ```pycon
            >>> from servicehttp.request import RequestDescriptor
            >>> req = RequestDescriptor(method="GET", params={"page": 1})
            >>> req.set_url("https://api.example.com/items?sort=name")
            >>> req.url
            'https://api.example.com/items'
            >>> req.params
            {'page': 1, 'sort': 'name'}

            ```
        """
        target = httpx.URL(url)
        if target.query:
            self.params.update(target.params)
            target = target.copy_with(query=None)
        self.url = str(target)

    def basic_auth(self, username: str, password: str) -> None:
        """Authenticate this request with HTTP basic authentication.

        Args:
            username: The user name.
            password: The password.
        """
        self.auth = httpx.BasicAuth(username, password)
