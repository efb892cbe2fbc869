r"""HTTP helper mixin for services.

This module provides ``HttpMixin``, which gives a service a lazily
created ``httpx.Client`` and convenience methods to issue requests
through it. Each helper builds a ``RequestDescriptor`` from its
arguments, lets an optional ``on_request`` callback customize it, then
sends it and returns the response regardless of its status code.
"""

from __future__ import annotations

__all__ = ["HttpMixin"]

import logging
from typing import TYPE_CHECKING, Any

import httpx

from servicehttp.core.client_logic import create_client, send_request
from servicehttp.core.config import SHORTENER_CREATED_STATUS, SHORTENER_URL
from servicehttp.request import RequestDescriptor
from servicehttp.response import (
    error_response_details,
    is_successful_response,
    raise_for_unsuccessful_response,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from servicehttp.request import RequestBody

logger: logging.Logger = logging.getLogger(__name__)


class HttpMixin:
    r"""Mixin adding HTTP helpers to a service.

    The client is created on the first call to ``http()`` and stored in
    the ``_http`` field of the instance. Every helper of the instance
    then goes through this same client. The instance is meant to be used
    from a single thread.

    Example:
        ```pycon
        >>> from servicehttp import HttpMixin
        >>> class Notifier(HttpMixin):
        ...     def notify(self, message):
        ...         return self.http_post("https://hooks.example.com/notify", message)
        ...
        >>> response = Notifier().notify("deployed")  # doctest: +SKIP

        ```
    """

    _http: httpx.Client | None = None

    def http_options(self) -> Mapping[str, Any]:
        """Return the client options used when ``http()`` receives none.

        Override this method to preset e.g. ``auth`` or ``headers`` on
        the client of a service.

        Returns:
            A mapping of ``httpx.Client`` keyword arguments.
        """
        return {}

    def http(self, options: Mapping[str, Any] | None = None) -> httpx.Client:
        r"""Return the HTTP client of this instance.

        The client is created on the first call. Later calls return the
        same client and ignore ``options``.

        Args:
            options: Optional ``httpx.Client`` keyword arguments used to
                create the client. If ``None``, ``http_options()`` is used.

        Returns:
            The ``httpx.Client`` of this instance.

        Raises:
            ValueError: If the ``timeout`` option is a non-positive number.
        """
        if self._http is None:
            self._http = create_client(self.http_options() if options is None else options)
        return self._http

    def http_get(
        self,
        url: str | None = None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        on_request: Callable[[RequestDescriptor], None] | None = None,
    ) -> httpx.Response:
        r"""Send an HTTP GET request.

        Args:
            url: Optional URL to request. Relative URLs are resolved
                against the base URL of the client.
            params: Optional query parameters, added to the parameters
                already present in the URL or on the client.
            headers: Optional headers to set on the request.
            on_request: Optional callback receiving the
                ``RequestDescriptor`` before it is sent.

        Returns:
            The ``httpx.Response`` received, whatever its status code.

        Example:
            ```pycon
            >>> from servicehttp import Service
            >>> service = Service()
            >>> # GET https://api.example.com/items?page=1
            >>> response = service.http_get(
            ...     "https://api.example.com/items", {"page": 1}, {"Accept": "application/json"}
            ... )  # doctest: +SKIP
            >>> def customize(req):
            ...     req.basic_auth("username", "password")
            ...     req.params["page"] = 2
            ...
            >>> response = service.http_get(
            ...     "https://api.example.com/items", on_request=customize
            ... )  # doctest: +SKIP

            ```
        """
        descriptor = RequestDescriptor(method="GET")
        if url is not None:
            descriptor.set_url(url)
        if params is not None:
            descriptor.params.update(params)
        if headers is not None:
            descriptor.headers.update(headers)
        if on_request is not None:
            on_request(descriptor)
        return send_request(self.http(), descriptor)

    def http_post(
        self,
        url: str | None = None,
        body: RequestBody | None = None,
        headers: Mapping[str, str] | None = None,
        on_request: Callable[[RequestDescriptor], None] | None = None,
    ) -> httpx.Response:
        r"""Send an HTTP POST request.

        Args:
            url: Optional URL to request.
            body: Optional request body. Strings and bytes are sent
                verbatim, mappings are form-urlencoded.
            headers: Optional headers to set on the request.
            on_request: Optional callback receiving the
                ``RequestDescriptor`` before it is sent.

        Returns:
            The ``httpx.Response`` received, whatever its status code.

        Example:
            ```pycon
            >>> import json
            >>> from servicehttp import Service
            >>> service = Service()
            >>> response = service.http_post(
            ...     "https://api.example.com/create",
            ...     json.dumps({"name": "demo"}),
            ...     {"Content-Type": "application/json"},
            ... )  # doctest: +SKIP

            ```
        """
        return self.http_method("POST", url, body, headers, on_request=on_request)

    def http_method(
        self,
        method: str,
        url: str | None = None,
        body: RequestBody | None = None,
        headers: Mapping[str, str] | None = None,
        on_request: Callable[[RequestDescriptor], None] | None = None,
    ) -> httpx.Response:
        r"""Send an HTTP request with the given method.

        When ``url`` is given, it also becomes the base URL of the client
        so that credentials configured on the client apply to that host.
        The base URL stays in place for the next requests of this
        instance. Query parameters of ``url`` are added to the client
        parameters rather than kept in the base URL.

        Args:
            method: The HTTP method (e.g., "PUT", "DELETE").
            url: Optional URL to request.
            body: Optional request body. Strings and bytes are sent
                verbatim, mappings are form-urlencoded. Other formats
                such as JSON must be encoded by the caller.
            headers: Optional headers to set on the request.
            on_request: Optional callback receiving the
                ``RequestDescriptor`` before it is sent.

        Returns:
            The ``httpx.Response`` received, whatever its status code.

        Example:
            ```pycon
            >>> from servicehttp import Service
            >>> service = Service()
            >>> response = service.http_method(
            ...     "PUT", "https://api.example.com/items/1", "payload"
            ... )  # doctest: +SKIP

            ```
        """
        client = self.http()
        descriptor = RequestDescriptor(method=method)
        if url is not None:
            self._set_base_url(client, url)
            descriptor.set_url(url)
        if headers is not None:
            descriptor.headers.update(headers)
        if body is not None:
            descriptor.body = body
        if on_request is not None:
            on_request(descriptor)
        return send_request(client, descriptor)

    @staticmethod
    def _set_base_url(client: httpx.Client, url: str) -> None:
        # httpx appends the trailing slash after the query string, so the
        # query goes to the client parameters instead
        target = httpx.URL(url)
        if target.query:
            client.params = client.params.merge(target.params)
            target = target.copy_with(query=None)
        client.base_url = target

    def shorten_url(self, url: str) -> str:
        r"""Shorten a URL with the crash.io service.

        Args:
            url: The URL to shorten.

        Returns:
            The short URL, or ``url`` unchanged if the service does not
                answer with 201 Created or if the request times out.

        Raises:
            httpx.HTTPError: Transport errors other than timeouts.
        """
        try:
            response = self.http_post(SHORTENER_URL, {"url": url})
        except httpx.TimeoutException as exc:
            logger.debug(f"Shortening {url} timed out: {exc}")
            return url
        if response.status_code == SHORTENER_CREATED_STATUS:
            return response.headers.get("location", url)
        logger.debug(f"Shortening {url} failed with status {response.status_code}")
        return url

    def is_successful_response(self, response: httpx.Response) -> bool:
        r"""Indicate if the response has a 2xx status code.

        See ``servicehttp.response.is_successful_response``.
        """
        return is_successful_response(response)

    def error_response_details(self, response: httpx.Response) -> str:
        r"""Describe the status code and, unless it is an HTML document,
        the body of a response.

        See ``servicehttp.response.error_response_details``.
        """
        return error_response_details(response)

    def raise_for_unsuccessful_response(self, response: httpx.Response) -> None:
        r"""Raise ``ServiceHttpError`` if the response is not successful.

        See ``servicehttp.response.raise_for_unsuccessful_response``.
        """
        raise_for_unsuccessful_response(response)
