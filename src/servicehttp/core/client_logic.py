r"""Client creation and request sending for service HTTP helpers.

This module contains the logic shared by all helpers of ``HttpMixin``:
building the ``httpx.Client`` owned by a service and sending a
``RequestDescriptor`` through it.
"""

from __future__ import annotations

__all__ = ["create_client", "send_request"]

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import httpx

from servicehttp.core.validation import validate_client_options

if TYPE_CHECKING:
    from servicehttp.request import RequestDescriptor

logger: logging.Logger = logging.getLogger(__name__)


def create_client(options: Mapping[str, Any] | None = None) -> httpx.Client:
    """Create the HTTP client of a service.

    The client sends requests through ``httpx.HTTPTransport`` unless a
    ``transport`` option is provided. Mapping bodies are sent
    form-urlencoded by ``send_request``.

    Args:
        options: Optional ``httpx.Client`` keyword arguments. Recognized
            options are passed through verbatim, unrecognized ones are
            dropped.

    Returns:
        A new ``httpx.Client`` instance.

    Raises:
        ValueError: If the ``timeout`` option is a non-positive number.

    Example:
        ```pycon
        >>> from servicehttp.core.client_logic import create_client
        >>> client = create_client({"timeout": 5.0})
        >>> client.timeout.read
        5.0
        >>> client.close()

        ```
    """
    client_options = validate_client_options(options or {})
    if client_options.get("transport") is None:
        client_options["transport"] = httpx.HTTPTransport()
    logger.debug(f"Creating HTTP client with options: {sorted(client_options)}")
    return httpx.Client(**client_options)


def send_request(client: httpx.Client, descriptor: RequestDescriptor) -> httpx.Response:
    """Build an ``httpx.Request`` from a descriptor and send it.

    Args:
        client: The client used to build and send the request. Its base
            URL, default parameters, headers and authentication apply.
        descriptor: The request to send.

    Returns:
        The ``httpx.Response`` received, whatever its status code.

    Raises:
        httpx.HTTPError: Transport and protocol errors are propagated
            unchanged, including ``httpx.TimeoutException``.
    """
    content: str | bytes | None = None
    data: Mapping[str, Any] | None = None
    if isinstance(descriptor.body, Mapping):
        data = descriptor.body
    else:
        content = descriptor.body

    # httpx replaces the query string of the URL when params are given
    url = httpx.URL(descriptor.url)
    params = url.params.merge(descriptor.params)
    if url.query:
        url = url.copy_with(query=None)

    request = client.build_request(
        descriptor.method,
        url,
        params=params or None,
        headers=descriptor.headers,
        content=content,
        data=data,
    )
    send_kwargs: dict[str, Any] = {}
    if descriptor.auth is not None:
        send_kwargs["auth"] = descriptor.auth

    logger.debug(f"Sending {request.method} request to {request.url}")
    response = client.send(request, **send_kwargs)
    logger.debug(
        f"{request.method} request to {request.url} returned status {response.status_code}"
    )
    return response
