r"""Shared test helpers for the service HTTP helper tests.

This module contains the transport used to stub HTTP exchanges and a
builder for services wired to it.
"""

from __future__ import annotations

__all__ = ["TEST_URL", "RecordingTransport", "create_service"]

from typing import Any

import httpx

from servicehttp import Service

TEST_URL = "https://api.example.com/data"


class RecordingTransport(httpx.MockTransport):
    """Mock transport that records every request it receives.

    Args:
        status_code: The status code of every response. Default is 200.
        headers: Optional headers of every response.
        text: The body of every response. Default is empty.
        error: Optional exception raised instead of answering. The
            request is still recorded.
    """

    def __init__(
        self,
        status_code: int = 200,
        headers: dict[str, str] | None = None,
        text: str = "",
        error: Exception | None = None,
    ) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.headers = headers or {}
        self.text = text
        self.error = error
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, headers=self.headers, text=self.text)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


def create_service(transport: httpx.BaseTransport, **options: Any) -> Service:
    """Create a service whose client sends requests through
    ``transport``.

    Args:
        transport: The transport of the service client.
        **options: Additional ``httpx.Client`` options.

    Returns:
        A ``Service`` with its client already created.
    """
    service = Service()
    service.http({"transport": transport, **options})
    return service
