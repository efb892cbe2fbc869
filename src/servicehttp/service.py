r"""Base class for services sending HTTP requests."""

from __future__ import annotations

__all__ = ["Service"]

from typing import TYPE_CHECKING, Any

from servicehttp.mixin import HttpMixin

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx


class Service(HttpMixin):
    r"""A service configured by a mapping of settings and triggered by a
    payload.

    Subclasses use the helpers of ``HttpMixin`` to deliver the payload.
    The HTTP client is owned by the service: it is created on first use
    and lives as long as the service.

    Args:
        data: Optional settings of the service (e.g., endpoint, token).
        payload: Optional event payload the service delivers.

    Example:
        ```pycon
        >>> from servicehttp import Service
        >>> class Webhook(Service):
        ...     def receive_push(self):
        ...         return self.http_post(self.data["url"], self.payload["message"])
        ...
        >>> service = Webhook({"url": "https://hooks.example.com"}, {"message": "hi"})
        >>> service.data["url"]
        'https://hooks.example.com'
        >>> response = service.receive_push()  # doctest: +SKIP

        ```
    """

    def __init__(
        self,
        data: Mapping[str, Any] | None = None,
        payload: Mapping[str, Any] | None = None,
    ) -> None:
        self.data: dict[str, Any] = dict(data or {})
        self.payload: dict[str, Any] = dict(payload or {})
        self._http: httpx.Client | None = None

    def __repr__(self) -> str:
        return f"{type(self).__qualname__}(data={self.data!r})"
