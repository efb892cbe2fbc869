r"""Configuration constants for the service HTTP helpers.

This module gathers the fixed values used by the HTTP helper mixin:
the URL shortener endpoint, the range of status codes considered
successful, the marker used to detect HTML error pages, and the names of
the ``httpx.Client`` options accepted when creating a service client.
"""

from __future__ import annotations

__all__ = [
    "CLIENT_OPTION_NAMES",
    "HTML_DOCUMENT_MARKER",
    "SHORTENER_CREATED_STATUS",
    "SHORTENER_URL",
    "SUCCESS_STATUS_MAX",
    "SUCCESS_STATUS_MIN",
]

# Endpoint of the URL shortener used by ``HttpMixin.shorten_url``
# The URL to shorten is sent as the ``url`` form field
SHORTENER_URL = "http://crash.io"

# The shortener answers 201 Created with the short URL in ``location``
SHORTENER_CREATED_STATUS = 201

# Inclusive bounds of the status codes considered successful
SUCCESS_STATUS_MIN = 200
SUCCESS_STATUS_MAX = 299

# Response bodies containing this text are treated as HTML documents and
# left out of error details
HTML_DOCUMENT_MARKER = "!DOCTYPE"

# Keyword arguments of httpx.Client that can be passed through when a
# service creates its client
CLIENT_OPTION_NAMES = frozenset(
    {
        "auth",
        "base_url",
        "cert",
        "cookies",
        "default_encoding",
        "event_hooks",
        "follow_redirects",
        "headers",
        "http1",
        "http2",
        "limits",
        "max_redirects",
        "mounts",
        "params",
        "proxy",
        "timeout",
        "transport",
        "trust_env",
        "verify",
    }
)
