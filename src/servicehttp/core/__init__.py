r"""Core logic shared by the service HTTP helpers.

This package contains configuration constants, validation of client
options, client creation and request sending.
"""

from __future__ import annotations

__all__ = [
    "CLIENT_OPTION_NAMES",
    "HTML_DOCUMENT_MARKER",
    "SHORTENER_CREATED_STATUS",
    "SHORTENER_URL",
    "SUCCESS_STATUS_MAX",
    "SUCCESS_STATUS_MIN",
    "create_client",
    "send_request",
    "validate_client_options",
    "validate_timeout",
]

from servicehttp.core.client_logic import create_client, send_request
from servicehttp.core.config import (
    CLIENT_OPTION_NAMES,
    HTML_DOCUMENT_MARKER,
    SHORTENER_CREATED_STATUS,
    SHORTENER_URL,
    SUCCESS_STATUS_MAX,
    SUCCESS_STATUS_MIN,
)
from servicehttp.core.validation import validate_client_options, validate_timeout
