r"""Validation utilities for service client options.

This module provides the checks applied to the options used to create
the ``httpx.Client`` owned by a service.
"""

from __future__ import annotations

__all__ = ["validate_client_options", "validate_timeout"]

import logging
from typing import TYPE_CHECKING, Any

from servicehttp.core.config import CLIENT_OPTION_NAMES

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx

logger: logging.Logger = logging.getLogger(__name__)


def validate_timeout(timeout: float | httpx.Timeout | None) -> None:
    """Validate timeout parameter.

    Args:
        timeout: Maximum seconds to wait for server responses.
            Must be > 0 if provided as a numeric value. ``None`` disables
            the timeout and is accepted.

    Raises:
        ValueError: If timeout is a numeric value <= 0.

    Example:
        ```pycon
        >>> from servicehttp.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(30)
        >>> validate_timeout(None)
        >>> validate_timeout(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: timeout must be > 0, got 0

        ```
    """
    if isinstance(timeout, (int, float)) and timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_client_options(options: Mapping[str, Any]) -> dict[str, Any]:
    """Return the options that can be passed to ``httpx.Client``.

    Recognized options are returned verbatim. Unrecognized option names
    are dropped and reported with a warning.

    Args:
        options: The candidate ``httpx.Client`` keyword arguments.

    Returns:
        A new dictionary holding only the recognized options.

    Raises:
        ValueError: If the ``timeout`` option is a non-positive number.

    Example:
        ```pycon
        >>> from servicehttp.core.validation import validate_client_options
        >>> validate_client_options({"timeout": 5.0, "colour": "blue"})
        {'timeout': 5.0}

        ```
    """
    unknown = sorted(name for name in options if name not in CLIENT_OPTION_NAMES)
    if unknown:
        logger.warning(f"Ignoring unrecognized HTTP client options: {', '.join(unknown)}")
    valid = {name: value for name, value in options.items() if name in CLIENT_OPTION_NAMES}
    if "timeout" in valid:
        validate_timeout(valid["timeout"])
    return valid
