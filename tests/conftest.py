from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock

import httpx
import pytest

from tests.helpers import RecordingTransport

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def transport() -> RecordingTransport:
    """Create a transport that records requests and answers 200."""
    return RecordingTransport()


@pytest.fixture
def client(transport: RecordingTransport) -> Generator[httpx.Client, None, None]:
    """Create an httpx.Client sending requests through the recording
    transport."""
    with httpx.Client(transport=transport) as client:
        yield client


@pytest.fixture
def mock_response() -> httpx.Response:
    """Create a mock httpx.Response for testing."""
    return Mock(spec=httpx.Response, status_code=200, text="")


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback function for testing ``on_request``."""
    return Mock()
