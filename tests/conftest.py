"""Shared fixtures for unit tests."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from ethos.proxy.models import ResponseEnvelope


@pytest.fixture
def make_envelope():
    """Factory for response envelopes with a JSON array body."""

    def _make(
        total: int | str | None = None,
        rows: int | None = 0,
        max_page_size: int | str | None = None,
        body: str | None = None,
    ) -> ResponseEnvelope:
        headers: dict[str, str] = {}
        if total is not None:
            headers["X-Total-Count"] = str(total)
        if max_page_size is not None:
            headers["X-Max-Page-Size"] = str(max_page_size)
        if body is None:
            body = json.dumps(list(range(rows))) if rows is not None else ""
        return ResponseEnvelope(status_code=200, body=body, headers=headers)

    return _make


@pytest.fixture
def mock_transport():
    """Transport double with AsyncMock get/post/close."""
    transport = MagicMock()
    transport.get = AsyncMock()
    transport.post = AsyncMock()
    transport.close = AsyncMock()
    return transport
