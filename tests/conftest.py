"""Shared test fixtures for ebay-finding tests."""

from __future__ import annotations

import os
from typing import Any
from unittest.mock import AsyncMock

import pytest

from ebay_finding.client import FindingClient
from ebay_finding.config import FindingConfig
from ebay_finding.connection.protocol import FindingTransport


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep developer EBAY_* variables out of the tests."""
    for key in list(os.environ):
        if key.upper().startswith("EBAY_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def minimal_config() -> FindingConfig:
    return FindingConfig(app_id="TestApp-1234")


# ---------------------------------------------------------------------------
# Mock transport
# ---------------------------------------------------------------------------

class MockTransport(FindingTransport):
    """Transport returning canned payloads, recording every call."""

    def __init__(self) -> None:
        self.get_mock = AsyncMock()
        self.closed = False

    async def get(self, service: str, params: dict[str, Any]) -> dict[str, Any]:
        return await self.get_mock(service, params)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def mock_transport() -> MockTransport:
    return MockTransport()


@pytest.fixture
def client(mock_transport: MockTransport) -> FindingClient:
    return FindingClient(mock_transport)


# ---------------------------------------------------------------------------
# Wire-format payloads (every field wrapped in a list)
# ---------------------------------------------------------------------------

def wire_item(item_id: str, title: str) -> dict[str, Any]:
    return {
        "itemId": [item_id],
        "title": [title],
        "sellingStatus": [{
            "currentPrice": [{"@currencyId": "USD", "__value__": "19.99"}],
            "sellingState": ["Active"],
        }],
        "galleryURL": [f"https://thumbs.ebaystatic.com/{item_id}.jpg"],
    }


def wire_response(
    operation: str = "findItemsByProduct",
    items: list[dict[str, Any]] | None = None,
    ack: str = "Success",
    count: str | None = None,
) -> dict[str, Any]:
    items = items if items is not None else []
    search_result: dict[str, Any] = {"@count": count if count is not None else str(len(items))}
    if items:
        search_result["item"] = items
    return {
        f"{operation}Response": [{
            "ack": [ack],
            "version": ["1.13.0"],
            "timestamp": ["2024-03-01T12:00:00.000Z"],
            "searchResult": [search_result],
            "paginationOutput": [{
                "pageNumber": ["1"],
                "entriesPerPage": ["100"],
                "totalPages": ["1"],
                "totalEntries": [str(len(items))],
            }],
            "itemSearchURL": ["https://www.ebay.com/sch/i.html?_upc=885909950805"],
        }]
    }


def wire_failure(operation: str = "findItemsByProduct") -> dict[str, Any]:
    return {
        f"{operation}Response": [{
            "ack": ["Failure"],
            "version": ["1.13.0"],
            "timestamp": ["2024-03-01T12:00:00.000Z"],
            "errorMessage": [{
                "error": [{
                    "errorId": ["41"],
                    "domain": ["Marketplace"],
                    "severity": ["Error"],
                    "message": ["Invalid product ID value."],
                }]
            }],
        }]
    }


@pytest.fixture
def make_item():
    return wire_item


@pytest.fixture
def make_response():
    return wire_response


@pytest.fixture
def make_failure():
    return wire_failure
