"""Abstract transport interface and transport error type."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ebay_finding.errors import FindingError


class TransportError(FindingError):
    """Network / protocol-level failure talking to the eBay API."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class FindingTransport(ABC):
    """Abstract interface for issuing eBay API calls."""

    @abstractmethod
    async def get(self, service: str, params: dict[str, Any]) -> dict[str, Any]:
        """Call *service* with flat query *params* and return the decoded body."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Close the transport and release resources."""
        ...
