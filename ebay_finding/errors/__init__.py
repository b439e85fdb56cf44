"""
Error types for the eBay Finding client.

Every error raised by the package derives from FindingError so callers can
catch the whole family, or tell service-reported failures apart from
transport failures.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ebay_finding.finding.normalize import flatten, force_list


class FindingError(Exception):
    """Base class for all eBay Finding client errors."""


class NotInitializedError(FindingError):
    """A module-level search function was called before init()."""

    def __init__(self, message: str = "call ebay_finding.init() first") -> None:
        super().__init__(message)


class InvalidArgumentError(FindingError, ValueError):
    """An operation name or identifier type outside the supported set."""

    def __init__(
        self,
        message: str,
        value: Any = None,
        valid: Iterable[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.value = value
        self.valid = sorted(valid) if valid is not None else []


class EmptyResponseError(FindingError):
    """The call succeeded but the ``<operation>Response`` envelope was empty."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"eBay response empty for {operation}")
        self.operation = operation


class ServiceFailureError(FindingError):
    """The service acknowledged the request with ``ack == "Failure"``.

    ``response`` holds the full normalized response body for inspection.
    """

    def __init__(self, response: dict[str, Any], operation: str | None = None) -> None:
        self.response = response
        self.operation = operation
        message = "eBay reported failure"
        if operation:
            message = f"eBay reported failure for {operation}"
        errors = self.errors
        if errors and errors[0].get("message"):
            message = f"{message}: {errors[0]['message']}"
        super().__init__(message)

    @property
    def ack(self) -> str | None:
        return self.response.get("ack")

    @property
    def errors(self) -> list[dict[str, Any]]:
        """Service error entries from ``errorMessage.error``, always a list."""
        error_message = self.response.get("errorMessage")
        if not isinstance(error_message, dict):
            return []
        return [
            flatten(entry)
            for entry in force_list(error_message.get("error"))
            if isinstance(entry, dict)
        ]
