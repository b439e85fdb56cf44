"""Parsers turning an unwrapped ``<operation>Response`` body into result records."""

from __future__ import annotations

import logging
from typing import Any

from ebay_finding.errors import ServiceFailureError
from ebay_finding.finding.models import Pagination, SearchResult, VersionResult, parse_int
from ebay_finding.finding.normalize import flatten, force_list

logger = logging.getLogger("ebay_finding.parsers")

FAILURE = "Failure"


def _raise_on_failure(body: dict[str, Any], operation: str | None) -> None:
    if body.get("ack") == FAILURE:
        logger.warning("Service failure for %s: %s", operation or "request", body.get("errorMessage"))
        raise ServiceFailureError(body, operation=operation)


def parse_search_response(
    body: dict[str, Any], operation: str | None = None
) -> SearchResult:
    """Parse a search-shaped response body (findItems* and findCompletedItems).

    ``searchResult.item`` is coerced to a list before anything else, so a
    ServiceFailureError carries the same item shape as a successful result.
    """
    search_result = body.get("searchResult")
    items: list[Any] = []
    if isinstance(search_result, dict):
        if search_result.get("item") is not None:
            items = force_list(search_result["item"])
            search_result = {**search_result, "item": items}
            body = {**body, "searchResult": search_result}
    else:
        search_result = {}

    _raise_on_failure(body, operation)

    return SearchResult(
        ack=body.get("ack"),
        version=body.get("version"),
        timestamp=body.get("timestamp"),
        search_result_count=parse_int(search_result.get("@count")),
        search_result=[flatten(item) for item in items],
        pagination_output=Pagination.from_response(body.get("paginationOutput")),
        item_search_url=body.get("itemSearchURL"),
    )


def parse_version_response(
    body: dict[str, Any], operation: str | None = None
) -> VersionResult:
    _raise_on_failure(body, operation)
    return VersionResult(
        ack=body.get("ack"),
        version=body.get("version"),
        timestamp=body.get("timestamp"),
    )
