"""Result records returned by the Finding client."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def parse_int(value: Any, default: int = 0) -> int:
    """Parse a non-negative base-10 integer from the service's string fields."""
    try:
        result = int(str(value).strip(), 10)
    except (TypeError, ValueError):
        return default
    return result if result >= 0 else default


@dataclass
class Pagination:
    """Paging details of a search: current page, page size and totals."""

    page_number: int = 0
    entries_per_page: int = 0
    total_pages: int = 0
    total_entries: int = 0

    @classmethod
    def from_response(cls, data: Any) -> Pagination | None:
        if not isinstance(data, dict):
            return None
        return cls(
            page_number=parse_int(data.get("pageNumber")),
            entries_per_page=parse_int(data.get("entriesPerPage")),
            total_pages=parse_int(data.get("totalPages")),
            total_entries=parse_int(data.get("totalEntries")),
        )

    def to_dict(self) -> dict[str, int]:
        return {
            "pageNumber": self.page_number,
            "entriesPerPage": self.entries_per_page,
            "totalPages": self.total_pages,
            "totalEntries": self.total_entries,
        }


@dataclass
class SearchResult:
    """Normalised result of a search operation.

    ``search_result_count`` is the count reported for this page and may
    differ from the total number of matches (see ``pagination_output``).
    ``search_result`` is always a list, even for a single item.
    """

    ack: str | None = None
    version: str | None = None
    timestamp: str | None = None
    search_result_count: int = 0
    search_result: list[dict[str, Any]] = field(default_factory=list)
    pagination_output: Pagination | None = None
    item_search_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the service's camelCase record shape."""
        return {
            "ack": self.ack,
            "version": self.version,
            "timestamp": self.timestamp,
            "searchResultCount": self.search_result_count,
            "searchResult": list(self.search_result),
            "paginationOutput": (
                self.pagination_output.to_dict()
                if self.pagination_output is not None
                else None
            ),
            "itemSearchUrl": self.item_search_url,
        }


@dataclass
class VersionResult:
    ack: str | None = None
    version: str | None = None
    timestamp: str | None = None
