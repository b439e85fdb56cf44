"""eBay Finding client — product and keyword search with normalised results."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("ebay-finding")
except PackageNotFoundError:
    __version__ = "0.1.0"

from ebay_finding.api import (  # noqa: E402
    close,
    find_completed_items,
    find_items_advanced,
    find_items_by_category,
    find_items_by_ean,
    find_items_by_isbn,
    find_items_by_keywords,
    find_items_by_product,
    find_items_by_reference_id,
    find_items_by_upc,
    find_items_in_ebay_stores,
    get_client,
    get_version,
    init,
    product_finder,
)
from ebay_finding.client import FindingClient  # noqa: E402
from ebay_finding.config import FindingConfig, load_config  # noqa: E402
from ebay_finding.errors import (  # noqa: E402
    EmptyResponseError,
    FindingError,
    InvalidArgumentError,
    NotInitializedError,
    ServiceFailureError,
)
from ebay_finding.connection import TransportError  # noqa: E402
from ebay_finding.finding.models import Pagination, SearchResult, VersionResult  # noqa: E402

__all__ = [
    "EmptyResponseError",
    "FindingClient",
    "FindingConfig",
    "FindingError",
    "InvalidArgumentError",
    "NotInitializedError",
    "Pagination",
    "SearchResult",
    "ServiceFailureError",
    "TransportError",
    "VersionResult",
    "close",
    "find_completed_items",
    "find_items_advanced",
    "find_items_by_category",
    "find_items_by_ean",
    "find_items_by_isbn",
    "find_items_by_keywords",
    "find_items_by_product",
    "find_items_by_reference_id",
    "find_items_by_upc",
    "find_items_in_ebay_stores",
    "get_client",
    "get_version",
    "init",
    "load_config",
    "product_finder",
]
