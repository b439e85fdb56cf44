"""Supported Finding operations and product identifier types."""

from __future__ import annotations

from ebay_finding.errors import InvalidArgumentError

# http://developer.ebay.com/devzone/finding/CallRef/index.html
OPERATIONS: frozenset[str] = frozenset({
    "findCompletedItems",
    "findItemsAdvanced",
    "findItemsByCategory",
    "findItemsByKeywords",
    "findItemsByProduct",
    "findItemsIneBayStores",
    "getHistograms",
    "getSearchKeywordsRecommendation",
    "getVersion",
})

PRODUCT_ID_TYPES: tuple[str, ...] = ("ReferenceID", "ISBN", "UPC", "EAN")


def validate_operation(operation: str) -> str:
    """Return *operation* if supported, else raise InvalidArgumentError."""
    if operation not in OPERATIONS:
        raise InvalidArgumentError(
            f"unknown operation {operation!r}, use one of: "
            + ", ".join(sorted(OPERATIONS)),
            value=operation,
            valid=OPERATIONS,
        )
    return operation


def validate_product_id_type(product_id_type: str) -> str:
    """Return *product_id_type* if supported, else raise InvalidArgumentError."""
    if product_id_type not in PRODUCT_ID_TYPES:
        raise InvalidArgumentError(
            f"unknown type {product_id_type!r}, use ReferenceID, ISBN, UPC, or EAN",
            value=product_id_type,
            valid=PRODUCT_ID_TYPES,
        )
    return product_id_type
