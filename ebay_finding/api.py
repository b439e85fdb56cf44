"""Process-wide convenience API.

``init()`` once at startup, then call the module-level search functions::

    import ebay_finding

    ebay_finding.init(app_id="MyApp-1234")
    result = await ebay_finding.find_items_by_upc("885909950805")
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ebay_finding.client import FindingClient, Options, ProductFinder
from ebay_finding.config import FindingConfig, load_config
from ebay_finding.errors import NotInitializedError
from ebay_finding.finding.models import SearchResult, VersionResult

logger = logging.getLogger("ebay_finding")

_client: FindingClient | None = None
_superseded: list[FindingClient] = []


def init(
    config: FindingConfig | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> FindingClient:
    """Create the default client.

    A client replaced by a later init() stays open until close() is awaited.

    *config* may be a FindingConfig, a mapping of config values, or omitted
    to read ``EBAY_*`` environment variables / the config file.
    """
    global _client

    if isinstance(config, FindingConfig):
        cfg = load_config({**config.model_dump(), **overrides}) if overrides else config
    else:
        cfg = load_config({**(config or {}), **overrides})

    if _client is not None:
        logger.warning("ebay_finding.init() called again; replacing the default client")
        _superseded.append(_client)
    _client = FindingClient.from_config(cfg)
    return _client


def get_client() -> FindingClient:
    if _client is None:
        raise NotInitializedError()
    return _client


async def close() -> None:
    """Close and forget the default client and any client it replaced."""
    global _client
    while _superseded:
        await _superseded.pop().close()
    if _client is not None:
        await _client.close()
        _client = None
        logger.info("Default Finding client closed")


async def find_items_by_product(
    product_id_type: str, product_id: str, options: Options | None = None
) -> SearchResult:
    return await get_client().find_items_by_product(product_id_type, product_id, options)


def product_finder(product_id_type: str) -> ProductFinder:
    return get_client().product_finder(product_id_type)


async def find_items_by_upc(upc: str, options: Options | None = None) -> SearchResult:
    return await get_client().find_items_by_upc(upc, options)


async def find_items_by_reference_id(
    reference_id: str, options: Options | None = None
) -> SearchResult:
    return await get_client().find_items_by_reference_id(reference_id, options)


async def find_items_by_isbn(isbn: str, options: Options | None = None) -> SearchResult:
    return await get_client().find_items_by_isbn(isbn, options)


async def find_items_by_ean(ean: str, options: Options | None = None) -> SearchResult:
    return await get_client().find_items_by_ean(ean, options)


async def find_items_by_keywords(
    keywords: str, options: Options | None = None
) -> SearchResult:
    return await get_client().find_items_by_keywords(keywords, options)


async def find_items_advanced(
    keywords: str | None = None,
    category_id: str | None = None,
    description_search: bool = False,
    options: Options | None = None,
) -> SearchResult:
    return await get_client().find_items_advanced(
        keywords, category_id, description_search, options
    )


async def find_items_by_category(
    category_id: str, options: Options | None = None
) -> SearchResult:
    return await get_client().find_items_by_category(category_id, options)


async def find_completed_items(
    keywords: str, options: Options | None = None
) -> SearchResult:
    return await get_client().find_completed_items(keywords, options)


async def find_items_in_ebay_stores(
    store_name: str, options: Options | None = None
) -> SearchResult:
    return await get_client().find_items_in_ebay_stores(store_name, options)


async def get_version() -> VersionResult:
    return await get_client().get_version()
