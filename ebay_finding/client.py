"""Finding client: search operations built on the generic dispatcher."""

from __future__ import annotations

import functools
import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from ebay_finding.config import FindingConfig
from ebay_finding.connection.httpx_adapter import HttpxTransport
from ebay_finding.connection.protocol import FindingTransport
from ebay_finding.errors import InvalidArgumentError
from ebay_finding.finding.dispatcher import ResponseParser, T, dispatch
from ebay_finding.finding.models import SearchResult, VersionResult
from ebay_finding.finding.operations import validate_product_id_type
from ebay_finding.finding.parsers import parse_search_response, parse_version_response

logger = logging.getLogger("ebay_finding.client")

Options = Mapping[str, Any]
ProductFinder = Callable[..., Awaitable[SearchResult]]


class FindingClient:
    """Client for the eBay Finding service.

    Build one per application (``FindingClient.from_config``) and share it;
    each call is an independent request.
    """

    def __init__(self, transport: FindingTransport) -> None:
        self._transport = transport

    @classmethod
    def from_config(cls, config: FindingConfig) -> FindingClient:
        transport = HttpxTransport(
            app_id=config.app_id,
            base_url=config.endpoint_url,
            global_id=config.global_id,
            service_version=config.service_version,
            timeout=config.timeout,
            verify_ssl=config.verify_ssl,
        )
        logger.info("Finding client ready (%s, %s)", config.endpoint_url, config.global_id)
        return cls(transport)

    @property
    def transport(self) -> FindingTransport:
        return self._transport

    async def __aenter__(self) -> FindingClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self._transport.close()

    # --- Generic dispatch ---

    async def call(
        self,
        operation: str,
        parser: ResponseParser[T],
        base_params: Options,
        options: Options | None = None,
    ) -> T:
        return await dispatch(self._transport, operation, parser, base_params, options)

    async def _search(
        self, operation: str, base_params: Options, options: Options | None
    ) -> SearchResult:
        parser = functools.partial(parse_search_response, operation=operation)
        return await self.call(operation, parser, base_params, options)

    # --- Product searches ---

    async def find_items_by_product(
        self,
        product_id_type: str,
        product_id: str,
        options: Options | None = None,
    ) -> SearchResult:
        """Search for items by product identifier.

        Args:
            product_id_type: 'ReferenceID', 'ISBN', 'UPC' or 'EAN'.
            product_id: The identifier value, e.g. a UPC code.
            options: Extra call parameters, see
                http://developer.ebay.com/devzone/finding/CallRef/findItemsByProduct.html
        """
        validate_product_id_type(product_id_type)
        return await self._search(
            "findItemsByProduct",
            {"productId.@type": product_id_type, "productId": product_id},
            options,
        )

    def product_finder(self, product_id_type: str) -> ProductFinder:
        """Bind a product identifier type, returning ``finder(product_id, options=None)``."""
        validate_product_id_type(product_id_type)
        return functools.partial(self.find_items_by_product, product_id_type)

    async def find_items_by_upc(self, upc: str, options: Options | None = None) -> SearchResult:
        return await self.find_items_by_product("UPC", upc, options)

    async def find_items_by_reference_id(
        self, reference_id: str, options: Options | None = None
    ) -> SearchResult:
        return await self.find_items_by_product("ReferenceID", reference_id, options)

    async def find_items_by_isbn(self, isbn: str, options: Options | None = None) -> SearchResult:
        return await self.find_items_by_product("ISBN", isbn, options)

    async def find_items_by_ean(self, ean: str, options: Options | None = None) -> SearchResult:
        return await self.find_items_by_product("EAN", ean, options)

    # --- Keyword / category searches ---

    async def find_items_by_keywords(
        self, keywords: str, options: Options | None = None
    ) -> SearchResult:
        return await self._search("findItemsByKeywords", {"keywords": keywords}, options)

    async def find_items_advanced(
        self,
        keywords: str | None = None,
        category_id: str | None = None,
        description_search: bool = False,
        options: Options | None = None,
    ) -> SearchResult:
        """Keyword and/or category search; *description_search* also matches descriptions."""
        if not keywords and not category_id:
            raise InvalidArgumentError(
                "findItemsAdvanced needs keywords or category_id",
                valid=("keywords", "category_id"),
            )
        params: dict[str, Any] = {}
        if keywords:
            params["keywords"] = keywords
        if category_id:
            params["categoryId"] = category_id
        if description_search:
            params["descriptionSearch"] = "true"
        return await self._search("findItemsAdvanced", params, options)

    async def find_items_by_category(
        self, category_id: str, options: Options | None = None
    ) -> SearchResult:
        return await self._search("findItemsByCategory", {"categoryId": category_id}, options)

    async def find_completed_items(
        self, keywords: str, options: Options | None = None
    ) -> SearchResult:
        return await self._search("findCompletedItems", {"keywords": keywords}, options)

    async def find_items_in_ebay_stores(
        self, store_name: str, options: Options | None = None
    ) -> SearchResult:
        return await self._search("findItemsIneBayStores", {"storeName": store_name}, options)

    # --- Service info ---

    async def get_version(self) -> VersionResult:
        parser = functools.partial(parse_version_response, operation="getVersion")
        return await self.call("getVersion", parser, {})
