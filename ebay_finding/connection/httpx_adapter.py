"""httpx-based transport for the eBay Finding REST endpoint."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ebay_finding.connection.protocol import FindingTransport, TransportError
from ebay_finding.errors import InvalidArgumentError

logger = logging.getLogger("ebay_finding.connection.http")

SERVICE_ENDPOINTS: dict[str, str] = {
    "finding": "/services/search/FindingService/v1",
}

APP_ID_HEADER = "X-EBAY-SOA-SECURITY-APPNAME"

_SECRET_PARAMS = {"security-appname"}


def _sanitize_params(params: dict[str, Any]) -> dict[str, Any]:
    """Mask credentials before logging."""
    return {
        k: "***" if k.lower() in _SECRET_PARAMS else v
        for k, v in params.items()
    }


def _query_params(params: dict[str, Any]) -> list[tuple[str, Any]]:
    """Flatten to query pairs; sequences become repeated keys, None is dropped."""
    pairs: list[tuple[str, Any]] = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _stringify(v)) for v in value)
        else:
            pairs.append((key, _stringify(value)))
    return pairs


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class HttpxTransport(FindingTransport):
    """Transport issuing GET requests with the Finding service's call headers."""

    def __init__(
        self,
        app_id: str,
        base_url: str = "https://svcs.ebay.com",
        global_id: str = "EBAY-US",
        service_version: str = "1.13.0",
        timeout: int = 30,
        verify_ssl: bool = True,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._app_id = app_id
        self._global_id = global_id
        self._service_version = service_version
        self._owns_client = client is None
        self._client: httpx.AsyncClient | None = client
        if client is None:
            self._client = httpx.AsyncClient(
                base_url=base_url.rstrip("/"),
                timeout=timeout,
                verify=verify_ssl,
                headers={"Accept": "application/json"},
            )

    def _headers(self) -> dict[str, str]:
        # Credential goes in a header, never in the query string.
        return {APP_ID_HEADER: self._app_id}

    def _default_params(self) -> dict[str, Any]:
        return {
            "SERVICE-VERSION": self._service_version,
            "GLOBAL-ID": self._global_id,
            "RESPONSE-DATA-FORMAT": "JSON",
            "REST-PAYLOAD": "",
        }

    async def get(self, service: str, params: dict[str, Any]) -> dict[str, Any]:
        endpoint = SERVICE_ENDPOINTS.get(service)
        if endpoint is None:
            raise InvalidArgumentError(
                f"unknown service {service!r}",
                value=service,
                valid=SERVICE_ENDPOINTS,
            )
        if self._client is None:
            raise TransportError("Transport is closed")

        merged = {**self._default_params(), **params}
        logger.debug("GET %s %s", endpoint, _sanitize_params(merged))

        try:
            response = await self._client.get(
                endpoint, params=_query_params(merged), headers=self._headers()
            )
        except httpx.TimeoutException as e:
            raise TransportError("Request timed out") from e
        except httpx.ConnectError as e:
            raise TransportError(f"Connection failed: {e}") from e
        except httpx.HTTPError as e:
            raise TransportError(f"HTTP error: {e}") from e

        if response.status_code >= 400:
            raise TransportError(
                f"eBay API returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(
                "eBay API returned a non-JSON body",
                status_code=response.status_code,
            ) from e

        if not isinstance(data, dict):
            raise TransportError(
                f"Unexpected response payload type: {type(data).__name__}",
                status_code=response.status_code,
            )
        return data

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
        self._client = None

    def is_connected(self) -> bool:
        return self._client is not None
