"""Transport layer: the HTTP client the Finding calls go through."""

from ebay_finding.connection.httpx_adapter import HttpxTransport
from ebay_finding.connection.protocol import FindingTransport, TransportError

__all__ = [
    "FindingTransport",
    "HttpxTransport",
    "TransportError",
]
