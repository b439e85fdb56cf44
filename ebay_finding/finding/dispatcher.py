"""Generic call dispatcher shared by every Finding operation."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from ebay_finding.connection.protocol import FindingTransport
from ebay_finding.errors import EmptyResponseError
from ebay_finding.finding.normalize import flatten
from ebay_finding.finding.operations import validate_operation

logger = logging.getLogger("ebay_finding.dispatcher")

T = TypeVar("T")

SERVICE = "finding"

ResponseParser = Callable[[dict[str, Any]], T]


def build_params(
    operation: str,
    base_params: Mapping[str, Any],
    options: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Merge call parameters: options < OPERATION-NAME < base params."""
    return {
        **(options or {}),
        "OPERATION-NAME": operation,
        **base_params,
    }


async def dispatch(
    transport: FindingTransport,
    operation: str,
    parser: ResponseParser[T],
    base_params: Mapping[str, Any],
    options: Mapping[str, Any] | None = None,
) -> T:
    """Issue one Finding call and hand the unwrapped body to *parser*.

    Raises InvalidArgumentError before any call for an unsupported
    operation, EmptyResponseError when ``<operation>Response`` is missing or
    empty. Transport errors propagate unchanged.
    """
    validate_operation(operation)
    params = build_params(operation, base_params, options)
    logger.debug("Calling %s with %d params", operation, len(params))

    data = await transport.get(SERVICE, params)

    # The service occasionally answers 200 with a completely empty payload.
    body = flatten(data).get(f"{operation}Response") if isinstance(data, Mapping) else None
    if not isinstance(body, Mapping) or not body:
        logger.warning("Empty response envelope for %s", operation)
        raise EmptyResponseError(operation)

    return parser(dict(body))
