"""Translate Jupiter failures and bad amounts into HTTP errors."""

import logging
from decimal import Decimal

import httpx
from fastapi import HTTPException, status

from curators.jupiter import JupiterAPIError, JupiterError, to_smallest_unit

logger = logging.getLogger(__name__)


def upstream_http_exception(exc: Exception) -> HTTPException:
    """Map a Jupiter or transport failure to the HTTPException to raise."""
    if isinstance(exc, JupiterAPIError):
        logger.warning(f"Jupiter rejected {exc.endpoint}: HTTP {exc.status_code}")
        return HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"error": "Jupiter API error", "upstream_status": exc.status_code, "body": exc.body},
        )
    if isinstance(exc, JupiterError):
        logger.warning(f"Jupiter returned an unusable response: {exc}")
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))
    if isinstance(exc, httpx.HTTPError):
        logger.warning(f"Jupiter unreachable: {type(exc).__name__}: {exc}")
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Jupiter API unavailable",
        )
    raise TypeError(f"Not an upstream error: {exc!r}")


def check_amount(amount: Decimal, decimals: int) -> None:
    """Reject amounts that do not convert to a positive whole number of units."""
    try:
        to_smallest_unit(amount, decimals)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)) from e
