"""Swap quote endpoints.

READ-ONLY: quoting never builds or executes a transaction.
"""

import logging
from decimal import Decimal

import httpx
from fastapi import APIRouter, Query

from curators.api.errors import check_amount, upstream_http_exception
from curators.jupiter import SOL_DECIMALS, JupiterError
from curators.services import ServiceRegistry

logger = logging.getLogger(__name__)


def register_swap_routes(router: APIRouter, services: ServiceRegistry) -> None:
    """Attach the /swap group to ``router``."""
    group = APIRouter(prefix="/swap", tags=["swap"])

    @group.get("/quote")
    async def get_swap_quote(
        input_mint: str = Query(..., min_length=32, max_length=44),
        output_mint: str = Query(..., min_length=32, max_length=44),
        amount: Decimal = Query(..., gt=0, description="Amount in whole units"),
        decimals: int = Query(SOL_DECIMALS, ge=0, le=18),
    ) -> dict:
        """Get the best Jupiter quote for a pair.

        Returns the raw Jupiter quote so clients can inspect the route plan.
        """
        logger.info(f"Quote request: {amount} {input_mint} -> {output_mint}")
        check_amount(amount, decimals)
        try:
            quote = await services.jupiter.get_quote(input_mint, output_mint, amount, decimals)
        except (JupiterError, httpx.HTTPError) as e:
            raise upstream_http_exception(e) from e

        return {"success": True, "out_amount": quote["outAmount"], "quote": quote}

    router.include_router(group)
