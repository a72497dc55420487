"""Unsigned transaction endpoints.

SECURITY: the backend builds transactions but NEVER signs or broadcasts
them. The returned payload is signed client-side.
"""

import logging

import httpx
from fastapi import APIRouter

from curators.api.errors import check_amount, upstream_http_exception
from curators.contracts.swaps import SwapTransactionRequest, SwapTransactionResponse
from curators.jupiter import JupiterError
from curators.services import ServiceRegistry

logger = logging.getLogger(__name__)


def register_transaction_routes(router: APIRouter, services: ServiceRegistry) -> None:
    """Attach the /transactions group to ``router``."""
    group = APIRouter(prefix="/transactions", tags=["transactions"])

    @group.post("/swap", response_model=SwapTransactionResponse)
    async def build_swap_transaction(request: SwapTransactionRequest) -> SwapTransactionResponse:
        """Build an unsigned Jupiter swap transaction for a wallet."""
        logger.info(
            f"Swap transaction request: {request.amount} {request.input_mint} -> "
            f"{request.output_mint} for {request.user_public_key[:8]}..."
        )
        check_amount(request.amount, request.decimals)
        try:
            result = await services.jupiter.get_swap_transaction(
                request.input_mint,
                request.output_mint,
                request.amount,
                request.user_public_key,
                request.decimals,
            )
        except (JupiterError, httpx.HTTPError) as e:
            raise upstream_http_exception(e) from e

        return SwapTransactionResponse(
            success=True,
            swap_obj=result.swap_obj,
            out_amount=result.out_amount,
            swap_transaction=result.swap_transaction,
            last_valid_block_height=result.last_valid_block_height,
        )

    router.include_router(group)
