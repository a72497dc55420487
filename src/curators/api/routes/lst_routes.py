"""Liquid staking token endpoints."""

from decimal import Decimal

import httpx
from fastapi import APIRouter, HTTPException, Query

from curators.api.errors import check_amount, upstream_http_exception
from curators.contracts.lst import LstListResponse, LstToken
from curators.jupiter import SOL_DECIMALS, JupiterError
from curators.services import ServiceRegistry


def register_lst_routes(router: APIRouter, services: ServiceRegistry) -> None:
    """Attach the /lst group to ``router``."""
    group = APIRouter(prefix="/lst", tags=["lst"])

    @group.get("", response_model=LstListResponse)
    async def list_lst_tokens() -> LstListResponse:
        """List known liquid staking tokens."""
        return services.lst.list_tokens()

    @group.get("/{symbol}", response_model=LstToken)
    async def get_lst_token(symbol: str) -> LstToken:
        token = services.lst.get_token(symbol)
        if not token:
            raise HTTPException(status_code=404, detail=f"LST not found: {symbol}")
        return token

    @group.get("/{symbol}/quote")
    async def quote_lst(symbol: str, amount: Decimal = Query(..., gt=0)) -> dict:
        """Quote staking ``amount`` SOL into the given LST."""
        token = services.lst.get_token(symbol)
        if not token:
            raise HTTPException(status_code=404, detail=f"LST not found: {symbol}")
        check_amount(amount, SOL_DECIMALS)

        try:
            quote = await services.lst.quote_stake(token, amount)
        except (JupiterError, httpx.HTTPError) as e:
            raise upstream_http_exception(e) from e

        return {"success": True, "token": token.symbol, "quote": quote}

    router.include_router(group)
