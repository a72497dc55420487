"""Wallet authentication endpoints.

SECURITY: these endpoints only ever accept public keys.
"""

import logging

from fastapi import APIRouter, HTTPException

from curators.contracts.wallet import (
    ConnectWalletRequest,
    ConnectWalletResponse,
    DisconnectWalletRequest,
)
from curators.services import ServiceRegistry

logger = logging.getLogger(__name__)


def register_auth_routes(router: APIRouter, services: ServiceRegistry) -> None:
    """Attach the /auth group to ``router``."""
    group = APIRouter(prefix="/auth", tags=["auth"])

    @group.post("/connect", response_model=ConnectWalletResponse)
    async def connect_wallet(request: ConnectWalletRequest) -> ConnectWalletResponse:
        """Register a wallet session for a public key."""
        return await services.wallets.connect_wallet(request)

    @group.post("/disconnect")
    async def disconnect_wallet(request: DisconnectWalletRequest) -> dict:
        """Drop the wallet session for a public key."""
        removed = await services.wallets.disconnect_wallet(request.public_key)
        if not removed:
            raise HTTPException(status_code=404, detail="Wallet not connected")
        return {"success": True}

    router.include_router(group)
