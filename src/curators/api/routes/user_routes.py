"""User endpoints."""

from fastapi import APIRouter, HTTPException

from curators.contracts.wallet import WalletSession
from curators.services import ServiceRegistry


def register_user_routes(router: APIRouter, services: ServiceRegistry) -> None:
    """Attach the /users group to ``router``."""
    group = APIRouter(prefix="/users", tags=["users"])

    @group.get("/{public_key}", response_model=WalletSession)
    async def get_user(public_key: str) -> WalletSession:
        """Get the session of a connected wallet."""
        session = services.wallets.get_session(public_key)
        if not session:
            raise HTTPException(status_code=404, detail=f"User not found: {public_key}")
        return session

    router.include_router(group)
