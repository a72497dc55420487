"""Network information endpoint."""

from fastapi import APIRouter

from curators.contracts.network import NetworkInfo
from curators.jupiter import SOL_DECIMALS
from curators.services import ServiceRegistry


def register_network_routes(router: APIRouter, services: ServiceRegistry) -> None:
    """Attach the /network group to ``router``."""
    group = APIRouter(prefix="/network", tags=["network"])

    @group.get("", response_model=NetworkInfo)
    async def get_network() -> NetworkInfo:
        settings = services.settings
        safe = settings.get_safe_dict()
        return NetworkInfo(
            cluster=settings.solana_cluster,
            rpc_url=safe["solana"]["rpc"],
            jupiter_api_url=services.jupiter.base_url,
            slippage_bps=services.jupiter.slippage_bps,
            native_decimals=SOL_DECIMALS,
        )

    router.include_router(group)
