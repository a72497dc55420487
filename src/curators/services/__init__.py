"""Shared backend services handed to every route group."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from curators.config import Settings, get_settings
from curators.jupiter import JupiterClient
from curators.services.lst_service import LstService
from curators.services.wallet_service import WalletService

logger = logging.getLogger(__name__)


@dataclass
class ServiceRegistry:
    """Services shared by all route registrars.

    Route groups receive the same instance and must treat it as read-only
    wiring: they call services but never replace them.
    """

    settings: Settings
    jupiter: JupiterClient
    wallets: WalletService = field(default_factory=WalletService)
    lst: Optional[LstService] = None

    def __post_init__(self):
        if self.lst is None:
            self.lst = LstService(self.jupiter)

    async def close(self) -> None:
        """Release network resources held by the services."""
        await self.jupiter.close()
        logger.debug("Service registry closed")


def create_service_registry(
    settings: Optional[Settings] = None,
    jupiter: Optional[JupiterClient] = None,
) -> ServiceRegistry:
    """Build the registry from settings."""
    settings = settings or get_settings()
    return ServiceRegistry(
        settings=settings,
        jupiter=jupiter or JupiterClient.from_settings(settings),
    )


__all__ = [
    "LstService",
    "ServiceRegistry",
    "WalletService",
    "create_service_registry",
]
