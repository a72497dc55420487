"""Wallet session service.

Keeps connected wallets in memory. Only public keys are ever stored; the
backend never holds keys and never signs.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from curators.contracts.wallet import (
    ConnectWalletRequest,
    ConnectWalletResponse,
    WalletSession,
)

logger = logging.getLogger(__name__)


def _short(public_key: str) -> str:
    return public_key[:8] + "..." if len(public_key) > 8 else public_key


class WalletService:
    """Registers and looks up wallet sessions."""

    def __init__(self):
        self._sessions: dict[str, WalletSession] = {}

    async def connect_wallet(self, request: ConnectWalletRequest) -> ConnectWalletResponse:
        """Register a wallet session, replacing any previous one for the key."""
        session = WalletSession(
            public_key=request.public_key,
            session_id=request.session_id or str(uuid.uuid4()),
            connected_at=datetime.now(timezone.utc),
            is_read_only=request.is_read_only,
        )
        self._sessions[request.public_key] = session

        logger.info(f"Wallet connected: {_short(request.public_key)} (read_only={request.is_read_only})")
        return ConnectWalletResponse(success=True, session=session)

    async def disconnect_wallet(self, public_key: str) -> bool:
        """Drop a wallet session. Returns False if none existed."""
        session = self._sessions.pop(public_key, None)
        if session is None:
            logger.debug(f"Disconnect for unknown wallet {_short(public_key)}")
            return False

        logger.info(f"Wallet disconnected: {_short(public_key)}")
        return True

    def get_session(self, public_key: str) -> Optional[WalletSession]:
        """Get the session for a connected wallet."""
        return self._sessions.get(public_key)

    @property
    def session_count(self) -> int:
        return len(self._sessions)
