"""Liquid staking token catalog and SOL -> LST quoting."""

import logging
from decimal import Decimal
from typing import Optional

from curators.contracts.lst import LstListResponse, LstToken
from curators.jupiter import JupiterClient, JupiterQuote

logger = logging.getLogger(__name__)

# Wrapped SOL mint, the input side of every LST quote
WSOL_MINT = "So11111111111111111111111111111111111111112"

# Liquid staking token mints on Solana mainnet
LST_TOKENS = {
    "MSOL": LstToken(
        symbol="mSOL",
        name="Marinade staked SOL",
        mint="mSoLzYCxHdYgdzU16g5QSh3i5K3z3KZK7ytfqcJm7So",
        decimals=9,
    ),
    "JITOSOL": LstToken(
        symbol="JitoSOL",
        name="Jito Staked SOL",
        mint="J1toso1uCk3RLmjorhTtrVwY9HJ7X8V9yYac6Y7kGCPn",
        decimals=9,
    ),
    "BSOL": LstToken(
        symbol="bSOL",
        name="BlazeStake Staked SOL",
        mint="bSo13r4TkiE4KumL71LsHTPpL2euBYLFx6h9HP3piy1",
        decimals=9,
    ),
    "JUPSOL": LstToken(
        symbol="JupSOL",
        name="Jupiter Staked SOL",
        mint="jupSoLaHXQiZZTSfEWMTRRgpnyFm8f6sZdosWBjx93v",
        decimals=9,
    ),
    "INF": LstToken(
        symbol="INF",
        name="Infinity",
        mint="5oVNBeEEQvYi1cX3ir8Dx5n1P7pdxydbGF2X4TxVusJm",
        decimals=9,
    ),
}


class LstService:
    """Serves the LST catalog and quotes native SOL into a given LST."""

    def __init__(self, jupiter: JupiterClient):
        self.jupiter = jupiter

    def list_tokens(self) -> LstListResponse:
        tokens = list(LST_TOKENS.values())
        return LstListResponse(tokens=tokens, total=len(tokens))

    def get_token(self, symbol: str) -> Optional[LstToken]:
        """Look up an LST by symbol, case-insensitively."""
        return LST_TOKENS.get(symbol.upper())

    async def quote_stake(self, token: LstToken, amount: Decimal) -> JupiterQuote:
        """Quote swapping ``amount`` SOL into ``token``."""
        logger.info(f"Quoting {amount} SOL -> {token.symbol}")
        return await self.jupiter.get_quote(WSOL_MINT, token.mint, amount)
