"""Liquid staking token contracts."""

from pydantic import BaseModel, Field


class LstToken(BaseModel):
    """A Solana liquid staking token."""

    symbol: str = Field(..., description="Token symbol (e.g., mSOL)")
    name: str = Field(..., description="Display name")
    mint: str = Field(..., description="Token mint address")
    decimals: int = Field(..., ge=0, description="Token decimals")


class LstListResponse(BaseModel):
    """All known liquid staking tokens."""

    tokens: list[LstToken]
    total: int
