"""Wallet session contracts.

A wallet session only ever holds a public key. Secret keys and seed phrases
are rejected at the boundary.
"""

import re
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

# Base58 alphabet, 32-byte public keys encode to 32-44 characters
SOLANA_ADDRESS_RE = re.compile(r"^[1-9A-HJ-NP-Za-km-z]{32,44}$")
SECRET_KEY_RE = re.compile(r"^[1-9A-HJ-NP-Za-km-z]{85,90}$")


def validate_public_key(value: str) -> str:
    """Validate a Solana public key, rejecting anything that looks like a secret."""
    value = value.strip()
    if SECRET_KEY_RE.match(value) or value.startswith("[") or len(value.split()) >= 12:
        raise ValueError(
            "SECURITY: Secret keys and seed phrases must NEVER be sent to the backend. "
            "Only provide the public wallet address."
        )
    if not SOLANA_ADDRESS_RE.match(value):
        raise ValueError("Invalid Solana public key format")
    return value


class WalletSession(BaseModel):
    """Connected wallet, read-only from the backend's perspective."""

    public_key: str = Field(..., description="Wallet public key (base58)")
    session_id: str = Field(..., description="Session identifier")
    connected_at: datetime = Field(..., description="When the wallet connected")
    is_read_only: bool = Field(default=False, description="View-only, no signing")


class ConnectWalletRequest(BaseModel):
    """Request to register a wallet session."""

    public_key: str = Field(..., description="Wallet public key to connect")
    session_id: Optional[str] = Field(None, description="Client supplied session ID")
    is_read_only: bool = Field(default=False, description="Connect in read-only mode")

    @field_validator("public_key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        return validate_public_key(v)


class ConnectWalletResponse(BaseModel):
    """Response after registering a wallet session."""

    success: bool = Field(..., description="Whether connection succeeded")
    session: Optional[WalletSession] = Field(None, description="Created wallet session")


class DisconnectWalletRequest(BaseModel):
    """Request to drop a wallet session."""

    public_key: str = Field(..., description="Wallet public key to disconnect")

    @field_validator("public_key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        return validate_public_key(v)
