"""Request and response models for the HTTP API."""

from curators.contracts.lst import LstListResponse, LstToken
from curators.contracts.network import NetworkInfo
from curators.contracts.swaps import SwapTransactionRequest, SwapTransactionResponse
from curators.contracts.wallet import (
    ConnectWalletRequest,
    ConnectWalletResponse,
    DisconnectWalletRequest,
    WalletSession,
)

__all__ = [
    "ConnectWalletRequest",
    "ConnectWalletResponse",
    "DisconnectWalletRequest",
    "LstListResponse",
    "LstToken",
    "NetworkInfo",
    "SwapTransactionRequest",
    "SwapTransactionResponse",
    "WalletSession",
]
