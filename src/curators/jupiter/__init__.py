"""Jupiter aggregator integration: quotes and unsigned swap transactions."""

from curators.jupiter.client import (
    GLOBAL_SLIPPAGE_BPS,
    JUPITER_API_V6,
    LAMPORTS_PER_SOL,
    SOL_DECIMALS,
    JupiterClient,
    JupiterQuote,
    SwapTransaction,
    get_jupiter_quote,
    get_swap_transaction,
    to_smallest_unit,
)
from curators.jupiter.exceptions import JupiterAPIError, JupiterError, JupiterResponseError

__all__ = [
    # Client
    "JupiterClient",
    "JupiterQuote",
    "SwapTransaction",
    "get_jupiter_quote",
    "get_swap_transaction",
    "to_smallest_unit",
    # Constants
    "GLOBAL_SLIPPAGE_BPS",
    "JUPITER_API_V6",
    "LAMPORTS_PER_SOL",
    "SOL_DECIMALS",
    # Errors
    "JupiterError",
    "JupiterAPIError",
    "JupiterResponseError",
]
