"""Jupiter DEX aggregator client for Solana.

Fetches swap quotes and unsigned swap transactions from the Jupiter v6 API.
API docs: https://station.jup.ag/docs/apis/swap-api

The backend never signs: the swap transaction returned here is handed back to
the caller for client-side signing.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Union

import httpx

from curators.config import Settings, get_settings
from curators.jupiter.exceptions import JupiterAPIError, JupiterResponseError

logger = logging.getLogger(__name__)

# Jupiter API endpoint
JUPITER_API_V6 = "https://quote-api.jup.ag/v6"

# Maximum slippage: accept any price movement between quote and execution
GLOBAL_SLIPPAGE_BPS = 10_000

# Native SOL
SOL_DECIMALS = 9
LAMPORTS_PER_SOL = 10 ** SOL_DECIMALS

# Raw quote payload, schema owned by Jupiter
JupiterQuote = dict[str, Any]

Amount = Union[int, float, Decimal, str]


@dataclass
class SwapTransaction:
    """Unsigned swap transaction plus the amount the quote promised."""

    swap_obj: dict[str, Any]
    out_amount: str

    @property
    def swap_transaction(self) -> Optional[str]:
        """Base64 serialized transaction, if Jupiter returned one."""
        return self.swap_obj.get("swapTransaction")

    @property
    def last_valid_block_height(self) -> Optional[int]:
        return self.swap_obj.get("lastValidBlockHeight")

    def to_dict(self) -> dict:
        return {"swapObj": self.swap_obj, "outAmount": self.out_amount}


def to_smallest_unit(amount: Amount, decimals: int = SOL_DECIMALS) -> int:
    """Convert a whole-unit amount to the token's smallest unit.

    Args:
        amount: Amount in human-readable units (e.g. 1.5 SOL)
        decimals: Token decimals, SOL by default

    Returns:
        Integer amount in smallest units (lamports for SOL)

    Raises:
        ValueError: If the amount is not a finite positive number, or has
            more fractional digits than ``decimals``
    """
    try:
        value = Decimal(str(amount))
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {amount}")
    if not value.is_finite():
        raise ValueError(f"Amount must be finite, got {amount}")
    if value <= 0:
        raise ValueError(f"Amount must be positive, got {amount}")

    units = value.scaleb(decimals)
    if units != units.to_integral_value():
        raise ValueError(f"Amount {amount} has more than {decimals} decimal places")
    return int(units)


class JupiterClient:
    """Async client for the Jupiter swap API.

    Endpoint, slippage and timeout are fixed per instance. One
    ``httpx.AsyncClient`` is created lazily and reused until ``close()``.
    """

    def __init__(
        self,
        base_url: str = JUPITER_API_V6,
        slippage_bps: int = GLOBAL_SLIPPAGE_BPS,
        api_key: Optional[str] = None,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize Jupiter client.

        Args:
            base_url: Jupiter API base URL
            slippage_bps: Slippage tolerance applied to every request
            api_key: Optional API key for higher rate limits
            timeout: HTTP timeout in seconds
            http_client: Pre-built HTTP client (tests inject a mock transport)
        """
        self.base_url = base_url.rstrip("/")
        self.slippage_bps = slippage_bps
        self.api_key = api_key
        self.timeout = timeout
        self._http_client = http_client

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "JupiterClient":
        """Create a client from application settings."""
        settings = settings or get_settings()
        return cls(
            base_url=settings.jupiter_api_url,
            slippage_bps=settings.slippage_bps,
            api_key=settings.jupiter_api_key,
            timeout=settings.http_timeout,
        )

    async def __aenter__(self) -> "JupiterClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def _get_headers(self) -> dict:
        """Get API headers."""
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self.timeout)
        return self._http_client

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    @staticmethod
    def _check_response(endpoint: str, response: httpx.Response) -> Any:
        """Parse a JSON body, raising on non-2xx statuses."""
        if not response.is_success:
            try:
                body = response.json()
            except ValueError:
                body = response.text
            logger.warning(f"Jupiter API error: {response.status_code} - {body}")
            raise JupiterAPIError(endpoint, response.status_code, body)
        return response.json()

    async def get_quote(
        self,
        from_token: str,
        to_token: str,
        amount: Amount,
        decimals: int = SOL_DECIMALS,
    ) -> JupiterQuote:
        """Get the best swap quote from Jupiter.

        Args:
            from_token: Source token mint
            to_token: Destination token mint
            amount: Amount in whole units of the source token
            decimals: Source token decimals (native SOL unless given)

        Returns:
            Raw quote payload, including ``outAmount``
        """
        amount_units = to_smallest_unit(amount, decimals)

        client = await self._get_client()
        response = await client.get(
            f"{self.base_url}/quote",
            headers=self._get_headers(),
            params={
                "inputMint": from_token,
                "outputMint": to_token,
                "amount": str(amount_units),
                "slippageBps": str(self.slippage_bps),
            },
        )

        data = self._check_response("quote", response)
        logger.debug(f"Jupiter quote: {data}")

        if not isinstance(data, dict) or "outAmount" not in data:
            raise JupiterResponseError("quote", "outAmount")
        return data

    async def get_swap_transaction(
        self,
        input_mint: str,
        output_mint: str,
        amount: Amount,
        user_public_key: str,
        decimals: int = SOL_DECIMALS,
    ) -> SwapTransaction:
        """Fetch a fresh quote and build an unsigned swap transaction for it.

        Args:
            input_mint: Source token mint
            output_mint: Destination token mint
            amount: Amount in whole units of the source token
            user_public_key: Wallet that will sign the transaction
            decimals: Source token decimals (native SOL unless given)

        Returns:
            SwapTransaction with the Jupiter swap payload and quoted output
        """
        quote_response = await self.get_quote(input_mint, output_mint, amount, decimals)

        logger.debug(
            f"Building swap: {amount} {input_mint} -> {output_mint} "
            f"for {user_public_key}, quote: {quote_response}"
        )

        client = await self._get_client()
        response = await client.post(
            f"{self.base_url}/swap",
            headers=self._get_headers(),
            json={
                "quoteResponse": quote_response,
                "userPublicKey": user_public_key,
                "dynamicComputeUnitLimit": True,
                "dynamicSlippage": {"maxBps": self.slippage_bps},
            },
        )

        swap_obj = self._check_response("swap", response)
        logger.debug(f"Jupiter swap transaction: {swap_obj}")

        out_amount = quote_response["outAmount"]
        logger.debug(f"Swap out amount: {out_amount}")

        return SwapTransaction(swap_obj=swap_obj, out_amount=out_amount)


async def get_jupiter_quote(
    from_token: str,
    to_token: str,
    amount: Amount,
    decimals: int = SOL_DECIMALS,
) -> JupiterQuote:
    """Get a quote with a one-off client built from settings."""
    async with JupiterClient.from_settings() as jupiter:
        return await jupiter.get_quote(from_token, to_token, amount, decimals)


async def get_swap_transaction(
    input_mint: str,
    output_mint: str,
    amount: Amount,
    user_public_key: str,
    decimals: int = SOL_DECIMALS,
) -> SwapTransaction:
    """Build a swap transaction with a one-off client built from settings."""
    async with JupiterClient.from_settings() as jupiter:
        return await jupiter.get_swap_transaction(
            input_mint, output_mint, amount, user_public_key, decimals
        )
