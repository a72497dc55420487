"""Pytest configuration and fixtures."""

import json
import os
from typing import Any, AsyncGenerator, Optional

import httpx
import pytest
import pytest_asyncio

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["DEBUG"] = "true"
os.environ["JUPITER_API_URL"] = "https://quote-api.jup.ag/v6"
os.environ["SLIPPAGE_BPS"] = "10000"

from curators.config import get_settings
from curators.jupiter import JupiterClient
from curators.services import ServiceRegistry, create_service_registry

SOL_MINT = "So11111111111111111111111111111111111111112"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
WALLET = "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM"

QUOTE = {
    "inputMint": SOL_MINT,
    "inAmount": "1000000000",
    "outputMint": USDC_MINT,
    "outAmount": "500000",
    "otherAmountThreshold": "0",
    "swapMode": "ExactIn",
    "slippageBps": 10000,
    "priceImpactPct": "0.001",
    "routePlan": [{"swapInfo": {"label": "Raydium"}, "percent": 100}],
}

SWAP = {
    "swapTransaction": "AQAAAAAAAAAAAAAAAAAAAAAAAAAA==",
    "lastValidBlockHeight": 123456789,
}


class FakeJupiterAPI:
    """In-process stand-in for the Jupiter v6 API, recording every request."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.quote_status = 200
        self.quote_body: Any = QUOTE
        self.swap_status = 200
        self.swap_body: Any = SWAP

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method == "GET" and request.url.path.endswith("/quote"):
            return self._respond(self.quote_status, self.quote_body)
        if request.method == "POST" and request.url.path.endswith("/swap"):
            return self._respond(self.swap_status, self.swap_body)
        return httpx.Response(404, json={"error": "not found"})

    @staticmethod
    def _respond(status: int, body: Any) -> httpx.Response:
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)

    def requests_to(self, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith(path)]

    def swap_payload(self, index: int = 0) -> Optional[dict]:
        swaps = self.requests_to("/swap")
        return json.loads(swaps[index].content) if swaps else None


@pytest.fixture
def jupiter_api() -> FakeJupiterAPI:
    """Fake Jupiter API with default successful responses."""
    return FakeJupiterAPI()


@pytest_asyncio.fixture
async def jupiter(jupiter_api: FakeJupiterAPI) -> AsyncGenerator[JupiterClient, None]:
    """Jupiter client wired to the fake API."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(jupiter_api.handler))
    client = JupiterClient(http_client=http_client)
    yield client
    await client.close()


@pytest.fixture
def services(jupiter: JupiterClient) -> ServiceRegistry:
    """Service registry backed by the fake Jupiter API."""
    return create_service_registry(get_settings(), jupiter=jupiter)
