"""Tests for the FastAPI endpoints."""

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from curators.api.app import create_app

from tests.conftest import QUOTE, SOL_MINT, SWAP, USDC_MINT, WALLET


@pytest_asyncio.fixture
async def client(services):
    """Create async test client."""
    app = create_app(services)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    @pytest.mark.asyncio
    async def test_health_check(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "curators"

    @pytest.mark.asyncio
    async def test_detailed_health(self, client):
        """Detailed health exposes config without secrets."""
        response = await client.get("/health/detailed")

        assert response.status_code == 200
        data = response.json()
        assert data["config"]["environment"] == "test"
        assert data["config"]["jupiter"]["slippage_bps"] == 10000
        assert data["config"]["jupiter"]["api_key"] == "(not set)"

    @pytest.mark.asyncio
    async def test_detailed_health_reports_services(self, client):
        """Jupiter client settings and live wallet sessions are reported."""
        await client.post("/api/v1/auth/connect", json={"public_key": WALLET})

        response = await client.get("/health/detailed")

        services = response.json()["services"]
        assert services["jupiter"] == {
            "api_url": "https://quote-api.jup.ag/v6",
            "slippage_bps": 10000,
            "api_key_configured": False,
        }
        assert services["wallet_sessions"] == 1


class TestAuthEndpoints:
    """Tests for wallet connect/disconnect and user lookup."""

    @pytest.mark.asyncio
    async def test_connect_then_lookup(self, client):
        response = await client.post("/api/v1/auth/connect", json={"public_key": WALLET})

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["session"]["public_key"] == WALLET
        assert data["session"]["session_id"]

        response = await client.get(f"/api/v1/users/{WALLET}")
        assert response.status_code == 200
        assert response.json()["public_key"] == WALLET

    @pytest.mark.asyncio
    async def test_unknown_user(self, client):
        response = await client.get(f"/api/v1/users/{WALLET}")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_disconnect(self, client):
        await client.post("/api/v1/auth/connect", json={"public_key": WALLET})

        response = await client.post("/api/v1/auth/disconnect", json={"public_key": WALLET})
        assert response.status_code == 200

        response = await client.post("/api/v1/auth/disconnect", json={"public_key": WALLET})
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_secret_key_rejected(self, client):
        """Anything shaped like a secret key never reaches the session store."""
        response = await client.post("/api/v1/auth/connect", json={"public_key": "5" * 88})

        assert response.status_code == 422
        assert "SECURITY" in response.text

    @pytest.mark.asyncio
    async def test_seed_phrase_rejected(self, client):
        phrase = " ".join(["abandon"] * 11 + ["about"])
        response = await client.post("/api/v1/auth/connect", json={"public_key": phrase})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_invalid_public_key(self, client):
        response = await client.post("/api/v1/auth/connect", json={"public_key": "0xabc"})

        assert response.status_code == 422


class TestSwapEndpoints:
    """Tests for quote and swap transaction endpoints."""

    @pytest.mark.asyncio
    async def test_swap_quote(self, client, jupiter_api):
        response = await client.get(
            "/api/v1/swap/quote",
            params={"input_mint": SOL_MINT, "output_mint": USDC_MINT, "amount": "1"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["out_amount"] == "500000"
        assert data["quote"] == QUOTE
        assert jupiter_api.requests[0].url.params["amount"] == "1000000000"

    @pytest.mark.asyncio
    async def test_swap_quote_rejects_zero_amount(self, client, jupiter_api):
        response = await client.get(
            "/api/v1/swap/quote",
            params={"input_mint": SOL_MINT, "output_mint": USDC_MINT, "amount": "0"},
        )

        assert response.status_code == 422
        assert jupiter_api.requests == []

    @pytest.mark.asyncio
    async def test_swap_quote_rejects_sub_lamport_amount(self, client, jupiter_api):
        """An amount below one lamport is refused instead of quoting zero."""
        response = await client.get(
            "/api/v1/swap/quote",
            params={"input_mint": SOL_MINT, "output_mint": USDC_MINT, "amount": "0.0000000001"},
        )

        assert response.status_code == 422
        assert jupiter_api.requests == []

    @pytest.mark.asyncio
    async def test_build_swap_transaction_rejects_excess_precision(self, client, jupiter_api):
        response = await client.post(
            "/api/v1/transactions/swap",
            json={
                "input_mint": USDC_MINT,
                "output_mint": SOL_MINT,
                "amount": "1.0000001",
                "user_public_key": WALLET,
                "decimals": 6,
            },
        )

        assert response.status_code == 422
        assert "decimal places" in response.text
        assert jupiter_api.requests == []

    @pytest.mark.asyncio
    async def test_swap_quote_upstream_error(self, client, jupiter_api):
        jupiter_api.quote_status = 400
        jupiter_api.quote_body = {"error": "invalid mint"}

        response = await client.get(
            "/api/v1/swap/quote",
            params={"input_mint": SOL_MINT, "output_mint": USDC_MINT, "amount": "1"},
        )

        assert response.status_code == 502
        detail = response.json()["detail"]
        assert detail["upstream_status"] == 400
        assert detail["body"] == {"error": "invalid mint"}

    @pytest.mark.asyncio
    async def test_build_swap_transaction(self, client, jupiter_api):
        response = await client.post(
            "/api/v1/transactions/swap",
            json={
                "input_mint": SOL_MINT,
                "output_mint": USDC_MINT,
                "amount": "1",
                "user_public_key": WALLET,
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["swap_obj"] == SWAP
        assert data["out_amount"] == "500000"
        assert data["swap_transaction"] == SWAP["swapTransaction"]
        assert jupiter_api.swap_payload()["userPublicKey"] == WALLET

    @pytest.mark.asyncio
    async def test_build_swap_transaction_unreachable(self, services):
        def fail(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        services.jupiter._http_client = httpx.AsyncClient(transport=httpx.MockTransport(fail))
        app = create_app(services)
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            response = await ac.post(
                "/api/v1/transactions/swap",
                json={
                    "input_mint": SOL_MINT,
                    "output_mint": USDC_MINT,
                    "amount": 1,
                    "user_public_key": WALLET,
                },
            )

        assert response.status_code == 503


class TestLstEndpoints:
    """Tests for liquid staking token endpoints."""

    @pytest.mark.asyncio
    async def test_list_tokens(self, client):
        response = await client.get("/api/v1/lst")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == len(data["tokens"])
        assert "mSOL" in {t["symbol"] for t in data["tokens"]}

    @pytest.mark.asyncio
    async def test_get_token_case_insensitive(self, client):
        response = await client.get("/api/v1/lst/jitosol")

        assert response.status_code == 200
        assert response.json()["mint"] == "J1toso1uCk3RLmjorhTtrVwY9HJ7X8V9yYac6Y7kGCPn"

    @pytest.mark.asyncio
    async def test_unknown_token(self, client):
        response = await client.get("/api/v1/lst/NOPE")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_stake_quote(self, client, jupiter_api):
        response = await client.get("/api/v1/lst/msol/quote", params={"amount": "2"})

        assert response.status_code == 200
        assert response.json()["token"] == "mSOL"
        params = jupiter_api.requests[0].url.params
        assert params["inputMint"] == SOL_MINT
        assert params["outputMint"] == "mSoLzYCxHdYgdzU16g5QSh3i5K3z3KZK7ytfqcJm7So"
        assert params["amount"] == "2000000000"


class TestNetworkEndpoint:
    """Tests for network info."""

    @pytest.mark.asyncio
    async def test_network_info(self, client):
        response = await client.get("/api/v1/network")

        assert response.status_code == 200
        data = response.json()
        assert data["cluster"] == "mainnet-beta"
        assert data["slippage_bps"] == 10000
        assert data["native_decimals"] == 9
        assert data["jupiter_api_url"] == "https://quote-api.jup.ag/v6"
