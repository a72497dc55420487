"""Network information contract."""

from pydantic import BaseModel, Field


class NetworkInfo(BaseModel):
    """Solana network and aggregator settings the backend runs against."""

    cluster: str = Field(..., description="Solana cluster name")
    rpc_url: str = Field(..., description="Solana RPC URL (secrets redacted)")
    jupiter_api_url: str = Field(..., description="Jupiter API base URL")
    slippage_bps: int = Field(..., description="Slippage applied to every swap")
    native_decimals: int = Field(..., description="Decimals of the native asset")
