"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # API
    # ======================
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, description="API server port")
    cors_origins: str = Field(
        default="", description="Comma-separated list of allowed CORS origins"
    )

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Log level when debug is off")

    # ======================
    # Jupiter
    # ======================
    jupiter_api_url: str = Field(
        default="https://quote-api.jup.ag/v6", description="Jupiter swap API base URL"
    )
    jupiter_api_key: Optional[str] = Field(
        default=None, description="Optional Jupiter API key for higher rate limits"
    )
    slippage_bps: int = Field(
        default=10_000,
        ge=0,
        le=10_000,
        description="Slippage tolerance in basis points for every quote and swap",
    )
    http_timeout: float = Field(
        default=30.0, gt=0, description="Timeout in seconds for outbound HTTP calls"
    )

    # ======================
    # Solana
    # ======================
    solana_cluster: str = Field(default="mainnet-beta", description="Solana cluster name")
    solana_rpc_url: str = Field(
        default="https://api.mainnet-beta.solana.com", description="Solana RPC URL"
    )

    @property
    def allowed_origins(self) -> list[str]:
        """Parse CORS origins into a list."""
        if not self.cors_origins:
            return ["*"] if self.debug else []
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "api_host": self.api_host,
            "api_port": self.api_port,
            "jupiter": {
                "api_url": self.jupiter_api_url,
                "api_key": "***" if self.jupiter_api_key else "(not set)",
                "slippage_bps": self.slippage_bps,
                "timeout": self.http_timeout,
            },
            "solana": {
                "cluster": self.solana_cluster,
                "rpc": self._redact_url(self.solana_rpc_url),
            },
        }

    @staticmethod
    def _redact_url(url: str) -> str:
        """Redact an api-key query parameter from an RPC URL."""
        if "api-key=" in url:
            base, _ = url.split("api-key=", 1)
            return f"{base}api-key=***"
        return url


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
