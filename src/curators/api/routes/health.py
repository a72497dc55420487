"""Health check endpoints."""

from fastapi import APIRouter, Request

from curators.config import get_settings

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy", "service": "curators"}


@router.get("/health/detailed")
async def detailed_health(request: Request):
    """Detailed health check with configuration and service state."""
    settings = get_settings()
    services = request.app.state.services
    jupiter = services.jupiter
    return {
        "status": "healthy",
        "service": "curators",
        "version": "0.1.0",
        "config": settings.get_safe_dict(),
        "services": {
            "jupiter": {
                "api_url": jupiter.base_url,
                "slippage_bps": jupiter.slippage_bps,
                "api_key_configured": bool(jupiter.api_key),
            },
            "wallet_sessions": services.wallets.session_count,
        },
    }
