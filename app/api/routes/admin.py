"""Admin API routes for service status."""

from typing import Annotated, Any, Dict

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.core.config import Settings, get_settings
from app.core.security import ApiKeyDep

router = APIRouter(prefix="/admin", tags=["admin"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    vendor: str
    model: str
    vendor_configured: bool


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """Check service health and upstream configuration."""
    vendor = settings.default_vendor
    return HealthResponse(
        status="healthy",
        vendor=vendor,
        model=settings.model_for_vendor(vendor),
        vendor_configured=bool(settings.api_key_for_vendor(vendor)),
    )


@router.get("/config")
async def get_config(
    _api_key: ApiKeyDep,
    settings: Annotated[Settings, Depends(get_settings)],
) -> Dict[str, Any]:
    """Get current configuration (non-sensitive values only)."""
    return {
        "app_name": settings.app_name,
        "debug": settings.debug,
        "require_api_key": settings.require_api_key,
        "trust_gateway_headers": settings.trust_gateway_headers,
        "default_vendor": settings.default_vendor,
        "default_model": settings.model_for_vendor(settings.default_vendor),
        "temperature": settings.temperature,
        "max_output_tokens": settings.max_output_tokens,
        "legacy_flat_thread_response": settings.legacy_flat_thread_response,
        "gemini_configured": bool(settings.google_api_key),
        "anthropic_configured": bool(settings.anthropic_api_key),
        "openai_configured": bool(settings.openai_api_key),
    }
