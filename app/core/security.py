"""Security utilities - API key authentication."""

import hmac
import logging
from typing import Annotated

from fastapi import Depends, Header, HTTPException, Security, status
from fastapi.security import APIKeyHeader

from app.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

API_KEY_HEADER = APIKeyHeader(name="X-API-Key", auto_error=False)
GATEWAY_KEY_HEADER = APIKeyHeader(name="X-RapidAPI-Key", auto_error=False)


def _is_gateway_request(
    proxy_secret: str | None, gateway_host: str | None, settings: Settings
) -> bool:
    """Check whether the request was forwarded by a trusted API gateway."""
    if not settings.trust_gateway_headers:
        return False
    if not (proxy_secret or gateway_host):
        return False
    if settings.gateway_proxy_secret:
        return bool(proxy_secret) and hmac.compare_digest(
            proxy_secret, settings.gateway_proxy_secret
        )
    return True


async def verify_api_key(
    api_key: Annotated[str | None, Security(API_KEY_HEADER)],
    gateway_key: Annotated[str | None, Security(GATEWAY_KEY_HEADER)],
    settings: Annotated[Settings, Depends(get_settings)],
    x_rapidapi_proxy_secret: Annotated[str | None, Header()] = None,
    x_rapidapi_host: Annotated[str | None, Header()] = None,
) -> str:
    """Validate API key from header.

    Args:
        api_key: API key from X-API-Key header.
        gateway_key: API key from X-RapidAPI-Key header, used when X-API-Key is absent.
        settings: Application settings.
        x_rapidapi_proxy_secret: Secret attached by the RapidAPI proxy.
        x_rapidapi_host: Host header attached by the RapidAPI proxy.

    Returns:
        The validated API key, or empty string for anonymous and gateway traffic.

    Raises:
        HTTPException: If API key is missing or invalid (when authentication is enabled).
    """
    # Skip authentication if disabled
    if not settings.require_api_key:
        logger.debug("API key authentication is disabled - allowing anonymous access")
        return ""

    if _is_gateway_request(x_rapidapi_proxy_secret, x_rapidapi_host, settings):
        logger.debug("Request forwarded by API gateway - skipping client key check")
        return ""

    client_key = api_key or gateway_key
    if not client_key:
        logger.warning("API request without API key")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing API key. Include X-API-Key header.",
        )

    if client_key not in settings.api_keys:
        logger.warning(f"Invalid API key attempted: {client_key[:8]}...")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Unauthorized",
        )

    return client_key


# Type alias for dependency injection
ApiKeyDep = Annotated[str, Depends(verify_api_key)]
