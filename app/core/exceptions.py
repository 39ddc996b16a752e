"""Custom exceptions and exception handlers."""

import logging
from typing import Any, Dict

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.models.summary import ALLOWED_FORMATS

logger = logging.getLogger(__name__)


class SummarizerError(Exception):
    """Base exception for the summarize service."""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.message, "type": type(self).__name__}


class InvalidRequestError(SummarizerError):
    """Missing content or unrecognized format."""

    def __init__(self):
        super().__init__(
            f"content and format ({', '.join(ALLOWED_FORMATS)}) are required",
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    def to_payload(self) -> Dict[str, Any]:
        payload = super().to_payload()
        payload["allowed_formats"] = list(ALLOWED_FORMATS)
        return payload


class MalformedModelOutputError(SummarizerError):
    """Model output could not be shaped into a twitter thread."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(
            "Invalid thread output from AI",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    def to_payload(self) -> Dict[str, Any]:
        payload = super().to_payload()
        payload["raw"] = self.raw
        return payload


class UpstreamFailureError(SummarizerError):
    """The text-generation call failed."""

    def __init__(self):
        super().__init__(
            "Something went wrong",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


async def summarizer_exception_handler(
    request: Request, exc: SummarizerError
) -> JSONResponse:
    """Handle SummarizerError exceptions."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render body validation failures as invalid summarize requests."""
    logger.info(f"Rejected malformed request body: {exc.errors()}")
    return await summarizer_exception_handler(request, InvalidRequestError())


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render HTTP errors (auth, routing, method) with the service error shape."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )
