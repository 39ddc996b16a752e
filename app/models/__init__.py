"""Pydantic models package."""

from app.models.summary import (
    ALLOWED_FORMATS,
    NormalizedResult,
    SummarizeRequest,
    SummarizeResponse,
    SummaryFormat,
    ThreadEnvelope,
    ThreadPayload,
)

__all__ = [
    "ALLOWED_FORMATS",
    "NormalizedResult",
    "SummarizeRequest",
    "SummarizeResponse",
    "SummaryFormat",
    "ThreadEnvelope",
    "ThreadPayload",
]
