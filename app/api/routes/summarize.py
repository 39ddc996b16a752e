"""Summarize API route."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from app.core.security import ApiKeyDep
from app.models.summary import SummarizeRequest, SummarizeResponse
from app.services.summarizer import SummarizerService, get_summarizer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/summarize", tags=["summarize"])


@router.post("", response_model=SummarizeResponse)
async def summarize(
    request: SummarizeRequest,
    _api_key: ApiKeyDep,
    summarizer: Annotated[SummarizerService, Depends(get_summarizer)],
) -> SummarizeResponse:
    """Summarize content as an abstract, LinkedIn post or Twitter thread.

    The full model response is buffered and normalized before responding.

    Args:
        request: Content to summarize and the desired format.

    Returns:
        Summaries keyed by the requested format.
    """
    response = await summarizer.summarize(request)
    logger.info(f"Summary in '{request.format}' format completed")
    return response
