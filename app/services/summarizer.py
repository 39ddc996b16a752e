"""Summarizer service - prompts the upstream model and shapes its response."""

import logging
from typing import Optional

from app.core.config import Settings, get_settings
from app.core.exceptions import InvalidRequestError, UpstreamFailureError
from app.models.summary import (
    NormalizedResult,
    SummarizeRequest,
    SummarizeResponse,
    SummaryFormat,
)
from app.services.llm_client import BaseLLMClient, LLMClientFactory
from app.services.normalizer import normalize
from app.services.prompts import render_prompt

logger = logging.getLogger(__name__)


def parse_format(value: Optional[str]) -> SummaryFormat:
    """Resolve a requested format name, raising InvalidRequestError if unknown."""
    try:
        return SummaryFormat(value)
    except ValueError:
        raise InvalidRequestError()


class SummarizerService:
    """Turns a summarize request into a normalized model response."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[BaseLLMClient] = None,
    ):
        self.settings = settings or get_settings()
        self._client = client

    def _get_client(self) -> BaseLLMClient:
        if self._client is None:
            self._client = LLMClientFactory.get_client(settings=self.settings)
        return self._client

    async def _generate(self, prompt: str) -> str:
        try:
            client = self._get_client()
            return await client.generate(
                prompt,
                temperature=self.settings.temperature,
                max_tokens=self.settings.max_output_tokens,
            )
        except Exception as e:
            logger.exception(f"Upstream generation failed: {e}")
            raise UpstreamFailureError() from e

    def _build_response(self, result: NormalizedResult) -> SummarizeResponse:
        if (
            self.settings.legacy_flat_thread_response
            and result.format == SummaryFormat.TWITTER_THREAD
        ):
            return SummarizeResponse(summaries=result.value)
        return SummarizeResponse(summaries=result.as_mapping())

    async def summarize(self, request: SummarizeRequest) -> SummarizeResponse:
        """Summarize request content in the requested format.

        Args:
            request: Content and format to summarize into.

        Returns:
            Response with the normalized summary.

        Raises:
            InvalidRequestError: Content is blank or the format is unknown.
            UpstreamFailureError: The generation call failed.
            MalformedModelOutputError: A thread could not be recovered from the output.
        """
        if not request.content or not request.content.strip():
            raise InvalidRequestError()
        summary_format = parse_format(request.format)

        logger.info(
            f"Summarizing {len(request.content)} chars as '{summary_format.value}'"
        )

        raw = await self._generate(render_prompt(summary_format, request.content))
        result = normalize(raw, summary_format)
        return self._build_response(result)


def get_summarizer() -> SummarizerService:
    """Dependency provider for the summarizer service."""
    return SummarizerService()
