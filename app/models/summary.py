"""Summarization request, result and response models."""

from enum import Enum
from typing import Dict, List, Union

from pydantic import AliasChoices, BaseModel, Field, TypeAdapter


class SummaryFormat(str, Enum):
    """Output style requested by the caller."""

    ABSTRACT = "abstract"
    LINKEDIN_POST = "linkedin_post"
    TWITTER_THREAD = "twitter_thread"


ALLOWED_FORMATS = tuple(f.value for f in SummaryFormat)


class SummarizeRequest(BaseModel):
    """Request to summarize a block of text."""

    content: str = Field(default="", description="Text to summarize")
    format: str = Field(
        default=SummaryFormat.ABSTRACT.value,
        description=f"Output format, one of: {', '.join(ALLOWED_FORMATS)}",
    )


class NormalizedResult(BaseModel):
    """Cleaned model output shaped for the requested format."""

    format: SummaryFormat
    value: Union[str, List[str]]

    def as_mapping(self) -> Dict[str, Union[str, List[str]]]:
        return {self.format.value: self.value}


class SummarizeResponse(BaseModel):
    """Summaries keyed by format, or a bare tweet list in legacy mode."""

    summaries: Union[Dict[str, Union[str, List[str]]], List[str]]


class ThreadEnvelope(BaseModel):
    """Structured thread object as returned by the model."""

    tweets: List[str] = Field(
        validation_alias=AliasChoices("twitter_thread", "tweets", "thread")
    )


# Structured shapes a thread may be decoded from, tried left to right
ThreadPayload = Union[ThreadEnvelope, List[str]]
thread_payload_adapter: TypeAdapter[ThreadPayload] = TypeAdapter(ThreadPayload)
