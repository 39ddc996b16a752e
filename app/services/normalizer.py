"""Response normalization for model output.

Model output is first cleaned of incidental formatting (a leading
``Summary:`` label and markdown code fences). Abstracts and LinkedIn posts
are returned as the cleaned text. Twitter threads go through a cascade of
decoders, from the most structured interpretation to the least:

1. structured JSON decode (``{"twitter_thread": [...]}`` or a bare array)
2. paragraph split on blank lines
3. ``1/n, 2/n, ...`` numbering markers (at least two, in sequence)
4. one tweet per non-empty line
"""

import logging
import re
from typing import Callable, List, Optional

from pydantic import ValidationError

from app.core.exceptions import MalformedModelOutputError
from app.models.summary import (
    NormalizedResult,
    SummaryFormat,
    ThreadEnvelope,
    thread_payload_adapter,
)

logger = logging.getLogger(__name__)

_SUMMARY_LABEL = re.compile(
    r"^\s*(?:#{1,6}\s*)?(?:[*_]{1,2}summary\s*(?::[*_]{0,2}|[*_]{1,2}\s*:?)|summary\s*:)\s*",
    re.IGNORECASE,
)
_JSON_FENCE_OPEN = re.compile(r"```json[ \t]*\n?", re.IGNORECASE)
_FENCE = re.compile(r"```")
_PARAGRAPH_BREAK = re.compile(r"(?:[ \t]*\r?\n){2,}")
_THREAD_MARKER = re.compile(r"(?<!\S)(\d{1,3})/(\d{1,3})?(?=\s|$)")


def _clean_once(text: str) -> str:
    text = _SUMMARY_LABEL.sub("", text, count=1)
    text = _JSON_FENCE_OPEN.sub("", text)
    text = _FENCE.sub("", text)
    return text.strip()


def clean_model_output(text: str) -> str:
    """Strip a leading summary label and code fences, then trim.

    Applied until the text stops changing, so cleaning is idempotent.
    """
    cleaned = _clean_once(text)
    while cleaned != text:
        text, cleaned = cleaned, _clean_once(cleaned)
    return cleaned


def _non_empty(items: List[str]) -> List[str]:
    return [item.strip() for item in items if item and item.strip()]


def _from_structured(text: str) -> Optional[List[str]]:
    try:
        payload = thread_payload_adapter.validate_json(text)
    except ValidationError:
        return None
    tweets = payload.tweets if isinstance(payload, ThreadEnvelope) else payload
    return _non_empty(tweets) or None


def _from_paragraphs(text: str) -> Optional[List[str]]:
    segments = _non_empty(_PARAGRAPH_BREAK.split(text))
    return segments if len(segments) > 1 else None


def _thread_marker_starts(text: str) -> List[int]:
    """Offsets of markers that continue the sequence 1/n, 2/n, ...

    Other index/total tokens (dates, fractions, "24/7") stay inside their tweet.
    """
    starts: List[int] = []
    total: Optional[str] = None
    for match in _THREAD_MARKER.finditer(text):
        index, marker_total = int(match.group(1)), match.group(2)
        if index != len(starts) + 1:
            continue
        if starts and marker_total != total:
            continue
        if marker_total is not None and index > int(marker_total):
            continue
        total = marker_total
        starts.append(match.start())
    return starts


def _from_numbering(text: str) -> Optional[List[str]]:
    starts = _thread_marker_starts(text)
    if len(starts) < 2:
        return None
    bounds = zip([0] + starts, starts + [len(text)])
    return _non_empty([text[start:end] for start, end in bounds]) or None


def _from_lines(text: str) -> Optional[List[str]]:
    return _non_empty(text.splitlines()) or None


THREAD_STRATEGIES: List[Callable[[str], Optional[List[str]]]] = [
    _from_structured,
    _from_paragraphs,
    _from_numbering,
    _from_lines,
]


def split_thread(text: str) -> List[str]:
    """Split cleaned text into tweets using the first strategy that succeeds.

    Raises:
        MalformedModelOutputError: If no strategy yields a single tweet.
    """
    for strategy in THREAD_STRATEGIES:
        tweets = strategy(text)
        if tweets:
            logger.debug(f"Thread decoded by {strategy.__name__}: {len(tweets)} tweets")
            return tweets

    logger.warning(f"Unparseable thread output ({len(text)} chars)")
    raise MalformedModelOutputError(text)


def normalize(raw_text: str, summary_format: SummaryFormat) -> NormalizedResult:
    """Clean raw model output and shape it for the requested format."""
    cleaned = clean_model_output(raw_text)

    if summary_format == SummaryFormat.TWITTER_THREAD:
        return NormalizedResult(format=summary_format, value=split_thread(cleaned))

    return NormalizedResult(format=summary_format, value=cleaned)
