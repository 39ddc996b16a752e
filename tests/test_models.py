"""Tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from app.models.summary import (
    ALLOWED_FORMATS,
    NormalizedResult,
    SummarizeRequest,
    SummaryFormat,
    ThreadEnvelope,
    thread_payload_adapter,
)


class TestSummaryModels:
    """Tests for request and result models."""

    def test_allowed_formats(self):
        """Test the allowed format list and its order."""
        assert ALLOWED_FORMATS == ("abstract", "linkedin_post", "twitter_thread")

    def test_request_defaults(self):
        """Test SummarizeRequest defaults."""
        request = SummarizeRequest()

        assert request.content == ""
        assert request.format == "abstract"

    def test_request_rejects_non_text_content(self):
        """Test content must be a string."""
        with pytest.raises(ValidationError):
            SummarizeRequest(content=42)

    def test_result_mapping(self):
        """Test NormalizedResult renders as a format-keyed mapping."""
        result = NormalizedResult(format=SummaryFormat.TWITTER_THREAD, value=["a", "b"])

        assert result.as_mapping() == {"twitter_thread": ["a", "b"]}


class TestThreadPayload:
    """Tests for the structured thread decode schema."""

    @pytest.mark.parametrize("key", ["twitter_thread", "tweets", "thread"])
    def test_envelope_keys(self, key):
        """Test each accepted envelope key decodes."""
        payload = thread_payload_adapter.validate_json(f'{{"{key}": ["x", "y"]}}')

        assert isinstance(payload, ThreadEnvelope)
        assert payload.tweets == ["x", "y"]

    def test_bare_array(self):
        """Test a bare array decodes to a list."""
        assert thread_payload_adapter.validate_json('["x"]') == ["x"]

    @pytest.mark.parametrize(
        "text",
        ['{"twitter_thread": "x"}', '{"other": ["x"]}', "[1, 2]", "not json", '"x"'],
    )
    def test_rejected_shapes(self, text):
        """Test shapes outside the schema fail to decode."""
        with pytest.raises(ValidationError):
            thread_payload_adapter.validate_json(text)
