"""LLM client abstraction for multiple vendors."""

import logging
from abc import ABC, abstractmethod
from typing import AsyncIterator, Dict, Optional

from app.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


class LLMClientError(Exception):
    """Error from LLM client."""

    pass


class BaseLLMClient(ABC):
    """Abstract base class for LLM clients."""

    model: str

    @abstractmethod
    def stream(
        self,
        prompt: str,
        temperature: float = 0.7,
        max_tokens: int = 2048,
    ) -> AsyncIterator[str]:
        """Stream a plain-text response to a single user-role prompt.

        Args:
            prompt: Fully rendered prompt, sent as the user message.
            temperature: Sampling temperature.
            max_tokens: Maximum output tokens.

        Yields:
            Text fragments in the order the vendor delivers them.
        """
        pass

    async def generate(
        self,
        prompt: str,
        temperature: float = 0.7,
        max_tokens: int = 2048,
    ) -> str:
        """Drain the response stream and return the concatenated text."""
        fragments = []
        async for fragment in self.stream(prompt, temperature, max_tokens):
            if fragment:
                fragments.append(fragment)
        text = "".join(fragments)
        logger.debug(f"Received {len(fragments)} fragments ({len(text)} chars) from {self.model}")
        return text


class GeminiClient(BaseLLMClient):
    """Google Gemini client."""

    def __init__(self, api_key: str, model: str):
        self.model = model
        try:
            import google.generativeai as genai

            genai.configure(api_key=api_key)
            self.genai = genai
        except ImportError:
            raise LLMClientError("google-generativeai package not installed")

    async def stream(
        self,
        prompt: str,
        temperature: float = 0.7,
        max_tokens: int = 2048,
    ) -> AsyncIterator[str]:
        try:
            model = self.genai.GenerativeModel(
                self.model,
                generation_config=self.genai.GenerationConfig(
                    temperature=temperature,
                    max_output_tokens=max_tokens,
                    response_mime_type="text/plain",
                ),
            )

            response = await model.generate_content_async(
                [{"role": "user", "parts": [prompt]}],
                stream=True,
            )
            async for chunk in response:
                yield chunk.text

        except Exception as e:
            raise LLMClientError(f"Gemini API error: {e}")


class AnthropicClient(BaseLLMClient):
    """Anthropic Claude client."""

    def __init__(self, api_key: str, model: str):
        self.model = model
        try:
            import anthropic

            self.client = anthropic.AsyncAnthropic(api_key=api_key)
        except ImportError:
            raise LLMClientError("anthropic package not installed")

    async def stream(
        self,
        prompt: str,
        temperature: float = 0.7,
        max_tokens: int = 2048,
    ) -> AsyncIterator[str]:
        try:
            async with self.client.messages.stream(
                model=self.model,
                max_tokens=max_tokens,
                temperature=temperature,
                messages=[{"role": "user", "content": prompt}],
            ) as stream:
                async for text in stream.text_stream:
                    yield text

        except Exception as e:
            raise LLMClientError(f"Anthropic API error: {e}")


class OpenAIClient(BaseLLMClient):
    """OpenAI client."""

    def __init__(self, api_key: str, model: str):
        self.model = model
        try:
            import openai

            self.client = openai.AsyncOpenAI(api_key=api_key)
        except ImportError:
            raise LLMClientError("openai package not installed")

    async def stream(
        self,
        prompt: str,
        temperature: float = 0.7,
        max_tokens: int = 2048,
    ) -> AsyncIterator[str]:
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                temperature=temperature,
                max_tokens=max_tokens,
                messages=[{"role": "user", "content": prompt}],
                stream=True,
            )
            async for chunk in response:
                if chunk.choices:
                    yield chunk.choices[0].delta.content or ""

        except Exception as e:
            raise LLMClientError(f"OpenAI API error: {e}")


class LLMClientFactory:
    """Factory for creating LLM clients."""

    _clients: Dict[str, BaseLLMClient] = {}

    @classmethod
    def get_client(
        cls,
        vendor: Optional[str] = None,
        model: Optional[str] = None,
        settings: Optional[Settings] = None,
    ) -> BaseLLMClient:
        """Get or create an LLM client.

        Args:
            vendor: LLM vendor (gemini, anthropic, openai). Defaults to settings.
            model: Model name override.
            settings: Settings instance.

        Returns:
            LLM client instance.
        """
        settings = settings or get_settings()
        vendor = (vendor or settings.default_vendor).lower()

        if vendor == "gemini":
            client_cls = GeminiClient
        elif vendor == "anthropic":
            client_cls = AnthropicClient
        elif vendor == "openai":
            client_cls = OpenAIClient
        else:
            raise LLMClientError(f"Unknown vendor: {vendor}")

        model = model or settings.model_for_vendor(vendor)
        api_key = settings.api_key_for_vendor(vendor)
        if not api_key:
            raise LLMClientError(f"API key for vendor '{vendor}' not configured")

        # Cache key
        key = f"{vendor}:{model}"

        if key not in cls._clients:
            cls._clients[key] = client_cls(api_key, model)
            logger.info(f"Created LLM client: {vendor}/{model}")

        return cls._clients[key]

    @classmethod
    def clear_cache(cls) -> None:
        """Clear client cache."""
        cls._clients.clear()
