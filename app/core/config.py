"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import List, Optional

from pydantic import AliasChoices, Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App settings
    app_name: str = "Summarize API"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api"

    # Authentication settings
    require_api_key: bool = False  # Set to True to enable API key authentication

    # API Keys for authentication (comma-separated string in env)
    api_keys_str: str = Field(
        default="",
        validation_alias=AliasChoices("api_keys", "client_api_key"),
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def api_keys(self) -> List[str]:
        """Parse comma-separated API keys."""
        return [k.strip() for k in self.api_keys_str.split(",") if k.strip()]

    # Requests forwarded by an API gateway (RapidAPI) are authenticated upstream
    trust_gateway_headers: bool = True
    gateway_proxy_secret: Optional[str] = None

    # LLM settings
    default_vendor: str = "gemini"
    default_model: Optional[str] = None

    # Google Gemini
    google_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("google_api_key", "gemini_api_key"),
    )
    gemini_model: str = "gemini-1.5-flash-8b"

    # Anthropic
    anthropic_api_key: Optional[str] = None
    anthropic_model: str = "claude-sonnet-4-20250514"

    # OpenAI
    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4o"

    # Generation settings
    temperature: float = 0.7
    max_output_tokens: int = 2048

    # Respond with a bare list under "summaries" for twitter threads
    legacy_flat_thread_response: bool = False

    def model_for_vendor(self, vendor: str) -> str:
        """Resolve the model name used for a vendor."""
        if self.default_model and vendor == self.default_vendor:
            return self.default_model
        return {
            "gemini": self.gemini_model,
            "anthropic": self.anthropic_model,
            "openai": self.openai_model,
        }.get(vendor, self.gemini_model)

    def api_key_for_vendor(self, vendor: str) -> Optional[str]:
        """Return the upstream credential for a vendor, if configured."""
        return {
            "gemini": self.google_api_key,
            "anthropic": self.anthropic_api_key,
            "openai": self.openai_api_key,
        }.get(vendor)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
