"""Configuration management for querybridge"""
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, read from the environment or a `.env` file."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    port: int = 5000
    log_level: str = "INFO"
    cors_origins: str = "*"

    # Outbound HTTP; None keeps the httpx default timeout
    upstream_timeout: Optional[float] = None

    # Google Custom Search
    google_api_key: Optional[str] = None
    google_cse_id: Optional[str] = None
    google_api_url: str = "https://www.googleapis.com/customsearch/v1"

    # Chat providers
    chatgpt_api_key: Optional[str] = None
    chatgpt_api_url: str = "https://api.openai.com/v1/chat/completions"
    chatgpt_model: str = "gpt-3.5-turbo"

    deepseek_api_key: Optional[str] = None
    deepseek_api_url: str = "https://api.deepseek.com/v1/chat/completions"
    deepseek_model: str = "deepseek-coder"

    gemini_api_key: Optional[str] = None
    gemini_api_url: str = (
        "https://generativelanguage.googleapis.com/v1/models/gemini-2.0-flash:generateContent"
    )

    mistral_api_key: Optional[str] = None
    mistral_api_url: str = "https://api.mistral.ai/v1/chat/completions"
    mistral_model: str = "mistral-large-latest"

    def api_key_for(self, platform: str) -> Optional[str]:
        """Credential for a chat platform, or None when unset or empty."""
        return getattr(self, f"{platform}_api_key", None) or None


def get_settings() -> Settings:
    """Fresh settings per call so credentials are re-read for every request."""
    return Settings()


settings = Settings()
