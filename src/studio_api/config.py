"""Configuration management for the studio API."""

from functools import lru_cache
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # API Keys
    gemini_api_key: Optional[str] = Field(None, description="GEMINI_API_KEY")
    anthropic_api_key: Optional[str] = Field(None, description="ANTHROPIC_API_KEY")
    openai_api_key: Optional[str] = Field(None, description="OPENAI_API_KEY")

    # API Configuration
    api_host: str = Field("0.0.0.0")
    api_port: int = Field(8000)
    log_level: str = Field("info")

    # Generation Configuration
    default_model: str = Field("gemini-2.5-flash")
    translation_char_limit: int = Field(2000, gt=0)
    max_text_length: int = Field(100000, gt=0)

    # Rate limiting for generation routes
    rate_limit_times: int = Field(5, ge=1)
    rate_limit_seconds: int = Field(30, ge=1)


@lru_cache
def get_settings() -> Settings:
    """Get the application settings."""
    return Settings()
