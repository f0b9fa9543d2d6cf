"""
Configuration management for WritWay.

Loads settings from environment variables with sensible defaults.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Environment
    # ==========================================================================
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = True
    log_level: str = "INFO"
    log_json: bool = False

    # ==========================================================================
    # OpenAI
    # ==========================================================================
    openai_api_key: str = Field(default="", description="OpenAI API key")
    openai_model: str = "gpt-4o-mini"
    openai_timeout: float = 30.0
    openai_max_retries: int = 3

    extraction_temperature: float = 0.2
    drafting_temperature: float = 0.3
    question_temperature: float = 0.7

    # Cost per million tokens, used for the usage log line
    openai_prompt_cost_per_million: float = 0.15
    openai_completion_cost_per_million: float = 0.6

    # ==========================================================================
    # Claim intake
    # ==========================================================================
    claim_inference_enabled: bool = True
    small_claims_limit: float = 35000.0

    # ==========================================================================
    # Documents
    # ==========================================================================
    document_filename_base: str = "statement-of-claim"

    # ==========================================================================
    # API Configuration
    # ==========================================================================
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    cors_origins: str = Field(
        default="http://localhost:3000",
        description="Comma separated list of allowed origins",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept lowercase level names."""
        return v.upper() if isinstance(v, str) else v

    @property
    def cors_origin_list(self) -> list[str]:
        """CORS origins split into a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def openai_enabled(self) -> bool:
        """True when an OpenAI key is configured."""
        return bool(self.openai_api_key.strip())

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
