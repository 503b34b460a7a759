"""
Application settings and configuration management.

Uses pydantic-settings for environment variable loading. The pipeline
itself only ever sees an IntegrationConfig; reading the environment is
left to the host application through get_settings().
"""

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_INFERENCE_BASE_URL = "https://api-inference.huggingface.co/models"
DEFAULT_COMPLETION_MODEL = "mistralai/Mistral-7B-Instruct-v0.1"
DEFAULT_SENTIMENT_MODEL = "cardiffnlp/twitter-roberta-base-sentiment-latest"


class IntegrationConfig(BaseModel):
    """
    Which external services the pipeline may call.

    The defaults describe a fully local pipeline: no credential, so no
    inference tier, no question enhancement and no sentiment classifier.
    """

    model_config = ConfigDict(frozen=True)

    hf_api_key: str = ""
    ai_service: Literal["local", "huggingface"] = "local"

    inference_base_url: str = DEFAULT_INFERENCE_BASE_URL
    completion_model: str = DEFAULT_COMPLETION_MODEL
    sentiment_model: str = DEFAULT_SENTIMENT_MODEL

    request_timeout_seconds: float = Field(default=30.0, gt=0)
    max_concurrency: int = Field(default=2, ge=1)

    @property
    def inference_configured(self) -> bool:
        """A credential is present, so tier-1 extraction may run."""
        return bool(self.hf_api_key.strip())

    @property
    def question_enhancement_enabled(self) -> bool:
        return self.inference_configured and self.ai_service == "huggingface"

    @property
    def sentiment_enabled(self) -> bool:
        return self.inference_configured and self.ai_service == "huggingface"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Hugging Face inference (optional)
    hf_api_key: str = ""
    ai_service: Literal["local", "huggingface"] = "local"
    hf_inference_url: str = DEFAULT_INFERENCE_BASE_URL
    hf_completion_model: str = DEFAULT_COMPLETION_MODEL
    hf_analysis_model: str = DEFAULT_SENTIMENT_MODEL

    # Request limits
    request_timeout_seconds: float = 30.0
    max_concurrency: int = 2

    def to_integration_config(self) -> IntegrationConfig:
        """Build the explicit config object handed to the pipeline."""
        return IntegrationConfig(
            hf_api_key=self.hf_api_key,
            ai_service=self.ai_service,
            inference_base_url=self.hf_inference_url,
            completion_model=self.hf_completion_model,
            sentiment_model=self.hf_analysis_model,
            request_timeout_seconds=self.request_timeout_seconds,
            max_concurrency=self.max_concurrency,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
