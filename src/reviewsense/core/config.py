"""Configuration management for ReviewSense."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

from .constants import ClassifierConstants, DatasetConstants


class Settings(BaseSettings):
    """Application settings."""

    # Hugging Face Inference API
    hf_api_token: str = Field("", description="Hugging Face API token")
    HF_TOKEN: str = Field("", description="Hugging Face API token (alternative naming)")
    sentiment_endpoint: str = Field(
        ClassifierConstants.DEFAULT_ENDPOINT,
        description="Sentiment classification endpoint"
    )
    request_timeout: Optional[float] = Field(
        ClassifierConstants.REQUEST_TIMEOUT,
        description="Timeout in seconds for classifier and dataset requests"
    )

    @property
    def effective_hf_token(self) -> str:
        """Get the effective Hugging Face token from either field."""
        return (self.hf_api_token or self.HF_TOKEN).strip()

    # Dataset
    dataset_path: str = Field(DatasetConstants.DEFAULT_DATASET, description="Path or URL of the reviews TSV")
    text_column: str = Field(DatasetConstants.TEXT_COLUMN, description="Column holding review text")

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


# Global settings instance
settings = Settings()
