"""Configuration settings for the Azure AI Document Intelligence decoder."""

from enum import Enum
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthTypes(str, Enum):
    """Authentication modes supported by the decoder."""

    AZURE_IDENTITY = "AzureIdentity"
    API_KEY = "APIKey"


class DocIntelSettings(BaseSettings):
    """Decoder settings loaded from environment variables.

    Every field can be set through an ``AZURE_AI_DOCINTEL_`` prefixed
    variable, e.g. ``AZURE_AI_DOCINTEL_ENDPOINT``.
    """

    model_config = SettingsConfigDict(
        env_prefix="AZURE_AI_DOCINTEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Azure AI Document Intelligence
    endpoint: str = ""
    # "AzureIdentity" or "APIKey"; validated when the decoder is built
    auth: str = AuthTypes.AZURE_IDENTITY.value
    api_key: str = ""
    model_id: str = "prebuilt-read"

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"


# Global settings instance
settings: Optional[DocIntelSettings] = None


def load_settings() -> DocIntelSettings:
    """Load settings from environment variables and .env file."""
    global settings
    settings = DocIntelSettings()
    return settings


def get_settings() -> DocIntelSettings:
    """Get the global settings instance, loading if necessary."""
    global settings
    if settings is None:
        settings = load_settings()
    return settings
