"""
Application settings and configuration.
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "TOM Theatre Assistant"
    app_version: str = "1.0.0"
    debug: bool = False

    # Record store
    epr_system: str = Field(default="manual", description="Record backend tag")
    records_db_path: str = "tom_cases.db"
    records_seed_path: Optional[str] = None

    # Azure OpenAI
    azure_openai_api_key: Optional[str] = None
    azure_openai_endpoint: Optional[str] = None
    azure_openai_deployment_name: str = "gpt-4o"
    azure_openai_api_version: str = "2024-08-01-preview"
    generation_temperature: float = 0.5
    generation_max_tokens: int = 1000
    openai_timeout: float = 30.0

    # Azure Speech
    azure_speech_api_key: Optional[str] = None
    azure_speech_region: str = "uksouth"
    azure_speech_voice: str = "en-GB-RyanNeural"
    speech_timeout: float = 15.0

    # Audit
    audit_log_path: str = "tom_audit_log.jsonl"

    # Timezone
    timezone: str = "Europe/London"

    # Logging
    log_level: str = "INFO"


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()
