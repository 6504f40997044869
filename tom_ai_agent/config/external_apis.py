"""
External API configuration.
"""

from typing import Optional
from pydantic import BaseModel

from .settings import Settings

AZURE_TTS_OUTPUT_FORMAT = "audio-24khz-48kbitrate-mono-mp3"


class ExternalAPIConfig(BaseModel):
    """External API configuration settings."""

    # Azure OpenAI
    openai_api_key: Optional[str] = None
    openai_endpoint: Optional[str] = None
    openai_deployment_name: str = "gpt-4o"
    openai_api_version: str = "2024-08-01-preview"
    openai_temperature: float = 0.5
    openai_max_tokens: int = 1000
    openai_timeout: float = 30.0

    # Azure Speech
    speech_api_key: Optional[str] = None
    speech_region: Optional[str] = "uksouth"
    speech_voice: str = "en-GB-RyanNeural"
    speech_timeout: float = 15.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "ExternalAPIConfig":
        """Build the external API config from application settings."""
        return cls(
            openai_api_key=settings.azure_openai_api_key,
            openai_endpoint=settings.azure_openai_endpoint,
            openai_deployment_name=settings.azure_openai_deployment_name,
            openai_api_version=settings.azure_openai_api_version,
            openai_temperature=settings.generation_temperature,
            openai_max_tokens=settings.generation_max_tokens,
            openai_timeout=settings.openai_timeout,
            speech_api_key=settings.azure_speech_api_key,
            speech_region=settings.azure_speech_region,
            speech_voice=settings.azure_speech_voice,
            speech_timeout=settings.speech_timeout,
        )

    def get_speech_url(self) -> Optional[str]:
        """Get Azure TTS endpoint URL if a region is configured."""
        if self.speech_region:
            return f"https://{self.speech_region}.tts.speech.microsoft.com/cognitiveservices/v1"
        return None

    def is_openai_configured(self) -> bool:
        """Check if Azure OpenAI is properly configured."""
        return bool(self.openai_api_key and self.openai_endpoint)

    def is_speech_configured(self) -> bool:
        """Check if Azure Speech is properly configured."""
        return bool(self.speech_api_key and self.speech_region)
