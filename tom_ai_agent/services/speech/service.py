"""
Speech synthesis client for Azure text-to-speech.
"""

from typing import Optional
from xml.sax.saxutils import escape
import httpx

from ...config import ExternalAPIConfig, get_settings
from ...config.external_apis import AZURE_TTS_OUTPUT_FORMAT
from ...core.models import SpeechInfo
from ...utils.logging import get_logger

_XML_QUOTES = {'"': "&quot;", "'": "&apos;"}


class AzureSpeechService:
    """
    Synthesizes replies with a natural British voice.

    ``synthesize`` never raises: ``None`` tells the caller to fall back to a
    local (browser) voice.
    """

    def __init__(self, config: Optional[ExternalAPIConfig] = None):
        self.config = config or ExternalAPIConfig.from_settings(get_settings())
        self.voice_name = self.config.speech_voice
        self.region = self.config.speech_region
        self.timeout = self.config.speech_timeout
        self.logger = get_logger("tom.speech")

        if self.is_ready():
            self.logger.info(f"speech: Azure Speech initialized ({self.voice_name})")
        else:
            self.logger.warning("speech: Azure Speech not configured, TTS will use browser fallback")

    def _generate_ssml(self, text: str) -> str:
        """Wrap ``text`` in SSML for the configured voice."""
        return (
            "<speak version='1.0' xml:lang='en-GB' xmlns='http://www.w3.org/2001/10/synthesis'>"
            f"<voice xml:lang='en-GB' name='{self.voice_name}'>"
            "<prosody rate='0.95' pitch='0%'>"
            f"{escape(text, _XML_QUOTES)}"
            "</prosody></voice></speak>"
        )

    async def synthesize(self, text: str) -> Optional[bytes]:
        """
        Synthesize ``text`` to MP3.

        Returns:
            Audio bytes, or None if speech is unavailable
        """
        if not self.is_ready():
            self.logger.warning("speech: Azure Speech not configured, use browser fallback")
            return None

        headers = {
            "Ocp-Apim-Subscription-Key": self.config.speech_api_key,
            "Content-Type": "application/ssml+xml",
            "X-Microsoft-OutputFormat": AZURE_TTS_OUTPUT_FORMAT,
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.config.get_speech_url(),
                    content=self._generate_ssml(text).encode("utf-8"),
                    headers=headers,
                )
                response.raise_for_status()
                return response.content
        except httpx.HTTPStatusError as e:
            self.logger.error(f"speech: Azure TTS failed with HTTP {e.response.status_code}")
            return None
        except Exception as e:
            self.logger.error(f"speech: Azure TTS error: {e}")
            return None

    def is_ready(self) -> bool:
        """Check if speech synthesis is configured."""
        return self.config.is_speech_configured()

    def get_service_info(self) -> SpeechInfo:
        """Voice details for status reporting."""
        return SpeechInfo(
            voice_name=self.voice_name,
            region=self.region,
            ready=self.is_ready(),
        )
