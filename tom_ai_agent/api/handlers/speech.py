"""
Text-to-speech endpoint handler.
"""

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from ...services.orchestration import ServiceOrchestrator
from ...utils.logging import get_logger


class SpeechHandler:
    """Handler for the text-to-speech endpoint."""

    def __init__(self, orchestrator: ServiceOrchestrator):
        self.orchestrator = orchestrator
        self.logger = get_logger("tom.api.speech")
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):
        """Setup speech routes."""

        @self.router.post("")
        async def text_to_speech(request: Request):
            """Return MP3 audio, or tell the client to use its own voice."""
            try:
                body = await request.json()
            except Exception:
                return JSONResponse(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    content={"success": False, "error": "Invalid JSON body"},
                )

            text = body.get("text") if isinstance(body, dict) else None
            if not text or not isinstance(text, str):
                return JSONResponse(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    content={"success": False, "error": "Text is required"},
                )

            if not self.orchestrator.speech.is_ready():
                return self._browser_fallback("Azure Speech not configured, use browser fallback")

            audio = await self.orchestrator.generate_speech(text)
            if not audio:
                return self._browser_fallback("TTS generation failed, use browser fallback")

            return Response(
                content=audio,
                media_type="audio/mp3",
                headers={"Content-Disposition": 'inline; filename="speech.mp3"'},
            )

    def _browser_fallback(self, message: str) -> dict:
        self.logger.info(f"TTS fallback: {message}")
        return {"success": False, "useBrowserVoice": True, "message": message}
