"""
Chat endpoint handler.
"""

from datetime import datetime
from typing import Any, Dict
import pytz
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from ...services.orchestration import ServiceOrchestrator
from ...utils.logging import get_logger


class ChatHandler:
    """Handler for the TOM chat endpoint."""

    def __init__(self, orchestrator: ServiceOrchestrator):
        self.orchestrator = orchestrator
        self.logger = get_logger("tom.api.chat")
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):
        """Setup chat routes."""

        @self.router.post("")
        async def chat(request: Request):
            """Answer a theatre scheduling question."""
            try:
                body = await request.json()
            except Exception:
                return self._error("Invalid JSON body", status.HTTP_400_BAD_REQUEST)

            message = body.get("message") if isinstance(body, dict) else None
            if not message or not isinstance(message, str):
                return self._error("Message is required", status.HTTP_400_BAD_REQUEST)

            user_id = body.get("userId")
            try:
                result = await self.orchestrator.process_chat(
                    message, user_id if isinstance(user_id, str) else None
                )
            except Exception as e:
                self.logger.exception(f"TOM chat error: {e}")
                return self._error(
                    "Failed to process message",
                    status.HTTP_500_INTERNAL_SERVER_ERROR,
                    details=str(e),
                )

            return {
                "success": True,
                "message": result.content,
                "context": result.context,
                "timestamp": result.timestamp.isoformat(),
            }

        @self.router.get("")
        async def chat_status():
            """Report collaborator readiness."""
            try:
                system_status = await self.orchestrator.get_system_status()
            except Exception as e:
                self.logger.exception(f"TOM status error: {e}")
                return self._error(
                    "Health check failed",
                    status.HTTP_500_INTERNAL_SERVER_ERROR,
                    details=str(e),
                )

            return {
                "success": True,
                "status": system_status.model_dump(mode="json"),
                "timestamp": datetime.now(pytz.utc).isoformat(),
            }

    def _error(self, error: str, status_code: int, **extra: Any) -> JSONResponse:
        content: Dict[str, Any] = {"success": False, "error": error, **extra}
        return JSONResponse(status_code=status_code, content=content)
