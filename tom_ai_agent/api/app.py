"""
FastAPI application factory and configuration.
"""

from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config import get_settings
from ..services.orchestration import ServiceOrchestrator, build_orchestrator
from .middleware import SecurityHeaders, LoggingMiddleware
from .handlers import ChatHandler, HealthHandler, SpeechHandler


def create_app(orchestrator: Optional[ServiceOrchestrator] = None) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()
    orchestrator = orchestrator or build_orchestrator(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Theatre Operations Manager assistant for NHS theatre scheduling",
        version=settings.app_version,
        debug=settings.debug,
    )
    app.state.orchestrator = orchestrator

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add custom middleware
    app.add_middleware(SecurityHeaders)
    app.add_middleware(LoggingMiddleware)

    # Initialize handlers
    health_handler = HealthHandler(orchestrator)
    chat_handler = ChatHandler(orchestrator)
    speech_handler = SpeechHandler(orchestrator)

    # Register routes
    app.include_router(health_handler.router, prefix="/health", tags=["health"])
    app.include_router(chat_handler.router, prefix="/api/tom-chat", tags=["chat"])
    app.include_router(speech_handler.router, prefix="/api/tts", tags=["speech"])

    return app
