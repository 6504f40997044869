"""
Speech synthesis client.
"""

from .service import AzureSpeechService

__all__ = [
    "AzureSpeechService",
]
