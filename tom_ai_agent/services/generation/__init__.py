"""
Generative response client.
"""

from .service import AzureOpenAIService, NO_RESPONSE_TEXT

__all__ = [
    "AzureOpenAIService",
    "NO_RESPONSE_TEXT",
]
