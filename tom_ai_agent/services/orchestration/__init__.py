"""
Chat orchestration: intent, retrieval, grounding and generation.
"""

from .context_builder import ContextBuilder, NO_CASES_MESSAGE
from .factory import build_orchestrator
from .intent import IntentClassifier
from .orchestrator import FALLBACK_PREFIX, ServiceOrchestrator
from .prompts import SYSTEM_PROMPT

__all__ = [
    "ContextBuilder",
    "NO_CASES_MESSAGE",
    "build_orchestrator",
    "IntentClassifier",
    "FALLBACK_PREFIX",
    "ServiceOrchestrator",
    "SYSTEM_PROMPT",
]
