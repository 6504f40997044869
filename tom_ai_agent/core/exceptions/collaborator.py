"""
Exceptions raised by external collaborators (generation, speech, stores).
"""

from .base import TomError


class ConfigurationError(TomError):
    """Exception raised when a collaborator is not configured."""
    pass


class UpstreamError(TomError):
    """Exception raised when a configured collaborator call fails."""
    pass
