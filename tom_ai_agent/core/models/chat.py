"""
Chat-related data models.
"""

import time
import uuid
from datetime import datetime
from typing import Optional
import pytz
from pydantic import BaseModel, Field, ConfigDict


def new_message_id() -> str:
    """Message id in the ``msg_<epoch-ms>_<random>`` form."""
    return f"msg_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"


class ChatResult(BaseModel):
    """Assistant reply produced by the orchestrator."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(default_factory=new_message_id)
    role: str = "assistant"
    content: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(pytz.utc))
    user_id: Optional[str] = None
    context: str = ""  # context string the answer was grounded on
