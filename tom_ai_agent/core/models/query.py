"""
Query classification and retrieval models.
"""

from datetime import datetime
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, ConfigDict

from ..enums import QueryType
from .case import TheatreCase


class QueryIntent(BaseModel):
    """Classified purpose of a chat message."""

    model_config = ConfigDict(frozen=True)

    query_type: QueryType
    parameter: Optional[str] = None  # surgeon fragment or theatre identifier
    resolved_to: Optional[QueryType] = None  # day a "list" request resolved to

    @property
    def retrieval_type(self) -> QueryType:
        """The query type that drives retrieval."""
        if self.query_type == QueryType.LIST and self.resolved_to is not None:
            return self.resolved_to
        return self.query_type


class DateRange(BaseModel):
    """Inclusive datetime window."""

    start: datetime
    end: datetime


class QueryContext(BaseModel):
    """Cases retrieved for a single chat message."""

    cases: List[TheatreCase] = Field(default_factory=list)
    query_type: QueryType
    date_range: Optional[DateRange] = None
    filters: Dict[str, str] = Field(default_factory=dict)
