"""
Keyword intent classification for chat messages.
"""

import re

from ...core.enums import QueryType
from ...core.models import QueryIntent
from ...utils.logging import get_logger

_SURGEON_WORD = re.compile(r"surgeon|doctor|consultant")
_SURGEON_NAME = re.compile(r"(?:surgeon|doctor|consultant)\s+(\w+)")
_THEATRE_WORD = re.compile(r"theatre|room")
# A letter identifier must stand alone: "theatre b" is theatre b, "theatre alpha"
# names no theatre.
_THEATRE_ID = re.compile(r"(?:theatre|room)\s+(\d+|[a-z]\b)")


class IntentClassifier:
    """
    Classifies a message by keyword precedence; the first rule that matches
    wins:

    1. "today" / "current"           -> today
    2. "tomorrow"                    -> tomorrow
    3. "list" / "schedule"           -> list (resolved to tomorrow or today)
    4. surgeon / doctor / consultant -> by_surgeon with the following word
    5. theatre / room                -> by_theatre with a number or letter
    6. anything else                 -> default

    A surgeon or theatre keyword without an identifier after it classifies as
    default.
    """

    def __init__(self):
        self.logger = get_logger("tom.intent")

    def classify(self, text: str) -> QueryIntent:
        """Classify ``text``; never raises, returns an ``error`` intent instead."""
        try:
            intent = self._match(text.lower())
        except Exception as e:
            self.logger.error(f"intent: classification failed: {e}")
            return QueryIntent(query_type=QueryType.ERROR)

        self.logger.debug(f"intent: {intent.query_type.value} ({intent.parameter})")
        return intent

    def _match(self, text: str) -> QueryIntent:
        if "today" in text or "current" in text:
            return QueryIntent(query_type=QueryType.TODAY)

        if "tomorrow" in text:
            return QueryIntent(query_type=QueryType.TOMORROW)

        if "list" in text or "schedule" in text:
            day = QueryType.TOMORROW if "tomorrow" in text else QueryType.TODAY
            return QueryIntent(query_type=QueryType.LIST, resolved_to=day)

        if _SURGEON_WORD.search(text):
            match = _SURGEON_NAME.search(text)
            if match:
                return QueryIntent(query_type=QueryType.BY_SURGEON, parameter=match.group(1))
            return QueryIntent(query_type=QueryType.DEFAULT)

        if _THEATRE_WORD.search(text):
            match = _THEATRE_ID.search(text)
            if match:
                return QueryIntent(query_type=QueryType.BY_THEATRE, parameter=match.group(1))
            return QueryIntent(query_type=QueryType.DEFAULT)

        return QueryIntent(query_type=QueryType.DEFAULT)
