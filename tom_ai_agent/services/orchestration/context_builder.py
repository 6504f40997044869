"""
Renders retrieved theatre cases as grounding text for the model.
"""

from typing import Optional

from ...core.models import QueryContext, TheatreCase
from ...utils.date import DateParser

NO_CASES_MESSAGE = (
    "No theatre cases found for this query. "
    "The theatre schedule may be empty or the database may need updating."
)


class ContextBuilder:
    """Builds the numbered case listing the answer is grounded on."""

    def __init__(self, date_parser: Optional[DateParser] = None):
        self.date_parser = date_parser or DateParser()

    def build(self, context: QueryContext) -> str:
        if not context.cases:
            return NO_CASES_MESSAGE

        blocks = [
            self._render_case(index, case)
            for index, case in enumerate(context.cases, start=1)
        ]
        return f"Theatre Cases ({len(context.cases)} total):\n\n" + "\n\n".join(blocks)

    def _render_case(self, index: int, case: TheatreCase) -> str:
        lines = [
            f"{index}. {case.procedure}",
            f"   - Patient: {case.patient_name or case.patient_id}",
            f"   - Surgeon: {case.surgeon}",
            f"   - Theatre: {case.theatre}",
            f"   - Time: {case.scheduled_time or 'Not scheduled'}",
            f"   - Date: {self.date_parser.describe_day(case.scheduled_date)}",
            f"   - Status: {case.status.value}",
        ]
        if case.special_requirements:
            lines.append(f"   - Special requirements: {', '.join(case.special_requirements)}")
        return "\n".join(lines)
