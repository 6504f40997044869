"""
Service orchestrator for the TOM theatre assistant.

Each chat message flows through classification, retrieval, context building,
generation and audit. Every stage degrades on its own: the caller always gets
a reply.
"""

from typing import List, Optional, Tuple

from ...core.enums import QueryType
from ...core.exceptions import ConfigurationError
from ...core.models import (
    AuditRecord,
    ChatResult,
    DateRange,
    GenerationInfo,
    QueryContext,
    SpeechInfo,
    StoreStatus,
    SystemStatus,
    TheatreCase,
)
from ...utils.date import DateParser
from ...utils.logging import get_logger
from ..audit import AuditLogService
from ..generation import AzureOpenAIService
from ..records import BaseRecordStore
from ..speech import AzureSpeechService
from .context_builder import ContextBuilder
from .intent import IntentClassifier
from .prompts import SYSTEM_PROMPT

FALLBACK_PREFIX = (
    "I apologize, but I'm having trouble connecting to the AI service. "
    "However, I can share what I found:"
)


class ServiceOrchestrator:
    """Coordinates the record store, generation, speech and audit services."""

    def __init__(
        self,
        record_store: BaseRecordStore,
        generation: AzureOpenAIService,
        speech: AzureSpeechService,
        audit: AuditLogService,
        classifier: Optional[IntentClassifier] = None,
        context_builder: Optional[ContextBuilder] = None,
        date_parser: Optional[DateParser] = None,
    ):
        self.record_store = record_store
        self.generation = generation
        self.speech = speech
        self.audit = audit
        self.date_parser = date_parser or DateParser()
        self.classifier = classifier or IntentClassifier()
        self.context_builder = context_builder or ContextBuilder(self.date_parser)
        self.initialized = False
        self.logger = get_logger("tom.orchestrator")

    async def initialize(self) -> None:
        """Probe every collaborator once. Failing probes are logged, not raised."""
        if self.initialized:
            return

        self.logger.info("Initializing TOM services...")

        try:
            cases = await self.record_store.get_cases_for_today()
            self.logger.info(f"Record store connected: {len(cases)} cases today")
        except Exception as e:
            self.logger.warning(f"Record store connection issue: {e}")

        try:
            if self.generation.is_ready():
                self.logger.info("Azure OpenAI ready")
            else:
                self.logger.warning("Azure OpenAI not configured")
        except Exception as e:
            self.logger.warning(f"Azure OpenAI probe failed: {e}")

        try:
            if self.speech.is_ready():
                self.logger.info("Azure Speech ready")
            else:
                self.logger.warning("Azure Speech not configured, browser voice fallback")
        except Exception as e:
            self.logger.warning(f"Azure Speech probe failed: {e}")

        try:
            health = await self.record_store.health_check()
            if health.healthy:
                self.logger.info(f"EPR health: {health.message}")
            else:
                self.logger.warning(f"EPR health: {health.message}")
        except Exception as e:
            self.logger.warning(f"EPR health check failed: {e}")

        self.initialized = True
        self.logger.info("TOM services initialized")

    async def process_chat(self, message: str, user_id: Optional[str] = None) -> ChatResult:
        """
        Answer a chat message about the theatre schedule.

        Args:
            message: The user's question
            user_id: Optional caller identity for the audit trail

        Returns:
            ChatResult with the reply and the context it was grounded on
        """
        await self.initialize()

        context = await self.query_theatre_data(message)
        context_text = self.context_builder.build(context)
        content = await self._generate_reply(message, context_text)
        await self._log_chat_audit(message, context, user_id)

        return ChatResult(content=content, user_id=user_id, context=context_text)

    async def query_theatre_data(self, message: str) -> QueryContext:
        """Classify ``message`` and retrieve the matching cases."""
        intent = self.classifier.classify(message)
        if intent.query_type == QueryType.ERROR:
            return QueryContext(query_type=QueryType.ERROR)

        query_type = intent.retrieval_type
        try:
            if not self.record_store.is_configured():
                raise ConfigurationError("Record store not configured")
            cases, date_range = await self._retrieve(query_type, intent.parameter)
        except Exception as e:
            self.logger.error(f"Error querying theatre data: {e}")
            return QueryContext(query_type=QueryType.ERROR)

        filters = {query_type.value: intent.parameter} if intent.parameter else {}
        self.logger.info(f"Retrieved {len(cases)} cases for {query_type.value} query")
        return QueryContext(
            cases=cases,
            query_type=query_type,
            date_range=date_range,
            filters=filters,
        )

    async def _retrieve(
        self, query_type: QueryType, parameter: Optional[str]
    ) -> Tuple[List[TheatreCase], Optional[DateRange]]:
        if query_type == QueryType.BY_SURGEON:
            return await self.record_store.get_cases_by_surgeon(parameter), None

        if query_type == QueryType.BY_THEATRE:
            return await self.record_store.get_cases_by_theatre(parameter), None

        if query_type == QueryType.TOMORROW:
            start, end = self.date_parser.day_bounds(1)
            cases = await self.record_store.get_cases_for_tomorrow()
            return cases, DateRange(start=start, end=end)

        # today and default
        start, end = self.date_parser.day_bounds(0)
        cases = await self.record_store.get_cases_for_today()
        return cases, DateRange(start=start, end=end)

    async def _generate_reply(self, message: str, context_text: str) -> str:
        try:
            if not self.generation.is_ready():
                raise ConfigurationError("Azure OpenAI not configured")
            return await self.generation.generate(SYSTEM_PROMPT, context_text, message)
        except ConfigurationError as e:
            self.logger.warning(f"{e}, returning retrieved context")
        except Exception as e:
            self.logger.error(f"Error generating AI response: {e}")

        return f"{FALLBACK_PREFIX}\n\n{context_text}"

    async def _log_chat_audit(
        self, message: str, context: QueryContext, user_id: Optional[str]
    ) -> None:
        try:
            entry = AuditRecord(
                user_id=user_id or "anonymous",
                action="chat_query",
                resource="tom_chat",
                details={
                    "query": message,
                    "cases_found": len(context.cases),
                    "query_type": context.query_type.value,
                },
            )
            await self.audit.record(entry)
        except Exception as e:
            self.logger.error(f"Error logging audit: {e}")

    async def generate_speech(self, text: str) -> Optional[bytes]:
        """Synthesize ``text``; None means the caller should use a local voice."""
        try:
            return await self.speech.synthesize(text)
        except Exception as e:
            self.logger.error(f"Error generating speech: {e}")
            return None

    async def get_system_status(self) -> SystemStatus:
        """Read-only readiness snapshot. Never raises."""
        return SystemStatus(
            store=await self._store_status(),
            generation=self._generation_info(),
            speech=self._speech_info(),
            initialized=self.initialized,
        )

    async def _store_status(self) -> StoreStatus:
        store = self.record_store
        try:
            system = store.get_system_name().value
        except Exception:
            system = "unknown"

        status = StoreStatus(
            system=system,
            supports_subscriptions=hasattr(store, "subscribe_to_cases"),
        )

        try:
            status.configured = bool(store.is_configured())
        except Exception as e:
            self.logger.warning(f"Status: store configuration check failed: {e}")

        try:
            status.cases_count = len(await store.get_cases_for_today())
            status.connected = True
        except Exception as e:
            self.logger.warning(f"Status: store unreachable: {e}")

        try:
            status.healthy = (await store.health_check()).healthy
        except Exception as e:
            self.logger.warning(f"Status: store health check failed: {e}")

        return status

    def _generation_info(self) -> GenerationInfo:
        try:
            return self.generation.get_deployment_info()
        except Exception as e:
            self.logger.warning(f"Status: generation info unavailable: {e}")
            return GenerationInfo()

    def _speech_info(self) -> SpeechInfo:
        try:
            return self.speech.get_service_info()
        except Exception as e:
            self.logger.warning(f"Status: speech info unavailable: {e}")
            return SpeechInfo()
