"""
Generative response client backed by an Azure OpenAI deployment.
"""

from typing import Optional
from openai import AsyncAzureOpenAI
from agents import Agent, ModelSettings, OpenAIChatCompletionsModel, RunConfig, Runner

from ...config import ExternalAPIConfig, get_settings
from ...core.exceptions import ConfigurationError, UpstreamError
from ...core.models import GenerationInfo
from ...utils.logging import get_logger

NO_RESPONSE_TEXT = "I apologize, but I could not generate a response."


class AzureOpenAIService:
    """Runs a single-turn TOM agent against Azure OpenAI."""

    def __init__(self, config: Optional[ExternalAPIConfig] = None):
        self.config = config or ExternalAPIConfig.from_settings(get_settings())
        self.deployment_name = self.config.openai_deployment_name
        self.logger = get_logger("tom.generation")
        self.client: Optional[AsyncAzureOpenAI] = self._create_client()

    def _create_client(self) -> Optional[AsyncAzureOpenAI]:
        """Create the Azure client, or None when credentials are missing."""
        if not self.config.is_openai_configured():
            self.logger.warning("generation: Azure OpenAI credentials not configured")
            return None

        client = AsyncAzureOpenAI(
            api_key=self.config.openai_api_key,
            azure_endpoint=self.config.openai_endpoint,
            api_version=self.config.openai_api_version,
            timeout=self.config.openai_timeout,
        )
        self.logger.info(f"generation: Azure OpenAI initialized ({self.deployment_name})")
        return client

    def _build_agent(self, system_prompt: str, context_text: str) -> Agent:
        """Build the answering agent with the retrieved context injected."""
        instructions = f"{system_prompt}\n\nContext:\n{context_text}"

        return Agent(
            name="TOM",
            instructions=instructions,
            model=OpenAIChatCompletionsModel(
                model=self.deployment_name,
                openai_client=self.client,
            ),
            model_settings=ModelSettings(
                temperature=self.config.openai_temperature,
                max_tokens=self.config.openai_max_tokens,
            ),
        )

    async def generate(self, system_prompt: str, context_text: str, user_message: str) -> str:
        """
        Generate an answer grounded on ``context_text``.

        Args:
            system_prompt: Assistant role and guidelines
            context_text: Retrieved theatre data rendered as text
            user_message: The user's question

        Returns:
            Generated answer text

        Raises:
            ConfigurationError: if the client is not configured
            UpstreamError: if the Azure call fails
        """
        if self.client is None:
            raise ConfigurationError(
                "Azure OpenAI client not initialized. Check environment variables."
            )

        agent = self._build_agent(system_prompt, context_text)
        try:
            result = await Runner.run(
                agent,
                input=user_message,
                run_config=RunConfig(tracing_disabled=True),
            )
        except Exception as e:
            self.logger.error(f"generation: Azure OpenAI chat error: {e}")
            raise UpstreamError(f"Failed to generate response: {e}")

        text = str(result.final_output or "").strip()
        return text or NO_RESPONSE_TEXT

    def is_ready(self) -> bool:
        """Check if the client is configured."""
        return self.client is not None

    def get_deployment_info(self) -> GenerationInfo:
        """Deployment details for status reporting."""
        return GenerationInfo(
            deployment_name=self.deployment_name,
            endpoint=self.config.openai_endpoint,
            ready=self.is_ready(),
        )
