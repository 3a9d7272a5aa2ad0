"""Base agent class with common functionality."""

import time
from typing import Any, Dict, Optional

import openai
from openai import AzureOpenAI

from config import settings
from core.exceptions import LLMError
from core.logger import get_logger
from models.cv_models import CVData
from utils.formatting import format_cv_data
from utils.json_parser import parse_json_safe

logger = get_logger("agents")


class BaseAgent:
    """Base class for all Azure OpenAI agents."""

    system_prompt = "You are a helpful assistant. You must return valid JSON."

    def __init__(
        self,
        model_name: str,
        temperature: float = 1.0,
        api_key: Optional[str] = None,
        timeout: int = 120,
        max_retries: int = 2,
        client: Optional[Any] = None,
    ):
        """
        Initialize base agent with Azure OpenAI client.

        Args:
            model_name: Azure OpenAI deployment name
            temperature: Model temperature
            api_key: Optional API key (uses settings if not provided)
            timeout: Request timeout in seconds
            max_retries: Maximum number of retries
            client: Pre-built chat client; skips creating an AzureOpenAI client
        """
        self.model_name = model_name
        self.temperature = temperature
        self.timeout = timeout
        self.max_retries = max_retries

        if client is not None:
            self.client = client
        else:
            self.client = AzureOpenAI(
                api_version=settings.azure_openai_api_version,
                azure_endpoint=settings.azure_openai_endpoint,
                api_key=api_key or settings.api_key,
                timeout=timeout,
                max_retries=max_retries,
            )

    def _format_cv_data(self, cv_data: CVData) -> str:
        """Format CV data for prompt."""
        return format_cv_data(cv_data)

    def _complete_json(self, prompt: str, agent_type: str) -> Dict[str, Any]:
        """
        Send one chat completion and parse the reply as a JSON object.

        Args:
            prompt: User message
            agent_type: Short name used in log lines

        Returns:
            Parsed JSON object

        Raises:
            LLMError: On API failure, empty reply or unparseable JSON
        """
        start_time = time.time()
        logger.info(f"[{agent_type}] Sending request to {self.model_name} ({len(prompt)} chars)")

        try:
            response = self.client.chat.completions.create(
                model=self.model_name,
                messages=[
                    {"role": "system", "content": self.system_prompt},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.temperature,
            )
        except openai.RateLimitError as e:
            logger.warning(f"[{agent_type}] Rate limited by Azure OpenAI: {e}")
            raise LLMError(f"AI service rate limit exceeded: {e}") from e
        except openai.OpenAIError as e:
            logger.error(f"[{agent_type}] Azure OpenAI request failed: {type(e).__name__}: {e}")
            raise LLMError(f"AI request failed: {e}") from e

        raw_text = ""
        if response and response.choices:
            message = response.choices[0].message
            if message and message.content:
                raw_text = message.content

        if not raw_text.strip():
            raise LLMError(
                f"Model returned empty response for {agent_type}. "
                f"Check Azure deployment '{self.model_name}' and API availability."
            )

        logger.info(f"[{agent_type}] Response received in {time.time() - start_time:.2f}s")

        try:
            return parse_json_safe(raw_text)
        except ValueError as e:
            logger.error(f"[{agent_type}] Could not parse model output as JSON: {e}")
            raise LLMError(f"Invalid JSON from model for {agent_type}") from e
