"""
Structured Content Clients

The generator depends on the GenerativeContentClient capability only, so
tests can substitute a double that returns canned, malformed, or failing
responses. GeminiContentClient is the production implementation on the
Google Gen AI SDK.
"""

from abc import ABC, abstractmethod
from typing import Optional

from google import genai
from google.genai import types

from cardio_advisor.agents.recommendation.prompts import RECOMMENDATION_SYSTEM_PROMPT
from cardio_advisor.config import settings
from cardio_advisor.utils.logging import get_logger

logger = get_logger(__name__)


class GenerativeContentClient(ABC):
    """Single-call capability: prompt + schema in, raw response text out."""

    @abstractmethod
    async def generate_structured_content(
        self,
        prompt: str,
        response_schema: types.Schema,
    ) -> str:
        raise NotImplementedError


class GeminiContentClient(GenerativeContentClient):
    """
    Gemini client requesting JSON output that conforms to a response schema.

    Construction never fails: without an API key a warning is logged and
    every call raises ValueError, which the generator turns into the
    fallback recommendation set.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        system_instruction: str = RECOMMENDATION_SYSTEM_PROMPT,
    ):
        api_key = settings.GOOGLE_API_KEY if api_key is None else api_key
        self.model = model or settings.GEMINI_MODEL
        self.system_instruction = system_instruction
        self._client: Optional[genai.Client] = None

        if not api_key:
            logger.warning(
                "GOOGLE_API_KEY not configured. Gemini API calls will fail and "
                "fallback recommendations will be returned. "
                "Please set GOOGLE_API_KEY in your .env file."
            )
            return

        self._client = genai.Client(api_key=api_key)
        logger.info(f"Gemini client initialized for model={self.model}")

    async def generate_structured_content(
        self,
        prompt: str,
        response_schema: types.Schema,
    ) -> str:
        """
        Send one request to Gemini and return the raw response text.

        No retries and no timeout override: transport defaults apply.

        Raises:
            ValueError: If GOOGLE_API_KEY is not configured.
            Any SDK or transport error, unchanged.
        """
        if self._client is None:
            raise ValueError(
                "GOOGLE_API_KEY is not configured. "
                "Please set it in your .env file to generate recommendations."
            )

        config = types.GenerateContentConfig(
            system_instruction=self.system_instruction,
            response_mime_type="application/json",
            response_schema=response_schema,
        )

        logger.debug("Sending single-shot request to Gemini with response schema")
        response = await self._client.aio.models.generate_content(
            model=self.model,
            contents=prompt,
            config=config,
        )

        return response.text or ""
