"""
Model client boundary.

Flows talk to the hosted language model through a single operation,
``ModelClient.generate``. The Gemini implementation below is the only place
that knows about the google-genai SDK; tests substitute a fake client.

Architecture:
- Model: Gemini 2.5 Flash (configurable via GEMINI_MODEL)
- API: Google Gen AI Python SDK (google-genai), async surface (client.aio)
- Output: JSON constrained by response_schema (the flow's pydantic output model)
- Retries: none; every failure to complete the call is UpstreamUnavailableError
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol, Type, Union

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types
from pydantic import BaseModel

from credit_assist.config import settings
from credit_assist.flows.errors import UpstreamUnavailableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextPart:
    """Plain text prompt content."""
    text: str


@dataclass(frozen=True)
class MediaPart:
    """Inline binary media (e.g. a bill photo) sent alongside the prompt text."""
    mime_type: str
    data: bytes

    def __repr__(self) -> str:
        # Never render image bytes into logs or tracebacks
        return f"MediaPart(mime_type={self.mime_type!r}, size={len(self.data)})"


PromptPart = Union[TextPart, MediaPart]


class ModelClient(Protocol):
    """The single call contract every flow depends on."""

    async def generate(
        self,
        parts: List[PromptPart],
        *,
        system_instruction: str,
        response_schema: Type[BaseModel],
        temperature: float,
    ) -> Optional[str]:
        """
        Send a rendered prompt and return the raw response text.

        Returns None when the model produced no candidate at all.

        Raises:
            UpstreamUnavailableError: the call could not complete.
        """
        ...


class GeminiModelClient:
    """ModelClient backed by Google Gemini structured output."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.GOOGLE_API_KEY
        self.model = model or settings.GEMINI_MODEL
        self.timeout_seconds = timeout_seconds or settings.MODEL_TIMEOUT_SECONDS
        self._client: Optional[genai.Client] = None

    def _get_client(self) -> genai.Client:
        """Lazy initialization of the Gemini client."""
        if self._client is not None:
            return self._client

        if not self.api_key:
            logger.error("GOOGLE_API_KEY not configured")
            raise UpstreamUnavailableError(
                "The model service is not configured. Please set GOOGLE_API_KEY."
            )

        self._client = genai.Client(api_key=self.api_key)
        logger.info(f"Gemini client initialized for model={self.model}")
        return self._client

    @staticmethod
    def _to_gemini_part(part: PromptPart) -> types.Part:
        if isinstance(part, MediaPart):
            return types.Part(
                inline_data=types.Blob(mime_type=part.mime_type, data=part.data)
            )
        return types.Part(text=part.text)

    async def generate(
        self,
        parts: List[PromptPart],
        *,
        system_instruction: str,
        response_schema: Type[BaseModel],
        temperature: float,
    ) -> Optional[str]:
        client = self._get_client()

        config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            temperature=temperature,
            response_mime_type="application/json",
            response_schema=response_schema,
        )
        contents = [self._to_gemini_part(part) for part in parts]

        logger.debug(f"Sending request to Gemini with {len(contents)} parts")
        try:
            response = await asyncio.wait_for(
                client.aio.models.generate_content(
                    model=self.model,
                    contents=contents,  # type: ignore
                    config=config,
                ),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            logger.error(f"Gemini call timed out after {self.timeout_seconds}s")
            raise UpstreamUnavailableError("The model service did not respond in time.") from e
        except genai_errors.APIError as e:
            logger.error(f"Gemini API error: code={e.code} status={e.status}")
            raise UpstreamUnavailableError(f"The model service returned an error ({e.code}).") from e
        except httpx.HTTPError as e:
            logger.error(f"Network error calling Gemini: {type(e).__name__}")
            raise UpstreamUnavailableError("The model service could not be reached.") from e

        if not response.candidates or not response.candidates[0].content:
            logger.warning("Gemini returned no candidates")
            return None

        return response.text
