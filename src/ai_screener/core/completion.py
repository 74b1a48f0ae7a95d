"""Structured completion clients.

The rest of the application only needs one operation: given a prompt and a
response schema, asynchronously get back JSON text or an error.
`GeminiCompletionClient` implements it on top of the `google-genai` SDK.
"""

from typing import Any, Protocol

from google import genai
from google.genai import types
from loguru import logger

from ai_screener.config.settings import DEFAULT_MODEL
from ai_screener.core.exceptions import ServiceError


class CompletionClient(Protocol):
    """Anything that can turn a prompt plus a JSON schema into JSON text."""

    async def generate_json(self, prompt: str, schema: dict[str, Any]) -> str: ...


class GeminiCompletionClient:
    """Completion client backed by the Gemini API.

    A fresh SDK client is created for every request, each page run drives its
    fetch on its own event loop. A missing API key is therefore reported when a
    request is made, not at startup.
    """

    def __init__(self, api_key: str | None, model: str = DEFAULT_MODEL) -> None:
        self.api_key = api_key
        self.model = model

    def _new_client(self) -> genai.Client:
        if not self.api_key:
            raise ServiceError("Missing API key. Set API_KEY or GEMINI_API_KEY.")
        return genai.Client(api_key=self.api_key)

    async def generate_json(self, prompt: str, schema: dict[str, Any]) -> str:
        """Send the prompt and return the raw JSON text of the reply.

        Raises:
            ServiceError: If the request fails or the reply carries no text
        """
        client = self._new_client()
        logger.debug(f"Requesting structured completion from {self.model}")
        try:
            response = await client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    response_schema=schema,
                ),
            )
        except Exception as e:
            raise ServiceError(f"Gemini request failed: {e}") from e

        text = response.text
        if not text:
            raise ServiceError("Gemini returned an empty response")
        return text
