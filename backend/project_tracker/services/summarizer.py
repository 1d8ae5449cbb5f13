"""Text summarization backends for project analysis."""

import logging
import os
from typing import Protocol, runtime_checkable

import httpx

logger = logging.getLogger(__name__)

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.0-flash"


@runtime_checkable
class Summarizer(Protocol):
    async def summarize(self, prompt: str) -> str:
        ...


class GeminiSummarizer:
    """Summarizer backed by the Gemini generateContent REST endpoint.

    HTTP failures surface as httpx.HTTPStatusError; malformed payloads as
    ValueError. Nothing is retried.
    """

    def __init__(
        self,
        api_key: str,
        model: str | None = None,
        base_url: str = GEMINI_BASE_URL,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        # Read per instance, like the API key, so a changed GEMINI_MODEL needs no restart.
        self.model = model or os.environ.get("GEMINI_MODEL", DEFAULT_MODEL)
        self.base_url = base_url
        self.timeout = timeout
        self.transport = transport

    async def summarize(self, prompt: str) -> str:
        payload = {"contents": [{"parts": [{"text": prompt}]}]}
        headers = {"x-goog-api-key": self.api_key}

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.post(
                f"{self.base_url}/models/{self.model}:generateContent",
                json=payload,
                headers=headers,
            )
            response.raise_for_status()

        data = response.json()
        try:
            parts = data["candidates"][0]["content"]["parts"]
        except (KeyError, IndexError, TypeError) as exc:
            raise ValueError("Unexpected response from Gemini") from exc

        text = "".join(part.get("text", "") for part in parts)
        logger.info("Gemini summary generated (model=%s, chars=%d)", self.model, len(text))
        return text
