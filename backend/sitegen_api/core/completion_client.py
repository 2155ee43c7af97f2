"""OpenAI SDK wrapper"""

import logging
from typing import Any, Optional

from openai import AsyncOpenAI, OpenAIError

from sitegen_api.core.config import Settings
from sitegen_api.models.errors import CompletionError, ErrorCode

logger = logging.getLogger(__name__)


class CompletionClient:
    """
    Wrapper for the OpenAI chat completions API.

    Each call is one-shot: no retries and no caching. The SDK client is
    injected so callers (and tests) decide how it is built.
    """

    def __init__(self, client: Optional[Any]):
        self.client = client
        if client is None:
            logger.warning("OPENAI_API_KEY not set - completion calls will fail")

    @classmethod
    def from_settings(cls, settings: Settings) -> "CompletionClient":
        """Build a client with a bounded timeout and retries disabled."""
        if not settings.openai_api_key:
            return cls(None)
        sdk = AsyncOpenAI(
            api_key=settings.openai_api_key,
            timeout=settings.openai_timeout_seconds,
            max_retries=0,
        )
        return cls(sdk)

    async def complete(self, system_prompt: str, user_prompt: str, model: str) -> str:
        """
        Run one chat completion and return the first message's text.

        Args:
            system_prompt: The system message
            user_prompt: The user message
            model: OpenAI model to use

        Returns:
            Raw message content, not trimmed

        Raises:
            CompletionError: If the client is not configured, the call fails,
                or the response carries no content
        """
        if not system_prompt or not user_prompt:
            raise CompletionError("Both system and user prompts are required")

        if self.client is None:
            raise CompletionError(
                "OpenAI API key not configured",
                code=ErrorCode.CONFIGURATION_ERROR,
                hint="Set OPENAI_API_KEY in the environment or .env file.",
            )

        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ]

        try:
            logger.info(f"[OpenAI] Calling {model}")
            response = await self.client.chat.completions.create(model=model, messages=messages)
        except OpenAIError as e:
            logger.error(f"[OpenAI] {model} call failed: {e!r}")
            raise CompletionError(f"OpenAI API call failed: {type(e).__name__}", retryable=True) from e

        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            logger.error(f"[OpenAI] Malformed response from {model}: {e!r}")
            raise CompletionError("Malformed completion response") from e

        if content is None:
            logger.error(f"[OpenAI] {model} returned no message content")
            raise CompletionError("Completion returned no content")

        usage = getattr(response, "usage", None)
        tokens = getattr(usage, "total_tokens", "?")
        logger.info(f"[OpenAI] Response received ({tokens} tokens, {len(content)} chars)")
        return content

    async def aclose(self) -> None:
        """Close the underlying SDK client"""
        if self.client is not None and hasattr(self.client, "close"):
            await self.client.close()
