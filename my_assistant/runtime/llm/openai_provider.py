from __future__ import annotations

import os
from typing import Optional

from my_assistant.runtime.llm.errors import LLMConfigError, LLMResponseError, LLMTransportError
from my_assistant.runtime.llm.provider import LLMResponse


class OpenAIChatCompletionsProvider:
    """
    Single-shot chat provider using OpenAI's Chat Completions API.

    Also works with any OpenAI-compatible server through base_url.
    """

    def __init__(self, *, model: str, api_key: Optional[str] = None, base_url: Optional[str] = None):
        self.model = model
        self.api_key = api_key or os.getenv("OPENAI_API_KEY", "")

        if not self.api_key:
            raise LLMConfigError("OPENAI_API_KEY is not set")

        # Import lazily so tool-only paths (tests, GLM) don't require openai installed.
        from openai import AsyncOpenAI  # type: ignore

        self._client = AsyncOpenAI(api_key=self.api_key, base_url=base_url or None)

    async def aclose(self) -> None:
        await self._client.close()

    async def send_message(self, message: str) -> LLMResponse:
        import openai  # type: ignore

        try:
            resp = await self._client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": message}],
            )
        except openai.OpenAIError as e:
            raise LLMTransportError(f"OpenAI API error: {e}") from e

        if not resp.choices:
            raise LLMResponseError("OpenAI API returned no choices")
        return LLMResponse(content=resp.choices[0].message.content or "")
