from __future__ import annotations

import json
import logging
from typing import Any, Optional

import httpx

from my_assistant.runtime.llm.errors import LLMConfigError, LLMHTTPError, LLMResponseError, LLMTransportError
from my_assistant.runtime.llm.provider import LLMResponse

logger = logging.getLogger(__name__)


class GLMProvider:
    """
    Client for GLM (Zhipu / ChatGLM) chat-completions endpoints.

    The wire format is OpenAI-compatible. Some gateways also answer HTTP 200
    with {"status": "<code>", "msg": "...", "body": null} to report failures,
    which is treated as an error unless status is "200".

    base_url is the full endpoint, e.g. https://apis.iflow.cn/v1/chat/completions.
    """

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str,
        model: str,
        timeout_s: float = 60.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        if not api_key:
            raise LLMConfigError("API key is required")
        if not base_url:
            raise LLMConfigError("Base URL is required")

        self.api_key = api_key
        self.base_url = base_url
        self.model = model
        self._client = client or httpx.AsyncClient(timeout=float(timeout_s))

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "GLMProvider":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def send_message(self, message: str) -> LLMResponse:
        body = {
            "model": self.model,
            "messages": [{"role": "user", "content": message}],
        }
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

        try:
            resp = await self._client.post(self.base_url, headers=headers, json=body)
        except httpx.HTTPError as e:
            raise LLMTransportError(f"GLM API request failed: {e}") from e

        if not resp.is_success:
            raise LLMHTTPError(f"GLM API error: {resp.status_code} {resp.reason_phrase}", status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError as e:
            raise LLMResponseError(f"GLM API returned invalid JSON: {resp.text[:300]}") from e

        return LLMResponse(content=self._extract_content(data))

    def _extract_content(self, data: Any) -> str:
        if not isinstance(data, dict):
            raise LLMResponseError(f"Unexpected GLM API response format: {json.dumps(data)[:300]}")

        if "status" in data and str(data["status"]) != "200":
            msg = data.get("msg") or "Unknown error"
            raise LLMResponseError(f"GLM API error: {msg} (status: {data['status']})")

        choices = data.get("choices")
        first = choices[0] if isinstance(choices, list) and choices else None
        message = first.get("message") if isinstance(first, dict) else None
        content = message.get("content") if isinstance(message, dict) else None
        if isinstance(content, str):
            logger.debug("GLM response: %d chars", len(content))
            return content

        raise LLMResponseError(f"Unexpected GLM API response format: {json.dumps(data)[:300]}")
