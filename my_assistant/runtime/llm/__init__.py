from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import LLMConfigError, LLMError, LLMHTTPError, LLMResponseError, LLMTransportError
from .provider import LLMProvider, LLMResponse
from .glm_provider import GLMProvider
from .openai_provider import OpenAIChatCompletionsProvider

if TYPE_CHECKING:
    from my_assistant.config import AgentConfig


def build_provider(agent: "AgentConfig") -> LLMProvider:
    if agent.provider == "glm":
        return GLMProvider(api_key=agent.api_key, base_url=agent.base_url or "", model=agent.model)
    if agent.provider == "openai":
        return OpenAIChatCompletionsProvider(model=agent.model, api_key=agent.api_key or None, base_url=agent.base_url)
    raise LLMConfigError(f"Unsupported provider: {agent.provider}")


__all__ = [
    "GLMProvider",
    "LLMConfigError",
    "LLMError",
    "LLMHTTPError",
    "LLMProvider",
    "LLMResponse",
    "LLMResponseError",
    "LLMTransportError",
    "OpenAIChatCompletionsProvider",
    "build_provider",
]
