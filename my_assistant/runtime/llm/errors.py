"""LLM transport error hierarchy.

The executor never catches these; they reach whoever called process_message.
"""

from __future__ import annotations

from typing import Optional


class LLMError(RuntimeError):
    """Base for all model transport errors."""


class LLMConfigError(LLMError):
    """Missing or invalid provider configuration (no API key, unknown provider)."""


class LLMTransportError(LLMError):
    """The request could not be completed."""


class LLMHTTPError(LLMTransportError):
    """Non-success HTTP status.

    Attributes:
        status_code: HTTP status returned by the endpoint.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class LLMResponseError(LLMTransportError):
    """Malformed body or an error reported inside a 200 response."""
