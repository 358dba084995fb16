from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class LLMResponse:
    content: str


class LLMProvider(Protocol):
    async def send_message(self, message: str) -> LLMResponse:
        ...
