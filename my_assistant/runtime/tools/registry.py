from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional


ToolExecutor = Callable[[Dict[str, Any]], Awaitable[Any]]


class ToolRegistryError(RuntimeError):
    pass


class DuplicateCapabilityError(ToolRegistryError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Tool already registered: {name}")


class CapabilityNotFoundError(ToolRegistryError, LookupError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Tool not found: {name}")


@dataclass(frozen=True)
class ToolDefinition:
    """
    name: dispatch key the model writes after "Using tool:" (hyphens allowed)
    parameters: JSON schema, shown to the model but never enforced
    """

    name: str
    description: str
    parameters: Dict[str, Any]  # JSON schema
    executor: ToolExecutor

    def describe(self) -> str:
        return f"{self.name}: {self.description}\nParameters: {json.dumps(self.parameters, indent=2)}"


class ToolRegistry:
    def __init__(self, tools: Optional[Iterable[ToolDefinition]] = None):
        self._tools: Dict[str, ToolDefinition] = {}
        for t in tools or []:
            self.register(t)

    def register(self, tool: ToolDefinition) -> None:
        if tool.name in self._tools:
            raise DuplicateCapabilityError(tool.name)
        self._tools[tool.name] = tool

    def get(self, name: str) -> Optional[ToolDefinition]:
        return self._tools.get(name)

    def has(self, name: str) -> bool:
        return name in self._tools

    def list(self) -> List[ToolDefinition]:
        return list(self._tools.values())

    def list_names(self) -> List[str]:
        return list(self._tools.keys())

    def count(self) -> int:
        return len(self._tools)

    async def invoke(self, name: str, arguments: Dict[str, Any]) -> Any:
        """
        Run a tool by name. Whatever the executor returns or raises is passed through as-is.
        """
        tool = self._tools.get(name)
        if tool is None:
            raise CapabilityNotFoundError(name)
        return await tool.executor(arguments)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)
