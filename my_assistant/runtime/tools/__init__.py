from .registry import (
    CapabilityNotFoundError,
    DuplicateCapabilityError,
    ToolDefinition,
    ToolExecutor,
    ToolRegistry,
    ToolRegistryError,
)
from .builtin import builtin_tools, register_builtin_tools

__all__ = [
    "CapabilityNotFoundError",
    "DuplicateCapabilityError",
    "ToolDefinition",
    "ToolExecutor",
    "ToolRegistry",
    "ToolRegistryError",
    "builtin_tools",
    "register_builtin_tools",
]
