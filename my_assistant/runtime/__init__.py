from .executor import AgentExecutor
from .tool_calls import ParsedToolCall, parse_tool_call

__all__ = ["AgentExecutor", "ParsedToolCall", "parse_tool_call"]
