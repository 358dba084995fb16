"""
Prompt text for the two model calls of a turn.

Tool calls travel as plain text: the model is asked to write
"Using tool: <name> with params: <json>" and the reply is scanned for that
line (see my_assistant.runtime.tool_calls). The convention is brittle:
models drift from the format, and a malformed call reads as an ordinary
answer. Any plain completion endpoint can serve it; no function-calling API
is involved.
"""

from __future__ import annotations

import json
from typing import Any, Sequence

from my_assistant.runtime.tools.registry import ToolDefinition

TOOL_CALL_MARKER = "Using tool:"
TOOL_PARAMS_MARKER = "with params:"


def _tool_line(tool: ToolDefinition) -> str:
    return f"- {tool.name}: {tool.description}\n  Parameters: {json.dumps(tool.parameters, separators=(',', ':'))}"


def build_system_prompt(tools: Sequence[ToolDefinition]) -> str:
    tool_descriptions = "\n".join(_tool_line(t) for t in tools)
    return (
        "You are a helpful AI assistant with access to the following tools:\n\n"
        f"{tool_descriptions}\n\n"
        "When you need to use a tool, format your response as:\n"
        f'"{TOOL_CALL_MARKER} <tool_name> {TOOL_PARAMS_MARKER} <json_params>"\n\n'
        "For example:\n"
        f'"{TOOL_CALL_MARKER} echo {TOOL_PARAMS_MARKER} {{"message":"hello"}}"\n\n'
        "Always explain what you're doing before using a tool."
    )


def build_user_prompt(system_prompt: str, message: str) -> str:
    return f"{system_prompt}\n\nUser: {message}\nAssistant:"


def serialize_result(result: Any) -> str:
    return json.dumps(result, ensure_ascii=False, default=str)


def build_follow_up_prompt(tool_name: str, result: Any, message: str) -> str:
    # The second reply is returned as-is, so the model must not answer with another call.
    return (
        f"You just used the {tool_name} tool and got this result: {serialize_result(result)}\n\n"
        "Please provide a helpful, natural response to the user's question using this information.\n"
        "Do NOT mention using a tool or repeat the tool call format. Just answer naturally.\n\n"
        f"User's question: {message}"
    )
