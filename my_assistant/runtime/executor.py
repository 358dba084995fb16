from __future__ import annotations

import logging
from typing import List

from my_assistant.runtime.llm.provider import LLMProvider
from my_assistant.runtime.prompts.system_prompt import (
    build_follow_up_prompt,
    build_system_prompt,
    build_user_prompt,
)
from my_assistant.runtime.tool_calls import parse_tool_call
from my_assistant.runtime.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


class AgentExecutor:
    """
    One user message in, one answer out.

    The model is asked once with the tool list. If its reply contains a tool call,
    the tool runs and the model is asked a second time to answer with the result.
    A reply to that second prompt is returned as-is, even if it asks for another
    tool, so a turn makes at most one tool call and two model calls.

    Tool failures come back as text. Errors from the model transport are raised.
    No state is kept between calls.
    """

    def __init__(self, *, llm: LLMProvider, tools: ToolRegistry):
        self.llm = llm
        self.tools = tools

    async def process_message(self, message: str) -> str:
        prompt = build_user_prompt(build_system_prompt(self.tools.list()), message)
        response = await self.llm.send_message(prompt)

        call = parse_tool_call(response.content)
        if call is None:
            return response.content

        logger.info("Tool call: %s %s", call.name, call.arguments)
        try:
            result = await self.tools.invoke(call.name, call.arguments)
            # a result json cannot encode (e.g. circular) counts as a tool failure
            follow_up_prompt = build_follow_up_prompt(call.name, result, message)
        except Exception as e:
            logger.warning("Tool %s failed: %s", call.name, e)
            return f"Error executing tool {call.name}: {str(e) or type(e).__name__}"

        follow_up = await self.llm.send_message(follow_up_prompt)
        return follow_up.content

    def list_tools(self) -> List[str]:
        return self.tools.list_names()

    def get_tool_description(self, name: str) -> str:
        tool = self.tools.get(name)
        if tool is None:
            return f"Tool not found: {name}"
        return tool.describe()
