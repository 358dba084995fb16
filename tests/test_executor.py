"""Tests for AgentExecutor.process_message.

Tests cover:
- Pass-through when the model does not ask for a tool
- Tool execution followed by the summarizing second call
- Unknown tools and failing tools reported as text
- Transport errors propagated to the caller
"""

from __future__ import annotations

import json

import pytest

from my_assistant.runtime.executor import AgentExecutor
from my_assistant.runtime.llm import LLMHTTPError, LLMResponse
from my_assistant.runtime.tools import ToolDefinition, ToolRegistry, register_builtin_tools


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class ScriptedLLM:
    """Returns canned replies in order and records every prompt it receives."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.prompts: list[str] = []

    async def send_message(self, message: str) -> LLMResponse:
        self.prompts.append(message)
        reply = self.replies.pop(0)
        if isinstance(reply, BaseException):
            raise reply
        return LLMResponse(content=reply)


def _echo_registry() -> ToolRegistry:
    async def _echo(args):
        return f"Echo: {args.get('message')}"

    return ToolRegistry([ToolDefinition("echo", "Echoes back", {"type": "object"}, _echo)])


def _broken_registry(exc: Exception) -> ToolRegistry:
    async def _broken(args):
        raise exc

    return ToolRegistry([ToolDefinition("broken", "Always fails", {"type": "object"}, _broken)])


# ---------------------------------------------------------------------------
# No tool call
# ---------------------------------------------------------------------------

class TestPassThrough:
    @pytest.mark.asyncio
    async def test_plain_reply_returned_verbatim_after_one_call(self):
        llm = ScriptedLLM("Hello there!")
        agent = AgentExecutor(llm=llm, tools=_echo_registry())

        assert await agent.process_message("hi") == "Hello there!"
        assert len(llm.prompts) == 1

    @pytest.mark.asyncio
    async def test_first_prompt_contains_tools_and_message(self):
        llm = ScriptedLLM("ok")
        tools = ToolRegistry()
        register_builtin_tools(tools)
        agent = AgentExecutor(llm=llm, tools=tools)

        await agent.process_message("what time is it?")

        prompt = llm.prompts[0]
        for name in ("echo", "get-time", "file-list"):
            assert f"- {name}:" in prompt
        assert prompt.endswith("User: what time is it?\nAssistant:")

    @pytest.mark.asyncio
    async def test_malformed_call_is_treated_as_answer(self):
        reply = "Using tool: echo with params: {not json}"
        llm = ScriptedLLM(reply)
        agent = AgentExecutor(llm=llm, tools=_echo_registry())

        assert await agent.process_message("echo hi") == reply
        assert len(llm.prompts) == 1


# ---------------------------------------------------------------------------
# Tool execution
# ---------------------------------------------------------------------------

class TestToolExecution:
    @pytest.mark.asyncio
    async def test_echo_scenario(self):
        llm = ScriptedLLM(
            'Using tool: echo with params: {"message":"hi"}',
            '"hi" echoed successfully',
        )
        agent = AgentExecutor(llm=llm, tools=_echo_registry())

        assert await agent.process_message("echo hi") == '"hi" echoed successfully'
        assert len(llm.prompts) == 2
        assert json.dumps("Echo: hi") in llm.prompts[1]
        assert "User's question: echo hi" in llm.prompts[1]

    @pytest.mark.asyncio
    async def test_second_prompt_contains_serialized_result(self):
        result = {"directory": ".", "files": ["a.py", "b.py"], "count": 2}

        async def _list(args):
            return result

        tools = ToolRegistry([ToolDefinition("file-list", "Lists files", {}, _list)])
        llm = ScriptedLLM("Using tool: file-list with params: {}", "Two files.")
        agent = AgentExecutor(llm=llm, tools=tools)

        assert await agent.process_message("list files") == "Two files."
        assert json.dumps(result) in llm.prompts[1]

    @pytest.mark.asyncio
    async def test_arguments_reach_the_tool(self):
        seen = []

        async def _record(args):
            seen.append(args)
            return "done"

        tools = ToolRegistry([ToolDefinition("get-time", "Time", {}, _record)])
        llm = ScriptedLLM('Using tool: get-time with params: {"tz": "UTC+8"}', "It is noon.")
        await AgentExecutor(llm=llm, tools=tools).process_message("time?")

        assert seen == [{"tz": "UTC+8"}]

    @pytest.mark.asyncio
    async def test_second_reply_is_not_reparsed(self):
        calls = []

        async def _echo(args):
            calls.append(args)
            return "Echo"

        tools = ToolRegistry([ToolDefinition("echo", "d", {}, _echo)])
        again = 'Using tool: echo with params: {"message":"again"}'
        llm = ScriptedLLM('Using tool: echo with params: {"message":"hi"}', again)

        assert await AgentExecutor(llm=llm, tools=tools).process_message("echo hi") == again
        assert len(calls) == 1
        assert len(llm.prompts) == 2


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------

class TestFailures:
    @pytest.mark.asyncio
    async def test_unknown_tool_reported_without_second_call(self):
        llm = ScriptedLLM("Using tool: weather with params: {}")
        agent = AgentExecutor(llm=llm, tools=_echo_registry())

        out = await agent.process_message("weather?")

        assert "weather" in out
        assert out == "Error executing tool weather: Tool not found: weather"
        assert len(llm.prompts) == 1

    @pytest.mark.asyncio
    async def test_broken_tool_scenario(self):
        llm = ScriptedLLM("Using tool: broken with params: {}")
        agent = AgentExecutor(llm=llm, tools=_broken_registry(RuntimeError("disk full")))

        out = await agent.process_message("do it")

        assert "broken" in out
        assert "disk full" in out
        assert len(llm.prompts) == 1

    @pytest.mark.asyncio
    async def test_error_without_message_uses_exception_name(self):
        llm = ScriptedLLM("Using tool: broken with params: {}")
        agent = AgentExecutor(llm=llm, tools=_broken_registry(ValueError()))

        assert await agent.process_message("x") == "Error executing tool broken: ValueError"

    @pytest.mark.asyncio
    async def test_unserializable_result_reported_without_second_call(self):
        async def _loop(args):
            result = {}
            result["self"] = result
            return result

        llm = ScriptedLLM("Using tool: loop with params: {}")
        tools = ToolRegistry([ToolDefinition("loop", "Returns a circular dict", {"type": "object"}, _loop)])
        agent = AgentExecutor(llm=llm, tools=tools)

        out = await agent.process_message("go")

        assert out.startswith("Error executing tool loop: ")
        assert "Circular reference" in out
        assert len(llm.prompts) == 1

    @pytest.mark.asyncio
    async def test_first_transport_error_propagates(self):
        err = LLMHTTPError("GLM API error: 500 Internal Server Error", status_code=500)
        agent = AgentExecutor(llm=ScriptedLLM(err), tools=_echo_registry())

        with pytest.raises(LLMHTTPError) as exc_info:
            await agent.process_message("hi")
        assert exc_info.value is err

    @pytest.mark.asyncio
    async def test_follow_up_transport_error_propagates(self):
        err = LLMHTTPError("GLM API error: 503 Service Unavailable", status_code=503)
        llm = ScriptedLLM('Using tool: echo with params: {"message":"hi"}', err)
        agent = AgentExecutor(llm=llm, tools=_echo_registry())

        with pytest.raises(LLMHTTPError):
            await agent.process_message("echo hi")
        assert len(llm.prompts) == 2


# ---------------------------------------------------------------------------
# Introspection
# ---------------------------------------------------------------------------

class TestIntrospection:
    def test_list_tools(self):
        tools = ToolRegistry()
        register_builtin_tools(tools)
        agent = AgentExecutor(llm=ScriptedLLM(), tools=tools)
        assert agent.list_tools() == ["echo", "get-time", "file-list"]

    def test_get_tool_description(self):
        agent = AgentExecutor(llm=ScriptedLLM(), tools=_echo_registry())
        assert agent.get_tool_description("echo").startswith("echo: Echoes back\nParameters: ")
        assert agent.get_tool_description("nope") == "Tool not found: nope"
