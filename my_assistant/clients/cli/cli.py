#!/usr/bin/env python3
"""
My Assistant CLI - chat with the agent from a terminal.

Usage:
    my-assistant [--config PATH] [--debug]
"""
import argparse
import asyncio
import logging
import sys
import time
from pathlib import Path
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from my_assistant.config import Config, ConfigError, load_config
from my_assistant.runtime.executor import AgentExecutor
from my_assistant.runtime.llm import LLMConfigError, LLMProvider, build_provider
from my_assistant.runtime.tools import ToolRegistry, ToolRegistryError, register_builtin_tools

from . import ui

logger = logging.getLogger(__name__)

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

EXIT_COMMANDS = ("exit", "quit")
TOOLS_COMMAND = "tools"


def setup_logging(level: str, debug: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if debug else LOG_LEVELS.get(level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def build_agent(config: Config, llm: Optional[LLMProvider] = None) -> AgentExecutor:
    """Wire the configured provider and the built-in tools into an executor."""
    tools = ToolRegistry()
    register_builtin_tools(tools)
    return AgentExecutor(llm=llm or build_provider(config.agent), tools=tools)


class AssistantCLI:
    """Interactive chat loop."""

    def __init__(self, agent: AgentExecutor, prompt_session: Optional[PromptSession] = None):
        self.agent = agent
        self.prompt_session = prompt_session or PromptSession(
            history=FileHistory(str(Path.home() / ".my_assistant_history")),
            multiline=False,
            enable_history_search=True
        )

    def _tool_descriptions(self):
        return [self.agent.get_tool_description(name) for name in self.agent.list_tools()]

    async def handle_input(self, user_input: str) -> bool:
        """Handle one line of input. Returns False when the user asked to leave."""
        message = user_input.strip()

        if message.lower() in EXIT_COMMANDS:
            ui.print_goodbye()
            return False

        if message.lower() == TOOLS_COMMAND:
            ui.print_tool_details(self._tool_descriptions())
            return True

        if not message:
            return True

        start = time.monotonic()
        try:
            response = await self.agent.process_message(message)
        except Exception as e:
            # Transport failures end the turn, not the session.
            logger.debug("process_message failed", exc_info=True)
            ui.print_error(str(e) or type(e).__name__)
            return True

        ui.print_assistant_message(response, int((time.monotonic() - start) * 1000))
        return True

    async def run(self):
        ui.print_tool_summary(self._tool_descriptions())
        ui.print_hints()

        try:
            while True:
                try:
                    user_input = await self.prompt_session.prompt_async("You: ")
                except (EOFError, KeyboardInterrupt):
                    ui.print_goodbye()
                    break
                if not await self.handle_input(user_input):
                    break
        finally:
            aclose = getattr(self.agent.llm, "aclose", None)
            if aclose is not None:
                await aclose()


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="My Assistant CLI")
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.json (default: ~/.my-assistant/config.json)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        setup_logging(config.log_level, debug=args.debug)
        ui.print_header(config.agent.provider, config.agent.model)
        agent = build_agent(config)
    except (ConfigError, LLMConfigError, ToolRegistryError) as e:
        ui.print_error(str(e))
        sys.exit(1)

    asyncio.run(AssistantCLI(agent).run())


if __name__ == "__main__":
    main()
