"""
Built-in tools registered by the console:

- echo: returns what it is sent (handy for checking the tool round-trip)
- get-time: current date and time in Beijing time (UTC+8)
- file-list: files under a directory, optionally filtered by a glob
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List

from my_assistant.runtime.tools.filesystem import list_files
from my_assistant.runtime.tools.registry import ToolDefinition, ToolRegistry

BEIJING_OFFSET = timedelta(hours=8)


def beijing_time(now: datetime | None = None) -> str:
    now = now or datetime.now(timezone.utc)
    local = now.astimezone(timezone.utc) + BEIJING_OFFSET
    return local.replace(tzinfo=None).isoformat(timespec="milliseconds") + " (Beijing Time, UTC+8)"


def builtin_tools() -> List[ToolDefinition]:
    async def _echo(args: Dict[str, Any]) -> Any:
        return f"Echo: {args.get('message')}"

    async def _get_time(args: Dict[str, Any]) -> Any:
        return beijing_time()

    async def _file_list(args: Dict[str, Any]) -> Any:
        directory = args.get("directory")
        pattern = args.get("pattern")
        return await list_files(
            str(directory) if directory else None,
            pattern=str(pattern) if pattern else None,
            # only an explicit false disables recursion
            recursive=args.get("recursive") is not False,
        )

    return [
        ToolDefinition(
            name="echo",
            description="Echoes back the message you send. Useful for testing.",
            parameters={
                "type": "object",
                "properties": {"message": {"type": "string", "description": "The message to echo back"}},
                "required": ["message"],
            },
            executor=_echo,
        ),
        ToolDefinition(
            name="get-time",
            description="Returns the current date and time in Beijing timezone (UTC+8)",
            parameters={"type": "object", "properties": {}, "required": []},
            executor=_get_time,
        ),
        ToolDefinition(
            name="file-list",
            description=(
                "Lists files in a directory. Recursively searches subdirectories by default. "
                "Optionally filter by pattern."
            ),
            parameters={
                "type": "object",
                "properties": {
                    "directory": {"type": "string", "description": "Directory path (defaults to current directory)"},
                    "pattern": {
                        "type": "string",
                        "description": "Optional glob pattern to filter files (e.g., '*.py', '**/*.md')",
                    },
                    "recursive": {
                        "type": "boolean",
                        "description": "Search recursively in subdirectories (default: true)",
                    },
                },
                "required": [],
            },
            executor=_file_list,
        ),
    ]


def register_builtin_tools(registry: ToolRegistry) -> None:
    for tool in builtin_tools():
        registry.register(tool)
