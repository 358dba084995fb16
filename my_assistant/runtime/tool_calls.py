from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# Names are matched with hyphens included (get-time, file-list). The JSON runs to
# the last "}" on the marker's line.
TOOL_CALL_PATTERN = re.compile(r"Using tool:\s*([\w-]+)\s+with params:\s*(\{.*\})", re.IGNORECASE)


@dataclass(frozen=True)
class ParsedToolCall:
    name: str
    arguments: Dict[str, Any] = field(default_factory=dict)


def parse_tool_call(text: str) -> Optional[ParsedToolCall]:
    """
    Find the first "Using tool: <name> with params: {...}" in a model reply.

    Returns None when there is no marker or when its JSON does not decode to an
    object; a broken call is treated as a plain answer.
    """
    match = TOOL_CALL_PATTERN.search(text or "")
    if not match:
        return None
    name, raw_args = match.group(1), match.group(2)
    try:
        args = json.loads(raw_args)
    except json.JSONDecodeError:
        logger.debug("Ignoring tool call to %s with unparseable params: %s", name, raw_args)
        return None
    if not isinstance(args, dict):
        return None
    return ParsedToolCall(name=name, arguments=args)
