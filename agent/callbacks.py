# =============================================================================
# agent/callbacks.py  -  Halt Pattern Support for the ADK Agent
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Some tool results must reach the user EXACTLY as the tool produced them
#   (the itinerary is a structured document, not material for a paragraph).
#   The tool marks such results with {"halt": true, "content": {...}}.
#
#   Google ADK has a switch for this: if a tool sets
#   tool_context.actions.skip_summarization = True, the agent ends the turn
#   with the tool's response instead of sending it back to the LLM to be
#   paraphrased.
#
#   MCP tools run in another process, so they can't touch tool_context.
#   Instead the agent registers skip_summarization_on_halt() as its
#   after_tool_callback: ADK calls it after EVERY tool, it looks for the
#   halt marker, and flips the switch when it finds one.
#
# WHAT AN MCP RESPONSE LOOKS LIKE HERE:
#   ADK hands the callback the dumped MCP CallToolResult, e.g.
#     {"content": [{"type": "text", "text": "{\"halt\": true, ...}"}],
#      "structuredContent": {"halt": true, ...},
#      "isError": false}
#   unwrap_tool_response() digs the tool's own dict out of that.
#
# This module imports nothing from ADK at runtime, so it can be unit-tested
# with a stand-in tool_context.
# =============================================================================

import json
import logging
from typing import Any, Optional

from core.models import HALT_CONTENT_KEY, HALT_KEY

logger = logging.getLogger(__name__)


def unwrap_tool_response(response: Any) -> dict:
    """Extract the tool's own result dict from whatever ADK passes around.

    Handles, in order:
      1. An MCP CallToolResult dump with "structuredContent"
      2. An MCP CallToolResult dump whose first text block is JSON
      3. A plain dict (a local function tool's return value)

    Anything else becomes an empty dict.
    """
    if not isinstance(response, dict):
        return {}

    structured = response.get("structuredContent")
    if isinstance(structured, dict):
        return structured

    blocks = response.get("content")
    if isinstance(blocks, list):
        for block in blocks:
            if isinstance(block, dict) and block.get("type") == "text":
                try:
                    parsed = json.loads(block.get("text", ""))
                except json.JSONDecodeError:
                    return {}
                return parsed if isinstance(parsed, dict) else {}
        return {}

    return response


def is_halt(payload: dict) -> bool:
    return bool(payload.get(HALT_KEY)) and HALT_CONTENT_KEY in payload


def halt_content(response: Any) -> Optional[dict]:
    """The verbatim payload of a halt response, or None if it isn't one."""
    payload = unwrap_tool_response(response)
    if is_halt(payload):
        return payload[HALT_CONTENT_KEY]
    return None


def skip_summarization_on_halt(tool, args: dict, tool_context, tool_response) -> Optional[dict]:
    """ADK after_tool_callback: end the turn on a halt result.

    Returning None tells ADK to keep the tool's response unchanged.
    """
    if halt_content(tool_response) is not None:
        logger.info("Tool %s returned a halt result; skipping summarization", getattr(tool, "name", tool))
        tool_context.actions.skip_summarization = True
    return None
