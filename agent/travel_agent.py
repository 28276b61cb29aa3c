# =============================================================================
# agent/travel_agent.py  -  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the ADK agent that sits between the user and the three travel
#   tools.  The agent itself has no travel logic.  It has:
#     - A model (any LiteLLM model string, GPT-4o via OpenRouter by default)
#     - A system prompt (agent/prompt.py)
#     - An MCP toolset (tools/mcp_server.py, launched as a subprocess)
#     - An after_tool_callback that honours the halt marker
#
#   ┌────────────────────────────────────────────────────────────────┐
#   │                       Google ADK Agent                         │
#   │  system prompt ─▶ LLM (LiteLlm) ─▶ MCPToolset ─▶ callback      │
#   └────────────────────────────────────────────────────────────────┘
#                                        │ stdio
#                                        ▼
#                            ┌─────────────────────────┐
#                            │ FastMCP server          │
#                            │  • get_current_weather  │
#                            │  • search_destinations  │
#                            │  • build_itinerary      │
#                            └─────────────────────────┘
#                                        │
#                                        ▼
#                               core/ (pure Python)
#
# CONFIGURATION (environment, usually via .env):
#   OPENROUTER_API_KEY   read by LiteLLM for "openrouter/..." models
#   TRAVEL_AGENT_MODEL   LiteLLM model string (default below)
# =============================================================================

import os
import sys

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool.mcp_session_manager import StdioConnectionParams
from google.adk.tools.mcp_tool.mcp_toolset import MCPToolset
from mcp import StdioServerParameters

from agent.callbacks import skip_summarization_on_halt
from agent.prompt import get_travel_assistant_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"
AGENT_NAME = "skytraveler_assistant"


def get_model_name() -> str:
    return os.environ.get("TRAVEL_AGENT_MODEL", DEFAULT_MODEL)


def create_toolset() -> MCPToolset:
    """Connect to the FastMCP tool server over stdio.

    ADK starts `python -m tools.mcp_server` as a subprocess from the project
    root, with the same interpreter (and so the same virtualenv) as the
    agent.  The server logs to stderr; stdout is the MCP channel.
    """
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

    return MCPToolset(
        connection_params=StdioConnectionParams(
            server_params=StdioServerParameters(
                command=sys.executable,
                args=["-m", "tools.mcp_server"],
                cwd=project_root,
            ),
        ),
    )


def create_agent() -> Agent:
    """Create the SkyTraveler travel assistant.

    Returns:
        A configured Google ADK Agent, ready to be handed to a Runner.
    """
    return Agent(
        name=AGENT_NAME,
        model=LiteLlm(model=get_model_name()),
        instruction=get_travel_assistant_prompt(),
        tools=[create_toolset()],
        after_tool_callback=skip_summarization_on_halt,
    )
