# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the three core/ operations as MCP tools the agent can call.
#   Each tool is a thin wrapper: log the request, call core/, log and return
#   the result dict.
#
# HOW IT WORKS (the flow):
#   1. The LLM reads the tool names, docstrings and parameter schemas
#   2. It decides a tool would help (e.g., "what's the weather in Paris?")
#   3. ADK sends the call over MCP; FastMCP routes it to a function below
#   4. The function calls core/ and returns ToolResult.to_dict()
#   5. The LLM turns the dict into an answer, UNLESS it's a halt result,
#      in which case the agent returns the payload verbatim
#
# PARAMETER SCHEMAS:
#   FastMCP builds each tool's JSON schema from the type hints.  We use
#   Annotated[..., Field(...)] to add descriptions, enums and min/max.
#
#   IMPORTANT: enums and ranges go in json_schema_extra, NOT as pydantic
#   constraints (ge=/le=/Literal).  They're hints for the LLM.  If the LLM
#   still sends days=20 or pace="fast", we want core/ to clamp/default it,
#   not have pydantic reject the call before core/ ever sees it.
#
# RUNNING THIS SERVER:
#   a) Standalone:  python -m tools.mcp_server
#   b) As a stdio subprocess of the ADK agent (agent/travel_agent.py)
# =============================================================================

import json
import logging
import os
import sys
from typing import Annotated, Optional

from fastmcp import FastMCP
from pydantic import Field

# --- Import core logic ---
# The tools layer depends on core/ and nothing else.
from core.destinations import PASS_TIERS, SEASONS, search_destinations
from core.itinerary import ACTIVITIES_PER_PACE, MAX_DAYS, MIN_DAYS, build_itinerary
from core.weather import CELSIUS, FAHRENHEIT, lookup_weather

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server talks to the agent over STDOUT.
# Anything printed to stdout would corrupt the MCP JSON stream.
#
# Colors:
#   CYAN   → incoming requests (tool name + parameters)
#   GREEN  → response JSON
#   YELLOW → intermediate status messages
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logging.basicConfig(
    level=os.environ.get("MCP_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)
logger = logging.getLogger("tools.mcp_server")


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the tool response as compact JSON in GREEN, then return it."""
    logger.info(
        f"{_GREEN}  ← {tool_name} response: "
        f"{json.dumps(result, separators=(',', ':'), ensure_ascii=False)}{_RESET}"
    )
    return result


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
mcp = FastMCP("skytraveler-travel-tools")


# =============================================================================
# TOOL 1: get_current_weather
# =============================================================================
@mcp.tool(name="get_current_weather")
def get_current_weather(
    city: Annotated[str, Field(description="The city name (e.g., 'Paris', 'Tokyo', 'New York')")],
    units: Annotated[
        str,
        Field(
            description="Temperature units (default: celsius)",
            json_schema_extra={"enum": [CELSIUS, FAHRENHEIT]},
        ),
    ] = CELSIUS,
) -> dict:
    """Get the current weather for a specific city.

    Use this when users ask about weather conditions, temperature, or
    whether it's a good moment to be somewhere.

    Returns a dict with:
      - status: "success", "no_data" (city unknown) or "error"
      - temperature, temperature_display, condition, humidity, wind_speed
      - summary: one sentence you can quote directly
    """
    _log_request("get_current_weather", city=city, units=units)

    result = lookup_weather(city, units)
    _log_status(f"status={result.status}")
    return _log_response("get_current_weather", result.to_dict())


# =============================================================================
# TOOL 2: search_destinations
# =============================================================================
# This is the "business rules" tool: what you're allowed to see depends on
# your pass tier.  The LLM doesn't enforce the rule; core/ does.
# =============================================================================
@mcp.tool(name="search_destinations")
def search_destinations_tool(
    pass_tier: Annotated[
        str,
        Field(
            description="Your SkyTraveler pass tier: 'silver', 'gold', or 'platinum'",
            json_schema_extra={"enum": list(PASS_TIERS)},
        ),
    ],
    query: Annotated[
        str,
        Field(description="What you're looking for (e.g., 'beach', 'culture', 'adventure'), or 'any'"),
    ] = "any",
    season: Annotated[
        str,
        Field(
            description="Preferred season: 'spring', 'summer', 'fall', 'winter', or 'any'",
            json_schema_extra={"enum": [*SEASONS, "any"]},
        ),
    ] = "any",
    limit: Annotated[
        int,
        Field(
            description="Max number of results (1-20)",
            json_schema_extra={"minimum": 1, "maximum": 20},
        ),
    ] = 10,
) -> dict:
    """Search for SkyTraveler pass destinations.

    Check which destinations a member can visit based on their pass tier.
    Silver unlocks regional destinations, Gold adds continental
    destinations, Platinum unlocks worldwide luxury destinations.

    WHEN TO CALL THIS: whenever the user mentions their pass or asks where
    they can go.  Never guess what a tier includes.

    Returns a dict with:
      - status: "success", "no_results" or "error"
      - pass_tier, access_info (regions, destination count, description)
      - total_available: destinations the tier unlocks before filtering
      - showing, filters, results: each result has name, region, type,
        best_for, best_seasons, highlights
    """
    _log_request("search_destinations",
                 pass_tier=pass_tier, query=query, season=season, limit=limit)

    result = search_destinations(pass_tier, query=query, season=season, limit=limit)
    _log_status(f"status={result.status}, showing={result.data.get('showing', 0)}")
    return _log_response("search_destinations", result.to_dict())


# =============================================================================
# TOOL 3: build_itinerary
# =============================================================================
# The halt tool.  Its result is NOT for the LLM to paraphrase; see
# agent/callbacks.py for how the agent short-circuits on it.
# =============================================================================
DEFAULT_INTERESTS = ["culture", "food"]


@mcp.tool(name="build_itinerary")
def build_itinerary_tool(
    destination: Annotated[str, Field(description="The destination city or country")],
    days: Annotated[
        int,
        Field(
            description=f"Number of days for the trip ({MIN_DAYS}-{MAX_DAYS})",
            json_schema_extra={"minimum": MIN_DAYS, "maximum": MAX_DAYS},
        ),
    ],
    interests: Annotated[
        Optional[list[str]],
        Field(description="List of interests (e.g., ['culture', 'food', 'nature']). Defaults to culture and food."),
    ] = None,
    pace: Annotated[
        str,
        Field(
            description="Trip pace: relaxed (3 activities/day), moderate (4), or packed (6)",
            json_schema_extra={"enum": list(ACTIVITIES_PER_PACE)},
        ),
    ] = "moderate",
) -> dict:
    """Build a structured travel itinerary with daily activities.

    Provide the destination, number of days, and preferences.  Returns a
    complete day-by-day itinerary with activities, meals, and tips.

    The response is marked {"halt": true}: it is shown to the user exactly
    as returned.  Do not rewrite or summarize it.
    """
    if interests is None:
        interests = list(DEFAULT_INTERESTS)

    _log_request("build_itinerary",
                 destination=destination, days=days, interests=interests, pace=pace)

    result = build_itinerary(destination, days, interests=interests, pace=pace)
    _log_status(f"status={result.status}, halt={result.halt}")
    return _log_response("build_itinerary", result.to_dict())


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    mcp.run()
