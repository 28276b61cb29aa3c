"""Tests for the FastMCP tool server (tools/mcp_server.py).

The server is exercised in-process through fastmcp.Client, so these go
through the same schema validation and serialization an MCP client sees.
"""

import pytest
from fastmcp import Client

from tools.mcp_server import mcp

pytestmark = pytest.mark.anyio


@pytest.fixture
def anyio_backend():
    return "asyncio"


async def _call(tool: str, args: dict) -> dict:
    async with Client(mcp) as client:
        result = await client.call_tool(tool, args)
    return result.structured_content


class TestToolCatalog:

    async def test_three_tools_registered(self):
        async with Client(mcp) as client:
            tools = {t.name: t for t in await client.list_tools()}
        assert set(tools) == {"get_current_weather", "search_destinations", "build_itinerary"}

    async def test_schema_hints(self):
        async with Client(mcp) as client:
            tools = {t.name: t for t in await client.list_tools()}

        itinerary = tools["build_itinerary"].inputSchema
        assert set(itinerary["required"]) == {"destination", "days"}
        assert itinerary["properties"]["days"]["maximum"] == 14
        assert itinerary["properties"]["pace"]["enum"] == ["relaxed", "moderate", "packed"]

        search = tools["search_destinations"].inputSchema
        assert search["required"] == ["pass_tier"]
        assert search["properties"]["pass_tier"]["enum"] == ["silver", "gold", "platinum"]


class TestToolCalls:

    async def test_weather(self):
        data = await _call("get_current_weather", {"city": "Paris", "units": "fahrenheit"})
        assert data["status"] == "success"
        assert data["temperature"] == 64

    async def test_search(self):
        data = await _call("search_destinations", {"pass_tier": "silver", "query": "beach"})
        assert data["status"] == "success"
        assert data["pass_tier"] == "Silver"

    async def test_invalid_tier_is_a_result_not_a_failure(self):
        data = await _call("search_destinations", {"pass_tier": "diamond"})
        assert data["status"] == "error"

    async def test_itinerary_is_halt(self):
        data = await _call("build_itinerary", {"destination": "Barcelona", "days": 3})
        assert data["halt"] is True
        itinerary = data["content"]["itinerary"]
        assert itinerary["interests"] == ["culture", "food"]
        assert len(itinerary["daily_schedule"]) == 3

    async def test_out_of_range_days_reach_core_and_are_clamped(self):
        data = await _call("build_itinerary", {"destination": "Rome", "days": 30, "pace": "fast"})
        itinerary = data["content"]["itinerary"]
        assert len(itinerary["daily_schedule"]) == 14
        assert itinerary["pace"] == "moderate"
