"""Tests for the REPL's per-question output (main.ask).

The ADK Runner is replaced by a stand-in whose run_async yields
SimpleNamespace events shaped like ADK's: event.content.parts, where each
part carries function_call, function_response or text.
"""

import json
from types import SimpleNamespace

import pytest

from core.itinerary import build_itinerary
from main import ask

pytestmark = pytest.mark.anyio


@pytest.fixture
def anyio_backend():
    return "asyncio"


def _part(*, function_call=None, function_response=None, text=None) -> SimpleNamespace:
    return SimpleNamespace(function_call=function_call, function_response=function_response, text=text)


def _event(*parts) -> SimpleNamespace:
    return SimpleNamespace(content=SimpleNamespace(parts=list(parts)))


def _call(name: str) -> SimpleNamespace:
    return _part(function_call=SimpleNamespace(name=name))


def _response(payload: dict) -> SimpleNamespace:
    dump = {
        "content": [{"type": "text", "text": json.dumps(payload)}],
        "structuredContent": payload,
        "isError": False,
    }
    return _part(function_response=SimpleNamespace(response=dump))


class FakeRunner:
    """Replays a fixed list of events for every question."""

    def __init__(self, events):
        self.events = events
        self.messages = []

    async def run_async(self, *, user_id, session_id, new_message):
        self.messages.append(new_message)
        for event in self.events:
            yield event


class TestAsk:

    async def test_answer_without_tools(self, capsys):
        runner = FakeRunner([_event(_part(text="Travel broadens the mind."))])
        await ask(runner, "session-1", "Why travel?")
        out = capsys.readouterr().out

        assert "LLM answered directly (no tools needed)" in out
        assert "🤖 AI: Travel broadens the mind." in out
        assert "LLM used tool" not in out
        assert runner.messages[0].parts[0].text == "Why travel?"

    async def test_tool_then_synthesized_answer(self, capsys):
        runner = FakeRunner([
            _event(_call("get_current_weather")),
            _event(_response({"status": "success", "city": "Paris"})),
            _event(_part(text="It's 18°C and partly cloudy in Paris.")),
        ])
        await ask(runner, "session-1", "Weather in Paris?")
        out = capsys.readouterr().out

        assert "🔧 LLM used tool: get_current_weather" in out
        assert "answered directly" not in out
        assert "🤖 AI: It's 18°C and partly cloudy in Paris." in out

    async def test_halt_payload_printed_verbatim(self, capsys):
        wire = build_itinerary("Barcelona", 2, ["food"]).to_dict()
        runner = FakeRunner([
            _event(_call("build_itinerary")),
            _event(_response(wire)),
        ])
        await ask(runner, "session-1", "Plan 2 days in Barcelona")
        out = capsys.readouterr().out

        assert "🔧 LLM used tool: build_itinerary" in out
        assert "returned as-is, no LLM synthesis" in out
        assert json.dumps(wire["content"], indent=2, ensure_ascii=False) in out
        assert "🤖 AI:" not in out

    async def test_halt_wins_over_trailing_text(self, capsys):
        wire = build_itinerary("Rome", 1).to_dict()
        runner = FakeRunner([
            _event(_call("build_itinerary")),
            _event(_response(wire)),
            _event(_part(text="Here's a summary of your trip...")),
        ])
        await ask(runner, "session-1", "Plan a day in Rome")
        out = capsys.readouterr().out

        assert '"destination": "Rome"' in out
        assert "summary of your trip" not in out

    async def test_no_response_warning(self, capsys):
        runner = FakeRunner([SimpleNamespace(content=None), _event()])
        await ask(runner, "session-1", "Hello?")
        out = capsys.readouterr().out

        assert "No response generated" in out
