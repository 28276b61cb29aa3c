# =============================================================================
# demo.py  -  Walkthrough: LLM Function Calling with Travel Tools
# =============================================================================
#
# HOW TO RUN:
#   python demo.py
#
# No API key needed.  This script calls the core/ tools DIRECTLY and
# narrates what an LLM would do with them, step by step:
#
#   Example 1: Direct tool calls (the building blocks)
#   Example 2: Structured output with the halt pattern
#   Example 3: The LLM picks a tool on its own
#   Example 4: The LLM chains two tools
#   Example 5: The LLM decides NOT to use a tool
#
# For the real thing, with a live model choosing tools, run main.py.
# =============================================================================

import json

from core.destinations import search_destinations
from core.itinerary import build_itinerary
from core.weather import lookup_weather

RULE = "-" * 80
BANNER = "=" * 80


def _pretty(data: dict) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def _heading(title: str, rule: str = RULE) -> None:
    print("\n" + rule)
    print(title)
    print(rule)
    print()


def example_direct_calls() -> None:
    _heading("Example 1: Direct Tool Execution (Understanding the Building Blocks)")
    print("Before we see the LLM magic, let's understand what tools do:")
    print()

    print("🌤️  lookup_weather(city='Paris'):")
    print(_pretty(lookup_weather("Paris").to_dict()))

    print("\n🗺️  search_destinations(pass_tier='gold', query='beach', limit=3):")
    print(_pretty(search_destinations("gold", query="beach", limit=3).to_dict()))


def example_halt_pattern() -> None:
    _heading("Example 2: Structured Data Extraction (Halt Pattern)")
    print("Some tools return structured data without LLM synthesis:")
    print()

    print("📅 build_itinerary(destination='Barcelona', days=3):")
    result = build_itinerary("Barcelona", 3, interests=["culture", "food"], pace="moderate")

    if result.halt:
        print("✅ Returns a halt result - data goes directly to the frontend (no LLM synthesis)")
    print(_pretty(result.to_dict()))


def example_single_tool() -> None:
    _heading("Example 3: LLM with Function Calling (The Magic!)", BANNER)
    print("When you give tools to an LLM, it decides when to use them based on")
    print("the user's question!")
    print()

    print("-" * 40)
    print("👤 User: 'What's the weather in Tokyo? Is it good for traveling?'")
    print()
    print("🤖 AI thinks: 'User wants weather info. I have a weather tool. I'll use it!'")
    print("🤖 AI: [Automatically calls get_current_weather(city='Tokyo')]")

    tokyo = lookup_weather("Tokyo").data
    print(f"   Tool returns: {tokyo['summary']}")
    print()
    print("🤖 AI synthesizes natural response:")
    print(f"   'The weather in Tokyo is currently {tokyo['condition']} "
          f"with {tokyo['temperature_display']}. Humidity is {tokyo['humidity']}")
    print(f"   with winds at {tokyo['wind_speed']}. Perfect for traveling!'")
    print()
    print("✨ Key Point: YOU didn't tell the AI to use the weather tool.")
    print("   It saw the tool was available and decided to use it automatically!")


def example_tool_chain() -> None:
    _heading("Example 4: Multi-Tool Conversation (Automatic Chaining)", BANNER)
    print("The LLM can chain multiple tools automatically to answer complex questions!")
    print()

    print("-" * 40)
    print("👤 User: 'I have a Gold pass. Where can I go in winter? Create an itinerary.'")
    print()
    print("🤖 AI thinks: 'I need destinations for the Gold pass first, then an itinerary!'")
    print()

    print("🤖 AI: [Step 1: Calls search_destinations]")
    print("       Parameters: pass_tier='gold', season='winter'")
    winter = search_destinations("gold", season="winter", limit=2)
    if not winter.ok:
        print(f"   Tool returns: {winter.data['message']}")
        return

    print(f"   Tool returns: Found {winter.data['showing']} destinations")
    first_dest = winter.data["results"][0]["name"]
    print(f"   Top result: {first_dest}")
    print()
    print(f"🤖 AI thinks: 'Great! Let me create an itinerary for {first_dest}...'")
    print()

    print("🤖 AI: [Step 2: Calls build_itinerary]")
    print(f"       Parameters: destination='{first_dest}', days=3")
    itinerary = build_itinerary(first_dest, 3, interests=["culture", "food"], pace="moderate")
    if itinerary.halt:
        print("   Tool returns: Structured 3-day itinerary")
    print()

    print("🤖 AI synthesizes final response:")
    print(f"   'With your Gold pass, {first_dest} is perfect for winter! I've created")
    print("   a 3-day itinerary for you. Day 1 includes exploring local culture and")
    print("   cuisine. Would you like details for each day?'")
    print()
    print("✨ Key Point: The LLM automatically called TWO tools in sequence!")
    print("   It figured out the workflow: check pass access → create itinerary")
    print("   You just asked one question!")


def example_no_tool() -> None:
    _heading("Example 5: When LLM Chooses NOT to Use Tools", BANNER)
    print("The LLM is smart enough to know when tools aren't needed:")
    print()

    print("-" * 40)
    print("👤 User: 'What are the benefits of traveling?'")
    print()
    print("🤖 AI thinks: 'This is a general question. I don't need tools for this.'")
    print("🤖 AI responds directly: 'Traveling offers many benefits including...")
    print("   cultural exposure, personal growth, relaxation, and creating memories.'")
    print()
    print("✨ Key Point: Tools are OPTIONAL. The LLM only uses them when helpful!")


def print_summary() -> None:
    _heading("🎯 Summary: How LLM Function Calling Works", BANNER)
    print("1. You Define Tools:")
    print("   - Each tool has a name, description, and parameters")
    print("   - Tools execute and return structured data")
    print()
    print("2. You Give Tools to the LLM:")
    print("   Agent(model=..., tools=[MCPToolset(...)])   # see agent/travel_agent.py")
    print()
    print("3. User Asks a Question:")
    print("   runner.run_async(..., new_message='What\\'s the weather in Paris?')")
    print()
    print("4. LLM Decides Automatically:")
    print("   - Should I use a tool? Which one?")
    print("   - What parameters should I pass?")
    print("   - Should I chain multiple tools?")
    print()
    print("5. LLM Executes Tool(s):")
    print("   - Calls tool with validated parameters")
    print("   - Receives structured response")
    print()
    print("6. LLM Synthesizes Answer:")
    print("   - Combines tool results into natural language")
    print("   - Answers the user's original question")
    print("   - ...unless the tool returned a halt result, which is shown as-is")
    print()
    print("Benefits:")
    print("  ✅ LLM can access current data (weather, destinations, etc.)")
    print("  ✅ LLM can enforce business rules (membership tiers, access control)")
    print("  ✅ LLM can generate structured data (itineraries, schedules)")
    print("  ✅ All automatically - you just define the tools!")
    print()


def main() -> None:
    print(BANNER)
    print("🌍 Travel Planning Assistant with LLM Function Calling")
    print(BANNER)
    print()
    print("This demo shows how LLMs can automatically use tools to answer questions.")
    print("The key concept: You give the LLM access to tools, and it decides when to use them!")
    print()
    print("📦 Available Tools:")
    print("  1. get_current_weather - Get current weather for cities")
    print("  2. search_destinations - Find destinations with SkyTraveler pass tiers")
    print("  3. build_itinerary     - Create day-by-day itineraries")

    example_direct_calls()
    example_halt_pattern()
    example_single_tool()
    example_tool_chain()
    example_no_tool()
    print_summary()


if __name__ == "__main__":
    main()
