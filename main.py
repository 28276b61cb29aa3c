# =============================================================================
# main.py  -  Interactive Chat with the SkyTraveler Travel Assistant
# =============================================================================
#
# HOW TO RUN:
#   python main.py
#
# Then try:
#   What's the weather in Paris?
#   Where can I go with my Gold pass?
#   Create a 3-day itinerary for Tokyo
#   What are the benefits of traveling?
#
# WHAT HAPPENS PER QUESTION:
#   1. The question goes to the ADK agent (agent/travel_agent.py)
#   2. The LLM decides whether a tool helps, and which one
#   3. Tool calls are printed as they happen ("🔧 LLM used tool: ...")
#   4. The final answer is printed, or for a halt result such as an
#      itinerary, the tool's JSON exactly as returned
#
#   If no tool was called, you'll see "LLM answered directly".  That's the
#   other half of function calling: the model also decides when NOT to.
# =============================================================================

import asyncio
import json
import os

from dotenv import load_dotenv

# Load .env BEFORE creating the agent: LiteLLM reads the API key from the
# environment when the model is first used.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.callbacks import halt_content
from agent.travel_agent import create_agent, get_model_name

APP_NAME = "skytraveler_assistant"
USER_ID = "demo_user"
API_KEY_VARS = ("OPENROUTER_API_KEY", "OPENAI_API_KEY", "GEMINI_API_KEY")
QUIT_COMMANDS = ("quit", "exit", "q")


async def ask(runner: Runner, session_id: str, message: str) -> None:
    """Send one message to the agent and print what it did."""
    user_message = types.Content(role="user", parts=[types.Part(text=message)])

    tools_used: list[str] = []
    final_response = ""
    halted_payload = None

    async for event in runner.run_async(
        user_id=USER_ID,
        session_id=session_id,
        new_message=user_message,
    ):
        if not (event.content and event.content.parts):
            continue

        for part in event.content.parts:
            if part.function_call:
                tools_used.append(part.function_call.name)
                print(f"  🔧 LLM used tool: {part.function_call.name}")

            if part.function_response:
                payload = halt_content(part.function_response.response)
                if payload is not None:
                    halted_payload = payload

            if part.text:
                final_response = part.text

    if not tools_used:
        print("  💭 LLM answered directly (no tools needed)")

    print("-" * 70)
    if halted_payload is not None:
        # Halt pattern: the structured result IS the answer.
        print("\n📋 Structured result (returned as-is, no LLM synthesis):\n")
        print(json.dumps(halted_payload, indent=2, ensure_ascii=False))
    elif final_response:
        print(f"\n🤖 AI: {final_response}")
    else:
        print("\n⚠️  No response generated. The agent may have encountered an error.")


async def run_chat() -> None:
    print("=" * 70)
    print("  SKYTRAVELER TRAVEL ASSISTANT")
    print(f"  Google ADK + {get_model_name()} + FastMCP")
    print("=" * 70)

    if not any(os.environ.get(var) for var in API_KEY_VARS):
        print(f"\n⚠️  No API key found. Set one of {', '.join(API_KEY_VARS)} in .env\n")

    agent = create_agent()
    session_service = InMemorySessionService()
    runner = Runner(agent=agent, app_name=APP_NAME, session_service=session_service)
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("\n✅ Ready! Try: What's the weather in Paris?")
    print("   (Type 'quit' to exit)\n")

    while True:
        try:
            user_input = input("\n💬 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in QUIT_COMMANDS:
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        print("-" * 70)
        try:
            await ask(runner, session.id, user_input)
        except Exception as e:
            # Keep the REPL alive on provider errors (bad key, rate limit...).
            print(f"❌ Error: {e}")
            print(f"   Make sure one of {', '.join(API_KEY_VARS)} is set in .env")

    await runner.close()


if __name__ == "__main__":
    asyncio.run(run_chat())
