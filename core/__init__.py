# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL the logic behind the three travel tools:
#   - weather.py       →  lookup_weather()
#   - destinations.py  →  search_destinations()
#   - itinerary.py     →  build_itinerary()
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports Google ADK, FastMCP, or any LLM client.
#   Every module here is pure Python: you can import it in a bare REPL with
#   zero internet access and call the tools directly (demo.py does exactly
#   that).
#
# Every public function returns a core.models.ToolResult and never raises.
# =============================================================================
