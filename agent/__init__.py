# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK agent configuration.
#
# ARCHITECTURAL ROLE:
#   The agent/ layer decides WHICH tool to call and WHEN, then turns tool
#   results into an answer.  It does not contain travel logic (core/) or
#   tool plumbing (tools/).
#
#   travel_agent.py  →  create_agent(): model, prompt, MCP toolset
#   prompt.py        →  the system prompt
#   callbacks.py     →  halt-pattern handling (skip LLM summarization)
# =============================================================================
