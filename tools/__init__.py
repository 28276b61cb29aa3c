# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool server.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between the agent framework and the
#   core logic.  mcp_server.py:
#     1. Imports the public functions from core/
#     2. Wraps each in a FastMCP tool with a name, docstring and schema
#     3. Serializes the core ToolResult into a plain dict
#     4. Logs every request and response to stderr
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT contain travel logic (that's in core/)
#   - They do NOT decide when to be called (that's the LLM's job)
#   - They do NOT know about Google ADK (any MCP client can use them)
#
# The docstrings matter: the LLM reads them to decide WHEN to call a tool.
# =============================================================================
