"""
Headless-browser tools for AI agents, served over MCP.

- tools: registry, executor and the tool handlers
- server: stdio transport
"""

__version__ = "0.1.0"
