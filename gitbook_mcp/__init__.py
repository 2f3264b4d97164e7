"""
GitBook MCP: GitBook REST API exposed as Model Context Protocol tools.

A thin adapter that maps each MCP tool call onto one GitBook API request and
maps the response (or error) back into a tool result.
"""

__version__ = "1.0.0"
