"""MCP server exposing the GitBook API as tools.

The server speaks the Model Context Protocol over stdio. Each tool maps onto
exactly one GitBook API request.
"""
