"""Command line tools for exercising the GitBook adapter without an MCP host."""
