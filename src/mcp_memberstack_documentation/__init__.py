"""MCP server exposing Memberstack documentation search and retrieval."""

__version__ = "1.0.0"
