"""MCP server for fetching, searching and batch-downloading YouTube transcripts."""

__version__ = "0.1.0"
