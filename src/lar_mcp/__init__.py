"""MCP adapter for the Legal Assistant RAG backend."""

__version__ = "1.0.0"
