"""Concrete adapters for the Core contracts (MCP SDK, httpx)."""
