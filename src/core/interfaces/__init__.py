"""Core interfaces/abstractions.

Why:
- Defines contracts (Protocol) that concrete adapters implement.
- Inverts dependencies: the Core depends on abstractions, not on the MCP SDK.
"""
