"""Contract for a remote documentation-search session.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- The real MCP adapter and the in-memory fakes used by tests are
  interchangeable without coupling the Core to a transport.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from core.domain.models import ToolResult


@runtime_checkable
class SearchSession(Protocol):
    """Minimal session the search flow depends on.

    Design rules:
    - Every method is async because each one is a network round trip.
    - `close` must be safe to call after a failed or partial `connect`.
    """

    async def connect(self) -> None:
        """Open the transport and complete the protocol handshake."""

        ...

    async def list_tools(self) -> set[str]:
        """Return the names of the tools exposed by the server."""

        ...

    async def call_tool(self, name: str, arguments: dict[str, Any]) -> ToolResult:
        """Invoke `name` with `arguments` and return its normalized result."""

        ...

    async def close(self) -> None:
        """Release the session and its transport."""

        ...
