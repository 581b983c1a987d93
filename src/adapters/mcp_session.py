"""MCP client session over the streamable HTTP transport.

Implements `core.interfaces.search_session.SearchSession` with the official
`mcp` SDK. SDK types never leave this module: tool results are converted to
`core.domain.models.ToolResult` and SDK/httpx failures to `core.errors`.
"""

from __future__ import annotations

import logging
from contextlib import AsyncExitStack
from datetime import timedelta
from typing import Any, Callable

from mcp import ClientSession, types
from mcp.client.streamable_http import streamablehttp_client

from core.config import AppSettings
from core.domain.models import ToolResult
from core.errors import (
    DocsSearchError,
    EndpointUnreachableError,
    ToolInvocationError,
    describe_exception,
)
from core.interfaces.search_session import SearchSession

logger = logging.getLogger(__name__)


def _to_tool_result(result: types.CallToolResult) -> ToolResult:
    return ToolResult(
        content=[
            item.model_dump(mode="json", by_alias=True, exclude_none=True)
            for item in result.content
        ],
        structured_content=getattr(result, "structuredContent", None),
        is_error=bool(result.isError),
    )


class McpSearchSession(SearchSession):
    """Search session backed by an MCP `ClientSession`."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport_factory: Callable[..., Any] | None = None,
        client_session_factory: Callable[..., Any] | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport_factory = transport_factory or streamablehttp_client
        self._client_session_factory = client_session_factory or ClientSession
        self._stack: AsyncExitStack | None = None
        self._session: ClientSession | None = None

    @property
    def connected(self) -> bool:
        return self._session is not None

    def _require_session(self) -> ClientSession:
        if self._session is None:
            raise DocsSearchError("MCP session is not connected")
        return self._session

    async def connect(self) -> None:
        settings = self._settings
        timeout = timedelta(seconds=settings.http_timeout_seconds)
        # Released in place when connect fails; close() handles the connected case.
        self._stack = AsyncExitStack()
        try:
            read_stream, write_stream, _ = await self._stack.enter_async_context(
                self._transport_factory(
                    settings.endpoint_url,
                    headers={"User-Agent": settings.user_agent},
                    timeout=timeout,
                )
            )
            session = await self._stack.enter_async_context(
                self._client_session_factory(
                    read_stream,
                    write_stream,
                    read_timeout_seconds=timeout,
                    client_info=types.Implementation(
                        name=settings.client_name,
                        version=settings.client_version,
                    ),
                )
            )
            init = await session.initialize()
        except (KeyboardInterrupt, SystemExit):
            raise
        except BaseException as exc:
            # A failing transport task cancels us from inside its task group; the
            # real error only surfaces once that group is exited.
            failure = await self._unwind_failed_connect(exc)
            raise EndpointUnreachableError(
                settings.endpoint_url, describe_exception(failure)
            ) from failure

        self._session = session
        logger.debug(
            "Connected to %s (server %s %s)",
            settings.endpoint_url,
            init.serverInfo.name,
            init.serverInfo.version,
        )

    async def _unwind_failed_connect(self, exc: BaseException) -> BaseException:
        """Close whatever `connect` opened and return the error worth reporting."""

        stack, self._stack = self._stack, None
        if stack is None:
            return exc
        try:
            await stack.aclose()
        except Exception as close_exc:
            logger.debug("Transport failed during connect: %s", describe_exception(close_exc))
            return close_exc
        return exc

    async def list_tools(self) -> set[str]:
        listed = await self._require_session().list_tools()
        return {tool.name for tool in listed.tools}

    async def call_tool(self, name: str, arguments: dict[str, Any]) -> ToolResult:
        session = self._require_session()
        try:
            result = await session.call_tool(name, arguments=arguments)
        except Exception as exc:
            raise ToolInvocationError(name, describe_exception(exc)) from exc
        return _to_tool_result(result)

    async def close(self) -> None:
        stack, self._stack, self._session = self._stack, None, None
        if stack is not None:
            await stack.aclose()
