"""Remote documentation search orchestration.

The flow is strictly sequential: (optional probe) -> connect -> list tools ->
call the search tool -> hand the summary to the UI layer. Printing stays out
of this module; callers observe progress through `SearchHooks`, the same way
the CLI plugs into the other pipelines.

Every failure is turned into exit status 1. The session is released on every
path and a failing release never replaces the original outcome.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable

from adapters.http_client import probe_endpoint
from adapters.mcp_session import McpSearchSession
from core.config import AppSettings
from core.domain.models import SearchSummary, ToolResult
from core.errors import ToolInvocationError, ToolUnavailableError, describe_exception
from core.interfaces.search_session import SearchSession
from core.services.result_parser import extract_structured, summarize

logger = logging.getLogger(__name__)

SessionFactory = Callable[[AppSettings], SearchSession]

EXIT_OK = 0
EXIT_FAILURE = 1


@dataclass
class SearchHooks:
    """Optional callbacks for UI layers (progress, errors, result)."""

    info: Callable[[str], None] | None = None
    error: Callable[[str], None] | None = None
    result: Callable[[SearchSummary | None], None] | None = None


def _emit(callback: Callable[[str], None] | None, message: str) -> None:
    if callback is not None:
        callback(message)


def _error_text(result: ToolResult) -> str:
    for item in result.content:
        text = item.get("text")
        if isinstance(text, str) and text.strip():
            return text.strip()
    return "server reported an error"


async def _release(session: SearchSession) -> None:
    try:
        await session.close()
    except (Exception, asyncio.CancelledError) as exc:
        logger.debug("Ignoring error while closing session: %s", describe_exception(exc))


async def search_docs(
    query: str,
    *,
    settings: AppSettings,
    session_factory: SessionFactory | None = None,
    hooks: SearchHooks | None = None,
) -> int:
    """Search the remote documentation for `query` and return the exit status."""

    hooks = hooks or SearchHooks()
    factory = session_factory or McpSearchSession
    session: SearchSession | None = None

    _emit(hooks.info, f"Starting search with query: {query}")
    try:
        if settings.probe_endpoint:
            _emit(hooks.info, f"Probing endpoint {settings.endpoint_url}...")
            await probe_endpoint(settings.endpoint_url, settings=settings)

        _emit(hooks.info, "Creating MCP client...")
        session = factory(settings)

        _emit(hooks.info, "Connecting to MCP server...")
        await session.connect()
        _emit(hooks.info, "Connected")

        _emit(hooks.info, "Listing available tools...")
        tools = await session.list_tools()
        logger.debug("Server tools: %s", sorted(tools))
        if settings.tool_name not in tools:
            raise ToolUnavailableError(settings.tool_name)

        _emit(hooks.info, f"Calling tool {settings.tool_name}...")
        result = await session.call_tool(settings.tool_name, {"query": query})
        logger.debug("Raw tool result: %s", result.as_jsonable())
        if result.is_error:
            raise ToolInvocationError(settings.tool_name, _error_text(result))

        payload = extract_structured(result)
        summary = summarize(payload) if payload is not None else None
        if hooks.result is not None:
            hooks.result(summary)
        return EXIT_OK
    except ToolUnavailableError as exc:
        _emit(hooks.error, str(exc))
        return EXIT_FAILURE
    except (Exception, asyncio.CancelledError) as exc:
        logger.debug("Docs search failed", exc_info=True)
        _emit(hooks.error, f"Error searching docs: {describe_exception(exc)}")
        return EXIT_FAILURE
    finally:
        if session is not None:
            await _release(session)


def run_docs_search(
    query: str,
    *,
    settings: AppSettings | None = None,
    session_factory: SessionFactory | None = None,
    hooks: SearchHooks | None = None,
) -> int:
    """Synchronous entry point used by the CLI."""

    return asyncio.run(
        search_docs(
            query,
            settings=settings or AppSettings(),
            session_factory=session_factory,
            hooks=hooks,
        )
    )
