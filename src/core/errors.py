"""Errors raised along the remote search path.

Usage problems (unknown command, missing query) are not errors: the dispatcher
answers them with guidance text. Everything below ends the process with
status 1.
"""

from __future__ import annotations


class DocsSearchError(Exception):
    """Base class for failures while searching the remote documentation."""


class EndpointUnreachableError(DocsSearchError):
    """The endpoint could not be reached or the handshake failed."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"could not connect to {url}: {reason}")
        self.url = url
        self.reason = reason


class ToolUnavailableError(DocsSearchError):
    """The server does not advertise the required tool."""

    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Tool '{tool_name}' is not available on the server")
        self.tool_name = tool_name


class ToolInvocationError(DocsSearchError):
    """The tool call failed or the server flagged its result as an error."""

    def __init__(self, tool_name: str, reason: str) -> None:
        super().__init__(f"tool '{tool_name}' failed: {reason}")
        self.tool_name = tool_name
        self.reason = reason


def describe_exception(exc: BaseException) -> str:
    """Human readable description, unwrapping exception groups to their first leaf."""

    nested = getattr(exc, "exceptions", None)
    if isinstance(nested, (list, tuple)) and nested:
        return describe_exception(nested[0])
    text = str(exc).strip()
    return text or exc.__class__.__name__
