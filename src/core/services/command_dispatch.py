"""Argument classification for the `learncli` entry point.

Only the first token and the first `-q` pair after a `docs` command are
inspected; everything else on the command line is ignored.
"""

from __future__ import annotations

from typing import Sequence

from core.domain.command import Command
from core.domain.models import InvocationRequest

QUERY_FLAG = "-q"

USAGE_MESSAGE = "Please provide a first parameter: 'docs' or 'code'"
DOCS_GREETING = "hello docs"
CODE_GREETING = "hello code"


def _find_query(tokens: Sequence[str]) -> str | None:
    try:
        index = list(tokens).index(QUERY_FLAG)
    except ValueError:
        return None
    if index + 1 >= len(tokens):
        return None
    return tokens[index + 1] or None


def classify(tokens: Sequence[str]) -> InvocationRequest:
    """Build the `InvocationRequest` for argv `tokens` (program name excluded)."""

    first = tokens[0] if tokens else None
    command = Command.from_token(first)
    if command is Command.DOCS:
        return InvocationRequest(command=command, query=_find_query(tokens[1:]))
    return InvocationRequest(command=command)


def greeting_for(request: InvocationRequest) -> str | None:
    """Text printed for the local outcomes; `None` means run a remote search."""

    if request.command is Command.CODE:
        return CODE_GREETING
    if request.command is Command.DOCS:
        return None if request.query else DOCS_GREETING
    return USAGE_MESSAGE
