"""Turns a raw tool result into a `SearchSummary`.

Search tools usually answer with a text content item that itself holds JSON
(an array of hits, or a single hit object). The first text item that looks
like JSON and parses wins; the native `structured_content` payload is only
used when no text item qualifies.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from core.domain.models import DocEntry, SearchSummary, ToolResult

logger = logging.getLogger(__name__)

_JSON_OPENERS = ("{", "[")


def _parse_text_item(item: dict[str, Any]) -> Any | None:
    if item.get("type") != "text":
        return None
    text = item.get("text")
    if not isinstance(text, str):
        return None
    stripped = text.strip()
    if not stripped.startswith(_JSON_OPENERS):
        return None
    try:
        return json.loads(stripped)
    except json.JSONDecodeError as exc:
        logger.debug("Skipping text item that is not valid JSON: %s", exc)
        return None


def extract_structured(result: ToolResult) -> Any | None:
    """Return the first structured value found in `result`, or None."""

    for item in result.content:
        parsed = _parse_text_item(item)
        if parsed is not None:
            return parsed
    if isinstance(result.structured_content, (dict, list)):
        return result.structured_content
    return None


def _normalize(payload: Any) -> list[Any]:
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        nested = payload.get("results")
        if isinstance(nested, list):
            return nested
        return [payload]
    return [payload]


def summarize(payload: Any) -> SearchSummary:
    """Normalize `payload` to a list and keep its size and first object."""

    items = _normalize(payload)
    first: DocEntry | None = None
    if items and isinstance(items[0], dict):
        first = DocEntry.model_validate(items[0])
    return SearchSummary(count=len(items), first=first)
