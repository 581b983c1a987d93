"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-documenting fields (Field) without coupling the
  Core to the MCP SDK or to httpx.
- Normalizes search hits coming back in slightly different shapes.

Note:
- These models describe *what* the data is, not *how* it is fetched.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from core.domain.command import Command


class InvocationRequest(BaseModel):
    """What the user asked for in this process run.

    Built once from argv and never mutated.
    """

    model_config = ConfigDict(frozen=True)

    command: Command = Field(
        ...,
        description="Classified first positional argument.",
    )
    query: str | None = Field(
        default=None,
        min_length=1,
        description="Search text; only set for `docs -q <text>`.",
    )


class ToolResult(BaseModel):
    """SDK-independent view of a remote tool call result."""

    content: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Content items as plain dicts (`{'type': 'text', 'text': ...}`, ...).",
    )
    structured_content: Any | None = Field(
        default=None,
        description="Structured payload when the server returns one natively.",
    )
    is_error: bool = Field(
        default=False,
        description="Set by the server when the tool itself failed.",
    )

    def as_jsonable(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class DocEntry(BaseModel):
    """A single documentation hit."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = Field(
        default=None,
        description="Page or section title.",
    )
    body: str | None = Field(
        default=None,
        validation_alias=AliasChoices("body", "content"),
        description="Excerpt of the matching content.",
    )
    link: str | None = Field(
        default=None,
        validation_alias=AliasChoices("link", "url", "contentUrl"),
        description="URL of the page.",
    )

    @field_validator("title", "body", "link", mode="before")
    @classmethod
    def scalar_as_text(cls, value: Any) -> str | None:
        """Numbers and booleans become text; nested objects are dropped."""

        if value is None or isinstance(value, str):
            return value
        if isinstance(value, (int, float, bool)):
            return str(value)
        return None


class SearchSummary(BaseModel):
    """Structured search output reduced to what the CLI prints."""

    count: int = Field(
        default=0,
        ge=0,
        description="Number of items in the normalized result list.",
    )
    first: DocEntry | None = Field(
        default=None,
        description="First item, when it is an object.",
    )
