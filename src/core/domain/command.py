"""Commands understood by learncli.

Kept in the domain layer so the dispatcher, the CLI and the tests share a
single source of truth.
"""

from __future__ import annotations

from enum import Enum


class Command(str, Enum):
    """First positional argument, classified."""

    DOCS = "docs"
    CODE = "code"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def from_token(cls, token: str | None) -> "Command":
        """Map a raw argv token to a command; anything unknown is `UNRECOGNIZED`."""

        if token == cls.DOCS.value:
            return cls.DOCS
        if token == cls.CODE.value:
            return cls.CODE
        return cls.UNRECOGNIZED
