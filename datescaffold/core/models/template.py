"""
Template model — a static text resource rendered into one file kind.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class FileKind(str, Enum):
    """The two files a scaffold contains."""

    CODE = "code"
    DOC = "doc"


# Literal tokens every template may contain
TOKEN_YEAR = "yr"
TOKEN_ISO_DATE = "date_chr"
TOKEN_COMPACT = "date_strip"

PLACEHOLDER_TOKENS: tuple[str, ...] = (TOKEN_YEAR, TOKEN_ISO_DATE, TOKEN_COMPACT)


class Template(BaseModel):
    """A loaded template.

    Attributes:
        kind:   Which file kind it renders.
        text:   Raw template text with placeholder tokens.
        source: Where it was loaded from (file path, or ``bundled:<name>``).
    """

    model_config = ConfigDict(frozen=True)

    kind: FileKind
    text: str
    source: str
