"""
Templating — turn a template's text into file content for a date.

Substitution is plain text replacement of the placeholder tokens, not a
tokenized syntax: a template must not use the token words inside other
literal content.  The replacement is wrapped in a ``TemplateEngine`` so
a stricter engine can be dropped in without touching ``scaffold()``.

Quoting is a per-file-kind policy: values rendered into the code file
are wrapped in quotes (they land in string literals), values rendered
into the documentation file are not.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Protocol

from datescaffold.core.models.date_key import DateKey
from datescaffold.core.models.template import (
    PLACEHOLDER_TOKENS,
    TOKEN_COMPACT,
    TOKEN_ISO_DATE,
    TOKEN_YEAR,
    FileKind,
    Template,
)

DEFAULT_QUOTE_CHAR = '"'

# Which file kinds get quoted values
QUOTING: dict[FileKind, bool] = {
    FileKind.CODE: True,
    FileKind.DOC: False,
}


class TemplateEngine(Protocol):
    """Anything that can render template text with a token → value map."""

    def render(self, text: str, values: Mapping[str, str]) -> str: ...


class LiteralEngine:
    """Replace every occurrence of every token in a single pass.

    One regex alternation over all tokens, longest first, so the result
    does not depend on token order and inserted values are never
    scanned again.
    """

    def render(self, text: str, values: Mapping[str, str]) -> str:
        if not values:
            return text
        tokens = sorted(values, key=len, reverse=True)
        pattern = re.compile("|".join(re.escape(t) for t in tokens))
        return pattern.sub(lambda m: values[m.group(0)], text)


def placeholder_values(date_key: DateKey, quote: str = "") -> dict[str, str]:
    """Map each placeholder token to its value, optionally quoted."""
    return {
        TOKEN_YEAR: f"{quote}{date_key.year}{quote}",
        TOKEN_ISO_DATE: f"{quote}{date_key.iso_date}{quote}",
        TOKEN_COMPACT: f"{quote}{date_key.compact}{quote}",
    }


def render_template(
    template: Template,
    date_key: DateKey,
    engine: TemplateEngine | None = None,
    quote_char: str = DEFAULT_QUOTE_CHAR,
) -> str:
    """Render a template for a date, applying its kind's quoting policy."""
    quote = quote_char if QUOTING[template.kind] else ""
    values = placeholder_values(date_key, quote=quote)
    return (engine or LiteralEngine()).render(template.text, values)


def find_placeholders(text: str) -> list[str]:
    """Return the placeholder tokens present in ``text``, in canonical order."""
    return [t for t in PLACEHOLDER_TOKENS if t in text]
