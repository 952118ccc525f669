"""
Error types raised by the scaffold core.

Each error carries a ``kind`` name so callers (CLI, JSON output,
``FileResult``) can report the failure class without isinstance chains.
A pre-existing target file is never an error; it is a normal skip.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for scaffold failures."""

    kind = "ScaffoldError"


class InvalidDateFormat(ScaffoldError):
    """The date input is not a valid ``yyyy-mm-dd`` calendar date."""

    kind = "InvalidDateFormat"

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid date {value!r}: expected a calendar date as yyyy-mm-dd")


class TemplateNotFound(ScaffoldError):
    """A template file is missing or unreadable."""

    kind = "TemplateNotFound"

    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        msg = f"Template not found: {path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class FilesystemError(ScaffoldError):
    """A filesystem call failed (permission denied, disk full, ...)."""

    kind = "FilesystemError"

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
