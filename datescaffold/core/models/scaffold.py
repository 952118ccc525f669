"""
Scaffold models — derived paths and per-file outcomes.

Paths are computed from a DateKey and a base directory; nothing here is
persisted.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from datescaffold.core.models.date_key import DateKey
from datescaffold.core.models.template import FileKind

DOC_FILENAME = "README.md"
DEFAULT_CODE_EXTENSION = "R"


def check_extension(value: str) -> str:
    """Normalize a code file extension (drop leading dots) and validate it.

    Raises:
        ValueError: If it is empty or contains a path separator.
    """
    ext = value.lstrip(".")
    if not ext:
        raise ValueError(f"code extension must not be empty: {value!r}")
    if "/" in ext or "\\" in ext:
        raise ValueError(f"code extension must not contain path separators: {value!r}")
    return ext


class FileOutcome(str, Enum):
    CREATED = "created"
    SKIPPED = "skipped"
    FAILED = "failed"


class ScaffoldPaths(BaseModel):
    """Directory, code file and doc file for one dated scaffold."""

    model_config = ConfigDict(frozen=True)

    directory: Path
    code_file: Path
    doc_file: Path

    @classmethod
    def derive(
        cls,
        date_key: DateKey,
        base_dir: Path,
        code_extension: str = DEFAULT_CODE_EXTENSION,
    ) -> ScaffoldPaths:
        """Compute ``{year}/{iso_date}/`` and the two files inside it.

        Raises:
            ValueError: If ``code_extension`` is not a plain extension.
        """
        ext = check_extension(code_extension)
        directory = base_dir / date_key.year / date_key.iso_date
        return cls(
            directory=directory,
            code_file=directory / f"{date_key.compact}.{ext}",
            doc_file=directory / DOC_FILENAME,
        )

    def for_kind(self, kind: FileKind) -> Path:
        return self.code_file if kind is FileKind.CODE else self.doc_file


class FileResult(BaseModel):
    """What happened to one file of the scaffold.

    Attributes:
        kind:    code or doc.
        path:    Target path.
        outcome: created, skipped or failed.
        error:   Error kind name when failed (``TemplateNotFound``,
                 ``FilesystemError``).
        message: Human-readable failure detail.
    """

    kind: FileKind
    path: Path
    outcome: FileOutcome
    error: str | None = None
    message: str = ""
