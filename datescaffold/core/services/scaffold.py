"""
Scaffold service — create the dated directory and its two files.

For a date ``2023-08-22`` this produces::

    {base}/2023/2023-08-22/
    {base}/2023/2023-08-22/20230822.<ext>
    {base}/2023/2023-08-22/README.md

A file that already exists is skipped and never touched.  A newly
created file is filled from its template.  Failures are isolated per
file: the code file failing does not stop the doc file, and vice versa.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from datescaffold.core.errors import FilesystemError, TemplateNotFound
from datescaffold.core.models.date_key import DateKey
from datescaffold.core.models.scaffold import (
    DEFAULT_CODE_EXTENSION,
    FileOutcome,
    FileResult,
    ScaffoldPaths,
)
from datescaffold.core.models.template import FileKind
from datescaffold.core.persistence.files import (
    create_empty,
    ensure_directory,
    file_exists,
    write_whole,
)
from datescaffold.core.services.template_store import TemplateStore
from datescaffold.core.services.templating import (
    DEFAULT_QUOTE_CHAR,
    TemplateEngine,
    render_template,
)

logger = logging.getLogger(__name__)


@dataclass
class ScaffoldResult:
    """Result of one scaffold invocation."""

    date_key: DateKey
    paths: ScaffoldPaths
    directory_created: bool = False
    files: list[FileResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(f.outcome is not FileOutcome.FAILED for f in self.files)

    def get(self, kind: FileKind) -> FileResult | None:
        for f in self.files:
            if f.kind is kind:
                return f
        return None

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "date": self.date_key.model_dump(),
            "directory": str(self.paths.directory),
            "directory_created": self.directory_created,
            "files": [f.model_dump(mode="json") for f in self.files],
        }


def scaffold(
    date_input: str,
    include_doc: bool = True,
    *,
    base_dir: Path,
    code_extension: str = DEFAULT_CODE_EXTENSION,
    templates: TemplateStore | None = None,
    engine: TemplateEngine | None = None,
    quote_char: str = DEFAULT_QUOTE_CHAR,
) -> ScaffoldResult:
    """Build the scaffold for one date.

    Args:
        date_input:     Date as ``yyyy-mm-dd``.
        include_doc:    Also create the README.md documentation file.
        base_dir:       Directory the ``{year}/`` tree is created under.
        code_extension: Extension of the code file, without the dot.
        templates:      Template source (default: bundled templates).
        engine:         Substitution engine (default: literal replacement).
        quote_char:     Quote wrapped around values in the code file.

    Returns:
        ScaffoldResult with one FileResult per attempted file.

    Raises:
        InvalidDateFormat: Before any filesystem change, if the date is invalid.
        FilesystemError:   If the scaffold directory cannot be created.
        ValueError:        If ``code_extension`` is not a plain extension.
    """
    date_key = DateKey.parse(date_input)
    paths = ScaffoldPaths.derive(date_key, base_dir, code_extension)
    store = templates or TemplateStore()

    result = ScaffoldResult(date_key=date_key, paths=paths)
    result.directory_created = ensure_directory(paths.directory)

    kinds = [FileKind.CODE, FileKind.DOC] if include_doc else [FileKind.CODE]
    for kind in kinds:
        file_result = _scaffold_file(
            kind, paths.for_kind(kind), date_key, store, engine, quote_char,
        )
        result.files.append(file_result)

    logger.info(
        "Scaffold %s: %s",
        date_key.iso_date,
        ", ".join(f"{f.kind.value}={f.outcome.value}" for f in result.files),
    )
    return result


def _scaffold_file(
    kind: FileKind,
    path: Path,
    date_key: DateKey,
    store: TemplateStore,
    engine: TemplateEngine | None,
    quote_char: str,
) -> FileResult:
    """Create and render one file, isolating its failures."""
    try:
        if file_exists(path):
            logger.debug("Skipping existing %s file %s", kind.value, path)
            return FileResult(kind=kind, path=path, outcome=FileOutcome.SKIPPED)

        if not create_empty(path):
            logger.debug("Skipping %s file %s (appeared concurrently)", kind.value, path)
            return FileResult(kind=kind, path=path, outcome=FileOutcome.SKIPPED)

        template = store.load(kind)
        content = render_template(template, date_key, engine=engine, quote_char=quote_char)
        write_whole(path, content)
    except (TemplateNotFound, FilesystemError) as e:
        logger.warning("Failed to scaffold %s file %s: %s", kind.value, path, e)
        return FileResult(
            kind=kind,
            path=path,
            outcome=FileOutcome.FAILED,
            error=e.kind,
            message=str(e),
        )

    logger.info("Created %s file %s", kind.value, path)
    return FileResult(kind=kind, path=path, outcome=FileOutcome.CREATED)
