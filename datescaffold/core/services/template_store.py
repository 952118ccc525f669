"""
Template store — resolve and load the template for each file kind.

A kind uses its configured path when one is given, otherwise the
bundled default.  Each template is read at most once per store
instance; a store lives for one scaffold invocation.
"""

from __future__ import annotations

import logging
from pathlib import Path

from datescaffold.core.data import bundled_template_path
from datescaffold.core.errors import TemplateNotFound
from datescaffold.core.models.template import FileKind, Template

logger = logging.getLogger(__name__)


class TemplateStore:
    """Loads templates lazily and caches them.

    Args:
        code_path: Template for the code file (default: bundled).
        doc_path:  Template for the documentation file (default: bundled).
    """

    def __init__(self, code_path: Path | None = None, doc_path: Path | None = None) -> None:
        self._paths: dict[FileKind, Path | None] = {
            FileKind.CODE: code_path,
            FileKind.DOC: doc_path,
        }
        self._cache: dict[FileKind, Template] = {}

    def path_for(self, kind: FileKind) -> Path:
        """Resolved template path for a kind."""
        return self._paths[kind] or bundled_template_path(kind)

    def is_bundled(self, kind: FileKind) -> bool:
        return self._paths[kind] is None

    def load(self, kind: FileKind) -> Template:
        """Load the template for a kind.

        Raises:
            TemplateNotFound: If the file is missing or unreadable.
        """
        cached = self._cache.get(kind)
        if cached is not None:
            return cached

        path = self.path_for(kind)
        try:
            if not path.is_file():
                raise TemplateNotFound(path, "no such file")
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateNotFound(path, str(e)) from e

        source = f"bundled:{path.name}" if self.is_bundled(kind) else str(path)
        template = Template(kind=kind, text=text, source=source)
        self._cache[kind] = template
        logger.debug("Loaded %s template from %s", kind.value, source)
        return template
