"""
Bundled static data — the default templates.

Templates ship inside the package under ``templates/`` and are used
whenever ``scaffold.yml`` does not point a file kind at its own template.

Usage::

    from datescaffold.core.data import bundled_template_path

    path = bundled_template_path(FileKind.DOC)   # .../templates/readme.tmpl
"""

from __future__ import annotations

from pathlib import Path

from datescaffold.core.models.template import FileKind

_DATA_DIR = Path(__file__).parent
TEMPLATES_DIR = _DATA_DIR / "templates"

_BUNDLED_NAMES: dict[FileKind, str] = {
    FileKind.CODE: "code.tmpl",
    FileKind.DOC: "readme.tmpl",
}


def bundled_template_path(kind: FileKind) -> Path:
    """Path of the default template for a file kind."""
    return TEMPLATES_DIR / _BUNDLED_NAMES[kind]
