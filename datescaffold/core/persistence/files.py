"""
File writes for scaffolding — directory creation, exclusive create,
whole-content write.

Content writes are atomic (write to temp file in the same directory,
then rename over the target) so a file is written whole or not at all.
Every ``OSError`` surfaces as ``FilesystemError`` carrying the path.
"""

from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path

from datescaffold.core.errors import FilesystemError

logger = logging.getLogger(__name__)


def ensure_directory(path: Path) -> bool:
    """Create ``path`` and any missing parents.

    Returns:
        True if the directory was created, False if it already existed.
    """
    try:
        if path.is_dir():
            return False
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError(path, e.strerror or str(e)) from e
    logger.info("Created directory %s", path)
    return True


def file_exists(path: Path) -> bool:
    """Whether anything exists at ``path``."""
    try:
        return path.exists()
    except OSError as e:
        raise FilesystemError(path, e.strerror or str(e)) from e


def create_empty(path: Path) -> bool:
    """Create an empty file, never touching an existing one.

    Uses exclusive create, so a file that appears between an existence
    check and this call is left alone.

    Returns:
        True if the file was created, False if it already existed.
    """
    try:
        with open(path, "x", encoding="utf-8"):
            pass
    except FileExistsError:
        return False
    except OSError as e:
        raise FilesystemError(path, e.strerror or str(e)) from e
    return True


def write_whole(path: Path, content: str) -> None:
    """Replace the contents of ``path`` with ``content`` in one step."""
    try:
        fd, tmp_path = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}_",
            suffix=".tmp",
        )
    except OSError as e:
        raise FilesystemError(path, e.strerror or str(e)) from e

    tmp = Path(tmp_path)
    try:
        with open(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(content)
        if path.exists():
            shutil.copymode(path, tmp)
        tmp.replace(path)
    except OSError as e:
        tmp.unlink(missing_ok=True)
        raise FilesystemError(path, e.strerror or str(e)) from e
    logger.debug("Wrote %d bytes to %s", len(content.encode("utf-8")), path)
