"""
Configuration loader — reads scaffold.yml into a ScaffoldConfig.

It reads YAML, validates against a Pydantic schema, and resolves the
relative paths in it against the config file's directory.  A missing
config file is not an error: the defaults apply.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from datescaffold.core.models.scaffold import DEFAULT_CODE_EXTENSION, check_extension
from datescaffold.core.services.template_store import TemplateStore
from datescaffold.core.services.templating import DEFAULT_QUOTE_CHAR

logger = logging.getLogger(__name__)

# Default config filename
SCAFFOLD_CONFIG_FILE = "scaffold.yml"


class ConfigError(Exception):
    """Raised when scaffold configuration is invalid or unreadable."""


class TemplatePaths(BaseModel):
    """Per-kind template overrides (relative to the config file)."""

    code: str | None = None
    doc: str | None = None


class ScaffoldConfig(BaseModel):
    """Settings from scaffold.yml.

    ``root`` is not part of the file: it is the directory the file was
    found in (or the working directory when there is none), and every
    relative path is resolved against it.
    """

    version: int = 1
    base_dir: str = "."
    code_extension: str = DEFAULT_CODE_EXTENSION
    quote_char: str = DEFAULT_QUOTE_CHAR
    include_doc: bool = True
    templates: TemplatePaths = Field(default_factory=TemplatePaths)

    root: Path = Field(default_factory=Path.cwd, exclude=True)

    @field_validator("code_extension")
    @classmethod
    def _check_extension(cls, value: str) -> str:
        return check_extension(value)

    def resolve(self, rel: str) -> Path:
        path = Path(rel).expanduser()
        return path if path.is_absolute() else (self.root / path)

    def resolved_base_dir(self) -> Path:
        return self.resolve(self.base_dir)

    def template_path(self, kind: str) -> Path | None:
        rel = getattr(self.templates, kind)
        return self.resolve(rel) if rel else None

    def template_store(self) -> TemplateStore:
        return TemplateStore(
            code_path=self.template_path("code"),
            doc_path=self.template_path("doc"),
        )


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for scaffold.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to scaffold.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / SCAFFOLD_CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_config(path: Path | None = None, search: bool = True) -> ScaffoldConfig:
    """Load and validate scaffold configuration.

    Args:
        path: Explicit path to scaffold.yml.  Must exist when given.
        search: When no path is given, search upward from cwd.

    Returns:
        Validated ScaffoldConfig (defaults when no file is found).

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    if path is None:
        path = find_config_file() if search else None
        if path is None:
            logger.debug("No %s found, using defaults", SCAFFOLD_CONFIG_FILE)
            return ScaffoldConfig(root=Path.cwd())

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading scaffold config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # The YAML may wrap everything under a "scaffold" key or be flat
    if "scaffold" in data and isinstance(data["scaffold"], dict):
        data = data["scaffold"]

    try:
        config = ScaffoldConfig.model_validate({**data, "root": path.parent.resolve()})
    except ValidationError as e:
        raise ConfigError(f"Invalid scaffold configuration: {e}") from e

    logger.info("Loaded scaffold config from %s", path)
    return config
