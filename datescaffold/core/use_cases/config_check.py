"""
Config check use case — validate scaffold.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from datescaffold.core.config.loader import (
    SCAFFOLD_CONFIG_FILE,
    ConfigError,
    ScaffoldConfig,
    find_config_file,
    load_config,
)
from datescaffold.core.errors import TemplateNotFound
from datescaffold.core.models.template import PLACEHOLDER_TOKENS, FileKind
from datescaffold.core.services.templating import find_placeholders


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    config: ScaffoldConfig | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "base_dir": str(self.config.resolved_base_dir()) if self.config else None,
            "code_extension": self.config.code_extension if self.config else None,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate scaffold configuration and its templates.

    Args:
        config_path: Optional explicit path to scaffold.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_config_file()
        if config_path is None:
            result.warnings.append(f"No {SCAFFOLD_CONFIG_FILE} found. Using defaults.")

    result.config_path = config_path

    try:
        config = load_config(config_path, search=False)
        result.config = config
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    # Templates must exist and should use every token
    store = config.template_store()
    for kind in FileKind:
        try:
            template = store.load(kind)
        except TemplateNotFound as e:
            result.errors.append(f"{kind.value} template: {e}")
            continue
        missing = [t for t in PLACEHOLDER_TOKENS if t not in find_placeholders(template.text)]
        if missing:
            result.warnings.append(
                f"{kind.value} template ({template.source}) has no "
                f"{', '.join(missing)} placeholder(s)."
            )

    if len(config.quote_char) > 1:
        result.warnings.append(
            f"quote_char is {len(config.quote_char)} characters long: {config.quote_char!r}"
        )

    result.valid = len(result.errors) == 0
    return result
