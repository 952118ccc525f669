"""
New-scaffold use case — load config, apply overrides, run the scaffold.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from datescaffold.core.config.loader import ConfigError, load_config
from datescaffold.core.errors import FilesystemError, InvalidDateFormat
from datescaffold.core.services.scaffold import ScaffoldResult, scaffold

logger = logging.getLogger(__name__)


@dataclass
class NewResult:
    """Result of the new-scaffold use case."""

    scaffold: ScaffoldResult | None = None
    error: str | None = None
    error_kind: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.scaffold is not None and self.scaffold.ok

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error, "error_kind": self.error_kind}
        assert self.scaffold is not None
        return self.scaffold.to_dict()


def run_new(
    date_input: str,
    config_path: Path | None = None,
    include_doc: bool | None = None,
    base_dir: Path | None = None,
    code_extension: str | None = None,
) -> NewResult:
    """Create the scaffold for a date.

    Arguments left as None fall back to scaffold.yml, then to defaults.
    """
    try:
        config = load_config(config_path)
    except ConfigError as e:
        return NewResult(error=str(e), error_kind="ConfigError")

    try:
        result = scaffold(
            date_input,
            include_doc=config.include_doc if include_doc is None else include_doc,
            base_dir=base_dir if base_dir is not None else config.resolved_base_dir(),
            code_extension=code_extension or config.code_extension,
            templates=config.template_store(),
            quote_char=config.quote_char,
        )
    except (InvalidDateFormat, FilesystemError) as e:
        logger.debug("Scaffold aborted: %s", e)
        return NewResult(error=str(e), error_kind=e.kind)
    except ValueError as e:
        return NewResult(error=str(e), error_kind="InvalidExtension")

    return NewResult(scaffold=result)
