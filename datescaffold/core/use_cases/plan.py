"""
Plan use case — show what ``new`` would create, without touching disk.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from datescaffold.core.config.loader import ConfigError, load_config
from datescaffold.core.errors import InvalidDateFormat
from datescaffold.core.models.date_key import DateKey
from datescaffold.core.models.scaffold import ScaffoldPaths


@dataclass
class PlanResult:
    """Derived paths for a date and whether each already exists."""

    date_key: DateKey | None = None
    paths: ScaffoldPaths | None = None
    exists: dict[str, bool] = field(default_factory=dict)
    error: str | None = None

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error}
        assert self.date_key is not None and self.paths is not None
        return {
            "date": self.date_key.model_dump(),
            "paths": {
                "directory": str(self.paths.directory),
                "code_file": str(self.paths.code_file),
                "doc_file": str(self.paths.doc_file),
            },
            "exists": self.exists,
        }


def plan_paths(
    date_input: str,
    config_path: Path | None = None,
    include_doc: bool | None = None,
    base_dir: Path | None = None,
    code_extension: str | None = None,
) -> PlanResult:
    """Derive the scaffold paths for a date and check which exist."""
    try:
        config = load_config(config_path)
        date_key = DateKey.parse(date_input)
    except (ConfigError, InvalidDateFormat) as e:
        return PlanResult(error=str(e))

    if include_doc is None:
        include_doc = config.include_doc

    try:
        paths = ScaffoldPaths.derive(
            date_key,
            base_dir if base_dir is not None else config.resolved_base_dir(),
            code_extension or config.code_extension,
        )
        exists = {
            "directory": paths.directory.is_dir(),
            "code_file": paths.code_file.exists(),
        }
        if include_doc:
            exists["doc_file"] = paths.doc_file.exists()
    except (ValueError, OSError) as e:
        return PlanResult(date_key=date_key, error=str(e))

    return PlanResult(date_key=date_key, paths=paths, exists=exists)
