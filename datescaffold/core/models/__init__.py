"""
Domain models — Pydantic types for the scaffold generator.

All models are re-exported here for convenient access:

    from datescaffold.core.models import DateKey, ScaffoldPaths, Template
"""

from datescaffold.core.models.date_key import DateKey
from datescaffold.core.models.scaffold import FileOutcome, FileResult, ScaffoldPaths
from datescaffold.core.models.template import PLACEHOLDER_TOKENS, FileKind, Template

__all__ = [
    # date_key.py
    "DateKey",
    # template.py
    "FileKind",
    # scaffold.py
    "FileOutcome",
    "FileResult",
    "PLACEHOLDER_TOKENS",
    "ScaffoldPaths",
    "Template",
]
