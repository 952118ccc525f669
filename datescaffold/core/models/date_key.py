"""
DateKey — the date a scaffold is built for, and its derived strings.
"""

from __future__ import annotations

import re
from datetime import date

from pydantic import BaseModel, ConfigDict

from datescaffold.core.errors import InvalidDateFormat

# Strict yyyy-mm-dd, no surrounding whitespace
_ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class DateKey(BaseModel):
    """A calendar date plus the three strings the templates use.

    Attributes:
        year:     4-digit year, e.g. ``"2023"``.
        iso_date: ``yyyy-mm-dd``, e.g. ``"2023-08-22"``.
        compact:  ``yyyymmdd``, e.g. ``"20230822"``.
    """

    model_config = ConfigDict(frozen=True)

    year: str
    iso_date: str
    compact: str

    @classmethod
    def parse(cls, value: str) -> DateKey:
        """Build a DateKey from a ``yyyy-mm-dd`` string.

        Raises:
            InvalidDateFormat: If the value is not a string in that form
                or does not name a real calendar date.
        """
        if not isinstance(value, str) or not _ISO_DATE_RE.fullmatch(value):
            raise InvalidDateFormat(value)
        try:
            day = date.fromisoformat(value)
        except ValueError as e:
            raise InvalidDateFormat(value) from e
        return cls.from_date(day)

    @classmethod
    def from_date(cls, day: date) -> DateKey:
        iso = day.isoformat()
        return cls(year=iso.split("-")[0], iso_date=iso, compact=iso.replace("-", ""))
