"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest


@pytest.fixture
def base_dir(tmp_path: Path) -> Path:
    """Return an empty directory to build scaffolds under."""
    root = tmp_path / "work"
    root.mkdir()
    return root


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """Return a directory holding simple code and doc templates."""
    tdir = tmp_path / "templates"
    tdir.mkdir()
    (tdir / "code.tmpl").write_text(
        "year <- yr\nday <- date_chr\nslug <- date_strip\nagain <- date_chr\n",
        encoding="utf-8",
    )
    (tdir / "doc.tmpl").write_text(
        "# date_chr\n\nIn yr, file date_strip.\n",
        encoding="utf-8",
    )
    return tdir


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch) -> Path:
    """Run the test from an empty directory with no scaffold.yml above it."""
    cwd = tmp_path / "cwd"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd
