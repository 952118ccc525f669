"""
Tests for the scaffold service — directory/file creation, skips, rendering,
and per-file failure isolation.
"""

from pathlib import Path

import pytest

from datescaffold.core.errors import FilesystemError, InvalidDateFormat
from datescaffold.core.models import FileKind, FileOutcome
from datescaffold.core.services.scaffold import scaffold
from datescaffold.core.services.template_store import TemplateStore


def _store(template_dir: Path) -> TemplateStore:
    return TemplateStore(
        code_path=template_dir / "code.tmpl",
        doc_path=template_dir / "doc.tmpl",
    )


class TestScaffoldCreate:
    def test_scenario_layout(self, base_dir: Path):
        result = scaffold("2023-08-22", base_dir=base_dir)
        directory = base_dir / "2023" / "2023-08-22"

        assert result.ok
        assert result.directory_created is True
        assert result.paths.directory == directory
        assert (directory / "20230822.R").is_file()
        assert (directory / "README.md").is_file()
        assert result.get(FileKind.CODE).outcome is FileOutcome.CREATED
        assert result.get(FileKind.DOC).outcome is FileOutcome.CREATED

    def test_rendered_content(self, base_dir: Path, template_dir: Path):
        result = scaffold("2023-08-22", base_dir=base_dir, templates=_store(template_dir))
        code = result.paths.code_file.read_text(encoding="utf-8")
        doc = result.paths.doc_file.read_text(encoding="utf-8")

        assert code == (
            'year <- "2023"\nday <- "2023-08-22"\n'
            'slug <- "20230822"\nagain <- "2023-08-22"\n'
        )
        assert doc == "# 2023-08-22\n\nIn 2023, file 20230822.\n"

    def test_bundled_templates_leave_no_tokens(self, base_dir: Path):
        result = scaffold("2023-08-22", base_dir=base_dir)
        for path in (result.paths.code_file, result.paths.doc_file):
            text = path.read_text(encoding="utf-8")
            for token in ("yr", "date_chr", "date_strip"):
                assert token not in text
        assert 'tt_load("2023-08-22")' in result.paths.code_file.read_text(encoding="utf-8")

    def test_code_extension(self, base_dir: Path):
        result = scaffold("2023-08-22", base_dir=base_dir, code_extension="py")
        assert result.paths.code_file.name == "20230822.py"
        assert result.paths.code_file.is_file()

    def test_existing_directory_ok(self, base_dir: Path):
        (base_dir / "2023" / "2023-08-22").mkdir(parents=True)
        result = scaffold("2023-08-22", base_dir=base_dir)
        assert result.directory_created is False
        assert result.ok

    def test_to_dict(self, base_dir: Path):
        data = scaffold("2023-08-22", base_dir=base_dir).to_dict()
        assert data["ok"] is True
        assert data["date"] == {"year": "2023", "iso_date": "2023-08-22", "compact": "20230822"}
        assert [f["outcome"] for f in data["files"]] == ["created", "created"]
        assert data["files"][0]["kind"] == "code"


class TestScaffoldSkip:
    def test_second_run_skips_both(self, base_dir: Path):
        first = scaffold("2023-08-22", base_dir=base_dir)
        code_before = first.paths.code_file.read_bytes()
        doc_before = first.paths.doc_file.read_bytes()

        second = scaffold("2023-08-22", base_dir=base_dir)
        assert [f.outcome for f in second.files] == [FileOutcome.SKIPPED, FileOutcome.SKIPPED]
        assert second.ok
        assert first.paths.code_file.read_bytes() == code_before
        assert first.paths.doc_file.read_bytes() == doc_before

    def test_existing_readme_untouched(self, base_dir: Path, template_dir: Path):
        directory = base_dir / "2023" / "2023-08-22"
        directory.mkdir(parents=True)
        (directory / "README.md").write_text("my notes\n")

        result = scaffold("2023-08-22", base_dir=base_dir, templates=_store(template_dir))

        assert result.get(FileKind.DOC).outcome is FileOutcome.SKIPPED
        assert (directory / "README.md").read_text() == "my notes\n"
        assert result.get(FileKind.CODE).outcome is FileOutcome.CREATED
        assert '"2023-08-22"' in (directory / "20230822.R").read_text()

    def test_skipped_file_does_not_load_template(self, base_dir: Path, tmp_path: Path):
        """An existing file never needs its template."""
        directory = base_dir / "2023" / "2023-08-22"
        directory.mkdir(parents=True)
        (directory / "README.md").write_text("keep")
        store = TemplateStore(doc_path=tmp_path / "missing.tmpl")

        result = scaffold("2023-08-22", base_dir=base_dir, templates=store)
        assert result.ok
        assert result.get(FileKind.DOC).outcome is FileOutcome.SKIPPED


class TestIncludeDoc:
    def test_no_doc(self, base_dir: Path):
        result = scaffold("2023-08-22", include_doc=False, base_dir=base_dir)
        assert [f.kind for f in result.files] == [FileKind.CODE]
        assert result.get(FileKind.DOC) is None
        assert not result.paths.doc_file.exists()
        assert result.paths.code_file.is_file()

    def test_no_doc_ignores_existing_readme(self, base_dir: Path):
        directory = base_dir / "2023" / "2023-08-22"
        directory.mkdir(parents=True)
        (directory / "README.md").write_text("keep")

        result = scaffold("2023-08-22", include_doc=False, base_dir=base_dir)
        assert len(result.files) == 1
        assert (directory / "README.md").read_text() == "keep"


class TestScaffoldErrors:
    @pytest.mark.parametrize("value", ["2023-8-22", "2023/08/22", "2023-02-30", ""])
    def test_invalid_date_touches_nothing(self, base_dir: Path, value: str):
        with pytest.raises(InvalidDateFormat):
            scaffold(value, base_dir=base_dir)
        assert list(base_dir.iterdir()) == []

    def test_missing_template_isolated(self, base_dir: Path, template_dir: Path, tmp_path: Path):
        store = TemplateStore(
            code_path=tmp_path / "missing.tmpl",
            doc_path=template_dir / "doc.tmpl",
        )
        result = scaffold("2023-08-22", base_dir=base_dir, templates=store)

        code = result.get(FileKind.CODE)
        assert code.outcome is FileOutcome.FAILED
        assert code.error == "TemplateNotFound"
        assert "missing.tmpl" in code.message
        # Empty file is not rolled back
        assert result.paths.code_file.read_text() == ""

        assert result.get(FileKind.DOC).outcome is FileOutcome.CREATED
        assert not result.ok

    def test_directory_blocked(self, base_dir: Path):
        (base_dir / "2023").write_text("in the way")
        with pytest.raises(FilesystemError) as exc:
            scaffold("2023-08-22", base_dir=base_dir)
        assert exc.value.path == base_dir / "2023" / "2023-08-22"

    def test_write_failure_isolated(self, base_dir: Path, monkeypatch):
        from datescaffold.core.services import scaffold as scaffold_mod

        real_write = scaffold_mod.write_whole

        def flaky_write(path, content):
            if path.suffix == ".R":
                raise FilesystemError(path, "No space left on device")
            real_write(path, content)

        monkeypatch.setattr(scaffold_mod, "write_whole", flaky_write)
        result = scaffold("2023-08-22", base_dir=base_dir)

        code = result.get(FileKind.CODE)
        assert code.outcome is FileOutcome.FAILED
        assert code.error == "FilesystemError"
        assert "No space left" in code.message
        assert result.get(FileKind.DOC).outcome is FileOutcome.CREATED

    def test_lost_race_is_skip(self, base_dir: Path, monkeypatch):
        """A file created between the existence check and create is skipped."""
        from datescaffold.core.services import scaffold as scaffold_mod

        monkeypatch.setattr(scaffold_mod, "create_empty", lambda path: False)
        result = scaffold("2023-08-22", base_dir=base_dir)
        assert [f.outcome for f in result.files] == [FileOutcome.SKIPPED, FileOutcome.SKIPPED]

    def test_overlong_code_name_isolated(self, base_dir: Path):
        """A code file name the OS rejects fails alone; the README is still created."""
        result = scaffold("2023-08-22", base_dir=base_dir, code_extension="x" * 300)

        code = result.get(FileKind.CODE)
        assert code.outcome is FileOutcome.FAILED
        assert code.error == "FilesystemError"
        assert result.get(FileKind.DOC).outcome is FileOutcome.CREATED
        assert result.paths.doc_file.is_file()
        assert not result.ok

    def test_overlong_base_dir(self, tmp_path: Path):
        base = tmp_path / ("b" * 300)
        with pytest.raises(FilesystemError) as exc:
            scaffold("2023-08-22", base_dir=base)
        assert exc.value.path == base / "2023" / "2023-08-22"

    @pytest.mark.parametrize("ext", ["x/../../../escaped", "a\\b", "", "..."])
    def test_bad_extension_touches_nothing(self, base_dir: Path, ext: str):
        with pytest.raises(ValueError):
            scaffold("2023-08-22", base_dir=base_dir, code_extension=ext)
        assert list(base_dir.iterdir()) == []
