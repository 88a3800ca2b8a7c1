"""Tests for writing notes into the vault."""

import pytest

from highlights.errors import DestinationFileExists, DestinationFolderInvalid, DocumentWriteError
from highlights.models import ImportResult
from highlights.writer import resolve_vault_path, write_document


def make_result(path: str = "/Dune.md", document: str = "---\n---\n") -> ImportResult:
    return ImportResult(document=document, highlight_count=0, path=path)


def test_resolve_vault_path_root(tmp_path):
    assert resolve_vault_path(tmp_path, "/Dune.md") == tmp_path / "Dune.md"


def test_resolve_vault_path_folder(tmp_path):
    assert resolve_vault_path(tmp_path, "Books/Dune.md") == tmp_path / "Books" / "Dune.md"
    assert resolve_vault_path(tmp_path, "/Books/Dune.md") == tmp_path / "Books" / "Dune.md"


def test_write_document(tmp_path):
    target = write_document(make_result(document="título: ñ\n"), tmp_path)

    assert target == tmp_path / "Dune.md"
    assert target.read_text(encoding="utf-8") == "título: ñ\n"


def test_write_document_into_folder(tmp_path):
    (tmp_path / "Books").mkdir()
    target = write_document(make_result(path="Books/Dune.md"), tmp_path)
    assert target.exists()


def test_write_document_missing_folder(tmp_path):
    with pytest.raises(DestinationFolderInvalid):
        write_document(make_result(path="Missing/Dune.md"), tmp_path)
    assert not (tmp_path / "Missing").exists()


def test_write_document_folder_is_a_file(tmp_path):
    (tmp_path / "Books").write_text("not a folder")
    with pytest.raises(DestinationFolderInvalid):
        write_document(make_result(path="Books/Dune.md"), tmp_path)


def test_write_document_does_not_overwrite(tmp_path):
    existing = tmp_path / "Dune.md"
    existing.write_text("keep me")

    with pytest.raises(DestinationFileExists) as exc_info:
        write_document(make_result(), tmp_path)

    assert existing.read_text() == "keep me"
    assert exc_info.value.path == existing


def test_write_errors_share_a_base_class(tmp_path):
    (tmp_path / "Dune.md").write_text("")
    with pytest.raises(DocumentWriteError):
        write_document(make_result(), tmp_path)


def test_write_document_other_os_error(tmp_path, monkeypatch):
    def deny(*args, **kwargs):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr("builtins.open", deny)

    with pytest.raises(DocumentWriteError) as exc_info:
        write_document(make_result(), tmp_path)

    assert not isinstance(exc_info.value, (DestinationFileExists, DestinationFolderInvalid))
    assert exc_info.value.reason == "Permission denied"
