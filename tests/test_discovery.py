from pathlib import Path

import pytest

from siteaudit.discovery import find_documents
from siteaudit.models import AuditSetupError


def _touch(path: Path, text: str = "<html></html>") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_find_documents_recurses_and_prunes(tmp_path: Path) -> None:
    _touch(tmp_path / "index.html")
    _touch(tmp_path / "notes" / "a.html")
    _touch(tmp_path / "zh" / "notes" / "index.html")
    _touch(tmp_path / "notes" / "readme.md")
    _touch(tmp_path / ".git" / "hooks" / "x.html")
    _touch(tmp_path / "node_modules" / "pkg" / "deep" / "y.html")
    _touch(tmp_path / "assets" / ".cache" / "z.html")

    docs = find_documents(tmp_path)

    assert [doc.rel_path for doc in docs] == [
        "index.html",
        "notes/a.html",
        "zh/notes/index.html",
    ]


def test_find_documents_custom_extension_and_ignored_dirs(tmp_path: Path) -> None:
    _touch(tmp_path / "a.htm")
    _touch(tmp_path / "a.html")
    _touch(tmp_path / "vendor" / "b.htm")

    docs = find_documents(tmp_path, extension="htm", ignored_dirs=["vendor"])

    assert [doc.rel_path for doc in docs] == ["a.htm"]


def test_find_documents_missing_root_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(AuditSetupError):
        find_documents(tmp_path / "missing")


def test_document_content_is_loaded_once(tmp_path: Path) -> None:
    _touch(tmp_path / "index.html", "first")
    doc = find_documents(tmp_path)[0]

    assert doc.content == "first"
    (tmp_path / "index.html").write_text("second", encoding="utf-8")
    assert doc.content == "first"


def test_unreadable_document_is_fatal(tmp_path: Path) -> None:
    (tmp_path / "bad.html").write_bytes(b"\xff\xfe\xfa")
    doc = find_documents(tmp_path)[0]

    with pytest.raises(AuditSetupError):
        doc.content
