from pathlib import Path

from siteaudit.models import LinkReference
from siteaudit.resolve import check_links, link_target_exists, resolve_link_path


def test_root_relative_ignores_source_location() -> None:
    root = Path("/site")

    assert resolve_link_path("/assets/data/y.json", "notes/x.html", root) == Path(
        "/site/assets/data/y.json"
    )
    assert resolve_link_path("/assets/data/y.json", "a/b/c/d.html", root) == Path(
        "/site/assets/data/y.json"
    )


def test_relative_resolution() -> None:
    assert resolve_link_path("../assets/z.css", "notes/x.html", Path("/site")) == Path(
        "/site/assets/z.css"
    )
    assert resolve_link_path("./y.html", "notes/x.html", Path("/site")) == Path(
        "/site/notes/y.html"
    )


def test_anchor_is_stripped() -> None:
    assert resolve_link_path("/notes/#intro", "index.html", Path("/site")) == Path("/site/notes")
    assert resolve_link_path("./#top", "notes/x.html", Path("/site")) == Path("/site/notes")


def test_index_fallback(tmp_path: Path) -> None:
    (tmp_path / "projects").mkdir()
    (tmp_path / "projects" / "index.html").write_text("", encoding="utf-8")
    (tmp_path / "empty").mkdir()

    assert link_target_exists(resolve_link_path("/projects/", "index.html", tmp_path))
    assert not link_target_exists(resolve_link_path("/empty/", "index.html", tmp_path))


def test_check_links_reports_each_missing_reference_once(tmp_path: Path) -> None:
    (tmp_path / "notes").mkdir()
    (tmp_path / "notes" / "x.html").write_text("", encoding="utf-8")
    (tmp_path / "style.css").write_text("", encoding="utf-8")
    refs = [
        LinkReference(source="notes/x.html", link="../style.css"),
        LinkReference(source="notes/x.html", link="/missing.html#a"),
        LinkReference(source="index.html", link="/missing.html#a"),
    ]

    missing = check_links(refs, tmp_path)

    assert [(f.source, f.link) for f in missing] == [
        ("notes/x.html", "/missing.html#a"),
        ("index.html", "/missing.html#a"),
    ]
    assert missing[0].resolved == (tmp_path / "missing.html").as_posix()


def test_same_page_anchor_needs_index_document(tmp_path: Path) -> None:
    (tmp_path / "notes").mkdir()
    (tmp_path / "notes" / "x.html").write_text("", encoding="utf-8")
    refs = [LinkReference(source="notes/x.html", link="./#top")]

    assert [f.resolved for f in check_links(refs, tmp_path)] == [(tmp_path / "notes").as_posix()]

    (tmp_path / "notes" / "index.html").write_text("", encoding="utf-8")
    assert check_links(refs, tmp_path) == []
