"""Discovery of the documents to audit."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from .models import AuditSetupError, Document


def _is_pruned(name: str, ignored_dirs: Iterable[str]) -> bool:
    return name.startswith(".") or name in ignored_dirs


def _raise_walk_error(exc: OSError) -> None:
    raise AuditSetupError(f"Unable to scan {exc.filename}: {exc.strerror or exc}") from exc


def find_documents(
    root: Path, *, extension: str = "html", ignored_dirs: Iterable[str] = ("node_modules",)
) -> list[Document]:
    """Return every document with the extension under root, sorted by relative path.

    Hidden directories and ignored directories are skipped with their whole
    subtree.
    """

    if not root.is_dir():
        raise AuditSetupError(f"Site root not found or not a directory: {root}")

    ignored = set(ignored_dirs)
    suffix = "." + extension.lstrip(".")
    documents: list[Document] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        dirnames[:] = sorted(name for name in dirnames if not _is_pruned(name, ignored))
        base = Path(dirpath)
        for name in filenames:
            path = base / name
            if not name.endswith(suffix) or not path.is_file():
                continue
            documents.append(Document(rel_path=path.relative_to(root).as_posix(), path=path))

    return sorted(documents, key=lambda doc: doc.rel_path)
