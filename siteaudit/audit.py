"""Top-level audit run: discovery, link checks and head-tag checks."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .discovery import find_documents
from .head_rules import check_heads
from .io_utils import read_text, warn
from .links import LinkTable, extract_links, extract_nav_links, register_links
from .models import AuditConfig, AuditResult, AuditSetupError
from .resolve import check_links


def _nav_path(root: Path, config: AuditConfig, nav_source: Optional[Path]) -> Path:
    path = nav_source if nav_source is not None else Path(config.nav_source)
    return path if path.is_absolute() else root / path


def run_audit(
    root: Path,
    config: Optional[AuditConfig] = None,
    *,
    nav_source: Optional[Path] = None,
    verbose: bool = True,
) -> AuditResult:
    """Audit the site under root and return every finding.

    Raises AuditSetupError when the root or a document cannot be read, or
    when the root holds no documents to audit.
    """

    config = config or AuditConfig()
    root = root.resolve()
    result = AuditResult()

    def echo(msg: str) -> None:
        if verbose:
            print(msg)

    echo("🔍 Scanning HTML files...")
    documents = find_documents(
        root, extension=config.extension, ignored_dirs=config.ignored_dirs
    )
    if not documents:
        raise AuditSetupError(f"No .{config.extension} documents found under {root}")
    result.documents = len(documents)
    echo(f"Found {len(documents)} HTML files\n")

    echo("📝 Extracting internal links...")
    table: LinkTable = {}
    for document in documents:
        register_links(table, extract_links(document.content, document.rel_path))

    nav_path = _nav_path(root, config, nav_source)
    if nav_path.is_file():
        nav_refs = extract_nav_links(read_text(nav_path), config.nav_label)
        register_links(table, nav_refs)
        result.nav_loaded = True
        echo(f"Found {len(nav_refs)} navigation links in {config.nav_label}")
    else:
        warn(f"⚠️  Navigation source not found: {nav_path}; checking markup links only.")
    result.links = len(table)
    echo(f"Found {len(table)} internal links\n")

    echo("✅ Checking links...")
    result.missing_links = check_links(
        table.values(), root, index_document=config.index_document
    )

    echo("🏷️  Checking head tags...")
    result.head_violations = check_heads(documents, config)
    return result
