"""Extraction of internal link references from markup and the nav config."""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Tuple

from .models import LinkReference

HREF_RE = re.compile(r"""href=["']([^"']+)["']""")
NAV_HREF_RE = re.compile(r"""href:\s*["']([^"']+)["']""")

EXTERNAL_PREFIXES = ("http://", "https://", "mailto:")
INTERNAL_PREFIXES = ("/", "./", "../")

LinkTable = Dict[Tuple[str, str], LinkReference]


def is_internal_link(link: str) -> bool:
    """Protocol check first; then the link must be root- or path-relative."""

    if link.startswith(EXTERNAL_PREFIXES):
        return False
    return link.startswith(INTERNAL_PREFIXES)


def _dedupe(source: str, links: Iterable[str]) -> List[LinkReference]:
    seen: dict[str, LinkReference] = {}
    for link in links:
        seen.setdefault(link, LinkReference(source=source, link=link))
    return list(seen.values())


def extract_links(content: str, source: str) -> List[LinkReference]:
    """Return the unique internal href values found in a document."""

    matches = (match.group(1) for match in HREF_RE.finditer(content))
    return _dedupe(source, (link for link in matches if is_internal_link(link)))


def extract_nav_links(content: str, label: str) -> List[LinkReference]:
    """Return root-relative targets declared as ``href: '...'`` in the nav source.

    In-page anchors such as ``#about`` are not collected here.
    """

    matches = (match.group(1) for match in NAV_HREF_RE.finditer(content))
    return _dedupe(
        label,
        (link for link in matches if link.startswith("/") and not link.startswith("http")),
    )


def register_links(table: LinkTable, refs: Iterable[LinkReference]) -> int:
    """Add references to the table keyed by (source, link); return how many were new."""

    added = 0
    for ref in refs:
        key = (ref.source, ref.link)
        if key not in table:
            table[key] = ref
            added += 1
    return added
