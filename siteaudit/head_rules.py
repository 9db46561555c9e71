"""Head-tag conventions checked per document."""

from __future__ import annotations

import re
from typing import List, Literal, Optional

from .models import AuditConfig, Document, HeadViolation

PageCategory = Literal["excluded", "list", "page"]

CANONICAL_MARKER = 'rel="canonical"'
NOINDEX_MARKER = "noindex"


def hreflang_marker(code: str) -> str:
    return f'hreflang="{code}"'


def list_page_pattern(config: AuditConfig) -> re.Pattern[str]:
    """``(<lang>/)?<section>/index.<ext>`` built from the configured names."""

    sections = "|".join(re.escape(name) for name in config.list_sections) or r"(?!)"
    prefix = ""
    if config.language_prefixes:
        langs = "|".join(re.escape(lang) for lang in config.language_prefixes)
        prefix = f"(?:(?:{langs})/)?"
    return re.compile(f"^{prefix}(?:{sections})/{re.escape(config.index_document)}$")


def classify_page(
    rel_path: str, config: AuditConfig, pattern: Optional[re.Pattern[str]] = None
) -> PageCategory:
    if rel_path in config.excluded_pages:
        return "excluded"
    if (pattern or list_page_pattern(config)).match(rel_path):
        return "list"
    return "page"


def check_head(
    document: Document, config: AuditConfig, pattern: Optional[re.Pattern[str]] = None
) -> List[HeadViolation]:
    category = classify_page(document.rel_path, config, pattern)
    content = document.content

    if category == "excluded":
        if NOINDEX_MARKER not in content:
            return [
                HeadViolation(
                    file=document.rel_path,
                    rule="noindex",
                    issue="Missing noindex meta tag",
                )
            ]
        return []

    if category == "list":
        missing = [
            code for code in config.hreflang_languages if hreflang_marker(code) not in content
        ]
        if missing:
            return [
                HeadViolation(
                    file=document.rel_path,
                    rule="hreflang",
                    issue="Missing hreflang for: " + ", ".join(missing),
                )
            ]
        return []

    if CANONICAL_MARKER not in content:
        return [
            HeadViolation(
                file=document.rel_path,
                rule="canonical",
                issue="Missing canonical link",
            )
        ]
    return []


def check_heads(documents: List[Document], config: AuditConfig) -> List[HeadViolation]:
    pattern = list_page_pattern(config)
    violations: List[HeadViolation] = []
    for document in documents:
        violations.extend(check_head(document, config, pattern))
    return violations
