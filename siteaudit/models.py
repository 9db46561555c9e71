"""Data types and configuration models for the site audit."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AuditSetupError(RuntimeError):
    """Raised when the audit cannot read its inputs and must abort."""


class AuditConfig(BaseModel):
    """Rule set and layout conventions for the audited site."""

    extension: str = Field(
        "html", description="Extension of the documents to audit, without the dot."
    )
    ignored_dirs: List[str] = Field(
        default_factory=lambda: ["node_modules"],
        alias="ignoredDirs",
        description="Directory names pruned during discovery (hidden dirs are always pruned).",
    )
    nav_source: str = Field(
        "assets/js/site-nav.js",
        alias="navSource",
        description="Navigation definition script, relative to the site root.",
    )
    nav_label: str = Field(
        "[nav] assets/js/site-nav.js",
        alias="navLabel",
        description="Source label used for links declared in the navigation source.",
    )
    excluded_pages: List[str] = Field(
        default_factory=lambda: ["404.html", "en/index.html"],
        alias="excludedPages",
        description="Pages that must carry a noindex directive instead of a canonical link.",
    )
    list_sections: List[str] = Field(
        default_factory=lambda: ["tech-stack", "projects", "notes", "tools", "misc"],
        alias="listSections",
        description="Section names whose index documents are list pages.",
    )
    language_prefixes: List[str] = Field(
        default_factory=lambda: ["zh"],
        alias="languagePrefixes",
        description="Optional path prefixes of translated content trees.",
    )
    hreflang_languages: List[str] = Field(
        default_factory=lambda: ["en", "zh-cn"],
        alias="hreflangLanguages",
        description="Language codes every list page must declare with hreflang.",
    )
    index_name: str = Field(
        "index", alias="indexName", description="Stem of directory index documents."
    )

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("extension")
    @classmethod
    def strip_extension_dot(cls, value: str) -> str:
        extension = value.strip().lstrip(".")
        if not extension:
            raise ValueError("extension must name a file suffix such as 'html'")
        return extension

    @property
    def index_document(self) -> str:
        return f"{self.index_name}.{self.extension}"


@dataclass
class Document:
    """A discovered file; content is read once on first use."""

    rel_path: str
    path: Path
    _content: Optional[str] = field(default=None, init=False, repr=False)

    @property
    def content(self) -> str:
        if self._content is None:
            try:
                self._content = self.path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                raise AuditSetupError(f"Unable to read {self.rel_path}: {exc}") from exc
        return self._content


@dataclass(frozen=True)
class LinkReference:
    source: str
    link: str


@dataclass(frozen=True)
class MissingLinkFinding:
    link: str
    source: str
    resolved: str


@dataclass(frozen=True)
class HeadViolation:
    file: str
    rule: str
    issue: str


@dataclass
class AuditResult:
    """Everything a single run produced."""

    documents: int = 0
    links: int = 0
    nav_loaded: bool = False
    missing_links: list[MissingLinkFinding] = field(default_factory=list)
    head_violations: list[HeadViolation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.missing_links and not self.head_violations
