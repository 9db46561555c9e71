"""Console and file reports for audit results."""

from __future__ import annotations

import datetime as dt
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, TextIO, Tuple, TypeVar

from .io_utils import stable_json_dumps
from .models import AuditResult


T = TypeVar("T")


def group_by(items: Iterable[T], key: Callable[[T], str]) -> Dict[str, List[T]]:
    """Group items by key; keys keep the order in which they were first seen."""

    grouped: Dict[str, List[T]] = {}
    for item in items:
        grouped.setdefault(key(item), []).append(item)
    return grouped


def summarize(result: AuditResult) -> dict:
    return {
        "documents": result.documents,
        "links": result.links,
        "missingLinks": len(result.missing_links),
        "headViolations": len(result.head_violations),
        "navLoaded": result.nav_loaded,
        "ok": result.ok,
    }


def print_report(result: AuditResult, stream: Optional[TextIO] = None) -> None:
    out = stream or sys.stdout

    if result.missing_links:
        print(f"\n❌ Found {len(result.missing_links)} broken links:\n", file=out)
        for source, findings in group_by(result.missing_links, lambda f: f.source).items():
            print(f"  Source: {source}", file=out)
            for finding in findings:
                print(f"    {finding.link}", file=out)
                print(f"      Resolved: {finding.resolved}", file=out)
            print("", file=out)
    else:
        print("✅ All links are valid!", file=out)

    if result.head_violations:
        print(f"\n❌ Found {len(result.head_violations)} head tag violations:\n", file=out)
        for rule, violations in group_by(result.head_violations, lambda v: v.rule).items():
            print(f"  [{rule}]", file=out)
            for violation in violations:
                print(f"    {violation.file}: {violation.issue}", file=out)
            print("", file=out)
    else:
        print("✅ All head tags are valid!", file=out)


def _write_report(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def _markdown_report(result: AuditResult, meta: dict) -> str:
    summary = summarize(result)
    lines = [
        "# Site Audit Report",
        "",
        "## Overview",
        "",
        f"- Executed: {meta.get('executedAt')}",
        f"- Root: {meta.get('root')}",
        f"- Status: {'PASS' if result.ok else 'FAIL'}",
        "",
        "## Summary",
        "",
        "| Check | Count |",
        "| --- | ---: |",
        f"| Documents | {summary['documents']} |",
        f"| Internal links | {summary['links']} |",
        f"| Broken links | {summary['missingLinks']} |",
        f"| Head tag violations | {summary['headViolations']} |",
        "",
        "## Broken links",
        "",
    ]
    if not result.missing_links:
        lines.append("- None.")
    for source, findings in group_by(result.missing_links, lambda f: f.source).items():
        lines.append(f"### {source}")
        lines.append("")
        for finding in findings:
            lines.append(f"- `{finding.link}` → `{finding.resolved}`")
        lines.append("")

    lines.extend(["", "## Head tag violations", ""])
    if not result.head_violations:
        lines.append("- None.")
    for rule, violations in group_by(result.head_violations, lambda v: v.rule).items():
        lines.append(f"### {rule}")
        lines.append("")
        for violation in violations:
            lines.append(f"- `{violation.file}`: {violation.issue}")
        lines.append("")

    return "\n".join(lines).rstrip() + "\n"


def write_reports(result: AuditResult, report_dir: Path, *, root: Path) -> Tuple[Path, Path]:
    """Write site_audit.json and site_audit.md into report_dir."""

    report_dir.mkdir(parents=True, exist_ok=True)
    meta = {
        "executedAt": dt.datetime.now(dt.timezone.utc).isoformat(),
        "root": str(root),
        "python": sys.version,
    }
    payload = {
        "meta": meta,
        "summary": summarize(result),
        "missingLinks": [asdict(finding) for finding in result.missing_links],
        "headViolations": [asdict(violation) for violation in result.head_violations],
    }
    json_path = _write_report(report_dir / "site_audit.json", stable_json_dumps(payload))
    md_path = _write_report(report_dir / "site_audit.md", _markdown_report(result, meta))
    return json_path, md_path
