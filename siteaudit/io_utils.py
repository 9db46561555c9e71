"""Utility helpers for text/JSON IO and console warnings."""

from __future__ import annotations

import json
import sys
from pathlib import Path

from .models import AuditSetupError


def stable_json_dumps(obj: object) -> str:
    """Serialize JSON in a stable, human-readable way with a trailing newline."""
    return json.dumps(obj, ensure_ascii=False, sort_keys=True, indent=2) + "\n"


def read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise AuditSetupError(f"Unable to read {path}: {exc}") from exc


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)
