"""Loading of the audit configuration file."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from .io_utils import read_text
from .models import AuditConfig, AuditSetupError


def load_config(path: Optional[Path]) -> AuditConfig:
    """Load an AuditConfig from YAML, or return the defaults when no path is given."""

    if path is None:
        return AuditConfig()
    if not path.is_file():
        raise AuditSetupError(f"Config file not found: {path}")

    try:
        data = yaml.safe_load(read_text(path)) or {}
    except yaml.YAMLError as exc:
        raise AuditSetupError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise AuditSetupError(f"{path} must contain a mapping of audit settings.")
    try:
        return AuditConfig.model_validate(data)
    except ValidationError as exc:
        raise AuditSetupError(f"Invalid audit config in {path}: {exc}") from exc
