"""Command-line interface for the static site audit."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from .audit import run_audit
from .config import load_config
from .io_utils import warn
from .models import AuditSetupError
from .report import print_report, write_reports

EXIT_OK = 0
EXIT_FINDINGS = 1
EXIT_SETUP_ERROR = 2


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Check internal links and SEO head tags of a static site."
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=Path("."),
        help="Site root directory to audit (default: current directory).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML file overriding the default audit rules.",
    )
    parser.add_argument(
        "--nav",
        type=Path,
        help="Navigation definition script (relative paths are taken from the root).",
    )
    parser.add_argument(
        "--report-dir",
        type=Path,
        help="Also write site_audit.json and site_audit.md to this directory.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        config = load_config(args.config)
        result = run_audit(args.root, config, nav_source=args.nav)
    except AuditSetupError as exc:
        warn(f"error: {exc}")
        return EXIT_SETUP_ERROR

    print_report(result)
    if args.report_dir:
        json_path, md_path = write_reports(result, args.report_dir, root=args.root.resolve())
        print(f"Wrote reports to {md_path} and {json_path}")
    return EXIT_OK if result.ok else EXIT_FINDINGS


if __name__ == "__main__":
    raise SystemExit(main())
