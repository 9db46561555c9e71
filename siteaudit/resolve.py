"""Resolution of link references to filesystem paths."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

from .models import LinkReference, MissingLinkFinding


def resolve_link_path(link: str, source: str, root: Path) -> Path:
    """Map a raw link found in ``source`` (relative to root) to a candidate path.

    The anchor is dropped. Root-relative links resolve against the site root;
    everything else, including an empty same-page reference, resolves against
    the source document's directory.
    """

    target = link.split("#", 1)[0]
    if target.startswith("/"):
        candidate = os.path.join(str(root), "." + target)
    else:
        candidate = os.path.join(os.path.dirname(os.path.join(str(root), source)), target)
    return Path(os.path.normpath(candidate).replace("\\", "/"))


def link_target_exists(path: Path, index_document: str = "index.html") -> bool:
    """True if path is a file or a directory holding the index document.

    A bare directory does not count, so ``./#top`` in a page whose directory
    has no index document is reported as missing.
    """

    return path.is_file() or (path / index_document).is_file()


def check_links(
    refs: Iterable[LinkReference], root: Path, *, index_document: str = "index.html"
) -> List[MissingLinkFinding]:
    """Resolve each reference once and report the ones that do not exist."""

    missing: List[MissingLinkFinding] = []
    for ref in refs:
        resolved = resolve_link_path(ref.link, ref.source, root)
        if not link_target_exists(resolved, index_document):
            missing.append(
                MissingLinkFinding(link=ref.link, source=ref.source, resolved=resolved.as_posix())
            )
    return missing
