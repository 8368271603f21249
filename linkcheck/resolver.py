"""Internal route resolution against the content collection tree.

Only the route shapes listed here are known.  Any other internal path is
reported as broken, so a new route shape must be added explicitly.
"""

from __future__ import annotations

import re
from pathlib import Path

from linkcheck.classifier import strip_fragment
from linkcheck.models import LinkKind, LinkStatus, ValidationResult

_GUIDE_ROUTE = re.compile(r"^/docs/guides/([^/]+)/([^/]+)$")
_TUTORIAL_ROUTE = re.compile(r"^/docs/tutorials/([^/]+)$")
_DOCS_INDEX_ROUTE = re.compile(r"^/docs/?$")


def expected_file(path: str, content_dir: Path) -> Path | None:
    """Return the content file backing *path*, or ``None`` for unknown shapes.

    Synthetic routes (``/`` and ``/docs``) have no backing file either; use
    :func:`internal_path_exists` to test existence.
    """
    match = _GUIDE_ROUTE.match(path)
    if match:
        category, slug = match.groups()
        return content_dir / "guides" / category / f"{slug}.md"
    match = _TUTORIAL_ROUTE.match(path)
    if match:
        return content_dir / "tutorials" / f"{match.group(1)}.md"
    return None


def internal_path_exists(url: str, content_dir: Path) -> bool:
    """Return ``True`` if internal *url* resolves to content under *content_dir*.

    The ``#fragment`` is ignored.  The filesystem is consulted on every call.
    """
    path = strip_fragment(url)
    if path == "/" or _DOCS_INDEX_ROUTE.match(path):
        return True
    target = expected_file(path, content_dir)
    return target is not None and target.is_file()


def resolve_internal(url: str, content_dir: Path) -> ValidationResult:
    status = LinkStatus.OK if internal_path_exists(url, content_dir) else LinkStatus.BROKEN
    return ValidationResult(kind=LinkKind.INTERNAL, status=status)
