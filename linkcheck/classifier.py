"""URL classification."""

from __future__ import annotations

from linkcheck.models import LinkKind

_CONTACT_PREFIXES = ("mailto:", "tel:")
_EXTERNAL_PREFIXES = ("http://", "https://")

# Kinds that are looked at by a resolver or validator.
CHECKABLE_KINDS = frozenset({LinkKind.INTERNAL, LinkKind.EXTERNAL})


def classify_url(url: str) -> LinkKind | None:
    """Return the :class:`LinkKind` of *url*, or ``None`` if it is not checkable.

    Rules are applied in order and the first match wins.  Relative paths and
    empty strings are not checkable.  The full URL is classified, so an
    internal path with a ``#fragment`` is still internal.
    """
    if url.startswith("#"):
        return LinkKind.ANCHOR
    if url.startswith(_CONTACT_PREFIXES):
        return LinkKind.CONTACT
    if url.startswith(_EXTERNAL_PREFIXES):
        return LinkKind.EXTERNAL
    if url.startswith("/"):
        return LinkKind.INTERNAL
    return None


def is_checkable(kind: LinkKind | None) -> bool:
    return kind in CHECKABLE_KINDS


def strip_fragment(url: str) -> str:
    """Drop everything from the first ``#`` on."""
    return url.split("#", 1)[0]
