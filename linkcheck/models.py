"""Data models for the link check pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LinkKind(str, Enum):
    """What a link points at, derived from its URL prefix."""

    ANCHOR = "anchor"
    CONTACT = "contact"
    INTERNAL = "internal"
    EXTERNAL = "external"


class LinkStatus(str, Enum):
    OK = "ok"
    BROKEN = "broken"


@dataclass(frozen=True)
class Document:
    """A content file, read once per scan."""

    path: str
    text: str


@dataclass(frozen=True)
class LinkOccurrence:
    """One ``[text](url)`` token found in a document."""

    source_path: str
    line_number: int
    display_text: str
    raw_url: str


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of checking a single link.

    ``http_status_code`` is only set for external links; ``0`` means the
    server could not be reached at all.
    """

    kind: LinkKind
    status: LinkStatus
    http_status_code: int | None = None

    @property
    def is_broken(self) -> bool:
        return self.status is LinkStatus.BROKEN


@dataclass(frozen=True)
class BrokenLinkRecord:
    """A link that failed validation, as listed in the final report."""

    source_path: str
    line_number: int
    raw_url: str
    kind: LinkKind

    @classmethod
    def from_occurrence(cls, occurrence: LinkOccurrence, kind: LinkKind) -> BrokenLinkRecord:
        return cls(
            source_path=occurrence.source_path,
            line_number=occurrence.line_number,
            raw_url=occurrence.raw_url,
            kind=kind,
        )
