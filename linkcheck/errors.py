"""Exceptions raised by the link checker."""

from __future__ import annotations

from pathlib import Path


class LinkCheckError(Exception):
    """Base class for link checker failures."""


class ContentRootError(LinkCheckError):
    """The content root is missing or cannot be enumerated.

    This is the only unrecoverable condition: without a file list there is
    nothing to scan.
    """

    def __init__(self, content_dir: Path, reason: str) -> None:
        self.content_dir = content_dir
        self.reason = reason
        super().__init__(f"Cannot read content directory {content_dir}: {reason}")
