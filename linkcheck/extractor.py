"""Link extraction: turns a :class:`Document` into :class:`LinkOccurrence` items."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator

from linkcheck.models import Document, LinkOccurrence

# Simplified markdown link grammar: ``[text](url)``.  No nested brackets,
# no reference-style links; a leading ``!`` (image) is not special.
_LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")


def read_document(path: Path, root: Path) -> Document:
    """Read *path* into a :class:`Document` whose ``path`` is relative to *root*.

    Files outside *root* keep their path as given.

    Raises:
        OSError: If the file cannot be read.
    """
    try:
        relative = path.relative_to(root).as_posix()
    except ValueError:
        relative = path.as_posix()
    text = path.read_text(encoding="utf-8", errors="replace")
    return Document(path=relative, text=text)


def extract_links(document: Document) -> Iterator[LinkOccurrence]:
    """Yield every link token in *document*, in line order then left to right.

    Text that does not match the link grammar is skipped.  Each call returns
    a fresh generator, so the sequence can be restarted.
    """
    # Only "\n" ends a line; form feeds and other Unicode breaks stay inline.
    for line_number, line in enumerate(document.text.split("\n"), start=1):
        line = line.rstrip("\r")
        for match in _LINK_PATTERN.finditer(line):
            yield LinkOccurrence(
                source_path=document.path,
                line_number=line_number,
                display_text=match.group(1),
                raw_url=match.group(2),
            )
