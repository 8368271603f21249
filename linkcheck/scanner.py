"""Scan driver: enumerates documents and runs every link through the pipeline.

``run_scan`` is the single public entry point.  It works in two passes:

1. Read each document in enumeration order, extract and classify its links,
   resolve internal links on the spot, and submit external links to the
   :class:`~linkcheck.validator.ExternalChecker` thread pool.
2. Walk the documents again in the same order, waiting on each one's
   external results, and fold the findings into the :class:`ScanReport`.

Only the main thread writes to the report, and it does so in discovery order,
so the output is identical to a sequential run.
"""

from __future__ import annotations

import os
from concurrent.futures import Future
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Union

from linkcheck.classifier import classify_url, is_checkable
from linkcheck.config import settings
from linkcheck.errors import ContentRootError
from linkcheck.extractor import extract_links, read_document
from linkcheck.models import BrokenLinkRecord, LinkKind, LinkOccurrence, ValidationResult
from linkcheck.report import ScanReport
from linkcheck.resolver import resolve_internal
from linkcheck.validator import ExternalChecker

FileCallback = Callable[[str, List[BrokenLinkRecord]], None]
WarningCallback = Callable[[str], None]

_Outcome = Union[ValidationResult, "Future[ValidationResult]"]


@dataclass
class _PendingFile:
    path: str
    checks: List[tuple[LinkOccurrence, _Outcome]] = field(default_factory=list)
    error: Optional[str] = None


def discover_documents(content_dir: Path) -> List[Path]:
    """Return every ``.md`` file under *content_dir*, sorted by path.

    Raises:
        ContentRootError: If *content_dir* is missing or cannot be listed.
    """
    if not content_dir.is_dir():
        raise ContentRootError(content_dir, "not a directory")
    try:
        # rglob skips directories it cannot list, so open the root itself first.
        with os.scandir(content_dir):
            pass
        return sorted(p for p in content_dir.rglob("*.md") if p.is_file())
    except OSError as exc:
        raise ContentRootError(content_dir, str(exc)) from exc


def _prepare_file(
    path: Path,
    root: Path,
    content_dir: Path,
    checker: Optional[ExternalChecker],
) -> _PendingFile:
    try:
        document = read_document(path, root)
    except OSError as exc:
        try:
            relative = path.relative_to(root).as_posix()
        except ValueError:
            relative = path.as_posix()
        return _PendingFile(path=relative, error=str(exc))

    pending = _PendingFile(path=document.path)
    for occurrence in extract_links(document):
        kind = classify_url(occurrence.raw_url)
        if not is_checkable(kind):
            continue
        if kind is LinkKind.INTERNAL:
            pending.checks.append((occurrence, resolve_internal(occurrence.raw_url, content_dir)))
        elif checker is not None:
            pending.checks.append((occurrence, checker.submit(occurrence.raw_url)))
    return pending


def _collect(pending: _PendingFile) -> List[BrokenLinkRecord]:
    records: List[BrokenLinkRecord] = []
    for occurrence, outcome in pending.checks:
        result = outcome.result() if isinstance(outcome, Future) else outcome
        if result.is_broken:
            records.append(BrokenLinkRecord.from_occurrence(occurrence, result.kind))
    return records


def run_scan(
    content_dir: Optional[Path] = None,
    *,
    root: Optional[Path] = None,
    skip_external: bool = False,
    max_workers: Optional[int] = None,
    timeout: Optional[float] = None,
    on_file: Optional[FileCallback] = None,
    on_warning: Optional[WarningCallback] = None,
) -> ScanReport:
    """Scan every markdown file under *content_dir* and return the report.

    Args:
        content_dir: Content collection root.  Defaults to
            ``settings.content_dir``.
        root: Directory that report paths are made relative to.  Defaults to
            ``settings.project_root``.
        skip_external: Do not evaluate external links at all.
        max_workers: Size of the external check pool.
        timeout: Overall deadline for each external request, in seconds.
        on_file: Called once per file, in order, with its broken links.
        on_warning: Called with a message for each unreadable file.

    Returns:
        The finished :class:`ScanReport`.  If the scan is interrupted with
        Ctrl-C, the report holds every file completed so far and has
        ``interrupted`` set.

    Raises:
        ContentRootError: If the content root cannot be enumerated.
    """
    content_dir = content_dir or settings.content_dir
    root = root or settings.project_root
    paths = discover_documents(content_dir)
    report = ScanReport()

    checker = None if skip_external else ExternalChecker(max_workers=max_workers, timeout=timeout)
    finished = False
    try:
        pending_files = [_prepare_file(p, root, content_dir, checker) for p in paths]
        for pending in pending_files:
            if pending.error is not None:
                report.record_unreadable(pending.path)
                if on_warning is not None:
                    on_warning(f"Could not read {pending.path}: {pending.error}")
                continue
            records = _collect(pending)
            report.record_file(records)
            if on_file is not None:
                on_file(pending.path, records)
        finished = True
    except KeyboardInterrupt:
        report.interrupted = True
    finally:
        if checker is not None:
            checker.close(cancel_pending=not finished)

    return report
