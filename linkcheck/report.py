"""Aggregation of broken-link findings across a scan."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Callable, Dict, List

from linkcheck.models import BrokenLinkRecord

EXIT_OK = 0
EXIT_BROKEN = 1
EXIT_INTERRUPTED = 130

# (text, color name) -> decorated text
StyleFn = Callable[[str, str], str]


@dataclass
class ScanReport:
    """Ordered record of everything a scan found.

    Records are kept in discovery order: file enumeration order, then line
    order within a file.  Each file contributes its records in one
    consecutive block.
    """

    files_scanned: int = 0
    files_with_errors: int = 0
    broken_links: List[BrokenLinkRecord] = field(default_factory=list)
    unreadable_files: List[str] = field(default_factory=list)
    interrupted: bool = False
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def record_file(self, records: List[BrokenLinkRecord]) -> bool:
        """Fold one scanned file's findings in and return whether it passed."""
        with self._lock:
            self.files_scanned += 1
            if records:
                self.files_with_errors += 1
                self.broken_links.extend(records)
        return not records

    def record_unreadable(self, path: str) -> None:
        """Count *path* as scanned and failed without any link records."""
        with self._lock:
            self.files_scanned += 1
            self.files_with_errors += 1
            self.unreadable_files.append(path)

    @property
    def total_broken(self) -> int:
        return len(self.broken_links)

    def grouped(self) -> Dict[str, List[BrokenLinkRecord]]:
        """Return records keyed by source file, preserving discovery order."""
        groups: Dict[str, List[BrokenLinkRecord]] = {}
        for record in self.broken_links:
            groups.setdefault(record.source_path, []).append(record)
        return groups

    @property
    def exit_code(self) -> int:
        if self.files_with_errors or self.broken_links:
            return EXIT_BROKEN
        if self.interrupted:
            return EXIT_INTERRUPTED
        return EXIT_OK


def format_record(record: BrokenLinkRecord) -> str:
    return f"Line {record.line_number}: {record.raw_url} ({record.kind.value})"


def _plain(text: str, color: str) -> str:
    return text


def render_summary(report: ScanReport, style: StyleFn = _plain) -> str:
    """Render the grouped broken-link listing and any unreadable files.

    *style* receives each headline with a color name and may decorate it;
    the default leaves text plain.
    """
    if not report.broken_links:
        lines = [style("No broken links found. All links are valid!", "green")]
    else:
        lines = [style(f"Found {report.total_broken} broken link(s):", "red"), ""]
        for path, records in report.grouped().items():
            lines.append(style(path, "blue"))
            lines.extend(f"  {format_record(r)}" for r in records)

    if report.unreadable_files:
        lines.append("")
        lines.append(style(f"Could not read {len(report.unreadable_files)} file(s):", "red"))
        lines.extend(f"  {path}" for path in report.unreadable_files)
    return "\n".join(lines)


def render_totals(report: ScanReport) -> str:
    return f"Checked {report.files_scanned} files, {report.files_with_errors} with issues."
