"""Hand-off of broken-link findings to an external repair agent.

The core only builds the task description.  What the agent does with it is
outside this package: it is reached through a :data:`RepairSink`, a callable
that receives the description and reports success or failure.
"""

from __future__ import annotations

import shlex
import subprocess
import sys
from pathlib import Path
from typing import Callable, Optional

from linkcheck.config import settings
from linkcheck.report import ScanReport, format_record

RepairSink = Callable[[str], bool]

_INSTRUCTIONS = """\
For each broken link:
1. Read the file containing the broken link
2. Search the content tree for the page the link was meant to reach
3. Edit the link so it points at that page

Fix internal links first. A /docs/guides/CATEGORY/SLUG link needs
{content}/guides/CATEGORY/SLUG.md to exist, and a /docs/tutorials/SLUG link
needs {content}/tutorials/SLUG.md. External links that are permanently gone
should be replaced or removed."""


def build_repair_prompt(report: ScanReport, content_label: str = "src/content") -> str:
    """Serialize every broken link in *report* into a task description.

    Links are grouped under a heading per source file, in discovery order.
    """
    sections = [
        "Fix the broken links in this repository's markdown files.",
        "",
        "The following broken links were found:",
    ]
    for path, records in report.grouped().items():
        sections.append("")
        sections.append(f"## {path}")
        sections.extend(f"- {format_record(r)}" for r in records)
    sections.append("")
    sections.append(_INSTRUCTIONS.format(content=content_label))
    return "\n".join(sections)


def command_sink(command: Optional[str] = None, cwd: Optional[Path] = None) -> RepairSink:
    """Return a sink that pipes the task description to *command* on stdin.

    *command* defaults to ``settings.repair_command`` and runs in *cwd*
    (``settings.project_root`` by default).  A missing executable or a
    non-zero exit counts as failure.
    """
    argv = shlex.split(command or settings.repair_command)
    workdir = cwd or settings.project_root

    def sink(prompt: str) -> bool:
        try:
            completed = subprocess.run(argv, input=prompt, text=True, cwd=workdir, check=False)
        except OSError as exc:
            print(f"⚠️ Could not start repair command {argv[0]!r}: {exc}", file=sys.stderr)
            return False
        if completed.returncode != 0:
            print(f"⚠️ Repair command exited with code {completed.returncode}", file=sys.stderr)
            return False
        return True

    return sink


def dispatch_repair(
    report: ScanReport,
    sink: RepairSink,
    content_label: str = "src/content",
) -> bool:
    """Send *report* to *sink* if it has broken links.

    Returns ``True`` when there was nothing to repair or the sink accepted
    the task.
    """
    if not report.broken_links:
        return True
    return sink(build_repair_prompt(report, content_label))
