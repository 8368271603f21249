"""Utilities for rendering scan progress and reports in the CLI."""

from __future__ import annotations

from typing import List

import typer

from linkcheck.models import BrokenLinkRecord
from linkcheck.report import ScanReport, render_summary, render_totals

_RULE = "=" * 40


class ReportPrinter:
    """Writes progress lines and the final summary to stdout.

    Color is applied with ``typer.style`` and dropped entirely when
    *color* is false.
    """

    def __init__(self, color: bool = True) -> None:
        self.color = color

    def _style(self, text: str, fg: str) -> str:
        return typer.style(text, fg=fg) if self.color else text

    def _echo(self, text: str = "") -> None:
        typer.echo(text, color=None if self.color else False)

    def banner(self, title: str) -> None:
        self._echo(_RULE)
        self._echo(title.center(len(_RULE)).rstrip())
        self._echo(_RULE)
        self._echo()

    def file_checked(self, path: str, records: List[BrokenLinkRecord]) -> None:
        self._echo(f"{self._style('Checking:', 'blue')} {path}")
        for record in records:
            line = f"Line {record.line_number}: {self._style(record.raw_url, 'yellow')} ({record.kind.value})"
            self._echo(f"  {self._style('✗', 'red')} {line}")

    def summary(self, report: ScanReport) -> None:
        self._echo()
        self.banner("LINK CHECK SUMMARY")

        if report.interrupted:
            self._echo(self._style("Scan interrupted; results below are partial.", "yellow"))
            self._echo()

        self._echo(render_summary(report, style=self._style))

        self._echo()
        self._echo(render_totals(report))
