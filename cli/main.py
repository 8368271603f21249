"""Markdown link checker CLI.

Usage:
    python cli/main.py --help

Scans every markdown file in the content collection, checks internal routes
against the content tree and external URLs over HTTP, and exits non-zero if
any link is broken.  ``--fix`` hands the findings to a repair agent.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from linkcheck.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from typing import Optional

import typer

from cli.rendering import ReportPrinter
from linkcheck.config import settings
from linkcheck.errors import ContentRootError
from linkcheck.repair import command_sink, dispatch_repair
from linkcheck.scanner import run_scan

EXIT_CONTENT_ROOT = 2

app = typer.Typer(
    name="linkcheck",
    help="Check markdown content for broken links.",
    add_completion=False,
)


def _display_path(path: Path) -> str:
    try:
        return path.resolve().relative_to(settings.project_root.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


@app.command()
def check(
    fix: bool = typer.Option(False, "--fix", help="Fix broken links using the repair agent."),
    skip_external: bool = typer.Option(
        False, "--skip-external", help="Skip checking external URLs (faster)."
    ),
    content_dir: Optional[Path] = typer.Option(
        None, "--content-dir", help="Content collection root (default: src/content)."
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", min=0.1, help="Per-request timeout for external URLs, in seconds."
    ),
    workers: Optional[int] = typer.Option(
        None, "--workers", min=1, help="Number of concurrent external URL checks."
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output."),
) -> None:
    """Scan all markdown files and report broken links."""
    printer = ReportPrinter(color=not no_color)
    content_root = content_dir or settings.content_dir

    printer.banner("Markdown Link Checker")

    try:
        report = run_scan(
            content_root,
            root=settings.project_root,
            skip_external=skip_external,
            max_workers=workers,
            timeout=timeout,
            on_file=printer.file_checked,
            on_warning=lambda message: typer.echo(f"⚠️ {message}", err=True),
        )
    except ContentRootError as exc:
        typer.echo(f"❌ {exc}", err=True)
        raise typer.Exit(code=EXIT_CONTENT_ROOT)

    printer.summary(report)

    if report.broken_links:
        typer.echo("")
        if fix:
            typer.echo("🔧 Fixing broken links with the repair agent …")
            if not dispatch_repair(report, command_sink(), content_label=_display_path(content_root)):
                typer.echo("⚠️ Repair agent did not complete; links are still broken.", err=True)
        else:
            typer.echo("Run with --fix to attempt automatic repair.")

    raise typer.Exit(code=report.exit_code)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
