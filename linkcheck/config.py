"""Centralised settings for the link checker.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the working
directory (loaded automatically when this module is imported).  Command-line
flags take precedence over both for a single run.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the directory the checker is run from
load_dotenv(Path.cwd() / ".env", override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Content tree
    # ------------------------------------------------------------------
    project_root: Path = field(
        default_factory=lambda: Path(os.environ.get("LINKCHECK_ROOT", Path.cwd()))
    )
    content_dir_override: str | None = field(
        default_factory=lambda: os.environ.get("LINKCHECK_CONTENT_DIR")
    )

    @property
    def content_dir(self) -> Path:
        """Root of the content collection (``guides/``, ``tutorials/``)."""
        if self.content_dir_override:
            return Path(self.content_dir_override)
        return self.project_root / "src" / "content"

    # ------------------------------------------------------------------
    # External URL checks
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("LINKCHECK_TIMEOUT", "10.0"))
    )
    max_concurrent_checks: int = field(
        default_factory=lambda: int(os.environ.get("LINKCHECK_MAX_CONCURRENT_CHECKS", "8"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "LINKCHECK_USER_AGENT",
            "Mozilla/5.0 (compatible; DocsLinkCheck/1.0)",
        )
    )

    # ------------------------------------------------------------------
    # Repair hand-off
    # ------------------------------------------------------------------
    repair_command: str = field(
        default_factory=lambda: os.environ.get(
            "LINKCHECK_REPAIR_COMMAND", "claude --dangerously-skip-permissions -p"
        )
    )


# Module-level singleton; import this everywhere:
#   from linkcheck.config import settings
settings = Settings()
