"""Link checker package: markdown link extraction, validation and reporting."""

from linkcheck.errors import ContentRootError, LinkCheckError
from linkcheck.models import BrokenLinkRecord, LinkKind, LinkStatus
from linkcheck.report import ScanReport
from linkcheck.scanner import run_scan

__all__ = [
    "run_scan",
    "ScanReport",
    "BrokenLinkRecord",
    "LinkKind",
    "LinkStatus",
    "ContentRootError",
    "LinkCheckError",
]
