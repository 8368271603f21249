"""External URL validation over HTTP."""

from __future__ import annotations

import threading
from concurrent.futures import Future, ThreadPoolExecutor

import httpx

from linkcheck.config import settings
from linkcheck.models import LinkKind, LinkStatus, ValidationResult

# Recorded in place of a status code when no response arrived at all
# (timeout, DNS failure, refused connection, bad URL).
UNREACHABLE_STATUS = 0


def make_client(timeout: float | None = None) -> httpx.Client:
    """Return an ``httpx.Client`` configured for link checks.

    The client is safe to share between worker threads.  Its timeout bounds
    each connect or read on its own; :func:`fetch_status` adds the overall
    deadline.
    """
    return httpx.Client(
        headers={"User-Agent": settings.user_agent},
        timeout=settings.request_timeout if timeout is None else timeout,
        follow_redirects=True,
    )


def _request_status(client: httpx.Client, url: str) -> int:
    try:
        with client.stream("GET", url) as response:
            return response.status_code
    # Every way a request can fail maps to the sentinel:
    #   httpx.HTTPError     timeouts, connect/DNS errors, protocol errors,
    #                       too many redirects, unsupported scheme
    #   httpx.InvalidURL    URLs httpx refuses to parse
    #   RuntimeError        client closed underneath an abandoned request
    #                       (httpx.StreamError is one)
    #   ValueError          includes UnicodeError from IDNA-encoding a bad
    #                       host such as "docs..example.com"
    #   OSError             socket errors raised outside httpx's mapping
    except (httpx.HTTPError, httpx.InvalidURL, RuntimeError, ValueError, OSError):
        return UNREACHABLE_STATUS


def fetch_status(client: httpx.Client, url: str, timeout: float | None = None) -> int:
    """GET *url* and return the final status code, or ``UNREACHABLE_STATUS``.

    The whole request, redirects included, must finish within *timeout*
    seconds (``settings.request_timeout`` by default).  A request that runs
    over is abandoned on a daemon thread and reported unreachable.  The body
    is never read.  Network failures do not raise.
    """
    deadline = settings.request_timeout if timeout is None else timeout
    outcome: list[int] = []
    request = threading.Thread(
        target=lambda: outcome.append(_request_status(client, url)),
        name="linkcheck-request",
        daemon=True,
    )
    request.start()
    request.join(deadline)
    if request.is_alive() or not outcome:
        return UNREACHABLE_STATUS
    return outcome[0]


def status_is_ok(status_code: int) -> bool:
    return 100 <= status_code < 400


def check_external_url(
    url: str,
    client: httpx.Client | None = None,
    timeout: float | None = None,
) -> ValidationResult:
    """Validate external *url* with a single request.

    Uses *client* when given; otherwise opens a short-lived one.  *timeout*
    is the overall deadline in seconds.
    """
    if client is None:
        with make_client(timeout) as own_client:
            status_code = fetch_status(own_client, url, timeout)
    else:
        status_code = fetch_status(client, url, timeout)

    status = LinkStatus.OK if status_is_ok(status_code) else LinkStatus.BROKEN
    return ValidationResult(
        kind=LinkKind.EXTERNAL,
        status=status,
        http_status_code=status_code,
    )


class ExternalChecker:
    """Runs external URL checks on a bounded thread pool.

    Each distinct URL is requested once per checker; later submissions of the
    same URL share the first future.  Callers collect results in whatever
    order they submitted, which keeps the report in discovery order no
    matter which request finishes first.
    """

    def __init__(self, max_workers: int | None = None, timeout: float | None = None) -> None:
        workers = max_workers or settings.max_concurrent_checks
        self._timeout = settings.request_timeout if timeout is None else timeout
        self._client = make_client(self._timeout)
        self._pool = ThreadPoolExecutor(max_workers=max(1, workers), thread_name_prefix="linkcheck")
        self._futures: dict[str, Future[ValidationResult]] = {}

    def submit(self, url: str) -> Future[ValidationResult]:
        future = self._futures.get(url)
        if future is None:
            future = self._pool.submit(check_external_url, url, self._client, self._timeout)
            self._futures[url] = future
        return future

    def close(self, cancel_pending: bool = False) -> None:
        """Shut the pool down and close the HTTP client.

        With *cancel_pending*, checks that have not started are dropped.
        """
        self._pool.shutdown(wait=True, cancel_futures=cancel_pending)
        self._client.close()

