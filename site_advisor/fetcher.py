# site_advisor/fetcher.py
import logging
import queue
import threading
import time
from dataclasses import dataclass

import requests
from bs4 import UnicodeDammit

from .base_module import AdvisorModule
from .exceptions import FetchFailure

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "WordPress.com Website Analyzer Bot"
DEFAULT_TIMEOUT = 10
CHUNK_SIZE = 16 * 1024


@dataclass(frozen=True)
class FetchedPage:
    url: str
    html: str
    load_time_ms: float
    status_code: int


class PageFetcher(AdvisorModule):
    """
    Retrieves the raw HTML of one page. Failed requests are not retried.

    The timeout bounds the whole request (redirects, headers and body), not
    each socket operation: the download runs on a daemon worker and the
    caller stops waiting once the deadline passes.
    """

    def __init__(self, config=None):
        super().__init__(config=config)
        self.timeout = self.global_config.get("request_timeout", DEFAULT_TIMEOUT)
        self.headers = {"User-Agent": self.global_config.get("user_agent", DEFAULT_USER_AGENT)}
        self.session = requests.Session()
        self.session.headers.update(self.headers)

    def fetch(self, url: str) -> FetchedPage:
        """
        Issues one GET request for the URL.

        Returns:
            FetchedPage: body text and elapsed wall-clock milliseconds.

        Raises:
            FetchFailure: on transport error, timeout or a non-2xx status.
        """
        start = time.monotonic()
        deadline = start + self.timeout
        cancelled = threading.Event()
        outcome = queue.Queue(maxsize=1)

        worker = threading.Thread(
            target=self._download, args=(url, deadline, cancelled, outcome),
            name=f"{self.module_name}-download", daemon=True,
        )
        worker.start()
        try:
            result = outcome.get(timeout=max(deadline - time.monotonic(), 0))
        except queue.Empty:
            cancelled.set()
            raise FetchFailure(url, f"timed out after {self.timeout} s") from None

        if isinstance(result, requests.exceptions.RequestException):
            raise FetchFailure(url, str(result)) from result
        if isinstance(result, Exception):
            raise result

        status_code, html = result
        load_time_ms = (time.monotonic() - start) * 1000
        logger.debug("%s fetched %s (%s) in %.0f ms", self.get_module_name(), url, status_code, load_time_ms)
        return FetchedPage(url=url, html=html, load_time_ms=load_time_ms, status_code=status_code)

    def _download(self, url, deadline, cancelled, outcome):
        """Worker body: puts (status_code, html) or the raised exception on the outcome queue."""
        try:
            outcome.put(self._read_page(url, deadline, cancelled))
        except Exception as e:
            outcome.put(e)

    def _read_page(self, url, deadline, cancelled):
        resp = self.session.get(url, timeout=max(deadline - time.monotonic(), 0.001), stream=True)
        try:
            resp.raise_for_status()
            # raise_for_status lets 1xx/3xx through when redirects are exhausted or disabled
            if not 200 <= resp.status_code < 300:
                raise FetchFailure(url, f"HTTP {resp.status_code}")

            chunks = []
            for chunk in resp.iter_content(chunk_size=CHUNK_SIZE):
                if cancelled.is_set() or time.monotonic() > deadline:
                    raise FetchFailure(url, "timed out")
                chunks.append(chunk)
        finally:
            resp.close()

        # requests assumes ISO-8859-1 for text/* without a charset; only trust a declared one
        content_type = resp.headers.get("Content-Type", "") or ""
        declared = [resp.encoding] if resp.encoding and "charset=" in content_type.lower() else []
        html = UnicodeDammit(b"".join(chunks), declared).unicode_markup or ""
        return resp.status_code, html

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
