import contextlib
import logging
import threading
from typing import Callable, List, Optional

from mailcrawl.domain.crawl_request import CrawlRequest
from mailcrawl.domain.crawl_result import CrawlResult
from mailcrawl.domain.outstanding_work import OutstandingWork
from mailcrawl.domain.result_stream import ResultStream
from mailcrawl.exceptions import HttpFetchError, PageReadError
from mailcrawl.services.protocols import Fetcher

logger = logging.getLogger(__name__)


class CrawlExecutor:
    """Runs a recursive email crawl and collects the results.

    Every page is fetched on its own thread. Children are spawned by the page
    that discovered them and are tracked only through a shared
    `OutstandingWork` counter; a watcher thread closes the `ResultStream` once
    that counter drains to zero. This class does NOT construct dependencies
    (that stays in the DI layer).
    """

    def __init__(
        self,
        *,
        fetcher: Fetcher,
        content_review_service,
        link_processor,
        max_concurrency: Optional[int] = None,
        thread_factory: Callable[..., threading.Thread] = threading.Thread,
    ):
        if max_concurrency is not None and max_concurrency <= 0:
            raise ValueError("max_concurrency must be positive when set")
        self.fetcher = fetcher
        self.content_review_service = content_review_service
        self.link_processor = link_processor
        self.max_concurrency = max_concurrency
        self.thread_factory = thread_factory
        if max_concurrency is None:
            self._fetch_slots = contextlib.nullcontext()
        else:
            self._fetch_slots = threading.BoundedSemaphore(max_concurrency)

    def crawl(self, request: CrawlRequest) -> List[CrawlResult]:
        """Crawl from `request` and return every result in arrival order.

        Blocks the calling thread until the whole tree has finished.
        """
        stream = ResultStream()
        outstanding = OutstandingWork()
        # Reserved for the root before anything is started.
        outstanding.add()
        self._start(self._watch, (outstanding, stream), name="crawl-watcher")
        self._launch(request, outstanding, stream)

        results = list(stream)
        logger.info("Crawl of %s (depth %s) finished with %d pages", request.url, request.depth, len(results))
        return results

    def fetch_page(self, url: str) -> Optional[str]:
        """Fetch `url` and return its body, or None if the page is unusable."""
        with self._fetch_slots:
            try:
                response = self.fetcher.fetch(url)
            except HttpFetchError as e:
                logger.warning("Fetch failed for %s: %s", url, e)
                return None
            except PageReadError as e:
                logger.warning("Read failed for %s: %s", url, e)
                return None

        if response.status_code != 200:
            logger.info("Non-success status for %s: %s", url, response.status_code)
            return None
        return response.text

    def crawl_page(self, request: CrawlRequest, outstanding: OutstandingWork, stream: ResultStream) -> None:
        """Fetch one page, emit its emails and spawn its children."""
        body = self.fetch_page(request.url)
        if body is None:
            return

        emails = self.content_review_service.extract_emails(body)
        stream.put(CrawlResult(request.url, emails))
        logger.debug("Fetched %s -> %d emails", request.url, len(emails))

        spawned = self.link_processor.process(
            request,
            body,
            crawl_callback=lambda child: self._spawn(child, outstanding, stream),
        )
        if spawned:
            logger.debug("Spawned %d children from %s", spawned, request.url)

    def _spawn(self, request: CrawlRequest, outstanding: OutstandingWork, stream: ResultStream) -> None:
        # The child's slot must exist before its thread can possibly finish.
        outstanding.add()
        self._launch(request, outstanding, stream)

    def _launch(self, request: CrawlRequest, outstanding: OutstandingWork, stream: ResultStream) -> None:
        """Start the task for a request whose slot is already reserved."""
        try:
            self._start(self._run, (request, outstanding, stream), name=f"crawl-d{request.depth}")
        except RuntimeError as e:
            logger.error("Could not start crawl of %s: %s", request.url, e)
            outstanding.done()

    def _run(self, request: CrawlRequest, outstanding: OutstandingWork, stream: ResultStream) -> None:
        try:
            self.crawl_page(request, outstanding, stream)
        except Exception as e:
            logger.error("Crawl error for %s: %s", request.url, e, exc_info=True)
        finally:
            outstanding.done()

    def _watch(self, outstanding: OutstandingWork, stream: ResultStream) -> None:
        outstanding.wait()
        stream.close()

    def _start(self, target, args, name: str) -> None:
        thread = self.thread_factory(target=target, args=args, name=name, daemon=True)
        thread.start()
