import queue
import threading
from typing import Iterator

from mailcrawl.domain.crawl_result import CrawlResult
from mailcrawl.exceptions import StreamClosedError

_CLOSED = object()


class ResultStream:
    """Unbounded conduit of crawl results: many writers, one reader.

    Iterating yields results in arrival order until `close()` is called.
    """

    def __init__(self):
        self._queue: "queue.Queue" = queue.Queue()
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._closed

    def put(self, result: CrawlResult) -> None:
        with self._lock:
            if self._closed:
                raise StreamClosedError(f"result for {result.site_name} arrived after close")
            self._queue.put(result)

    def close(self) -> None:
        with self._lock:
            if self._closed:
                raise StreamClosedError("result stream already closed")
            self._closed = True
            self._queue.put(_CLOSED)

    def __iter__(self) -> Iterator[CrawlResult]:
        while True:
            item = self._queue.get()
            if item is _CLOSED:
                return
            yield item
