"""Custom exceptions for MailCrawl services."""


class HttpFetchError(Exception):
    """Raised when an HTTP fetch fails due to network/transport errors."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")


class PageReadError(Exception):
    """Raised when the response body of a fetched page cannot be read."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"Reading body failed for {url}: {original}")


class StreamClosedError(Exception):
    """Raised when a closed result stream is written to or closed again."""
