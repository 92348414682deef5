"""Protocol (interface) definitions for services."""

from typing import Protocol

from mailcrawl.domain.http_response import HttpResponse


class Fetcher(Protocol):
    """Fetch a URL and return a normalized HTTP-like response.

    Implementations raise `HttpFetchError` for transport failures and
    `PageReadError` when a 200 body cannot be read.
    """

    def fetch(self, url: str) -> HttpResponse: ...
