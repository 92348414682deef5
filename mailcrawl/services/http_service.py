import requests
from typing import Callable

from mailcrawl.domain.http_response import HttpResponse
from mailcrawl.exceptions import HttpFetchError, PageReadError


class HttpService:
    """
    HTTP client wrapper for fetching web pages.

    Requires http_client callable for dependency injection, so tests never
    touch the network and the HTTP library can be swapped.
    """

    def __init__(self, user_agent: str, http_client: Callable, timeout: int = 10):
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client

    def fetch(self, url: str) -> HttpResponse:
        """GET `url`; the body is only read for 200 responses."""
        headers = {"User-Agent": self.user_agent}
        try:
            resp = self.http_client(url, headers=headers, timeout=self.timeout, stream=True)
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e

        try:
            if resp.status_code != 200:
                return HttpResponse(url, resp.status_code)
            try:
                text = resp.text
            except requests.exceptions.RequestException as e:
                raise PageReadError(url, e) from e
            return HttpResponse(url, resp.status_code, text)
        finally:
            resp.close()
