from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CrawlRequest:
    """A single unit of crawl work: the page to fetch and how deep to go from it."""

    url: str
    depth: int

    def __post_init__(self):
        if self.depth < 0:
            raise ValueError(f"depth must be >= 0, got {self.depth}")

    def child(self, url: str) -> CrawlRequest:
        """Derive the request for a link discovered on this page."""
        if self.depth == 0:
            raise ValueError("cannot derive a child request at depth 0")
        return CrawlRequest(url=url, depth=self.depth - 1)
