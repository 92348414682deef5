import logging
from typing import Callable, List

from mailcrawl.domain.crawl_request import CrawlRequest

logger = logging.getLogger(__name__)

BLOCKED_SUFFIXES = ('.pdf"', '.png"', '.css"', '.jpg"', '.ico"')
HREF_PREFIX = 'href="'


class LinkProcessor:
    """Turns raw link matches on a page into the child crawls to schedule.

    `max_links` caps the fan-out per page. With `drop_last_under_cap` set, a
    page with `max_links` or fewer surviving links schedules all of them but
    the last one; this mirrors the long-standing behaviour of the service.
    """

    def __init__(self, content_review_service, max_links: int = 9, drop_last_under_cap: bool = True):
        if max_links < 0:
            raise ValueError("max_links must be >= 0")
        self.content_review_service = content_review_service
        self.max_links = max_links
        self.drop_last_under_cap = drop_last_under_cap

    def filter_links(self, matches: List[str]) -> List[str]:
        """Drop links to non-HTML assets, keeping the original order."""
        return [m for m in matches if not m.endswith(BLOCKED_SUFFIXES)]

    def cap_links(self, matches: List[str]) -> List[str]:
        if len(matches) > self.max_links:
            return matches[:self.max_links]
        if self.drop_last_under_cap:
            return matches[:-1]
        return list(matches)

    @staticmethod
    def strip_href(match: str) -> str:
        return match[len(HREF_PREFIX):-1]

    def select_links(self, body: str) -> List[str]:
        """Bare URLs of the links on `body` that should be crawled next."""
        matches = self.content_review_service.extract_links(body)
        kept = self.filter_links(matches)
        if len(kept) != len(matches):
            logger.debug("Filtered %d asset links", len(matches) - len(kept))
        return [self.strip_href(m) for m in self.cap_links(kept)]

    def process(self, request: CrawlRequest, body: str, crawl_callback: Callable[[CrawlRequest], None]) -> int:
        """Schedule a child crawl for each selected link via `crawl_callback`.

        Returns the number of children scheduled. Nothing is extracted once
        the request has no depth left.
        """
        if request.depth == 0:
            return 0
        links = self.select_links(body)
        for link_url in links:
            crawl_callback(request.child(link_url))
        return len(links)
