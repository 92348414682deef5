"""Crawl result data model."""
from typing import List, NamedTuple


class CrawlResult(NamedTuple):
    """Emails found on a single successfully fetched page."""

    site_name: str
    """URL the page was fetched from"""

    emails: List[str]
    """Every email match in order of appearance, duplicates included"""

    def to_dict(self) -> dict:
        return {"siteName": self.site_name, "emails": list(self.emails)}
