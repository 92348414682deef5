"""Domain objects for MailCrawl - explicit re-exports to satisfy linters."""
from .crawl_request import CrawlRequest as CrawlRequest
from .crawl_result import CrawlResult as CrawlResult
from .http_response import HttpResponse as HttpResponse
from .outstanding_work import OutstandingWork as OutstandingWork
from .result_stream import ResultStream as ResultStream

__all__ = ["CrawlRequest", "CrawlResult", "HttpResponse", "OutstandingWork", "ResultStream"]
