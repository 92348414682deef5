"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from mailcrawl.services.http_service import HttpService
from mailcrawl.services.content_review_service import ContentReviewService
from mailcrawl.services.link_processor import LinkProcessor
from mailcrawl.services.crawl_executor import CrawlExecutor
from mailcrawl import config as env


# Environment variables used by the container (read via `mailcrawl.config` helpers).
#
# USER_AGENT (str, default: "MailCrawl/0.1")
#   User-Agent header for outbound HTTP requests.
#
# HTTP_TIMEOUT (int seconds, default: 10)
#   Timeout for each outbound page fetch. A timeout counts as a failed fetch.
#
# MAILCRAWL_MAX_LINKS (int, default: 9)
#   Maximum number of links followed from a single page.
#
# MAILCRAWL_DROP_LAST_LINK (bool, default: true)
#   When a page has no more than MAILCRAWL_MAX_LINKS usable links, skip the
#   last one. Set to false to follow all of them.
#
# MAILCRAWL_MAX_CONCURRENCY (int | optional)
#   Upper bound on simultaneous page fetches across a crawl. Unset means
#   one fetch per spawned task with no cap.
#
# LOG_LEVEL (str, default: "INFO")
# HOST (str, default: "0.0.0.0")
# PORT (int, default: 3000)
ENV = {
    "USER_AGENT": env.get_str_env("USER_AGENT", "MailCrawl/0.1"),
    "HTTP_TIMEOUT": env.get_int_env("HTTP_TIMEOUT", 10),
    "MAILCRAWL_MAX_LINKS": env.get_int_env("MAILCRAWL_MAX_LINKS", 9),
    "MAILCRAWL_DROP_LAST_LINK": env.get_bool_env("MAILCRAWL_DROP_LAST_LINK", True),
    "MAILCRAWL_MAX_CONCURRENCY": env.get_optional_int_env("MAILCRAWL_MAX_CONCURRENCY"),
    "LOG_LEVEL": env.get_str_env("LOG_LEVEL", "INFO").strip().upper(),
    "HOST": env.get_str_env("HOST", "0.0.0.0"),
    "PORT": env.get_int_env("PORT", 3000),
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for MailCrawl application."""

    # Configuration
    config = providers.Configuration(default=ENV)

    # Services - Singleton instances
    http_service = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        http_client=providers.Object(requests.get),
        timeout=config.HTTP_TIMEOUT.as_(int)
    )

    content_review_service = providers.Singleton(
        ContentReviewService
    )

    link_processor = providers.Singleton(
        LinkProcessor,
        content_review_service=content_review_service,
        max_links=config.MAILCRAWL_MAX_LINKS.as_(int),
        drop_last_under_cap=config.MAILCRAWL_DROP_LAST_LINK.as_(bool),
    )

    crawl_executor = providers.Singleton(
        CrawlExecutor,
        fetcher=http_service,
        content_review_service=content_review_service,
        link_processor=link_processor,
        max_concurrency=config.MAILCRAWL_MAX_CONCURRENCY,
    )
