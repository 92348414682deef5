from fastapi import APIRouter


def create_systems_router(crawl_executor):
    """Create systems router reporting the settings the crawl engine runs with."""
    router = APIRouter(prefix="/systems", tags=["System"])

    @router.get("/health")
    def health():
        return {"status": "ok"}

    @router.get("/config")
    def get_config():
        """Return the effective crawl settings, read from the live services."""
        fetcher = crawl_executor.fetcher
        links = crawl_executor.link_processor
        return {
            "crawl": {
                "user_agent": getattr(fetcher, "user_agent", None),
                "http_timeout": getattr(fetcher, "timeout", None),
                "max_links": links.max_links,
                "drop_last_under_cap": links.drop_last_under_cap,
                "max_concurrency": crawl_executor.max_concurrency,
            }
        }

    return router
