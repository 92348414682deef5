import logging

from fastapi import APIRouter, Response
from pydantic import BaseModel, Field

from mailcrawl.domain.crawl_request import CrawlRequest

logger = logging.getLogger(__name__)

ALLOW_ORIGIN = {"Access-Control-Allow-Origin": "*"}

PREFLIGHT_HEADERS = {
    **ALLOW_ORIGIN,
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Allow-Headers": (
        "Content-Type, Content-Length, Accept-Encoding, X-CSRF-Token, Authorization, "
        "accept, origin, Cache-Control, X-Requested-With"
    ),
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}


class CrawlOptions(BaseModel):
    url: str = ""
    depth: int = Field(default=0, ge=0)


def create_crawl_router(crawl_executor):
    router = APIRouter(tags=["Crawl"])

    @router.options("/crawl", status_code=204)
    def crawl_preflight():
        return Response(status_code=204, headers=PREFLIGHT_HEADERS)

    @router.post("/crawl")
    def crawl(req: CrawlOptions, response: Response):
        """Crawl `url` down to `depth` and return the emails found per page.

        Plain `def` so FastAPI runs the blocking crawl in its threadpool.
        """
        response.headers.update(ALLOW_ORIGIN)
        results = crawl_executor.crawl(CrawlRequest(url=req.url, depth=req.depth))
        return {"data": [r.to_dict() for r in results]}

    return router
