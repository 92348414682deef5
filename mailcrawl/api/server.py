import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from mailcrawl.api.routers import create_crawl_router, create_systems_router
from mailcrawl.api.routers.crawl import ALLOW_ORIGIN

logger = logging.getLogger(__name__)


async def invalid_request_handler(request: Request, exc: RequestValidationError):
    """Reject unparseable or invalid bodies with 400, without echoing them back."""
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": "invalid crawl request"}, headers=ALLOW_ORIGIN)


def create_app(container) -> FastAPI:
    """Build the HTTP application from a configured container."""
    app = FastAPI(title="MailCrawl")
    app.add_exception_handler(RequestValidationError, invalid_request_handler)
    crawl_executor = container.crawl_executor()
    app.include_router(create_crawl_router(crawl_executor))
    app.include_router(create_systems_router(crawl_executor))
    return app
