import logging

import uvicorn

from mailcrawl.api.server import create_app
from mailcrawl.container import Container

logger = logging.getLogger(__name__)


def main(container=None):
    """Serve the crawl API. Accepts a pre-built container for testing."""
    container = container or Container()
    env = container.config()

    logging.basicConfig(
        level=env.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = create_app(container)
    host = env.get("HOST", "0.0.0.0")
    port = int(env.get("PORT", 3000))
    logger.info("MailCrawl listening on %s:%s", host, port)
    uvicorn.run(app, host=host, port=port)


if __name__ == '__main__':
    main()
