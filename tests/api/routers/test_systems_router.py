from unittest.mock import Mock

from mailcrawl.api.routers.systems import create_systems_router
from mailcrawl.services.link_processor import LinkProcessor


def _get_endpoint(router, path: str, method: str):
    for route in router.routes:
        if getattr(route, "path", None) != path:
            continue
        methods = getattr(route, "methods", set())
        if method.upper() in methods:
            return route.endpoint
    raise AssertionError(f"No route found for {method} {path}")


def test_health_endpoint():
    router = create_systems_router(Mock())
    assert _get_endpoint(router, "/systems/health", "GET")() == {"status": "ok"}


def test_config_reads_live_services():
    executor = Mock(
        fetcher=Mock(user_agent="Bot/2", timeout=3),
        link_processor=LinkProcessor(Mock(), max_links=5, drop_last_under_cap=True),
        max_concurrency=8,
    )
    router = create_systems_router(executor)

    body = _get_endpoint(router, "/systems/config", "GET")()

    assert body == {"crawl": {
        "user_agent": "Bot/2",
        "http_timeout": 3,
        "max_links": 5,
        "drop_last_under_cap": True,
        "max_concurrency": 8,
    }}


def test_config_tolerates_fetcher_without_settings():
    executor = Mock(
        fetcher=object(),
        link_processor=LinkProcessor(Mock()),
        max_concurrency=None,
    )
    body = _get_endpoint(create_systems_router(executor), "/systems/config", "GET")()
    assert body["crawl"]["user_agent"] is None
    assert body["crawl"]["http_timeout"] is None
    assert body["crawl"]["max_links"] == 9
