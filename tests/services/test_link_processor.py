from unittest.mock import MagicMock

import pytest

from mailcrawl.domain.crawl_request import CrawlRequest
from mailcrawl.services.content_review_service import ContentReviewService
from mailcrawl.services.link_processor import LinkProcessor


def _hrefs(*urls):
    return [f'href="{u}"' for u in urls]


def _page(*urls):
    return "".join(f'<a href="{u}">link</a>' for u in urls)


@pytest.mark.parametrize("suffix", [".pdf", ".png", ".css", ".jpg", ".ico"])
def test_filter_drops_asset_links(suffix):
    processor = LinkProcessor(ContentReviewService())
    matches = _hrefs("http://a.test/page", f"http://a.test/file{suffix}")
    assert processor.filter_links(matches) == _hrefs("http://a.test/page")


def test_filter_keeps_other_suffixes_in_order():
    processor = LinkProcessor(ContentReviewService())
    matches = _hrefs("http://a.test/z.html", "http://a.test/y.jpeg", "http://a.test/x.pdf", "http://a.test/w.php")
    assert processor.filter_links(matches) == _hrefs("http://a.test/z.html", "http://a.test/y.jpeg", "http://a.test/w.php")


@pytest.mark.parametrize(
    "count,expected",
    [(0, 0), (1, 0), (2, 1), (5, 4), (9, 8), (10, 9), (11, 9), (25, 9)],
)
def test_cap_links_default_behaviour(count, expected):
    processor = LinkProcessor(ContentReviewService())
    matches = _hrefs(*[f"http://a.test/{i}" for i in range(count)])
    capped = processor.cap_links(matches)
    assert capped == matches[:expected]


def test_cap_links_can_keep_all_links_under_cap():
    processor = LinkProcessor(ContentReviewService(), drop_last_under_cap=False)
    matches = _hrefs("http://a.test/1", "http://a.test/2", "http://a.test/3")
    assert processor.cap_links(matches) == matches


def test_custom_max_links():
    processor = LinkProcessor(ContentReviewService(), max_links=3)
    matches = _hrefs(*[f"http://a.test/{i}" for i in range(6)])
    assert processor.cap_links(matches) == matches[:3]


def test_negative_max_links_rejected():
    with pytest.raises(ValueError):
        LinkProcessor(ContentReviewService(), max_links=-1)


def test_strip_href():
    assert LinkProcessor.strip_href('href="http://a.test/x?y=1"') == "http://a.test/x?y=1"


def test_select_links_filters_before_capping():
    processor = LinkProcessor(ContentReviewService())
    body = _page("http://a.test/1", "http://a.test/logo.png", "http://a.test/2", "http://a.test/3")
    # three survive the filter, the last of them is dropped
    assert processor.select_links(body) == ["http://a.test/1", "http://a.test/2"]


def test_process_schedules_children_one_level_down():
    processor = LinkProcessor(ContentReviewService())
    callback = MagicMock()
    body = _page("http://a.test/1", "http://a.test/2", "http://a.test/3")

    spawned = processor.process(CrawlRequest("http://root.test", 2), body, crawl_callback=callback)

    assert spawned == 2
    assert [c.args[0] for c in callback.call_args_list] == [
        CrawlRequest("http://a.test/1", 1),
        CrawlRequest("http://a.test/2", 1),
    ]


def test_process_at_depth_zero_does_not_extract():
    content_review_service = MagicMock()
    processor = LinkProcessor(content_review_service)
    callback = MagicMock()

    spawned = processor.process(CrawlRequest("http://root.test", 0), _page("http://a.test/1"), crawl_callback=callback)

    assert spawned == 0
    assert not content_review_service.extract_links.called
    assert not callback.called
