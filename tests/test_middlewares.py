from types import SimpleNamespace

import scrapy

from freshersjobs.middlewares import RotatingProxyMiddleware

URL = "https://www.freshersworld.com/jobs-in-pune"


def test_without_proxies_only_sessions_rotate():
    middleware = RotatingProxyMiddleware(session_pool_size=2)
    spider = SimpleNamespace(proxy_urls=[])
    middleware.spider_opened(spider)

    requests = [scrapy.Request(f"{URL}?n={i}") for i in range(3)]
    for request in requests:
        assert middleware.process_request(request, spider) is None

    assert [r.meta["cookiejar"] for r in requests] == [0, 1, 0]
    assert all("proxy" not in r.meta for r in requests)


def test_spider_proxies_are_assigned_round_robin():
    middleware = RotatingProxyMiddleware(proxy_urls=["http://settings-proxy:1"])
    spider = SimpleNamespace(proxy_urls=["http://p1:8000", "http://p2:8000"])
    middleware.spider_opened(spider)

    requests = [scrapy.Request(f"{URL}?n={i}") for i in range(3)]
    for request in requests:
        middleware.process_request(request, spider)

    assert [r.meta["proxy"] for r in requests] == ["http://p1:8000", "http://p2:8000", "http://p1:8000"]


def test_session_is_sticky_until_retry():
    middleware = RotatingProxyMiddleware(proxy_urls=["http://p1:8000", "http://p2:8000"])
    spider = SimpleNamespace(proxy_urls=None)
    middleware.spider_opened(spider)
    request = scrapy.Request(URL)

    middleware.process_request(request, spider)
    assert request.meta["proxy"] == "http://p1:8000"

    middleware.process_request(request, spider)
    assert request.meta["proxy"] == "http://p1:8000"

    retry = request.replace(dont_filter=True)
    retry.meta["retry_times"] = 1
    middleware.process_request(retry, spider)
    assert retry.meta["proxy"] == "http://p2:8000"
    assert retry.meta["cookiejar"] == 1
