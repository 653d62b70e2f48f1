# Define here the models for your downloader middleware
#
# See documentation in:
# https://docs.scrapy.org/en/latest/topics/downloader-middleware.html

import itertools
import logging

from scrapy import signals

logger = logging.getLogger(__name__)


class RotatingProxyMiddleware:
    """
    Pins each request to a session: an outbound proxy (when any are
    configured) plus a cookie jar. A retried request moves on to the next
    session so a blocked proxy or poisoned cookie jar is not reused.

    Proxies come from the spider's ``proxy_urls`` run input, falling back
    to the ``PROXY_URLS`` setting.
    """

    def __init__(self, proxy_urls=(), session_pool_size=1):
        self.proxy_urls = list(proxy_urls)
        self.session_pool_size = max(1, session_pool_size, len(self.proxy_urls))
        self._sessions = itertools.cycle(range(self.session_pool_size))

    @classmethod
    def from_crawler(cls, crawler):
        middleware = cls(
            proxy_urls=crawler.settings.getlist("PROXY_URLS"),
            session_pool_size=crawler.settings.getint("SESSION_POOL_SIZE", 1),
        )
        crawler.signals.connect(middleware.spider_opened, signal=signals.spider_opened)
        return middleware

    def spider_opened(self, spider):
        spider_proxies = getattr(spider, "proxy_urls", None)
        if spider_proxies:
            self.proxy_urls = list(spider_proxies)
            self.session_pool_size = max(self.session_pool_size, len(self.proxy_urls))
            self._sessions = itertools.cycle(range(self.session_pool_size))
        if self.proxy_urls:
            logger.info(f"Rotating over {len(self.proxy_urls)} proxies")

    def process_request(self, request, spider):
        retried = request.meta.get("retry_times", 0) > 0
        if "session" in request.meta and not retried:
            return None

        session = next(self._sessions)
        request.meta["session"] = session
        request.meta["cookiejar"] = session
        if self.proxy_urls:
            request.meta["proxy"] = self.proxy_urls[session % len(self.proxy_urls)]
        return None
