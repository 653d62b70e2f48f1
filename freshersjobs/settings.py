# Scrapy settings for freshersjobs project
#
# For simplicity, this file contains only settings considered important or
# commonly used. You can find more settings consulting the documentation:
#
#     https://docs.scrapy.org/en/latest/topics/settings.html
#     https://docs.scrapy.org/en/latest/topics/downloader-middleware.html
#     https://docs.scrapy.org/en/latest/topics/spider-middleware.html

BOT_NAME = "freshersjobs"

SPIDER_MODULES = ["freshersjobs.spiders"]
NEWSPIDER_MODULE = "freshersjobs.spiders"

ROBOTSTXT_OBEY = False

# Bounded worker pool for fetches
CONCURRENT_REQUESTS = 10
CONCURRENT_REQUESTS_PER_DOMAIN = 10
DOWNLOAD_TIMEOUT = 60

RETRY_ENABLED = True
RETRY_TIMES = 3
RETRY_HTTP_CODES = [403, 408, 429, 500, 502, 503, 504, 522, 524]

COOKIES_ENABLED = True

# Rotated per request by the spider, together with a Referer header
USER_AGENTS = [
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/126.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_5) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.5 Safari/605.1.15",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/126.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:127.0) Gecko/20100101 Firefox/127.0",
]

# Outbound proxies, overridden by the spider's proxy_urls argument
PROXY_URLS = []
SESSION_POOL_SIZE = 5

DOWNLOADER_MIDDLEWARES = {
    # must run before CookiesMiddleware (700) and HttpProxyMiddleware (750)
    "freshersjobs.middlewares.RotatingProxyMiddleware": 350,
}

ITEM_PIPELINES = {
    "freshersjobs.pipelines.JobRecordPipeline": 300,
}

FEEDS = {
    "output/jobs.jsonl": {"format": "jsonlines", "encoding": "utf8"},
}
FEED_EXPORT_ENCODING = "utf-8"

LOG_LEVEL = "INFO"
