"""
Per-run crawl bookkeeping.

``CrawlState`` is owned by the spider. Every check-then-update on it runs
under one lock so concurrent handlers can neither enqueue the same URL
twice nor save past the wanted number of results.
"""

import enum
import threading
from dataclasses import dataclass
from urllib.parse import urldefrag

import scrapy


class TargetKind(enum.Enum):
    LISTING = "LISTING"
    DETAIL = "DETAIL"


@dataclass(frozen=True)
class CrawlTarget:
    url: str
    kind: TargetKind
    page: int = 1
    base_url: str = ""
    referer: str = ""

    def next_page(self, url):
        return CrawlTarget(url, TargetKind.LISTING, self.page + 1, self.base_url, self.url)

    def to_request(self, callback, errback=None, headers=None):
        return scrapy.Request(
            self.url,
            callback=callback,
            errback=errback,
            headers=headers,
            meta={"target": self, "label": self.kind.value},
        )


def visit_key(url):
    return urldefrag(url)[0]


class VisitedSet:
    """Append-only set of URLs scheduled in this run (fragments ignored)."""

    def __init__(self):
        self._urls = set()

    def __contains__(self, url):
        return visit_key(url) in self._urls

    def __len__(self):
        return len(self._urls)

    def add(self, url):
        """Add ``url``; False if it was already present."""
        key = visit_key(url)
        if key in self._urls:
            return False
        self._urls.add(key)
        return True


class CrawlState:
    def __init__(self, results_wanted, max_pages):
        self.results_wanted = results_wanted
        self.max_pages = max_pages
        self.saved = 0
        self.visited = VisitedSet()
        self._lock = threading.Lock()

    def claim(self, urls):
        """Mark unseen URLs as visited and return them, in order."""
        with self._lock:
            return [url for url in urls if self.visited.add(url)]

    def claim_one(self, url):
        with self._lock:
            return self.visited.add(url)

    def remaining(self):
        with self._lock:
            return max(0, self.results_wanted - self.saved)

    def is_done(self):
        return self.remaining() == 0

    def try_save(self):
        """Reserve one result slot; False once the wanted count is reached."""
        with self._lock:
            if self.saved >= self.results_wanted:
                return False
            self.saved += 1
            return True
