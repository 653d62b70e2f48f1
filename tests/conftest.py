"""
Shared fixtures: HTML fixtures on disk and Scrapy responses built from them.
"""

from pathlib import Path

import pytest
from scrapy.http import HtmlResponse, Request

from freshersjobs.state import CrawlTarget, TargetKind
from freshersjobs.urls import listing_base

FIXTURES_DIR = Path(__file__).parent / "fixtures"

LISTING_URL = "https://www.freshersworld.com/jobs/category/it-software-job-vacancies"
DETAIL_URL = (
    "https://www.freshersworld.com/jobs/"
    "java-developer-jobs-opening-in-acme-softech-at-bangalore-1234567"
)


def build_response(url, body, meta=None):
    request = Request(url, meta=meta or {})
    if isinstance(body, str):
        body = body.encode("utf-8")
    return HtmlResponse(url=url, body=body, encoding="utf-8", request=request)


def listing_meta(url, page=1, base_url=None):
    target = CrawlTarget(url, TargetKind.LISTING, page, base_url or listing_base(url))
    return {"target": target, "label": target.kind.value}


def detail_meta(url, referer=LISTING_URL):
    target = CrawlTarget(url, TargetKind.DETAIL, referer=referer)
    return {"target": target, "label": target.kind.value}


@pytest.fixture
def fixture_html():
    def _load(name):
        return (FIXTURES_DIR / name).read_text(encoding="utf-8")
    return _load


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def listing_response(fixture_html):
    return build_response(LISTING_URL, fixture_html("listing.html"), listing_meta(LISTING_URL))
