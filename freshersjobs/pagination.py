"""Next-page inference for listing pages."""

from collections import namedtuple

from freshersjobs.links import discover_job_links
from freshersjobs.urls import JOBS_PER_PAGE, build_paginated_url, resolve_absolute

NextPage = namedtuple("NextPage", "has_next next_url")
NO_NEXT_PAGE = NextPage(False, None)

NEXT_LINK_XPATHS = (
    "//a[contains(concat(' ', normalize-space(@class), ' '), ' next ')]/@href",
    "//a[@rel='next']/@href",
    "//a[contains(normalize-space(.), 'Next')]/@href",
    "//*[contains(concat(' ', normalize-space(@class), ' '), ' pagination ')]"
    "//a[normalize-space(.)='>' or normalize-space(.)='»']/@href",
)
PAGE_NUMBER_SELECTOR = ".pagination a, .page-numbers a, [class*='pagination'] a"

# Offset-based listings often render no pagination at all; a page that is
# at least this full is assumed to have a successor.
FULL_PAGE_RATIO = 0.5


def _next_link(doc, page_url):
    hrefs = (href for query in NEXT_LINK_XPATHS for href in doc.xpath(query).getall())
    candidates = (
        resolve_absolute(href, page_url)
        for href in hrefs
        if href.strip() and not href.strip().startswith("#")
    )
    return next((url for url in candidates if url), None)


def _max_page_number(doc):
    numbers = [
        int(text)
        for text in (t.strip() for t in doc.css(PAGE_NUMBER_SELECTOR).xpath("normalize-space(.)").getall())
        if text.isdecimal()
    ]
    return max(numbers, default=0)


def resolve_next_page(response, current_page, base_url, link_count=None):
    """
    Decide whether a listing page has a successor, and where it is.

    In order: an explicit next link, numbered pagination beyond the current
    page, or a page that yielded enough job links to look full. An empty
    page past the real end costs one wasted fetch; ``max_pages`` bounds it.
    """
    next_url = _next_link(response, response.url)
    if next_url:
        return NextPage(True, next_url)

    if _max_page_number(response) > current_page:
        return NextPage(True, build_paginated_url(base_url, current_page + 1))

    if link_count is None:
        link_count = len(discover_job_links(response, response.url))
    if link_count >= JOBS_PER_PAGE * FULL_PAGE_RATIO:
        return NextPage(True, build_paginated_url(base_url, current_page + 1))

    return NO_NEXT_PAGE
