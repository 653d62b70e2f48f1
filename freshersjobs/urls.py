"""
URL building for Freshersworld listings.

Start URLs are derived from a free-text search query, listing pages are
paginated with ``limit`` / ``offset`` query parameters.
"""

import re
from dataclasses import dataclass
from urllib.parse import urljoin, urlsplit, urlunsplit

from w3lib.url import add_or_replace_parameters

BASE_URL = "https://www.freshersworld.com"
JOBS_PER_PAGE = 20
DEFAULT_CATEGORY = "it-software"

# Ordered: the first key found in the keyword wins.
KEYWORD_CATEGORIES = (
    ("java", "it-software"),
    ("python", "it-software"),
    ("developer", "it-software"),
    ("software", "it-software"),
    ("programmer", "it-software"),
    ("web design", "it-software"),
    ("tester", "it-software"),
    ("data", "it-software"),
    ("bank", "banking-finance"),
    ("finance", "banking-finance"),
    ("account", "accounts"),
    ("teach", "teaching"),
    ("lecturer", "teaching"),
    ("sales", "sales-marketing"),
    ("marketing", "sales-marketing"),
    ("bpo", "bpo-call-center"),
    ("call center", "bpo-call-center"),
    ("customer support", "bpo-call-center"),
    ("mechanical", "mechanical-automobile"),
    ("civil", "civil-construction"),
    ("electrical", "electrical-electronics"),
    ("electronics", "electrical-electronics"),
    ("human resource", "hr-admin"),
    ("recruit", "hr-admin"),
    ("design", "design-creative"),
    ("pharma", "healthcare-pharma"),
    ("nurse", "healthcare-pharma"),
)

_NON_SLUG = re.compile(r"[^a-z0-9]+")
_SKIP_SCHEMES = ("javascript:", "mailto:", "tel:", "data:")


@dataclass(frozen=True)
class SearchQuery:
    keyword: str = ""
    location: str = ""
    category: str = ""
    experience: str = ""
    qualification: str = ""


def slugify(text):
    return _NON_SLUG.sub("-", (text or "").strip().lower()).strip("-")


def category_url(slug):
    return f"{BASE_URL}/jobs/category/{slug}-job-vacancies"


def location_url(slug):
    return f"{BASE_URL}/jobs-in-{slug}"


def category_for_keyword(keyword):
    """Map a free-text keyword to a category slug, or None."""
    lowered = (keyword or "").lower()
    return next(
        (category for key, category in KEYWORD_CATEGORIES if key in lowered),
        None,
    )


def build_start_url(query: SearchQuery) -> str:
    """
    Build the listing URL a crawl starts from.

    Only one branch is used, in priority order: keyword category, location,
    explicit category, default category. Experience and qualification are
    carried on the query but have no listing URL of their own.
    """
    keyword_category = category_for_keyword(query.keyword)
    if keyword_category:
        return category_url(keyword_category)

    location_slug = slugify(query.location)
    if location_slug:
        return location_url(location_slug)

    category_slug = slugify(query.category)
    if category_slug:
        return category_url(category_slug)

    return category_url(DEFAULT_CATEGORY)


def build_paginated_url(base_url: str, page: int) -> str:
    page = max(1, int(page))
    offset = (page - 1) * JOBS_PER_PAGE
    return add_or_replace_parameters(
        base_url, {"limit": str(JOBS_PER_PAGE), "offset": str(offset)}
    )


def listing_base(url: str) -> str:
    """Strip query string and fragment from a listing URL."""
    parts = urlsplit(url)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))


def resolve_absolute(href, base=BASE_URL):
    """
    Resolve ``href`` against ``base``.

    Returns None instead of raising for empty, malformed or non-http(s) hrefs
    so callers can skip them.
    """
    if not href:
        return None
    href = href.strip()
    if not href or href.lower().startswith(_SKIP_SCHEMES):
        return None
    try:
        absolute = urljoin(base, href)
        parts = urlsplit(absolute)
    except ValueError:
        return None
    if parts.scheme not in ("http", "https") or not parts.netloc:
        return None
    return absolute
