"""
Job-detail link discovery on listing pages.

Every href is classified by its shape before it is resolved. Paginated
location listings (``/jobs-in-bangalore/2``) look like detail URLs at a
glance and must be rejected first, otherwise a listing page would be
fetched and stored as a job.
"""

import enum
import logging
import re
from urllib.parse import urlsplit

from freshersjobs.urls import resolve_absolute

logger = logging.getLogger(__name__)

LISTING_SHAPE = re.compile(r"/jobs-in-[a-z0-9-]+/\d+/?$")

EXCLUDED_PATHS = re.compile(
    r"/(?:jobs/)?category/"
    r"|/(?:institutes?|colleges?|universit(?:y|ies))(?:/|$)"
    r"|/(?:company-profile|employers?|recruiters?)(?:/|$)"
    r"|/(?:user|users|account|my-account|profile|login|register|signup|logout)(?:/|$)"
    r"|/(?:about-us|about|contact-us|contact|privacy-policy|privacy|terms|faq|help|sitemap|blog)(?:/|\.|$)"
)

# A descriptive slug ending in a 6-8 digit job id, either as one segment
# (``/jobs/java-developer-1234567``) or split (``/java-developer/1234567``).
DETAIL_SHAPE = re.compile(
    r"/[a-z0-9-]*[a-z][a-z0-9-]*-\d{6,8}/?$"
    r"|/[a-z0-9-]*[a-z][a-z0-9-]*/\d{6,8}/?$"
)

JOB_CARD_SELECTOR = (
    ".job-container, .job-card, .job-listing, .jobs-list, [class*='job-item']"
)


class LinkKind(enum.Enum):
    DETAIL = "detail"
    LISTING = "listing"
    EXCLUDED = "excluded"
    OTHER = "other"


def classify_href(href) -> LinkKind:
    if not href:
        return LinkKind.OTHER
    try:
        path = urlsplit(href.strip()).path.lower()
    except ValueError:
        return LinkKind.OTHER

    if LISTING_SHAPE.search(path):
        return LinkKind.LISTING
    if EXCLUDED_PATHS.search(path):
        return LinkKind.EXCLUDED
    if DETAIL_SHAPE.search(path):
        return LinkKind.DETAIL
    return LinkKind.OTHER


def is_detail_href(href):
    return classify_href(href) is LinkKind.DETAIL


def _card_hrefs(doc):
    for card in doc.css(JOB_CARD_SELECTOR):
        yield from card.xpath("@data-href | @data-url").getall()
        yield from card.css("a::attr(href)").getall()


def discover_job_links(doc, page_url):
    """
    Absolute job-detail URLs found on a listing page.

    The second pass over job-card containers only adds recall (cards whose
    link lives in a data attribute); both passes share the classifier.
    """
    hrefs = list(doc.css("a::attr(href)").getall())
    hrefs.extend(_card_hrefs(doc))

    links = {}
    for href in hrefs:
        if not is_detail_href(href):
            continue
        absolute = resolve_absolute(href, page_url)
        if absolute is None:
            logger.debug("Dropping unresolvable href %r on %s", href, page_url)
            continue
        links.setdefault(absolute, None)
    return list(links)
