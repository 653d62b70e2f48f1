"""
Heuristic field extraction from the visible HTML of a job page.

Each field has an ordered chain of candidates. A candidate pairs an
extraction function with a plausibility check; the first candidate whose
value is non-empty and plausible wins, later ones are fallbacks only.
"""

import re
from collections import namedtuple
from dataclasses import dataclass
from typing import Callable

from scrapy import Selector

from freshersjobs.cleaning import clean_text, inner_html, sanitize_html, text_of
from freshersjobs.items import PartialJobRecord
from freshersjobs.links import is_detail_href
from freshersjobs.urls import resolve_absolute

CHROME_SELECTOR = (
    "header, nav, footer, .header, .footer, .navbar, .menu, .sidebar, script, style"
)

DESCRIPTION_MIN_CHARS = 50
DESCRIPTION_MAX_CHARS = 10000
PARAGRAPH_MIN_CHARS = 100

JOB_TYPE_KEYWORDS = (
    (("Full Time", "Fulltime"), "Full Time"),
    (("Part Time", "Parttime"), "Part Time"),
    (("Contract",), "Contract"),
    (("Internship",), "Internship"),
    (("Remote",), "Remote"),
)

_POSTED = re.compile(r"Posted[:\s]+([^\n]+)", re.IGNORECASE)
_DIGIT = re.compile(r"\d")

Page = namedtuple("Page", "sel url")


@dataclass(frozen=True)
class Candidate:
    extract: Callable[[Page], str]
    accept: Callable[[str], bool] = bool


def first_plausible(page, candidates):
    """Value of the first candidate that yields a plausible value, else ``""``."""
    values = ((candidate.extract(page), candidate) for candidate in candidates)
    return next((value for value, candidate in values if value and candidate.accept(value)), "")


def plausible(min_len=1, max_len=300, banned=()):
    def accept(value):
        return (
            min_len <= len(value) <= max_len
            and not any(word in value for word in banned)
        )
    return accept


def chain(accept, *extractors):
    return tuple(Candidate(extract, accept) for extract in extractors)


def _first(selector_list):
    return selector_list[0] if selector_list else None


def css_text(query):
    def extract(page):
        return text_of(_first(page.sel.css(query)))
    return extract


def xpath_text(query):
    def extract(page):
        return text_of(_first(page.sel.xpath(query)))
    return extract


def css_html(query):
    def extract(page):
        return inner_html(_first(page.sel.css(query)))
    return extract


def attr_url(query):
    """Absolute URL from the first value of an attribute XPath/CSS query."""
    def extract(page):
        if query.startswith("/"):
            raw = page.sel.xpath(query).get()
        else:
            raw = page.sel.css(query).get()
        return resolve_absolute(raw, page.url) or ""
    return extract


def _qualification_blocks(page):
    return page.sel.css(".qualifications.display-block")


def _salary_block(page):
    blocks = _qualification_blocks(page)
    return text_of(blocks[0]) if blocks else ""


def _eligibility_block(page):
    blocks = _qualification_blocks(page)
    if len(blocks) < 2:
        return ""
    block = blocks[1]
    items = [text_of(el) for el in block.css(".bold_elig, .elig_pos")]
    items = [item for item in items if item and len(item) < 50]
    return ", ".join(items) if items else text_of(block)


def _skill_tags(page):
    skills = {}
    for el in page.sel.css(".skills-tag, .skill-item, .key-skill, [class*='skill']"):
        skill = text_of(el)
        if 1 < len(skill) < 50:
            skills.setdefault(skill, None)
    return ", ".join(skills)


def _page_text(page):
    return "\n".join(t.strip() for t in page.sel.xpath("//body//text()").getall() if t.strip())


def _job_type_from_text(page):
    text = _page_text(page)
    return next(
        (label for needles, label in JOB_TYPE_KEYWORDS if any(n in text for n in needles)),
        "",
    )


def _posted_from_text(page):
    match = _POSTED.search(_page_text(page))
    return match.group(1).strip() if match else ""


def _description_fits(html):
    return DESCRIPTION_MIN_CHARS < len(clean_text(html)) < DESCRIPTION_MAX_CHARS


def _is_content_paragraph(el):
    text = text_of(el)
    return (
        len(text) > PARAGRAPH_MIN_CHARS
        and "Login" not in text
        and "Register" not in text
    )


def _first_long_paragraph(page):
    paragraph = next((el for el in page.sel.css("p, div.desc") if _is_content_paragraph(el)), None)
    return inner_html(paragraph)


FIELD_CHAINS = {
    "title": chain(
        plausible(min_len=6, max_len=200, banned=("Login", "Employer")),
        css_text(".seo_title"),
        css_text(".wrap-title.seo_title"),
        css_text(".job-new-title .wrap-title"),
        css_text("h1.job-title"),
        css_text("h1"),
    ),
    "company": chain(
        plausible(max_len=150, banned=("Login", "Employer", "Institute")),
        css_text(".latest-jobs-title.company-name"),
        css_text("h3.company-name"),
        xpath_text(
            "//*[contains(concat(' ', normalize-space(@class), ' '), ' company-name ')]"
            "[not(.//a)]"
        ),
    ),
    "company_logo": chain(
        bool,
        attr_url("img.company-logo::attr(src)"),
        attr_url("img[class*='company-logo']::attr(src)"),
    ),
    "location": chain(
        plausible(max_len=200),
        css_text(".job-location a.bold_font"),
        css_text(".job-location"),
        css_text("a.bold_font[href*='jobs-in-']"),
    ),
    "salary": (
        Candidate(_salary_block, lambda v: bool(_DIGIT.search(v)) and len(v) <= 150),
    ) + chain(
        plausible(max_len=150),
        css_text(".salary-range"),
        css_text("[class*='salary']"),
        css_text(".ctc"),
    ),
    "experience": chain(
        plausible(max_len=100),
        css_text(".experience.job-details-span"),
        css_text("span.experience"),
    ),
    "qualification": chain(
        plausible(max_len=300),
        _eligibility_block,
        css_text(".qualification"),
        css_text("[class*='qualification']"),
        css_text("[class*='eligib']"),
    ),
    "job_type": chain(
        plausible(max_len=60),
        css_text(".job-type"),
        css_text("[class*='job-type']"),
        css_text("[class*='employment']"),
        _job_type_from_text,
    ),
    "skills": (Candidate(_skill_tags),),
    "industry": chain(
        plausible(max_len=150),
        css_text(".industry"),
        css_text("[class*='industry']"),
    ),
    "date_posted": chain(
        plausible(max_len=80),
        css_text(".posted-date"),
        css_text(".date-posted"),
        css_text("time"),
        css_text("[class*='posted']"),
        _posted_from_text,
    ),
    "valid_through": chain(
        plausible(max_len=80),
        css_text(".deadline"),
        css_text(".last-date"),
        css_text("[class*='deadline']"),
    ),
    "description_html": chain(
        _description_fits,
        css_html(".job-description"),
        css_html("#job-description"),
        css_html(".job-desc"),
        css_html(".job-content"),
        css_html(".desc"),
        css_html("[class*='description']"),
    ) + (Candidate(_first_long_paragraph),),
    "apply_link": chain(
        bool,
        attr_url("a.apply-btn::attr(href)"),
        attr_url("a[class*='apply']::attr(href)"),
        attr_url("button[class*='apply']::attr(href)"),
        attr_url("//a[contains(., 'Apply Now')]/@href"),
    ),
}

# Card containers that hold exactly one job; the wrapping .jobs-list is not one.
LISTING_CARD_SELECTOR = ".job-container, .job-card, .job-listing, [class*='job-item']"

CARD_FIELD_CHAINS = {
    "title": chain(plausible(max_len=200), css_text("h2, h3, .job-title, [class*='title']")),
    "company": chain(plausible(max_len=150), css_text(".company-name, [class*='company'], .employer")),
    "location": chain(plausible(max_len=200), css_text(".location, [class*='location'], .job-location")),
    "salary": chain(plausible(max_len=150), css_text(".salary, [class*='salary']")),
}


def without_chrome(html):
    """A fresh selector over ``html`` with page chrome and scripts dropped."""
    sel = Selector(text=html or "<html></html>")
    for element in sel.css(CHROME_SELECTOR):
        element.drop()
    return sel


def extract_markup(response):
    """PartialJobRecord read from the visible HTML of a detail page."""
    page = Page(without_chrome(response.text), response.url)
    record = PartialJobRecord.blank(**{
        field: first_plausible(page, candidates)
        for field, candidates in FIELD_CHAINS.items()
    })
    record["description_html"] = sanitize_html(record["description_html"])
    return record


def card_link(card, page_url):
    hrefs = card.xpath("@data-href | @data-url").getall() + card.css("a::attr(href)").getall()
    href = next((h for h in hrefs if is_detail_href(h)), None)
    return resolve_absolute(href, page_url) or ""


def extract_card(card, page_url):
    """Lightweight record fields from one listing card."""
    page = Page(card, page_url)
    values = {field: first_plausible(page, candidates) for field, candidates in CARD_FIELD_CHAINS.items()}
    values["url"] = card_link(card, page_url)
    return values
