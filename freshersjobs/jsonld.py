"""Extraction of JobPosting data from embedded JSON-LD blocks."""

import json
import logging

from w3lib.html import replace_entities

from freshersjobs.cleaning import collapse_whitespace, sanitize_html
from freshersjobs.items import PartialJobRecord

logger = logging.getLogger(__name__)

JOB_POSTING = "JobPosting"
DEFAULT_CURRENCY = "INR"


def _is_job_posting(entry):
    if not isinstance(entry, dict):
        return False
    declared = entry.get("@type") or entry.get("type")
    if isinstance(declared, list):
        return JOB_POSTING in declared
    return declared == JOB_POSTING


def _entries(parsed):
    """Top-level objects of a JSON-LD block, including ``@graph`` members."""
    candidates = parsed if isinstance(parsed, list) else [parsed]
    for entry in candidates:
        if not isinstance(entry, dict):
            continue
        yield entry
        graph = entry.get("@graph")
        if isinstance(graph, list):
            yield from (node for node in graph if isinstance(node, dict))


def find_job_posting(doc):
    """The first JobPosting object among the page's JSON-LD blocks, or None."""
    for raw in doc.xpath('//script[@type="application/ld+json"]/text()').getall():
        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError:
            logger.debug("Skipping unparseable JSON-LD block")
            continue
        posting = next((e for e in _entries(parsed) if _is_job_posting(e)), None)
        if posting is not None:
            return posting
    return None


def _text(value):
    if value is None or isinstance(value, (dict, list)):
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return collapse_whitespace(str(value))


def _joined(value):
    if isinstance(value, list):
        return ", ".join(t for t in (_text(v) for v in value) if t)
    return _text(value)


def _present(value):
    return value is not None and value != ""


def format_salary(base_salary):
    """
    Render ``baseSalary`` as text.

    A min/max range wins over a single value, which wins over a plain
    string salary.
    """
    if isinstance(base_salary, str):
        return _text(base_salary)
    if not isinstance(base_salary, dict):
        return ""

    currency = base_salary.get("currency") or DEFAULT_CURRENCY
    value = base_salary.get("value")
    if isinstance(value, dict):
        low, high = value.get("minValue"), value.get("maxValue")
        if _present(low) and _present(high):
            return f"{_text(low)} - {_text(high)} {currency}"
        if _present(value.get("value")):
            return f"{_text(value['value'])} {currency}"
        return ""
    if isinstance(value, (int, float, str)) and _present(value):
        return f"{_text(value)} {currency}"
    return ""


def format_experience(requirements):
    if not isinstance(requirements, dict):
        return ""
    months = requirements.get("monthsOfExperience")
    if not _present(months):
        return ""
    try:
        return f"{int(float(months)) // 12} years"
    except (TypeError, ValueError, OverflowError):
        return ""


def _organization(posting):
    org = posting.get("hiringOrganization")
    if isinstance(org, str):
        return _text(org), ""
    if not isinstance(org, dict):
        return "", ""
    logo = org.get("logo")
    if isinstance(logo, dict):
        logo = logo.get("url")
    return _text(org.get("name")), _text(logo)


def _location(posting):
    location = posting.get("jobLocation")
    if isinstance(location, list):
        location = location[0] if location else None
    if isinstance(location, str):
        return _text(location)
    if not isinstance(location, dict):
        return ""
    address = location.get("address")
    if isinstance(address, str):
        return _text(address)
    if not isinstance(address, dict):
        return ""
    return _text(address.get("addressLocality")) or _text(address.get("addressRegion"))


def _qualification(posting):
    education = posting.get("educationRequirements")
    if isinstance(education, dict):
        return _joined(education.get("credentialCategory"))
    return _joined(education)


def _description(posting):
    raw = posting.get("description")
    if not isinstance(raw, str):
        return ""
    if "&lt;" in raw:
        raw = replace_entities(raw)
    return sanitize_html(raw)


def extract_structured(doc):
    """
    PartialJobRecord from the page's JSON-LD JobPosting, or None when the
    page carries no such block.
    """
    posting = find_job_posting(doc)
    if posting is None:
        return None

    company, logo = _organization(posting)
    return PartialJobRecord.blank(
        title=_text(posting.get("title")) or _text(posting.get("name")),
        company=company,
        company_logo=logo,
        location=_location(posting),
        salary=format_salary(posting.get("baseSalary")),
        experience=format_experience(posting.get("experienceRequirements")),
        qualification=_qualification(posting),
        job_type=_joined(posting.get("employmentType")),
        skills=_joined(posting.get("skills")),
        industry=_joined(posting.get("industry")),
        date_posted=_text(posting.get("datePosted")),
        valid_through=_text(posting.get("validThrough")),
        description_html=_description(posting),
        apply_link=_text(posting.get("url")),
    )
