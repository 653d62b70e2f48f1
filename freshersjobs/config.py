"""
Run input handling.

Spider arguments arrive as strings from ``scrapy crawl -a name=value``;
an ``input_file`` JSON object may provide the same keys in snake_case or
camelCase. Explicit spider arguments win over the file.
"""

import json
import math
import sys
from dataclasses import dataclass, field
from typing import Optional, Tuple

from freshersjobs.urls import SearchQuery

DEFAULT_RESULTS_WANTED = 100
DEFAULT_MAX_PAGES = 50
UNBOUNDED = sys.maxsize

FALSE_VALUES = {"false", "0", "no", "off"}

INPUT_ALIASES = {
    "resultsWanted": "results_wanted",
    "maxPages": "max_pages",
    "collectDetails": "collect_details",
    "startUrl": "start_url",
    "startUrls": "start_urls",
    "proxyUrls": "proxy_urls",
}


def _number(value):
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def parse_results_wanted(value=DEFAULT_RESULTS_WANTED):
    """Positive int; blank counts as 0, non-finite or non-numeric means unbounded."""
    if value is None or not str(value).strip():
        value = 0
    number = _number(value)
    if number is None:
        return UNBOUNDED
    return max(1, int(number))


def parse_max_pages(value=DEFAULT_MAX_PAGES):
    number = _number(value)
    if number is None:
        return DEFAULT_MAX_PAGES
    return max(1, int(number))


def parse_bool(value, default=True):
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if not text:
        return default
    return text not in FALSE_VALUES


def parse_url_list(value):
    if not value:
        return ()
    if isinstance(value, str):
        value = value.split(",")
    urls = []
    for item in value:
        if isinstance(item, dict):
            item = item.get("url")
        if item and str(item).strip():
            urls.append(str(item).strip())
    return tuple(urls)


def load_input_file(path):
    with open(path, "r", encoding="utf8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Run input in {path} must be a JSON object")

    normalized = {INPUT_ALIASES.get(key, key): value for key, value in data.items()}
    proxy_config = normalized.pop("proxyConfiguration", None)
    if isinstance(proxy_config, dict) and "proxy_urls" not in normalized:
        normalized["proxy_urls"] = proxy_config.get("proxyUrls") or proxy_config.get("proxy_urls")
    return normalized


@dataclass(frozen=True)
class RunInput:
    query: SearchQuery = field(default_factory=SearchQuery)
    results_wanted: int = DEFAULT_RESULTS_WANTED
    max_pages: int = DEFAULT_MAX_PAGES
    collect_details: bool = True
    start_urls: Tuple[str, ...] = ()
    proxy_urls: Tuple[str, ...] = ()

    @classmethod
    def from_arguments(cls, input_file: Optional[str] = None, **kwargs):
        values = load_input_file(input_file) if input_file else {}
        values.update({
            INPUT_ALIASES.get(key, key): value for key, value in kwargs.items() if value is not None
        })

        query = SearchQuery(**{
            name: str(values.get(name) or "").strip()
            for name in ("keyword", "location", "category", "experience", "qualification")
        })
        start_urls = (
            parse_url_list(values.get("start_url"))
            + parse_url_list(values.get("url"))
            + parse_url_list(values.get("start_urls"))
        )
        return cls(
            query=query,
            results_wanted=parse_results_wanted(values.get("results_wanted", DEFAULT_RESULTS_WANTED)),
            max_pages=parse_max_pages(values.get("max_pages", DEFAULT_MAX_PAGES)),
            collect_details=parse_bool(values.get("collect_details"), default=True),
            start_urls=tuple(dict.fromkeys(start_urls)),
            proxy_urls=parse_url_list(values.get("proxy_urls")),
        )
