from urllib.parse import parse_qs, urlsplit

import pytest

from freshersjobs.urls import (
    BASE_URL,
    JOBS_PER_PAGE,
    SearchQuery,
    build_paginated_url,
    build_start_url,
    category_for_keyword,
    listing_base,
    resolve_absolute,
    slugify,
)


def test_keyword_maps_to_category_listing():
    url = build_start_url(SearchQuery(keyword="Java Developer", location="Pune"))

    assert url == f"{BASE_URL}/jobs/category/it-software-job-vacancies"


def test_first_matching_keyword_wins():
    # "bank" appears later in the table than "software"
    assert category_for_keyword("software for bank") == "it-software"
    assert category_for_keyword("Bank PO") == "banking-finance"
    assert category_for_keyword("astronaut") is None


def test_unmatched_keyword_falls_through_to_location():
    url = build_start_url(SearchQuery(keyword="astronaut", location="New Delhi"))

    assert url == f"{BASE_URL}/jobs-in-new-delhi"


def test_location_wins_over_category():
    url = build_start_url(SearchQuery(location="Bangalore", category="Teaching"))

    assert url == f"{BASE_URL}/jobs-in-bangalore"


def test_category_is_slugified():
    url = build_start_url(SearchQuery(category="  Banking & Finance "))

    assert url == f"{BASE_URL}/jobs/category/banking-finance-job-vacancies"


def test_empty_query_uses_default_category():
    assert build_start_url(SearchQuery()) == f"{BASE_URL}/jobs/category/it-software-job-vacancies"


def test_slugify():
    assert slugify("Hyderabad / Secunderabad") == "hyderabad-secunderabad"
    assert slugify(None) == ""


def test_paginated_url_sets_limit_and_offset():
    base = f"{BASE_URL}/jobs-in-bangalore"

    url = build_paginated_url(base, 3)

    params = parse_qs(urlsplit(url).query)
    assert params == {"limit": [str(JOBS_PER_PAGE)], "offset": [str(2 * JOBS_PER_PAGE)]}
    assert url == build_paginated_url(base, 3)


def test_paginated_url_replaces_existing_parameters():
    url = build_paginated_url(f"{BASE_URL}/jobs-in-pune?limit=20&offset=40", 2)

    params = parse_qs(urlsplit(url).query)
    assert params["offset"] == ["20"]
    assert params["limit"] == ["20"]


def test_paginated_url_first_page_has_zero_offset():
    assert parse_qs(urlsplit(build_paginated_url(BASE_URL + "/x", 1)).query)["offset"] == ["0"]


def test_listing_base_strips_query_and_fragment():
    assert listing_base(f"{BASE_URL}/jobs-in-pune?limit=20&offset=40#top") == f"{BASE_URL}/jobs-in-pune"


@pytest.mark.parametrize(
    "href, expected",
    [
        ("/jobs/a-1234567", f"{BASE_URL}/jobs/a-1234567"),
        ("b-7654321", f"{BASE_URL}/jobs/b-7654321"),
        ("https://other.example.com/x", "https://other.example.com/x"),
        ("", None),
        (None, None),
        ("   ", None),
        ("javascript:void(0)", None),
        ("mailto:hr@example.com", None),
        ("http://[::1", None),
    ],
)
def test_resolve_absolute(href, expected):
    assert resolve_absolute(href, f"{BASE_URL}/jobs/listing") == expected
