import json

import pytest

from freshersjobs.config import (
    DEFAULT_MAX_PAGES,
    UNBOUNDED,
    RunInput,
    parse_bool,
    parse_max_pages,
    parse_results_wanted,
)


@pytest.mark.parametrize(
    "value, expected",
    [("100", 100), (5, 5), ("0", 1), ("-3", 1), ("7.9", 7), ("inf", UNBOUNDED), ("lots", UNBOUNDED), (None, 1), ("", 1), (" ", 1)],
)
def test_parse_results_wanted(value, expected):
    assert parse_results_wanted(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [("3", 3), ("0", 1), ("nan", DEFAULT_MAX_PAGES), ("abc", DEFAULT_MAX_PAGES)],
)
def test_parse_max_pages(value, expected):
    assert parse_max_pages(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [(None, True), ("", True), ("false", False), ("No", False), ("0", False), ("true", True), (False, False)],
)
def test_parse_bool(value, expected):
    assert parse_bool(value) is expected


def test_defaults():
    run_input = RunInput.from_arguments()

    assert run_input.results_wanted == 100
    assert run_input.max_pages == 50
    assert run_input.collect_details is True
    assert run_input.start_urls == ()
    assert run_input.query.keyword == ""


def test_spider_arguments():
    run_input = RunInput.from_arguments(
        keyword=" java developer ",
        results_wanted="2",
        maxPages="1",
        collect_details="false",
        start_urls="https://a.example/1, https://a.example/2",
        url="https://a.example/1",
    )

    assert run_input.query.keyword == "java developer"
    assert run_input.results_wanted == 2
    assert run_input.max_pages == 1
    assert run_input.collect_details is False
    assert run_input.start_urls == ("https://a.example/1", "https://a.example/2")


def test_input_file_with_camel_case_keys(tmp_path):
    path = tmp_path / "input.json"
    path.write_text(json.dumps({
        "keyword": "accountant",
        "resultsWanted": 10,
        "collectDetails": False,
        "startUrl": "https://www.freshersworld.com/jobs-in-pune",
        "proxyConfiguration": {"proxyUrls": ["http://proxy-1:8000", "http://proxy-2:8000"]},
    }), encoding="utf8")

    run_input = RunInput.from_arguments(input_file=str(path), results_wanted="3")

    assert run_input.query.keyword == "accountant"
    assert run_input.results_wanted == 3
    assert run_input.collect_details is False
    assert run_input.start_urls == ("https://www.freshersworld.com/jobs-in-pune",)
    assert run_input.proxy_urls == ("http://proxy-1:8000", "http://proxy-2:8000")


def test_null_results_wanted_in_input_file_means_one(tmp_path):
    path = tmp_path / "input.json"
    path.write_text(json.dumps({"resultsWanted": None}), encoding="utf8")

    assert RunInput.from_arguments(input_file=str(path)).results_wanted == 1


def test_input_file_must_be_an_object(tmp_path):
    path = tmp_path / "input.json"
    path.write_text("[1, 2]", encoding="utf8")

    with pytest.raises(ValueError):
        RunInput.from_arguments(input_file=str(path))
