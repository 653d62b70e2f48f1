import random

import scrapy

from freshersjobs.config import RunInput
from freshersjobs.items import JobRecord
from freshersjobs.jsonld import extract_structured
from freshersjobs.links import discover_job_links
from freshersjobs.markup import LISTING_CARD_SELECTOR, extract_card, extract_markup
from freshersjobs.merge import merge
from freshersjobs.pagination import resolve_next_page
from freshersjobs.state import CrawlState, CrawlTarget, TargetKind, visit_key
from freshersjobs.urls import BASE_URL, build_start_url, listing_base

RUN_ARGUMENTS = {
    "keyword", "location", "category", "experience", "qualification",
    "results_wanted", "resultsWanted", "max_pages", "maxPages",
    "collect_details", "collectDetails", "start_url", "startUrl", "url",
    "start_urls", "startUrls", "proxy_urls", "proxyUrls",
}


class FreshersworldSpider(scrapy.Spider):
    """
    Walks Freshersworld listing pages and stores one JobRecord per job.

    Listing pages yield detail requests (or card records when
    ``collect_details`` is off) plus the next listing page; detail pages
    yield merged records until ``results_wanted`` is reached.
    """

    name = "freshersworld"
    allowed_domains = ["freshersworld.com"]

    def __init__(self, input_file=None, *args, **kwargs):
        run_args = {
            key: kwargs.pop(key)
            for key in list(kwargs)
            if key in RUN_ARGUMENTS
        }
        super().__init__(*args, **kwargs)
        self.run_input = RunInput.from_arguments(input_file=input_file, **run_args)
        self.state = CrawlState(self.run_input.results_wanted, self.run_input.max_pages)
        self.proxy_urls = list(self.run_input.proxy_urls)

    @property
    def collect_details(self):
        return self.run_input.collect_details

    def start_targets(self):
        urls = self.run_input.start_urls or (build_start_url(self.run_input.query),)
        targets = []
        for url in urls:
            if self.state.claim_one(url):
                targets.append(CrawlTarget(url, TargetKind.LISTING, 1, listing_base(url), BASE_URL))
        return targets

    async def start(self):
        targets = self.start_targets()
        self.logger.info(f"Starting Freshersworld scraper with {len(targets)} initial URL(s)")
        self.logger.info(
            f"Target: {self.state.results_wanted} results, max {self.state.max_pages} pages"
        )
        for target in targets:
            yield self.request_for(target)

    def request_for(self, target):
        callback = self.parse_listing if target.kind is TargetKind.LISTING else self.parse_detail
        return target.to_request(callback, errback=self.on_request_failed, headers=self.headers_for(target))

    def headers_for(self, target):
        headers = {"Referer": target.referer or BASE_URL}
        settings = getattr(self, "settings", None)
        user_agents = settings.getlist("USER_AGENTS") if settings is not None else []
        if user_agents:
            headers["User-Agent"] = random.choice(user_agents)
        return headers

    def parse_listing(self, response):
        target = response.meta["target"]
        links = discover_job_links(response, response.url)
        self.logger.info(f"[LIST] Page {target.page}: {response.url} -> found {len(links)} job links")

        new_links = self.state.claim(links)

        if self.collect_details:
            to_enqueue = new_links[:self.state.remaining()]
            for url in to_enqueue:
                yield self.request_for(CrawlTarget(url, TargetKind.DETAIL, referer=response.url))
            if to_enqueue:
                self.logger.info(f"[LIST] Enqueued {len(to_enqueue)} detail pages")
        else:
            yield from self.card_records(response, new_links)

        if self.state.is_done() or target.page >= self.state.max_pages or not new_links:
            return

        next_page = resolve_next_page(response, target.page, target.base_url, link_count=len(links))
        if next_page.has_next and self.state.claim_one(next_page.next_url):
            yield self.request_for(target.next_page(next_page.next_url))
            self.logger.info(f"[LIST] Enqueued next page: {target.page + 1}")

    def card_records(self, response, new_links):
        """Records for cards whose job link was first claimed on this page."""
        fresh = {visit_key(url) for url in new_links}
        saved = 0
        for card in response.css(LISTING_CARD_SELECTOR):
            values = extract_card(card, response.url)
            if not values["title"]:
                continue
            if values["url"] and visit_key(values["url"]) not in fresh:
                continue
            if not self.state.try_save():
                break
            saved += 1
            yield JobRecord.blank(**values)
        if saved:
            self.logger.info(f"[LIST] Saved {saved} items (total: {self.state.saved})")

    def parse_detail(self, response):
        if self.state.is_done():
            self.logger.info(f"[DETAIL] Skipping {response.url} - results limit reached")
            return

        try:
            record = merge(extract_structured(response), extract_markup(response), url=response.url)
        except Exception as exc:
            self.logger.error(f"[DETAIL] Failed {response.url}: {exc}")
            return

        if record is None:
            self.logger.warning(f"[DETAIL] No title found for {response.url}")
            return

        if not self.state.try_save():
            self.logger.info(f"[DETAIL] Skipping {response.url} - results limit reached")
            return

        self.logger.info(
            f'[DETAIL] Saved: "{record["title"]}" at {record["company"]} (total: {self.state.saved})'
        )
        yield record

    def on_request_failed(self, failure):
        request = failure.request
        self.logger.error(
            f"Request failed after retries: {request.url} "
            f"[{request.meta.get('label', '?')}] - {failure.getErrorMessage()}"
        )

    def closed(self, reason):
        self.logger.info(f"Finished ({reason}): saved {self.state.saved} job listings")
