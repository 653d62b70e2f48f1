# Define your item pipelines here
#
# Don't forget to add your pipeline to the ITEM_PIPELINES setting
# See: https://docs.scrapy.org/en/latest/topics/item-pipeline.html


# useful for handling different item types with a single interface
from itemadapter import ItemAdapter
from scrapy.exceptions import DropItem

from freshersjobs.items import JobRecord


class JobRecordPipeline:
    """
    Last stop before the feed export:
    - every JobRecord field is present, as a string
    - records without a title never reach the feed
    - a job URL is written at most once per run
    """

    def __init__(self):
        self.seen_urls = set()

    def process_item(self, item, spider):
        adapter = ItemAdapter(item)
        for name in JobRecord.fields:
            value = adapter.get(name)
            adapter[name] = "" if value is None else str(value)

        if not adapter["title"]:
            raise DropItem(f"Missing title: {adapter['url'] or '<no url>'}")

        url = adapter["url"]
        if url:
            if url in self.seen_urls:
                raise DropItem(f"Duplicate job: {url}")
            self.seen_urls.add(url)
        return item
