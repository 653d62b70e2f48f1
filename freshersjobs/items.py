# Define here the models for your scraped items
#
# See documentation in:
# https://docs.scrapy.org/en/latest/topics/items.html

import scrapy


class PartialJobRecord(scrapy.Item):
    """One extractor's view of a job posting. Unknown fields are ``""``."""

    title = scrapy.Field()
    company = scrapy.Field()
    company_logo = scrapy.Field()
    location = scrapy.Field()
    salary = scrapy.Field()
    experience = scrapy.Field()
    qualification = scrapy.Field()
    job_type = scrapy.Field()
    skills = scrapy.Field()
    industry = scrapy.Field()
    date_posted = scrapy.Field()
    valid_through = scrapy.Field()
    description_html = scrapy.Field()
    apply_link = scrapy.Field()

    @classmethod
    def blank(cls, **values):
        record = cls({name: "" for name in cls.fields})
        record.update(values)
        return record


class JobRecord(PartialJobRecord):
    # Derived / canonical fields
    description_text = scrapy.Field()
    url = scrapy.Field()
