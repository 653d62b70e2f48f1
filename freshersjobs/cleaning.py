"""Rich-text sanitizing and plain-text helpers shared by the extractors."""

import re

from scrapy import Selector
from w3lib.html import remove_tags_with_content, replace_entities, replace_tags

# Elements removed (with their content) before a description is stored.
STRIP_SELECTOR = ", ".join((
    "script", "style", "noscript", "iframe", "img", "svg", "video", "audio",
    "nav", "footer", "header", "form", "input", "button", "select", "textarea",
    ".navbar", ".menu", ".sidebar", ".header", ".footer",
    ".advertisement", ".ad", '[class^="ad-"]', '[id^="ad-"]',
    ".social", ".share", ".comment", ".related",
    "[onclick]", "[onload]", "[onerror]",
))
STRIP_ATTRIBUTES = ("style", "class", "id")

TEXT_NOISE_TAGS = ("script", "style", "noscript", "iframe", "nav", "footer", "header")

_WHITESPACE = re.compile(r"\s+")
_BETWEEN_TAGS = re.compile(r">\s+<")
_ZERO_WIDTH = re.compile(r"[\u200b\u200c\u200d\ufeff]")


def collapse_whitespace(text):
    if not text:
        return ""
    return _WHITESPACE.sub(" ", _ZERO_WIDTH.sub("", text)).strip()


def text_of(selector):
    """Whitespace-normalized text content of a selector (``""`` for None)."""
    if selector is None:
        return ""
    return collapse_whitespace(selector.xpath("normalize-space(.)").get())


def inner_html(selector):
    if selector is None:
        return ""
    return "".join(selector.xpath("node()").getall()).strip()


def sanitize_html(html):
    """
    Reduce a rich-text fragment to its text-bearing markup.

    Drops scripts, styles, media, forms, page chrome and anything with an
    inline event handler, strips ``on*``/``style``/``class``/``id``
    attributes and collapses whitespace between tags.
    """
    if not html or not html.strip():
        return ""

    sel = Selector(text=html)
    for element in sel.css(STRIP_SELECTOR):
        element.drop()

    for element in sel.xpath("//body//*"):
        attrib = element.root.attrib
        for name in list(attrib):
            if name.lower().startswith("on") or name.lower() in STRIP_ATTRIBUTES:
                del attrib[name]

    cleaned = "".join(sel.xpath("//body/node()").getall())
    cleaned = _WHITESPACE.sub(" ", cleaned).strip()
    return _BETWEEN_TAGS.sub("><", cleaned)


def clean_text(html):
    """Plain text of a rich-text fragment."""
    if not html:
        return ""
    text = remove_tags_with_content(html, which_ones=TEXT_NOISE_TAGS)
    text = replace_entities(replace_tags(text, " "))
    return collapse_whitespace(text)
