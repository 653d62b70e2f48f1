from freshersjobs.cleaning import clean_text
from freshersjobs.items import JobRecord, PartialJobRecord


def merge(structured, markup, url=""):
    """
    Combine the JSON-LD and HTML views of one job page.

    Each field independently takes the structured value when it is
    non-empty, else the markup value. ``structured`` may be None (no
    JSON-LD on the page), which behaves like an all-empty record.
    Returns None when neither source yields a title.
    """
    structured = structured or {}
    merged = JobRecord.blank(url=url or "")
    for field in PartialJobRecord.fields:
        merged[field] = structured.get(field) or markup.get(field) or ""

    if not merged["title"]:
        return None

    merged["description_text"] = clean_text(merged["description_html"])
    return merged
