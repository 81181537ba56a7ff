# scraper/content_extractor.py

# Turns raw HTML into the plain text we hand to the LLM:
# Title
# Meta description
# h1 / h2 headings
# article, main and "content" containers
# Paragraphs and list items
# Everything is whitespace-collapsed and the combined text is capped.

import re

from bs4 import BeautifulSoup

from config import MAX_CONTENT_LENGTH
from web_scraper.storage.models import Headings, ScrapedContent

NOISE_TAGS = ["script", "style", "noscript", "iframe"]
CONTENT_SELECTOR = '.content, #content, [class*="content"]'

_WHITESPACE_RE = re.compile(r"\s+")


def clean_text(text: str) -> str:
    """Collapse whitespace runs to one space, drop newlines, trim."""
    return _WHITESPACE_RE.sub(" ", text or "").replace("\n", "").strip()


def _joined_text(elements) -> str:
    # No separator between elements
    return "".join(el.get_text() for el in elements)


def extract_content(html: str, url: str = "") -> ScrapedContent:
    """
    Extract title, meta description, headings and body text from ``html``.
    Pure: the same input always yields the same record.
    """
    # html5lib applies the HTML5 optional end-tag rules (unclosed <p>, <li>)
    soup = BeautifulSoup(html or "", "html5lib")

    for tag in soup(NOISE_TAGS):
        tag.decompose()

    title = _joined_text(soup.find_all("title"))

    meta_desc = ""
    desc_tag = soup.find("meta", attrs={"name": "description"})
    if desc_tag and desc_tag.get("content"):
        meta_desc = desc_tag["content"]

    h1 = _joined_text(soup.find_all("h1"))
    h2 = _joined_text(soup.find_all("h2"))
    article_text = _joined_text(soup.find_all("article"))
    main_text = _joined_text(soup.find_all("main"))
    content_text = _joined_text(soup.select(CONTENT_SELECTOR))
    paragraphs = _joined_text(soup.find_all("p"))
    list_items = _joined_text(soup.find_all("li"))

    combined = " ".join([
        title,
        meta_desc,
        h1,
        h2,
        article_text,
        main_text,
        content_text,
        paragraphs,
        list_items,
    ])

    return ScrapedContent(
        url=url,
        title=clean_text(title),
        headings=Headings(h1=clean_text(h1), h2=clean_text(h2)),
        meta_description=clean_text(meta_desc),
        content=clean_text(combined)[:MAX_CONTENT_LENGTH],
        error=None,
    )
