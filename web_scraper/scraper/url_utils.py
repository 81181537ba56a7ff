# scraper/url_utils.py

# Spot URLs inside a chat message and separate them from the question text.

import re
from typing import Optional
from urllib.parse import urlparse

URL_PATTERN = re.compile(
    r"https?://(?:www\.)?[-a-zA-Z0-9@:%.+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b(?:[-a-zA-Z0-9()@:%+.~#?&/=]*)",
    flags=re.I,
)


def first_url(message: str) -> Optional[str]:
    match = URL_PATTERN.search(message or "")
    return match.group(0) if match else None


def strip_url(message: str, url: Optional[str]) -> str:
    """
    Remove the first occurrence of ``url`` from the message and trim.
    """
    if not url:
        return (message or "").strip()
    return message.replace(url, "", 1).strip()


def host_of(url: str) -> str:
    return (urlparse(url).hostname or "").lower()
