# scraper/fetch_strategy.py

# Decide per URL whether a plain HTTP GET is enough or the page has to be
# rendered in the headless browser first. Matching is a substring test on the
# host against a fixed list; there is no content sniffing or escalation.

from enum import Enum
from typing import Callable, Iterable

from config import DYNAMIC_HOSTS
from web_scraper.scraper.url_utils import host_of


class FetchStrategy(str, Enum):
    STATIC = "static"
    DYNAMIC = "dynamic"


def select_strategy(url: str, dynamic_hosts: Iterable[str] = DYNAMIC_HOSTS) -> FetchStrategy:
    host = host_of(url)
    if host and any(entry.lower() in host for entry in dynamic_hosts):
        return FetchStrategy.DYNAMIC
    return FetchStrategy.STATIC


def make_selector(dynamic_hosts: Iterable[str]) -> Callable[[str], FetchStrategy]:
    """Build a selector bound to another host list."""
    hosts = tuple(dynamic_hosts)
    return lambda url: select_strategy(url, dynamic_hosts=hosts)
