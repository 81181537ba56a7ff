# storage/cache_policy.py

# Decides whether a cached page can be trusted and writes fresh pages back.
# Expiry is left entirely to the store's TTL; a cached record is never
# rejected for being old, only for being malformed.

import dataclasses
import json
import time
from typing import Any, Optional

from config import CACHE_KEY_PREFIX, CACHE_KEY_URL_LENGTH, CACHE_TTL_SECONDS, MAX_CACHE_SIZE
from utils.logger import setup_logger
from web_scraper.storage.models import ScrapedContent

logger = setup_logger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


def get_cache_key(url: str) -> str:
    """
    Namespaced cache key for a URL. Only the first CACHE_KEY_URL_LENGTH
    characters are used, so long URLs sharing that prefix share an entry.
    """
    return f"{CACHE_KEY_PREFIX}{url[:CACHE_KEY_URL_LENGTH]}"


def _reject_constant(name: str):
    # NaN / Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def deserialize(raw: Any) -> Any:
    """
    Normalize whatever the store handed back into plain Python objects.
    Raises ValueError for undecodable payloads.
    """
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8")
    if isinstance(raw, str):
        return json.loads(raw, parse_constant=_reject_constant)
    return raw


def is_valid_scraped_content(data: Any) -> bool:
    if not isinstance(data, dict):
        return False
    headings = data.get("headings")
    return (
        isinstance(data.get("url"), str)
        and isinstance(data.get("title"), str)
        and isinstance(headings, dict)
        and isinstance(headings.get("h1"), str)
        and isinstance(headings.get("h2"), str)
        and isinstance(data.get("metaDescription"), str)
        and isinstance(data.get("content"), str)
        and "error" in data
        and (data["error"] is None or isinstance(data["error"], str))
    )


def validate(raw: Any) -> Optional[ScrapedContent]:
    """Return the cached record, or None when the payload cannot be trusted."""
    try:
        data = deserialize(raw)
        if not is_valid_scraped_content(data):
            return None
        return ScrapedContent.from_dict(data)
    except (ValueError, TypeError, OverflowError, RecursionError) as e:
        logger.error(f"Error parsing cached content: {e}")
        return None


async def get_cached_content(store, url: str) -> Optional[ScrapedContent]:
    """
    Look up a URL in the cache. Malformed entries are deleted and reported
    as a miss; store errors are logged and also reported as a miss.
    """
    cache_key = get_cache_key(url)
    logger.info(f"Checking cache for key: {cache_key}")
    try:
        cached = await store.get(cache_key)
    except Exception as e:
        logger.error(f"Error getting cached content for {url}: {e}")
        return None

    if not cached:
        logger.info(f"Cache miss for key: {cache_key}")
        return None

    logger.info(f"Cache hit for key: {cache_key}")
    record = validate(cached)
    if record is None:
        logger.warning(f"Invalid cached content for {url}, evicting")
        try:
            await store.delete(cache_key)
        except Exception as e:
            logger.error(f"Error deleting invalid cache entry {cache_key}: {e}")
        return None

    age_ms = _now_ms() - (record.cached_at or 0)
    logger.info(f"Cache content age: {round(age_ms / 1000 / 60)} minutes")
    return record


async def cache_content(store, url: str, record: ScrapedContent) -> bool:
    """
    Write a freshly scraped record to the cache with a 7-day TTL.
    Returns True when written. ``record.cached_at`` is only stamped on success.
    """
    if not record.ok:
        logger.warning(f"Refusing to cache failed scrape for {url}")
        return False

    cache_key = get_cache_key(url)
    stamped = dataclasses.replace(record, cached_at=_now_ms())
    if not is_valid_scraped_content(stamped.to_dict()):
        logger.error(f"Invalid content to cache for url: {url}")
        return False

    serialized = stamped.to_json()
    size = len(serialized.encode("utf-8"))
    if size > MAX_CACHE_SIZE:
        logger.warning(f"Content too large to cache url: {url} ({size} bytes)")
        return False

    try:
        await store.set(cache_key, serialized, expire_seconds=CACHE_TTL_SECONDS)
    except Exception as e:
        logger.error(f"Error caching content for {url}: {e}")
        return False

    record.cached_at = stamped.cached_at
    logger.info(f"Cached content for url: {url} ({size} bytes), TTL: {CACHE_TTL_SECONDS}")
    return True
