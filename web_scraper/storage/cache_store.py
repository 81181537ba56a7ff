# storage/cache_store.py

"""
Thin async adapter over Redis used for both the page cache and the
conversation history. Payloads are UTF-8 strings; expiry is in seconds.
"""

from typing import Optional

import redis.asyncio as redis

from config import REDIS_URL
from utils.logger import setup_logger

logger = setup_logger(__name__)


class CacheStore:
    def __init__(self, client=None, url: str = REDIS_URL):
        self.client = client if client is not None else redis.from_url(url, decode_responses=True)

    async def get(self, key: str) -> Optional[str]:
        return await self.client.get(key)

    async def set(self, key: str, value: str, expire_seconds: Optional[int] = None) -> None:
        await self.client.set(key, value, ex=expire_seconds)

    async def delete(self, key: str) -> None:
        await self.client.delete(key)

    async def close(self) -> None:
        await self.client.aclose()


# Process-wide store, created on first use
_store: Optional[CacheStore] = None


def get_cache_store() -> CacheStore:
    global _store
    if _store is None:
        _store = CacheStore()
        logger.info("Cache store configured for %s", REDIS_URL.split("@")[-1])
    return _store


async def close_cache_store() -> None:
    global _store
    if _store is not None:
        await _store.close()
        _store = None
