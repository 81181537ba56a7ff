# web_scraper/scraper_runner.py

# Entry point for scraping one URL:
# check cache -> pick fetch strategy -> fetch -> extract -> cache -> return.
# Never raises; failures come back as a ScrapedContent with ``error`` set.

import argparse
import asyncio

from utils.logger import setup_logger
from web_scraper.scraper.content_extractor import extract_content
from web_scraper.scraper.fetch_strategy import select_strategy
from web_scraper.scraper.fetcher import fetch_html
from web_scraper.scraper.playwright_utils import close_browser
from web_scraper.storage.cache_policy import cache_content, get_cached_content
from web_scraper.storage.cache_store import close_cache_store, get_cache_store
from web_scraper.storage.models import ScrapedContent

logger = setup_logger(__name__)


def _describe(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


async def scrape_url(url: str, cache=None, selector=select_strategy, session=None) -> ScrapedContent:
    """
    Scrape ``url`` using the cache when possible.

    ``cache`` defaults to the process-wide Redis store, ``selector`` maps a URL
    to a FetchStrategy and ``session`` is the browser session used for
    dynamic pages (the shared one by default).
    """
    logger.info(f"Scraping URL: {url}")
    if cache is None:
        try:
            cache = get_cache_store()
        except Exception as e:
            # Scrape without caching
            logger.error(f"Cache store unavailable: {e}")

    try:
        cached = await get_cached_content(cache, url) if cache is not None else None
        if cached is not None:
            logger.info(f"Returning cached content for url: {url}")
            return cached
        logger.info(f"Cache miss for url: {url}")

        strategy = selector(url)
        html = await fetch_html(url, strategy, session=session)
        result = extract_content(html, url=url)
    except Exception as e:
        logger.error(f"Error scraping {url}: {e}")
        return ScrapedContent.failure(url, _describe(e))

    if cache is not None:
        await cache_content(cache, url, result)
    return result


async def main(url: str) -> ScrapedContent:
    try:
        return await scrape_url(url)
    finally:
        await close_browser()
        await close_cache_store()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Scrape one URL and print the extracted JSON")
    parser.add_argument("url")
    args = parser.parse_args()
    print(asyncio.run(main(args.url)).to_json())
