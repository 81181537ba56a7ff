# scraper/fetcher.py

# Retrieve raw HTML for a URL, either with a plain GET or through the
# shared headless browser.

import httpx

from config import USER_AGENT
from utils.logger import setup_logger
from web_scraper.scraper.fetch_strategy import FetchStrategy
from web_scraper.scraper.playwright_utils import get_session

logger = setup_logger(__name__)


async def fetch_static(url: str) -> str:
    """GET the page; non-2xx responses raise httpx.HTTPStatusError."""
    async with httpx.AsyncClient(follow_redirects=True, headers={"User-Agent": USER_AGENT}) as client:
        response = await client.get(url)
        response.raise_for_status()
        return response.text


async def fetch_html(url: str, strategy: FetchStrategy, session=None) -> str:
    logger.info(f"Fetching {url} ({strategy.value})")
    if strategy is FetchStrategy.DYNAMIC:
        session = session or get_session()
        return await session.render_page(url)
    return await fetch_static(url)
