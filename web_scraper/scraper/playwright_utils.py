# scraper/playwright_utils.py

"""
The purpose of this module is:
Create and manage a single browser instance per process
Reuse it across scrape calls (launched lazily, at most once)
Render one URL per call in its own page, always closing that page
"""

import asyncio
from typing import Optional

from playwright.async_api import async_playwright

from config import CHROMIUM_SANDBOX, HEADLESS, NAV_TIMEOUT_MS, USER_AGENT, VIEWPORT, WAIT_UNTIL
from utils.logger import setup_logger

logger = setup_logger(__name__)


class NavigationError(Exception):
    def __init__(self, url: str, status: Optional[int]):
        self.url = url
        self.status = status
        super().__init__(f"Failed to load {url}: status {status}")


class BrowserClosedError(RuntimeError):
    pass


class BrowserSession:
    """
    Owns the shared browser. States: uninitialized -> running -> closed.
    A failed render only closes its own page, never the browser.
    """

    def __init__(self, headless: bool = HEADLESS):
        self.headless = headless
        self.launch_count = 0
        self._browser = None
        self._playwright = None
        self._closed = False
        self._lock = asyncio.Lock()

    @property
    def state(self) -> str:
        if self._closed:
            return "closed"
        return "running" if self._browser is not None else "uninitialized"

    async def _launch(self):
        self._playwright = await async_playwright().start()
        try:
            return await self._playwright.chromium.launch(
                headless=self.headless,
                chromium_sandbox=CHROMIUM_SANDBOX,
            )
        except Exception:
            logger.error("Browser launch failed, stopping Playwright driver")
            await self._playwright.stop()
            self._playwright = None
            raise

    async def get_browser(self):
        """
        Launch the shared browser if not already running.
        Concurrent first callers wait on the same launch.
        """
        if self._closed:
            raise BrowserClosedError("Browser session has been shut down")
        if self._browser is not None:
            return self._browser
        async with self._lock:
            if self._closed:
                raise BrowserClosedError("Browser session has been shut down")
            if self._browser is None:
                logger.info("Launching headless browser")
                self._browser = await self._launch()
                self.launch_count += 1
        return self._browser

    async def render_page(self, url: str) -> str:
        """Navigate to ``url`` in a fresh page and return the rendered HTML."""
        browser = await self.get_browser()
        page = await browser.new_page(user_agent=USER_AGENT, viewport=VIEWPORT)
        try:
            response = await page.goto(url, wait_until=WAIT_UNTIL, timeout=NAV_TIMEOUT_MS)
            if response is None or not response.ok:
                status = response.status if response is not None else None
                logger.error(f"Navigation failed for {url} (status {status})")
                raise NavigationError(url, status)
            return await page.content()
        finally:
            await page.close()

    async def close(self) -> None:
        """
        Close the shared browser. Only called on process shutdown.
        """
        async with self._lock:
            self._closed = True
            try:
                if self._browser is not None:
                    await self._browser.close()
                    logger.info("Headless browser closed")
            finally:
                self._browser = None
                if self._playwright is not None:
                    await self._playwright.stop()
                    self._playwright = None


_session: Optional[BrowserSession] = None


def get_session() -> BrowserSession:
    global _session
    if _session is None:
        _session = BrowserSession()
    return _session


async def get_browser():
    return await get_session().get_browser()


async def render_page(url: str) -> str:
    return await get_session().render_page(url)


async def close_browser():
    """
    Close the shared browser instance when the process shuts down.
    """
    global _session
    if _session is not None:
        await _session.close()
        _session = None
