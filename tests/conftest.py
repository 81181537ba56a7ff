import asyncio

import pytest

from web_scraper.scraper.playwright_utils import BrowserSession


class FakeCacheStore:
    """Dict-backed stand-in for the Redis adapter."""

    def __init__(self):
        self.data = {}
        self.ttls = {}
        self.deleted = []

    async def get(self, key):
        return self.data.get(key)

    async def set(self, key, value, expire_seconds=None):
        self.data[key] = value
        self.ttls[key] = expire_seconds

    async def delete(self, key):
        self.deleted.append(key)
        self.data.pop(key, None)
        self.ttls.pop(key, None)


class FakeResponse:
    def __init__(self, status):
        self.status = status
        self.ok = 200 <= status < 300


class FakePage:
    def __init__(self, html, status=200, goto_error=None):
        self.html = html
        self.status = status
        self.goto_error = goto_error
        self.goto_calls = []
        self.close_count = 0

    async def goto(self, url, wait_until=None, timeout=None):
        self.goto_calls.append({"url": url, "wait_until": wait_until, "timeout": timeout})
        await asyncio.sleep(0)
        if self.goto_error is not None:
            raise self.goto_error
        return FakeResponse(self.status) if self.status is not None else None

    async def content(self):
        return self.html

    async def close(self):
        self.close_count += 1


class FakeBrowser:
    def __init__(self, html="<html><body><p>rendered</p></body></html>", status=200, goto_error=None):
        self.html = html
        self.status = status
        self.goto_error = goto_error
        self.pages = []
        self.page_options = []
        self.closed = False

    async def new_page(self, **options):
        page = FakePage(self.html, status=self.status, goto_error=self.goto_error)
        self.pages.append(page)
        self.page_options.append(options)
        return page

    async def close(self):
        self.closed = True


class FakeBrowserSession(BrowserSession):
    def __init__(self, browser):
        super().__init__()
        self.browser = browser

    async def _launch(self):
        await asyncio.sleep(0)
        return self.browser


@pytest.fixture
def cache_store():
    return FakeCacheStore()


@pytest.fixture
def make_browser():
    return FakeBrowser


@pytest.fixture
def make_session():
    return FakeBrowserSession
