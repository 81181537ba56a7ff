import asyncio

import httpx
import pytest

from config import USER_AGENT
from web_scraper.scraper import fetcher
from web_scraper.scraper.fetch_strategy import FetchStrategy


@pytest.fixture
def mock_http(monkeypatch):
    """Route fetcher's httpx client through a MockTransport."""
    requests = []
    responses = {}
    real_client = httpx.AsyncClient

    def handler(request):
        requests.append(request)
        status, body = responses.get(str(request.url), (404, "not found"))
        return httpx.Response(status, text=body)

    def client_factory(**kwargs):
        return real_client(transport=httpx.MockTransport(handler), **kwargs)

    monkeypatch.setattr(fetcher.httpx, "AsyncClient", client_factory)
    return requests, responses


def test_fetch_static_returns_body(mock_http):
    requests, responses = mock_http
    responses["https://example.com/page"] = (200, "<html>ok</html>")

    html = asyncio.run(fetcher.fetch_static("https://example.com/page"))

    assert html == "<html>ok</html>"
    assert requests[0].headers["user-agent"] == USER_AGENT


def test_fetch_static_raises_on_error_status(mock_http):
    _, responses = mock_http
    responses["https://example.com/gone"] = (410, "gone")

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(fetcher.fetch_static("https://example.com/gone"))


def test_fetch_html_dispatches_on_strategy(monkeypatch, make_browser, make_session):
    async def fake_fetch_static(url):
        return "static:" + url

    monkeypatch.setattr(fetcher, "fetch_static", fake_fetch_static)
    session = make_session(make_browser(html="rendered"))

    assert asyncio.run(fetcher.fetch_html("https://a.example", FetchStrategy.STATIC)) == "static:https://a.example"
    assert asyncio.run(fetcher.fetch_html("https://a.example", FetchStrategy.DYNAMIC, session=session)) == "rendered"
