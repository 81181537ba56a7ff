import pytest

from web_scraper.scraper.fetch_strategy import FetchStrategy, make_selector, select_strategy


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://www.linkedin.com/in/x", FetchStrategy.DYNAMIC),
        ("https://LINKEDIN.com/company/acme", FetchStrategy.DYNAMIC),
        ("https://uk.linkedin.com/jobs", FetchStrategy.DYNAMIC),
        ("https://example.com/page", FetchStrategy.STATIC),
        ("https://example.com/linkedin.com", FetchStrategy.STATIC),
        ("not a url", FetchStrategy.STATIC),
    ],
)
def test_select_strategy(url, expected):
    assert select_strategy(url) is expected


def test_custom_host_list():
    selector = make_selector(["App.Example.org"])
    assert selector("https://app.example.org/dashboard") is FetchStrategy.DYNAMIC
    assert selector("https://www.linkedin.com/in/x") is FetchStrategy.STATIC
    assert select_strategy("https://spa.dev/x", dynamic_hosts=("spa.dev",)) is FetchStrategy.DYNAMIC


def test_injected_hosts_are_case_insensitive():
    assert select_strategy("https://www.linkedin.com/in/x", dynamic_hosts=("LinkedIn.com",)) is FetchStrategy.DYNAMIC
