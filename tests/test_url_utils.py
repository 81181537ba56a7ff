from web_scraper.scraper.url_utils import first_url, host_of, strip_url


def test_first_url_in_message():
    message = "Summarize https://example.com/blog/post-1?ref=home for me"
    assert first_url(message) == "https://example.com/blog/post-1?ref=home"


def test_only_first_of_several_urls_is_used():
    message = "compare http://a.example.org/x and https://www.b.example.com"
    assert first_url(message) == "http://a.example.org/x"


def test_no_url():
    assert first_url("what is the capital of France?") is None
    assert first_url("") is None


def test_strip_url():
    assert strip_url("Summarize https://example.com/post", "https://example.com/post") == "Summarize"
    assert strip_url("  just a question ", None) == "just a question"


def test_host_of():
    assert host_of("https://WWW.LinkedIn.com/in/x") == "www.linkedin.com"
    assert host_of("nonsense") == ""
