from unittest.mock import MagicMock, patch

import pytest

from site_advisor import normalize_url, run_analysis
from site_advisor.exceptions import FetchFailure, ValidationError
from site_advisor.fetcher import FetchedPage, PageFetcher


def _stub_fetcher(html="", load_time_ms=100, error=None):
    fetcher = MagicMock(spec=PageFetcher)
    if error:
        fetcher.fetch.side_effect = error
    else:
        fetcher.fetch.side_effect = lambda url: FetchedPage(url, html, load_time_ms, 200)
    return fetcher


class TestNormalizeUrl:
    @pytest.mark.parametrize("raw", ["example.com", "www.example.com/path?q=1", "ftp.example.com"])
    def test_adds_https_scheme(self, raw):
        assert normalize_url(raw) == "https://" + raw

    @pytest.mark.parametrize("raw", ["http://example.com", "https://example.com"])
    def test_keeps_existing_scheme(self, raw):
        assert normalize_url(raw) == raw

    @pytest.mark.parametrize("raw", [None, "", "   ", 42, ["https://example.com"]])
    def test_rejects_missing_or_malformed(self, raw):
        with pytest.raises(ValidationError, match="URL is required"):
            normalize_url(raw)


def test_result_reports_normalized_url(clean_page_html):
    fetcher = _stub_fetcher(clean_page_html)
    result = run_analysis("example.com", fetcher=fetcher)
    assert result.url == "https://example.com"
    fetcher.fetch.assert_called_once_with("https://example.com")


def test_analysis_groups(clean_page_html):
    result = run_analysis("https://example.com", fetcher=_stub_fetcher(clean_page_html))
    assert [g.category for g in result.improvements] == [
        "WordPress.com Specific",
        "Performance",
        "User Experience",
    ]


def test_fetch_failure_returns_fallback():
    fetcher = _stub_fetcher(error=FetchFailure("https://example.com", "HTTP 503"))
    result = run_analysis("example.com", fetcher=fetcher)
    assert result.url == "https://example.com"
    assert [g.category for g in result.improvements] == ["Site Access", "WordPress.com Recommendations"]


def test_unexpected_errors_propagate():
    fetcher = _stub_fetcher(error=RuntimeError("boom"))
    with pytest.raises(RuntimeError):
        run_analysis("example.com", fetcher=fetcher)


def test_own_fetcher_is_built_from_config_and_closed(clean_page_html):
    config = {"Global": {"request_timeout": 4}}
    page = FetchedPage("https://example.com", clean_page_html, 100, 200)
    with patch.object(PageFetcher, "fetch", return_value=page) as mock_fetch, \
            patch.object(PageFetcher, "close") as mock_close:
        result = run_analysis("example.com", config=config)
    mock_fetch.assert_called_once_with("https://example.com")
    mock_close.assert_called_once()
    assert result.improvements


def test_supplied_fetcher_is_not_closed(clean_page_html):
    fetcher = _stub_fetcher(clean_page_html)
    run_analysis("example.com", fetcher=fetcher)
    fetcher.close.assert_not_called()


def test_identical_input_gives_identical_output(clean_page_html):
    first = run_analysis("example.com", fetcher=_stub_fetcher(clean_page_html, 4100)).to_dict()
    second = run_analysis("example.com", fetcher=_stub_fetcher(clean_page_html, 4100)).to_dict()
    assert first == second
