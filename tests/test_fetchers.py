"""Tests for the feed fetchers and their registry."""

from __future__ import annotations

import urllib.error
from unittest.mock import MagicMock, patch

import pytest

from gold_news_bias.fetchers import FileFetcher, ForexFactoryFetcher, get_fetcher
from gold_news_bias.fetchers.forexfactory import FF_XML_URL

FEED_BYTES = b"""<weeklyevents><event><title>CPI m/m</title><country>USD</country>
<date>10-14-2026</date><impact>High</impact></event></weeklyevents>"""


def _response(body: bytes) -> MagicMock:
    resp = MagicMock()
    resp.read.return_value = body
    cm = MagicMock()
    cm.__enter__.return_value = resp
    return cm


class TestForexFactoryFetcher:

    def test_default_url(self, monkeypatch) -> None:
        monkeypatch.delenv("NEWS_FEED_URL", raising=False)
        assert ForexFactoryFetcher().url == FF_XML_URL

    def test_url_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("NEWS_FEED_URL", "https://example.test/feed.xml")
        assert ForexFactoryFetcher().url == "https://example.test/feed.xml"

    def test_returns_decoded_text(self) -> None:
        fetcher = ForexFactoryFetcher(url="https://example.test/feed.xml")
        with patch("urllib.request.urlopen", return_value=_response(FEED_BYTES)) as urlopen:
            text = fetcher.fetch()
        assert "<title>CPI m/m</title>" in text
        req = urlopen.call_args[0][0]
        assert req.full_url == "https://example.test/feed.xml"
        assert req.get_header("User-agent") == "Mozilla/5.0"

    def test_network_error_returns_empty(self, capsys) -> None:
        fetcher = ForexFactoryFetcher(url="https://example.test/feed.xml")
        with patch("urllib.request.urlopen", side_effect=urllib.error.URLError("down")):
            assert fetcher.fetch() == ""
        assert "[forexfactory]" in capsys.readouterr().out

    def test_http_error_returns_empty(self) -> None:
        fetcher = ForexFactoryFetcher(url="https://example.test/feed.xml")
        error = urllib.error.HTTPError(fetcher.url, 503, "Service Unavailable", {}, None)
        with patch("urllib.request.urlopen", side_effect=error):
            assert fetcher.fetch() == ""

    def test_timeout_returns_empty(self) -> None:
        fetcher = ForexFactoryFetcher(url="https://example.test/feed.xml", timeout=0.1)
        with patch("urllib.request.urlopen", side_effect=TimeoutError("timed out")):
            assert fetcher.fetch() == ""


class TestFileFetcher:

    def test_reads_file(self, tmp_path) -> None:
        path = tmp_path / "feed.xml"
        path.write_bytes(FEED_BYTES)
        assert "CPI m/m" in FileFetcher(str(path)).fetch()

    def test_missing_file_returns_empty(self, tmp_path) -> None:
        assert FileFetcher(str(tmp_path / "nope.xml")).fetch() == ""

    def test_no_path_returns_empty(self, monkeypatch) -> None:
        monkeypatch.delenv("NEWS_FEED_PATH", raising=False)
        assert FileFetcher().fetch() == ""


class TestGetFetcher:

    def test_known_names(self) -> None:
        assert get_fetcher("forexfactory").name == "forexfactory"
        assert get_fetcher("file").name == "file"

    def test_unknown_name(self) -> None:
        with pytest.raises(KeyError, match="Available: file, forexfactory"):
            get_fetcher("bloomberg")
