"""
Tests for the tweet oEmbed fetcher
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from markdown_embeds.markdown.embeds.errors import EmbedFetchError
from markdown_embeds.markdown.embeds.oembed import fetch_tweet_html, get_oembed_fetcher

from .fakes import TWEET_HTML, static_fetcher

TWEET_URL = "https://twitter.com/user/status/123"


def _response(payload=None, json_error=None):
    response = MagicMock()
    response.raise_for_status.return_value = None
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


def test_fetch_returns_html() -> None:
    response = _response({"html": TWEET_HTML, "type": "rich"})

    with patch("requests.get", return_value=response) as mock_get:
        assert fetch_tweet_html(TWEET_URL, "light") == TWEET_HTML

    mock_get.assert_called_once_with(
        "https://publish.twitter.com/oembed",
        params={"url": TWEET_URL, "theme": "light", "dnt": "true"},
        timeout=5,
    )


def test_fetch_uses_configured_endpoint_and_timeout(settings) -> None:
    settings.MARKDOWN_EMBEDS = {
        "OEMBED_ENDPOINT": "https://oembed.example.com/",
        "OEMBED_TIMEOUT": 1.5,
    }

    with patch("requests.get", return_value=_response({"html": TWEET_HTML})) as mock_get:
        fetch_tweet_html(TWEET_URL, "dark")

    args, kwargs = mock_get.call_args
    assert args == ("https://oembed.example.com/",)
    assert kwargs["timeout"] == 1.5


@pytest.mark.parametrize(
    "error",
    [requests.ConnectionError("refused"), requests.Timeout("slow")],
)
def test_network_errors_become_fetch_errors(error) -> None:
    with patch("requests.get", side_effect=error):
        with pytest.raises(EmbedFetchError):
            fetch_tweet_html(TWEET_URL, "dark")


def test_http_error_becomes_fetch_error() -> None:
    response = _response({"html": TWEET_HTML})
    response.raise_for_status.side_effect = requests.HTTPError("404 Not Found")

    with patch("requests.get", return_value=response):
        with pytest.raises(EmbedFetchError):
            fetch_tweet_html(TWEET_URL, "dark")


def test_non_json_body_becomes_fetch_error() -> None:
    with patch("requests.get", return_value=_response(json_error=ValueError("bad json"))):
        with pytest.raises(EmbedFetchError):
            fetch_tweet_html(TWEET_URL, "dark")


@pytest.mark.parametrize("payload", [{}, {"html": ""}, ["not", "a", "dict"]])
def test_missing_html_becomes_fetch_error(payload) -> None:
    with patch("requests.get", return_value=_response(payload)):
        with pytest.raises(EmbedFetchError):
            fetch_tweet_html(TWEET_URL, "dark")


def test_default_fetcher(settings) -> None:
    settings.MARKDOWN_EMBEDS = {}
    assert get_oembed_fetcher() is fetch_tweet_html


def test_fetcher_from_dotted_path(settings) -> None:
    settings.MARKDOWN_EMBEDS = {"OEMBED_FETCHER": "tests.fakes.static_fetcher"}
    assert get_oembed_fetcher() is static_fetcher


def test_fetcher_callable_setting(settings) -> None:
    settings.MARKDOWN_EMBEDS = {"OEMBED_FETCHER": static_fetcher}
    assert get_oembed_fetcher() is static_fetcher
