"""
oEmbed lookups for tweets.

The fetcher is deliberately thin: one blocking GET per call, bounded by the
configured timeout, with no caching or deduplication. Every failure is
reported as ``EmbedFetchError`` so the renderer can degrade to an inline
error message.
"""

import logging

import requests
from django.utils.module_loading import import_string

from ..config import get_embed_config
from .errors import EmbedFetchError

logger = logging.getLogger(__name__)


def fetch_tweet_html(url: str, theme: str) -> str:
    """
    Fetch the embeddable HTML for a tweet from the oEmbed endpoint.

    Args:
        url: Canonical tweet URL (twitter.com host)
        theme: "dark" or "light"

    Returns:
        The ``html`` member of the oEmbed response

    Raises:
        EmbedFetchError: on network errors, non-2xx responses, bodies that
            are not JSON, or responses without html
    """
    config = get_embed_config()
    params = {"url": url, "theme": theme, "dnt": "true"}

    try:
        response = requests.get(
            config["OEMBED_ENDPOINT"],
            params=params,
            timeout=config["OEMBED_TIMEOUT"],
        )
        response.raise_for_status()
        data = response.json()
    except requests.RequestException as e:
        raise EmbedFetchError(f"oEmbed request for {url} failed: {e}") from e
    except ValueError as e:
        raise EmbedFetchError(f"oEmbed response for {url} is not JSON") from e

    html = data.get("html") if isinstance(data, dict) else None
    if not html:
        raise EmbedFetchError(f"oEmbed response for {url} has no html")

    logger.debug(f"Fetched oEmbed html for {url} ({len(html)} chars)")
    return html


def get_oembed_fetcher():
    """Return the fetcher callable named by ``MARKDOWN_EMBEDS["OEMBED_FETCHER"]``."""
    fetcher = get_embed_config()["OEMBED_FETCHER"]
    if callable(fetcher):
        return fetcher
    return import_string(fetcher)
