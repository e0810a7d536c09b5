"""Tweet embeds backed by an oEmbed lookup."""

import logging

from django.utils.html import format_html
from django.utils.safestring import mark_safe

logger = logging.getLogger(__name__)


def twitter_embed_html(url: str, theme: str, fetcher) -> str:
    """
    Wrap the oEmbed snippet for ``url`` in the embed container.

    A failed or empty lookup never breaks the document: the embed degrades
    to a visible error naming the tweet URL.
    """
    try:
        snippet = fetcher(url, theme)
    except Exception as e:
        # Fetchers are pluggable; any failure degrades to the error fragment
        logger.warning(f"Failed to load tweet from {url}: {e}", exc_info=True)
        snippet = ""

    if not snippet:
        return format_html(
            '<div class="embedded-object-wrapper normal-wrapper">'
            '<div class="embedded-object twitter-embedded-object normal-object error">'
            "Failed to load tweet from {}</div></div>",
            url,
        )

    # oEmbed html comes from the provider and is inserted as-is
    return format_html(
        '<div class="embedded-object-wrapper normal-wrapper">'
        '<div class="embedded-object twitter-embedded-object normal-object">{}</div></div>',
        mark_safe(snippet),
    )
