"""
Render dispatcher for embed nodes.

``EmbedRenderer`` turns an ``EmbedNode`` into provider markup. It holds the
per-document collaborators: the oEmbed fetcher for tweets and the anchor id
source for chart widgets. ``EmbedFormatter`` hands the renderer to the nodes
while BeautifulSoup serializes the tree.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

from ..config import get_embed_config
from .anchors import make_anchor_ids
from .classifier import Provider
from .errors import EmbedConsistencyError
from .nodes import EmbedNode
from .oembed import get_oembed_fetcher
from .tradingview import tradingview_embed_html
from .twitter import twitter_embed_html
from .video import bilibili_embed_html, youtube_embed_html

logger = logging.getLogger(__name__)

OEmbedFetcher = Callable[[str, str], str]


class EmbedRenderer:
    def __init__(
        self,
        fetcher: Optional[OEmbedFetcher] = None,
        anchor_ids=None,
        video_height: int = 400,
    ):
        self.fetcher = fetcher
        self.anchor_ids = anchor_ids if anchor_ids is not None else make_anchor_ids()
        self.video_height = video_height

    @classmethod
    def from_settings(cls) -> "EmbedRenderer":
        """Build a renderer for one document from ``MARKDOWN_EMBEDS``."""
        config = get_embed_config()
        return cls(
            fetcher=get_oembed_fetcher(),
            anchor_ids=make_anchor_ids(config["ANCHOR_IDS"]),
            video_height=config["VIDEO_HEIGHT"],
        )

    def render_embed_node(self, node: EmbedNode) -> str:
        provider = node.provider

        if provider is Provider.YOUTUBE:
            html = youtube_embed_html(node.identifier, self.video_height)
        elif provider is Provider.BILIBILI:
            html = bilibili_embed_html(node.identifier, self.video_height)
        elif provider is Provider.TWITTER:
            fetcher = self.fetcher or get_oembed_fetcher()
            html = twitter_embed_html(node.identifier, node.theme, fetcher)
        elif provider is Provider.TRADINGVIEW:
            html = tradingview_embed_html(
                node.identifier, node.theme, self.anchor_ids.next_id()
            )
        else:
            raise EmbedConsistencyError(
                f"No renderer for embed provider {provider!r} ({node.destination})"
            )

        logger.debug(f"Rendered {provider.value} embed for {node.identifier}")
        return html


class EmbedFormatter(HTMLFormatter):
    """The minimal HTML formatter, plus the renderer embed nodes serialize through."""

    def __init__(self, embed_renderer: EmbedRenderer, **kwargs):
        kwargs.setdefault("entity_substitution", EntitySubstitution.substitute_xml)
        super().__init__(**kwargs)
        self.embed_renderer = embed_renderer


def render_embed_node(node: EmbedNode, renderer: Optional[EmbedRenderer] = None) -> str:
    """Render a single embed node, with a settings-built renderer by default."""
    if renderer is None:
        renderer = EmbedRenderer.from_settings()
    return renderer.render_embed_node(node)
