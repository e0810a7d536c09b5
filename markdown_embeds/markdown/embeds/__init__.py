"""
Rich embeds for image links that point at known media providers.

    ![](https://www.youtube.com/watch?v=dQw4w9WgXcQ)  -> YouTube iframe
    ![](https://www.bilibili.com/video/BV1xx411c7mD)  -> Bilibili iframe
    ![](https://x.com/user/status/123?theme=light)    -> tweet via oEmbed
    ![](https://www.tradingview.com/chart/?symbol=..) -> TradingView widget
"""

from .anchors import RandomAnchorIds, SequentialAnchorIds, make_anchor_ids
from .classifier import Classification, Provider, classify, normalize_theme
from .dispatcher import EmbedFormatter, EmbedRenderer, render_embed_node
from .errors import (
    EmbedConsistencyError,
    EmbedError,
    EmbedFetchError,
    MalformedURLError,
)
from .nodes import EmbedNode, LinkReference

__all__ = [
    "Classification",
    "EmbedConsistencyError",
    "EmbedError",
    "EmbedFetchError",
    "EmbedFormatter",
    "EmbedNode",
    "EmbedRenderer",
    "LinkReference",
    "MalformedURLError",
    "Provider",
    "RandomAnchorIds",
    "SequentialAnchorIds",
    "classify",
    "make_anchor_ids",
    "normalize_theme",
    "render_embed_node",
]
