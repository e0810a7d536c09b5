# markdown_embeds/markdown/postprocessors/embed_transformer.py
"""
Postprocessor that turns image links to known providers into embeds.

    <p><img src="https://www.youtube.com/watch?v=dQw4w9WgXcQ" /></p>
      ↓
    <p class="has-embed"><div class="embedded-object-wrapper"><iframe ...></iframe></div></p>

The work happens in two steps:
1. ``transform`` walks the soup once and replaces every classified <img>
   with an ``EmbedNode`` at the same position.
2. The soup is serialized with an ``EmbedFormatter``; each embed node asks
   the renderer for its provider markup while being written out.

Images whose src cannot be parsed stay in place and get an HTML comment
with the parse error right after them.
"""

import logging

from bs4 import BeautifulSoup, Comment

from ..config import get_embed_config
from ..embeds.classifier import classify
from ..embeds.dispatcher import EmbedFormatter, EmbedRenderer
from ..embeds.errors import MalformedURLError
from ..embeds.nodes import EmbedNode, LinkReference

logger = logging.getLogger(__name__)

# Context key for a caller-supplied EmbedRenderer
EMBED_RENDERER_KEY = "embed_renderer"


def _diagnostic_comment(error: Exception) -> Comment:
    # "--" would terminate the comment early
    text = str(error).replace("--", "- -")
    return Comment(f" {text} ")


def _add_container_class(parent, container_class: str) -> None:
    if parent is None or isinstance(parent, BeautifulSoup):
        return
    existing_classes = parent.get("class", [])
    if isinstance(existing_classes, str):
        existing_classes = existing_classes.split()
    if container_class not in existing_classes:
        existing_classes.append(container_class)
    parent["class"] = existing_classes


def replace_images(soup, container_class=None) -> int:
    """
    Replace classified <img> elements with embed nodes, in place.

    Images are collected up front in document order, so nodes inserted
    during the walk (embeds, diagnostics) are never visited. Running the
    pass again on the same tree changes nothing.

    Args:
        soup: Parsed document
        container_class: Class added to the parent of each embed, if set

    Returns:
        Number of nodes inserted (embeds plus diagnostic comments)
    """
    changes = 0
    for img in list(soup.find_all("img")):
        src = img.get("src")
        if src is None:
            continue

        try:
            classification = classify(src)
        except MalformedURLError as e:
            comment = _diagnostic_comment(e)
            # Already diagnosed by an earlier pass
            if isinstance(img.next_sibling, Comment) and img.next_sibling == comment:
                continue
            logger.warning(f"markdown-embeds: {e}")
            img.insert_after(comment)
            changes += 1
            continue

        if classification is None:
            continue

        parent = img.parent
        node = EmbedNode.create(classification, LinkReference.from_tag(img))
        img.replace_with(node)
        changes += 1
        if container_class:
            _add_container_class(parent, container_class)

        logger.debug(
            f"Replaced image {src} with {classification.provider.value} embed"
        )

    return changes


def transform(soup, container_class=None):
    """Run ``replace_images`` over the soup and return the same soup."""
    replace_images(soup, container_class=container_class)
    return soup


def embed_transformer(html: str, context: dict) -> str:
    """
    Transform image links into embeds and render them.

    Documents without embeds or broken image URLs are returned exactly as
    given, so pandoc's markup passes through byte for byte.

    Args:
        html: HTML string to process
        context: Rendering context; ``context["embed_renderer"]`` may hold an
            ``EmbedRenderer`` to use instead of one built from settings

    Returns:
        HTML with embed markup in place of recognized images
    """
    config = get_embed_config()

    soup = BeautifulSoup(html, "html.parser")
    if not replace_images(soup, container_class=config["CONTAINER_CLASS"]):
        return html

    renderer = context.get(EMBED_RENDERER_KEY) or EmbedRenderer.from_settings()
    return soup.decode(formatter=EmbedFormatter(renderer))


def embed_transformer_default(html: str, context: dict) -> str:
    """
    Default configuration for embed_transformer.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return embed_transformer(html, context)
