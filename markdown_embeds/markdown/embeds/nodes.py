"""
Tree nodes produced by the embed transform.

``EmbedNode`` lives in the BeautifulSoup tree in place of the ``<img>`` it
replaced. Like ``Comment`` it is a preformatted string: it is written to the
output verbatim by ``output_ready``. When the serializing formatter carries an
embed renderer (see ``EmbedFormatter``), the node asks it for provider markup;
any other formatter gets the plain ``<img>`` of the original link back.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from bs4.element import PreformattedString, Tag
from django.forms.utils import flatatt
from django.utils.html import format_html

from .classifier import Classification, Provider


@dataclass(frozen=True)
class LinkReference:
    """Attributes of an image-style link as supplied by the parser."""

    destination: str
    title: Optional[str] = None
    alt: Optional[str] = None

    @classmethod
    def from_tag(cls, tag: Tag) -> "LinkReference":
        return cls(
            destination=tag.get("src", ""),
            title=tag.get("title"),
            alt=tag.get("alt"),
        )

    def to_html(self) -> str:
        attrs = {"src": self.destination}
        if self.alt is not None:
            attrs["alt"] = self.alt
        if self.title is not None:
            attrs["title"] = self.title
        return format_html("<img{} />", flatatt(attrs))


class EmbedNode(PreformattedString):
    """An image link recognized as an embeddable provider object."""

    provider: Provider
    identifier: str
    theme: str
    link: LinkReference

    @classmethod
    def create(
        cls, classification: Classification, link: LinkReference
    ) -> "EmbedNode":
        if not classification.identifier:
            raise ValueError("embed nodes require a non-empty identifier")
        node = cls(link.destination)
        node.provider = classification.provider
        node.identifier = classification.identifier
        node.theme = classification.theme
        node.link = link
        return node

    @property
    def destination(self) -> str:
        return self.link.destination

    @property
    def title(self) -> Optional[str]:
        return self.link.title

    def output_ready(self, formatter=None):
        renderer = getattr(formatter, "embed_renderer", None)
        if renderer is None:
            return self.link.to_html()
        return renderer.render_embed_node(self)

    def __repr__(self):
        return (
            f"EmbedNode(provider={self.provider.value!r}, "
            f"identifier={self.identifier!r}, theme={self.theme!r})"
        )


__all__ = ["LinkReference", "EmbedNode"]
