"""Exceptions raised while turning image links into embeds."""

from __future__ import annotations


class EmbedError(Exception):
    """Base class for every embed failure."""


class MalformedURLError(EmbedError, ValueError):
    """The destination of an image link could not be parsed as a URL."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"failed to parse url {url!r}: {reason}")


class EmbedFetchError(EmbedError):
    """An oEmbed lookup failed or returned nothing renderable."""


class EmbedConsistencyError(EmbedError, RuntimeError):
    """An embed node reached the renderer with a provider it cannot render."""


__all__ = [
    "EmbedError",
    "MalformedURLError",
    "EmbedFetchError",
    "EmbedConsistencyError",
]
