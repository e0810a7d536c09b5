"""
Classify image-link destinations by embed provider.

Recognized destinations (first matching rule wins):

    https://www.youtube.com/watch?v={vid}            -> youtube
    https://youtu.be/{vid}                           -> youtube
    https://www.bilibili.com/video/{vid}             -> bilibili
    https://twitter.com/{user}/status/{id}?theme=..  -> twitter (x.com rewritten)
    https://www.tradingview.com/chart/?symbol=..     -> tradingview

Anything else is not an embed and ``classify`` returns ``None``.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Callable, Dict, List, NamedTuple, Optional, Tuple
from urllib.parse import SplitResult, parse_qs, unquote, urlsplit

from .errors import MalformedURLError

logger = logging.getLogger(__name__)

DEFAULT_THEME = "dark"

# Hosts
YOUTUBE_HOST = "www.youtube.com"
YOUTUBE_SHORT_HOST = "youtu.be"
BILIBILI_HOST = "www.bilibili.com"
TWITTER_HOSTS = {"twitter.com", "m.twitter.com", "x.com"}
TWITTER_CANONICAL_HOST = "twitter.com"
TWITTER_SHORT_HOST = "x.com"
TRADINGVIEW_HOSTS = {"tradingview.com", "www.tradingview.com"}

BILIBILI_PATH_PREFIX = "/video/"

_INVALID_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_CONTROL_CHAR_RE = re.compile(r"[\x00-\x1f\x7f]")


class Provider(str, Enum):
    YOUTUBE = "youtube"
    BILIBILI = "bilibili"
    TWITTER = "twitter"
    TRADINGVIEW = "tradingview"


class Classification(NamedTuple):
    provider: Provider
    identifier: str
    theme: str


class ParsedLink(NamedTuple):
    url: str
    parts: SplitResult
    host: str
    query: Dict[str, List[str]]

    def param(self, key: str) -> Optional[str]:
        values = self.query.get(key)
        return values[0] if values else None


def normalize_theme(value: Optional[str]) -> str:
    """Only the literal ``dark`` stays dark; an absent theme gets the default."""
    if value is None:
        return DEFAULT_THEME
    return "dark" if value == "dark" else "light"


def parse_destination(url: str) -> ParsedLink:
    """
    Parse an image destination, rejecting URLs that are syntactically broken.

    Raises:
        MalformedURLError: bad escapes, control characters, a missing scheme,
            unbalanced IPv6 brackets or a non-numeric port.
    """
    if _CONTROL_CHAR_RE.search(url):
        raise MalformedURLError(url, "invalid control character in URL")
    if url.startswith(":"):
        raise MalformedURLError(url, "missing protocol scheme")
    try:
        parts = urlsplit(url)
        parts.port  # noqa: B018 - validates the port
    except ValueError as exc:
        raise MalformedURLError(url, str(exc)) from exc

    # Query strings are decoded leniently; only path and fragment must be well escaped
    for component in (parts.path, parts.fragment):
        match = _INVALID_ESCAPE_RE.search(component)
        if match:
            escape = component[match.start():match.start() + 3]
            raise MalformedURLError(url, f"invalid URL escape {escape!r}")

    host = parts.hostname or ""
    if " " in host:
        raise MalformedURLError(url, "invalid character ' ' in host name")

    return ParsedLink(
        url=url,
        parts=parts,
        host=host,
        query=parse_qs(parts.query, keep_blank_values=True),
    )


def _canonical_twitter_url(link: ParsedLink) -> str:
    # oEmbed only accepts twitter.com, so x.com links are rewritten
    if link.host != TWITTER_SHORT_HOST:
        return link.url
    # Splice the host in place so the rest of the URL is kept byte for byte
    netloc = link.parts.netloc
    start = link.url.index("//" + netloc) + 2 + netloc.rfind("@") + 1
    end = start + len(TWITTER_SHORT_HOST)
    return link.url[:start] + TWITTER_CANONICAL_HOST + link.url[end:]


# Extractors return (identifier, theme); an empty identifier means no embed.
_Extractor = Callable[[ParsedLink], Tuple[str, str]]
_Predicate = Callable[[ParsedLink], bool]

# Ordered rule table: (provider, predicate, extractor). Priority is list order.
CLASSIFICATION_RULES: List[Tuple[Provider, _Predicate, _Extractor]] = [
    # https://www.youtube.com/watch?v={vid}
    (
        Provider.YOUTUBE,
        lambda link: link.host == YOUTUBE_HOST and link.parts.path == "/watch",
        lambda link: (link.param("v") or "", DEFAULT_THEME),
    ),
    # https://youtu.be/{vid}
    (
        Provider.YOUTUBE,
        lambda link: link.host == YOUTUBE_SHORT_HOST,
        lambda link: (unquote(link.parts.path).strip("/"), DEFAULT_THEME),
    ),
    # https://www.bilibili.com/video/{vid}
    (
        Provider.BILIBILI,
        lambda link: link.host == BILIBILI_HOST
        and link.parts.path.startswith(BILIBILI_PATH_PREFIX),
        lambda link: (
            unquote(link.parts.path[len(BILIBILI_PATH_PREFIX):]).strip("/"),
            DEFAULT_THEME,
        ),
    ),
    # https://twitter.com/{username}/status/{id}?theme=dark
    (
        Provider.TWITTER,
        lambda link: link.host in TWITTER_HOSTS,
        lambda link: (
            _canonical_twitter_url(link),
            normalize_theme(link.param("theme")),
        ),
    ),
    # https://www.tradingview.com/chart/UC0wWW9o/?symbol=BITFINEX%3ABTCUSD
    (
        Provider.TRADINGVIEW,
        lambda link: link.host in TRADINGVIEW_HOSTS,
        lambda link: (link.param("symbol") or "", normalize_theme(link.param("theme"))),
    ),
]


def classify(url: str) -> Optional[Classification]:
    """
    Map an image destination to an embed provider.

    Returns:
        A ``Classification`` for a recognized provider with a non-empty
        identifier, otherwise ``None``.

    Raises:
        MalformedURLError: the destination is not a parseable URL.
    """
    link = parse_destination(url)

    for provider, matches, extract in CLASSIFICATION_RULES:
        if not matches(link):
            continue
        identifier, theme = extract(link)
        if not identifier:
            logger.debug(f"{provider.value} link without identifier: {url}")
            return None
        return Classification(provider, identifier, theme)

    return None


__all__ = [
    "DEFAULT_THEME",
    "Provider",
    "Classification",
    "ParsedLink",
    "CLASSIFICATION_RULES",
    "normalize_theme",
    "parse_destination",
    "classify",
]
