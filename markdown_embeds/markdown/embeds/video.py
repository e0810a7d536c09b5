"""Iframe markup for video providers."""

from urllib.parse import quote, urlencode

from django.utils.html import format_html

YOUTUBE_EMBED_BASE = "https://www.youtube.com/embed/"
BILIBILI_PLAYER_URL = "//player.bilibili.com/player.html"

YOUTUBE_ALLOW = (
    "accelerometer; autoplay; clipboard-write; encrypted-media; "
    "gyroscope; picture-in-picture; web-share"
)


def youtube_embed_url(video_id: str) -> str:
    return YOUTUBE_EMBED_BASE + quote(video_id, safe="")


def bilibili_embed_url(video_id: str) -> str:
    return f"{BILIBILI_PLAYER_URL}?{urlencode({'bvid': video_id, 'page': 1})}"


def youtube_embed_html(video_id: str, height: int = 400) -> str:
    return format_html(
        '<div class="embedded-object-wrapper">'
        '<iframe class="embedded-object youtube-embedded-object" width="100%" height="{}" '
        'src="{}" title="YouTube video player" frameborder="0" allow="{}" allowfullscreen>'
        "</iframe></div>",
        height,
        youtube_embed_url(video_id),
        YOUTUBE_ALLOW,
    )


def bilibili_embed_html(video_id: str, height: int = 400) -> str:
    return format_html(
        '<div class="embedded-object-wrapper">'
        '<iframe class="embedded-object bilibili-embedded-object" width="100%" height="{}" '
        'src="{}" scrolling="no" border="0" framespacing="0" allowfullscreen="true" '
        'frameborder="no"></iframe></div>',
        height,
        bilibili_embed_url(video_id),
    )
