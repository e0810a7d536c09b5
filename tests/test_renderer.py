"""
End-to-end tests through pandoc
"""

import pypandoc
import pytest
from bs4 import BeautifulSoup

from markdown_embeds.markdown.config import get_pandoc_config
from markdown_embeds.markdown.embeds.dispatcher import EmbedRenderer
from markdown_embeds.markdown.renderer import render_markdown

from .conftest import requires_pandoc
from .fakes import RecordingFetcher


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


@requires_pandoc
def test_youtube_link_becomes_iframe(renderer: EmbedRenderer) -> None:
    source = "# Hello embeds\n\n![](https://www.youtube.com/watch?v=dQw4w9WgXcQ)\n"

    html = render_markdown(source, context={"embed_renderer": renderer})

    soup = _soup(html)
    assert soup.h1.get_text() == "Hello embeds"
    assert soup.iframe["src"] == "https://www.youtube.com/embed/dQw4w9WgXcQ"
    assert soup.find("img") is None


@requires_pandoc
def test_plain_images_match_pandoc_output(renderer: EmbedRenderer) -> None:
    source = "Some *text* and ![a cat](https://example.com/cat.png \"Cat\")\n"
    config = get_pandoc_config()
    pandoc_html = pypandoc.convert_text(
        source, to="html5", format=config["format"], extra_args=config["extra_args"]
    )

    html = render_markdown(source, context={"embed_renderer": renderer})

    assert html == pandoc_html


@requires_pandoc
@pytest.mark.parametrize(
    "fetcher",
    [RecordingFetcher(html=""), RecordingFetcher(error=ConnectionError("reset"))],
)
def test_failed_tweet_still_renders_document(fetcher: RecordingFetcher) -> None:
    renderer = EmbedRenderer(fetcher=fetcher)
    source = (
        "Before\n\n"
        "![](https://x.com/user/status/123?theme=light)\n\n"
        "After\n"
    )

    html = render_markdown(source, context={"embed_renderer": renderer})

    assert (
        "Failed to load tweet from https://twitter.com/user/status/123?theme=light"
        in html
    )
    texts = [p.get_text() for p in _soup(html).find_all("p")]
    assert texts[0] == "Before"
    assert texts[-1] == "After"


@requires_pandoc
def test_two_charts_get_distinct_anchors(renderer: EmbedRenderer) -> None:
    source = (
        "![](https://www.tradingview.com/chart/?symbol=NASDAQ:AAPL)\n\n"
        "![](https://www.tradingview.com/chart/?symbol=NASDAQ:MSFT&theme=light)\n"
    )

    html = render_markdown(source, context={"embed_renderer": renderer})

    ids = [
        div["id"]
        for div in _soup(html).find_all("div", id=True)
        if div["id"].startswith("tradingview_")
    ]
    assert ids == ["tradingview_1", "tradingview_2"]
