import pypandoc
import pytest

from markdown_embeds.markdown.embeds.anchors import SequentialAnchorIds
from markdown_embeds.markdown.embeds.dispatcher import EmbedRenderer

from .fakes import RecordingFetcher


def _pandoc_available() -> bool:
    try:
        pypandoc.get_pandoc_version()
    except OSError:
        return False
    return True


requires_pandoc = pytest.mark.skipif(
    not _pandoc_available(), reason="pandoc binary not available"
)


@pytest.fixture
def fetcher() -> RecordingFetcher:
    return RecordingFetcher()


@pytest.fixture
def renderer(fetcher: RecordingFetcher) -> EmbedRenderer:
    return EmbedRenderer(fetcher=fetcher, anchor_ids=SequentialAnchorIds())
