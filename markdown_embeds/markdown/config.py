from django.conf import settings

EMBED_DEFAULTS = {
    "OEMBED_ENDPOINT": "https://publish.twitter.com/oembed",
    "OEMBED_TIMEOUT": 5,
    "OEMBED_FETCHER": "markdown_embeds.markdown.embeds.oembed.fetch_tweet_html",
    "ANCHOR_IDS": "random",
    "CONTAINER_CLASS": "has-embed",
    "VIDEO_HEIGHT": 400,
}


def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    Images keep their destination untouched in the html5 output so the
    embed postprocessor can classify them after conversion.
    """
    return {
        "format": "markdown+autolink_bare_uris+strikeout+superscript+subscript+task_lists+pipe_tables+fenced_code_blocks+fenced_code_attributes+raw_html+link_attributes",
        "extra_args": [
            "--wrap=none",
        ],
        "filters": [],
    }


def get_embed_config():
    """
    Embed settings, read from ``settings.MARKDOWN_EMBEDS`` over the defaults.

    Example::

        MARKDOWN_EMBEDS = {
            "OEMBED_TIMEOUT": 3,
            "ANCHOR_IDS": "sequential",
            "CONTAINER_CLASS": "",  # don't tag parents of embeds
        }
    """
    overrides = getattr(settings, "MARKDOWN_EMBEDS", None) or {}
    config = dict(EMBED_DEFAULTS)
    config.update(overrides)
    return config
