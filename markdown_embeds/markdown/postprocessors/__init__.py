# markdown_embeds/markdown/postprocessors/__init__.py

from .embed_transformer import embed_transformer_default

POSTPROCESSORS = [
    embed_transformer_default,  # Replace provider image links with rich embeds
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
