# markdown_embeds/templatetags/markdown_tags.py

from django import template
from django.utils.safestring import mark_safe

from markdown_embeds.markdown.renderer import render_markdown

register = template.Library()


@register.filter(name="markdown")
def markdown_filter(value):
    return mark_safe(render_markdown(value))


@register.simple_tag(takes_context=True)
def markdown_with_context(context, value):
    """Template tag that passes an embed renderer from the template context"""
    processor_context = {}
    if context.get("embed_renderer") is not None:
        processor_context["embed_renderer"] = context.get("embed_renderer")
    return mark_safe(render_markdown(value, context=processor_context))
