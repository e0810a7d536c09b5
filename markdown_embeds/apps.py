from django.apps import AppConfig


class MarkdownEmbedsConfig(AppConfig):
    name = 'markdown_embeds'
    verbose_name = 'Markdown embeds'
