"""
TradingView chart widgets.

The widget script attaches to the element whose id is passed as
``container_id``; callers supply a unique ``anchor_id`` per chart.
Template errors are not caught here: a chart that cannot be rendered
fails the render call instead of silently disappearing.
"""

from functools import lru_cache

from django.template import Context, Engine
from django.utils.html import format_html

from .classifier import normalize_theme

TRADINGVIEW_TEMPLATE = """
<!-- TradingView Widget BEGIN -->
<div class="tradingview-widget-container" style="height:100%;width:100%">
  <div id="{{ anchor_id }}" style="height:calc(100% - 32px);width:100%"></div>
  <div class="tradingview-widget-copyright"><a href="https://www.tradingview.com/" rel="noopener nofollow" target="_blank"><span class="blue-text">Track all markets on TradingView</span></a></div>
  <script type="application/javascript" src="https://s3.tradingview.com/tv.js"></script>
  <script type="application/javascript">
  new TradingView.widget(
  {
    "autosize": true,
    "symbol": "{{ symbol|escapejs }}",
    "interval": "D",
    "timezone": "Etc/UTC",
    "theme": "{{ theme|escapejs }}",
    "style": "1",
    "locale": "en",
    "enable_publishing": false,
    "allow_symbol_change": true,
    "container_id": "{{ anchor_id|escapejs }}"
  }
  );
  </script>
</div>
<!-- TradingView Widget END -->
"""


@lru_cache(maxsize=1)
def get_widget_template():
    """Compile the widget template once with a standalone template engine."""
    return Engine(autoescape=True).from_string(TRADINGVIEW_TEMPLATE)


def tradingview_widget_html(symbol: str, theme: str, anchor_id: str) -> str:
    template = get_widget_template()
    return template.render(
        Context(
            {
                "anchor_id": anchor_id,
                "symbol": symbol,
                "theme": normalize_theme(theme),
            }
        )
    )


def tradingview_embed_html(symbol: str, theme: str, anchor_id: str) -> str:
    return format_html(
        '<div class="embedded-object-wrapper auto-resize">'
        '<div class="embedded-object tradingview-embedded-object no-border">{}</div></div>',
        tradingview_widget_html(symbol, theme, anchor_id),
    )
