"""Generate HTML previews for formatted numbers and glow cards."""
from __future__ import annotations

from html import escape

import pandas as pd

from ghost_display.config import DIM_OPACITY
from ghost_display.ui_components.formatting import FormattedNumber
from ghost_display.ui_components.glow import CardGlowStyle, TextGlow, border_gradient_css

GRADIENT_BORDER_WIDTH = 2


def number_to_html(formatted: FormattedNumber, glow: TextGlow | None = None, dim_opacity: float = DIM_OPACITY) -> str:
    spans = []
    for role, text, dimmed in formatted.segments():
        style = f' style="opacity: {dim_opacity}"' if dimmed else ""
        spans.append(f'<span class="gd-{role.replace("_", "-")}"{style}>{escape(text)}</span>')
    shadow = f"text-shadow: {glow.css()}; " if glow else ""
    return f'<span class="gd-number" style="{shadow}font-variant-numeric: tabular-nums;">{"".join(spans)}</span>'


def card_to_html(style: CardGlowStyle, body: str, radius: int = 12, padding: int = 16) -> str:
    glow_layer = ""
    if style.background:
        glow_layer = (
            f'<div class="gd-glow" style="position: absolute; inset: 0; border-radius: {radius}px; '
            f'pointer-events: none; background: {style.background};"></div>'
        )
    return (
        f'<div class="gd-card-border" style="padding: {GRADIENT_BORDER_WIDTH}px; '
        f'border-radius: {radius + GRADIENT_BORDER_WIDTH}px; background: {border_gradient_css(style)};">'
        f'<div class="gd-card" style="position: relative; overflow: hidden; background: #0b0b0f; '
        f'border-radius: {radius}px; padding: {padding}px;">'
        f'{glow_layer}<div style="position: relative; z-index: 1;">{body}</div>'
        "</div></div>"
    )


def table_to_html(df: pd.DataFrame, title: str) -> str:
    return f"<h3>{escape(title)}</h3>" + df.to_html(index=False, border=0)


def build_report_html(sections: list[tuple[str, str]]) -> str:
    body = "\n".join([f"<section><h2>{escape(title)}</h2><div>{content}</div></section>" for title, content in sections])
    return f"""
    <html>
    <head>
      <style>
        body {{font-family: Arial, sans-serif; margin: 24px; background: #0b0b0f; color: #f3f4f6;}}
        h1, h2 {{color: #5A9BFF;}}
        table {{border-collapse: collapse; width: 100%;}}
        th, td {{border: 1px solid #333; padding: 8px; text-align: right;}}
        .gd-number {{font-size: 20px;}}
      </style>
    </head>
    <body>
      <h1>Ghost Display Gallery</h1>
      {body}
    </body>
    </html>
    """
