from __future__ import annotations

import json

import pandas as pd
import plotly.express as px
import streamlit as st

from ghost_display.config import APP_TITLE
from ghost_display.logging_utils import ui_error
from ghost_display.reporting.html_report import build_report_html, card_to_html, number_to_html, table_to_html
from ghost_display.ui_components.currency import format_currency, format_percent_change
from ghost_display.ui_components.formatting import NumberFormat, format_number
from ghost_display.ui_components.glow import Brightness, CardGlow, DisplayContext, card_glow, text_glow
from ghost_display.ui_components.placement import placement_frame, select_placements
from ghost_display.ui_components.validation import validate_format_mapping

st.set_page_config(page_title=APP_TITLE, layout="wide")

st.sidebar.title("Navigation")
page = st.sidebar.radio("Go to", ["Home", "Number", "Currency", "Card Placements", "Gallery Report"])

st.sidebar.subheader("Display Context")
glow_multiplier = st.sidebar.slider("Glow multiplier", 0.0, 3.0, 1.0, 0.05)
context = DisplayContext(glow_multiplier=glow_multiplier)

SAMPLE_VALUES = [7, 78, 3376, 13376, 123456, 1234.5, 99.99, 0.0025, -14]


def home_page() -> None:
    st.title(APP_TITLE)
    st.caption("Segmented number formatting and seeded glow placement.")
    st.markdown("### Samples")
    rows = []
    for value in SAMPLE_VALUES:
        f = format_number(value)
        rows.append(
            {
                "value": value,
                "leading_zeros": f.leading_zeros,
                "main_content": f.main_content,
                "decimal_content": f.decimal_content,
                "trailing_zeros": f.trailing_zeros,
                "text": f.text,
            }
        )
    st.dataframe(pd.DataFrame(rows), use_container_width=True)


def number_page() -> None:
    st.header("Number")
    value = st.number_input("Value", value=3376.0, format="%f")
    raw = st.text_area("Format options (JSON)", '{"type": "default", "decimals": 2, "prefix": "$"}')
    try:
        options = json.loads(raw) if raw.strip() else {}
    except json.JSONDecodeError as exc:
        ui_error("Format options are not valid JSON", exc)
        return
    ok, errors = validate_format_mapping(options)
    if not ok:
        for err in errors:
            st.error(err)
        return

    c1, c2 = st.columns(2)
    appearance = c1.selectbox("Appearance", ["primary", "link", "success", "warning", "danger", "info"])
    brightness = c2.selectbox("Brightness", [b.value for b in Brightness])
    formatted = format_number(value, NumberFormat.from_mapping(options))
    glow = text_glow(appearance, brightness, context)
    st.markdown(number_to_html(formatted, glow), unsafe_allow_html=True)
    st.json(
        {
            "prefix": formatted.prefix,
            "leadingZeros": formatted.leading_zeros,
            "mainContent": formatted.main_content,
            "decimalContent": formatted.decimal_content,
            "trailingZeros": formatted.trailing_zeros,
            "suffix": formatted.suffix,
        }
    )


def currency_page() -> None:
    st.header("Currency")
    c1, c2, c3 = st.columns(3)
    value = c1.number_input("Amount", value=1234.56)
    currency = c2.text_input("Currency", "USD")
    decimals = c3.number_input("Decimals", 0, 8, 2)
    show_sign = st.checkbox("Show positive sign")
    compact = st.checkbox("Compact")
    formatted = format_currency(value, currency, int(decimals), show_positive_sign=show_sign, compact=compact)
    st.markdown(number_to_html(formatted), unsafe_allow_html=True)

    st.subheader("Percent change")
    change = st.number_input("Change (%)", value=-1.23)
    direction, pct = format_percent_change(change)
    arrow = {"up": "↑ ", "down": "↓ ", "flat": ""}[direction]
    st.markdown(arrow + number_to_html(pct), unsafe_allow_html=True)


def placements_page() -> None:
    st.header("Card Placements")
    frame = placement_frame()
    st.dataframe(frame, use_container_width=True)
    fig = px.scatter(frame, x="x_pct", y="y_pct", color="corner", symbol="variant", text="index", title="Glow anchors")
    fig.update_yaxes(autorange="reversed")
    st.plotly_chart(fig, use_container_width=True)

    c1, c2 = st.columns(2)
    glow = c1.selectbox("Glow", [g.value for g in CardGlow])
    seed = int(c2.number_input("Seed", value=42, step=1))
    layers = select_placements(seed)
    st.write("Layer placements: " + ", ".join(f"{p.corner.value}/{p.variant.value}" for p in layers))
    style = card_glow(glow, seed)
    st.components.v1.html(card_to_html(style, "<p style='color: #f3f4f6'>Seeded card</p>"), height=160)


def report_page() -> None:
    st.header("Gallery Report (HTML Preview)")
    seed = int(st.number_input("Seed", value=7, step=1, key="rep_seed"))
    order = st.multiselect(
        "Section order",
        ["Numbers", "Currency", "Cards", "Placement Table"],
        default=["Numbers", "Currency", "Cards", "Placement Table"],
    )

    sections: list[tuple[str, str]] = []
    for s in order:
        if s == "Numbers":
            sections.append(("Numbers", "<br/>".join(number_to_html(format_number(v)) for v in SAMPLE_VALUES)))
        elif s == "Currency":
            sections.append(("Currency", "<br/>".join(number_to_html(format_currency(v)) for v in [1234.56, -14, 0.0025])))
        elif s == "Cards":
            cards = [card_to_html(card_glow(g, seed + i), f"<p>{g.value}</p>") for i, g in enumerate(CardGlow)]
            sections.append(("Cards", "".join(f"<div style='margin: 12px 0'>{c}</div>" for c in cards)))
        elif s == "Placement Table":
            sections.append(("Placement Table", table_to_html(placement_frame(), "Glow placements")))

    html = build_report_html(sections)
    st.subheader("Preview")
    st.components.v1.html(html, height=600, scrolling=True)
    st.download_button("Download HTML Report", html.encode("utf-8"), file_name=f"gallery_seed_{seed}.html")


try:
    if page == "Home":
        home_page()
    elif page == "Number":
        number_page()
    elif page == "Currency":
        currency_page()
    elif page == "Card Placements":
        placements_page()
    else:
        report_page()
except Exception as exc:
    ui_error("Unexpected application error", exc)
