from collections.abc import Callable
from html import escape

import streamlit as st

from ai_screener.app.logic.controller import ScreenerState
from ai_screener.app.logic.results import ResultsView, StockCard, build_results_view
from ai_screener.app.views.colors import METRIC_ACCENT_COLORS, Colors
from ai_screener.app.views.common import render_empty_state
from ai_screener.config.categories import CATEGORY_DEFINITIONS, Category

LOADING_BUTTON_LABEL = "Searching..."
LOADING_MESSAGE = "Asking Gemini for stock ideas..."
ANALYSIS_HEADING = "Analysis"
GRID_COLUMNS = 3


def html_text(text: str) -> str:
    """Escape model text for a raw HTML block so it is shown verbatim.

    Line breaks become `<br>`: a blank line would end the HTML block and hand
    the rest of the text to the Markdown parser.
    """
    return escape(text).replace("\r\n", "\n").replace("\n", "<br>")


def render_category_buttons(
    state: ScreenerState, on_select: Callable[[Category], None]
) -> None:
    """Render one action button per category, disabled while a fetch is running."""
    cols = st.columns(len(CATEGORY_DEFINITIONS))
    for col, (category, definition) in zip(cols, CATEGORY_DEFINITIONS.items(), strict=True):
        with col:
            st.button(
                LOADING_BUTTON_LABEL if state.is_loading else definition.button_label,
                key=f"select_{category.value}",
                on_click=on_select,
                args=(category,),
                disabled=state.is_loading,
                type="primary",
                width="stretch",
            )


def render_stock_card(card: StockCard) -> None:
    """Render one recommendation as a bordered card."""
    stock = card.stock
    accent = METRIC_ACCENT_COLORS[card.accent]
    with st.container(border=True, key=f"stock_card_{card.key}"):
        col_name, col_metric = st.columns([3, 2])
        with col_name:
            st.markdown(
                f"<div style='font-size:1.5rem; font-weight:700'>"
                f"{html_text(stock.company_name)}</div>"
                f"<div style='color:{Colors.indigo}; font-family:monospace; font-size:1.1rem'>"
                f"{html_text(stock.ticker)}</div>",
                unsafe_allow_html=True,
            )
        with col_metric:
            st.markdown(
                f"<div style='font-size:0.8rem; opacity:0.7'>"
                f"{html_text(stock.key_metric_label)}</div>"
                f"<div style='color:{accent}; font-size:1.6rem; font-weight:700'>"
                f"{html_text(stock.key_metric_value)}</div>",
                unsafe_allow_html=True,
            )
        st.markdown(f"**{ANALYSIS_HEADING}**")
        st.markdown(
            f"<div style='font-size:0.9rem; line-height:1.6'>{html_text(stock.analysis)}</div>",
            unsafe_allow_html=True,
        )


def render_results_view(
    view: ResultsView, run_pending: Callable[[], None] | None = None
) -> None:
    """Render the results area for an already computed view.

    Args:
        view: What to show, see `build_results_view`
        run_pending: Work to run under the loading spinner (the in-flight fetch)
    """
    if view.kind == "loading":
        with st.spinner(LOADING_MESSAGE):
            if run_pending is not None:
                run_pending()
        return
    if view.kind == "error":
        st.error(view.message)
        return
    if view.kind == "empty":
        render_empty_state(view.message)
        return

    st.header(view.title, anchor=False)
    cols = st.columns(GRID_COLUMNS)
    for i, card in enumerate(view.cards):
        with cols[i % GRID_COLUMNS]:
            render_stock_card(card)


def render_results(
    state: ScreenerState, run_pending: Callable[[], None] | None = None
) -> None:
    render_results_view(build_results_view(state), run_pending)
