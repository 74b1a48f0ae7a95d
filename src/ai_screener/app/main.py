"""US Stock Screener - Streamlit entry point.

Builds settings, completion client and fetcher once per process and keeps the
screener state in the session. Run with `screener app` or
`streamlit run src/ai_screener/app/main.py`.
"""

import asyncio

import streamlit as st
from loguru import logger

from ai_screener.app.logic.controller import ScreenerController, ScreenerState
from ai_screener.app.views.common import render_footer, render_header
from ai_screener.app.views.screener import render_category_buttons, render_results
from ai_screener.config.categories import Category
from ai_screener.config.settings import load_settings
from ai_screener.core.completion import GeminiCompletionClient
from ai_screener.core.fetcher import StockFetcher
from ai_screener.core.log_setup import configure_logging

STATE_KEY = "screener_state"

st.set_page_config(
    page_title="US Stock Screener",
    page_icon="📈",
    layout="wide",
)


@st.cache_resource  # type: ignore[misc]
def get_fetcher() -> StockFetcher:
    settings = load_settings()
    configure_logging(settings.log_level)
    logger.info(f"Starting {settings.app_name} with model {settings.model}")
    client = GeminiCompletionClient(settings.api_key, model=settings.model)
    return StockFetcher(client, language=settings.analysis_language)


if STATE_KEY not in st.session_state:
    st.session_state[STATE_KEY] = ScreenerState()

controller = ScreenerController(get_fetcher(), st.session_state[STATE_KEY])


def on_select(category: Category) -> None:
    controller.start(category)


def run_pending() -> None:
    asyncio.run(controller.resolve())


render_header()
render_category_buttons(controller.state, on_select)
st.divider()

was_loading = controller.state.is_loading
render_results(controller.state, run_pending)
render_footer()

# Re-render with the settled state and re-enabled buttons
if was_loading:
    st.rerun()
