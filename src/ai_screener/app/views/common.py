"""Common UI components of the screener page.

Pure rendering functions for the static parts of the page.
"""

import streamlit as st

from ai_screener.app.views.colors import Colors

APP_TITLE = "US Stock Screener"
APP_DESCRIPTION = (
    "US stock finder: screen growth stocks, safe dividend stocks, and fast movers "
    "for day trading using the Gemini API."
)
DISCLAIMER_TITLE = "Disclaimer:"
DISCLAIMER_TEXT = (
    "This information is generated by AI and is for informational purposes only. "
    "It is not financial advice. Investing involves risk; do your own research "
    "before making investment decisions."
)


def render_header() -> None:
    """Render the page title and a short description."""
    st.title(f"📈 {APP_TITLE}", anchor=False)
    st.caption(APP_DESCRIPTION)


def render_empty_state(message: str, icon: str = "🔎") -> None:
    """Render empty state placeholder when no results are available.

    Args:
        message: Message to display
        icon: Emoji icon to show
    """
    st.info(f"{icon} {message}")


def render_footer() -> None:
    st.divider()
    st.markdown(
        f"<p style='text-align:center; color:{Colors.amber}; font-weight:700; margin:0'>"
        f"{DISCLAIMER_TITLE}</p>",
        unsafe_allow_html=True,
    )
    st.caption(DISCLAIMER_TEXT)
