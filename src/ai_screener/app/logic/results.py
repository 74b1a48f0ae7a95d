"""Logic layer for the results area.

Maps controller state to what the page should show. Pure Python - the views
turn the returned `ResultsView` into Streamlit elements.
"""

from dataclasses import dataclass, field
from typing import Literal

from ai_screener.app.logic.controller import ScreenerState
from ai_screener.core.domain_models import Stock

ViewKind = Literal["loading", "error", "empty", "results"]
AccentName = Literal["pe", "dividend", "default"]

EMPTY_STATE_MESSAGE = "Choose a stock category above to start the search."


@dataclass(frozen=True)
class StockCard:
    key: str
    stock: Stock
    accent: AccentName


@dataclass(frozen=True)
class ResultsView:
    kind: ViewKind
    message: str = ""
    title: str = ""
    cards: list[StockCard] = field(default_factory=list)


def metric_accent(metric_label: str) -> AccentName:
    """Pick the card accent from the metric label. Purely cosmetic."""
    if "P/E" in metric_label:
        return "pe"
    if "Dividend" in metric_label:
        return "dividend"
    return "default"


def card_key(stock: Stock, index: int) -> str:
    """Key of a result card, unique even when tickers repeat."""
    return f"{stock.ticker}-{index}"


def build_results_view(state: ScreenerState) -> ResultsView:
    """Decide what the results area renders, in priority order.

    loading > error > empty prompt > result cards
    """
    if state.is_loading:
        return ResultsView(kind="loading")
    if state.error_message:
        return ResultsView(kind="error", message=state.error_message)
    if not state.results:
        return ResultsView(kind="empty", message=EMPTY_STATE_MESSAGE)
    return ResultsView(
        kind="results",
        title=state.results_title,
        cards=[
            StockCard(
                key=card_key(stock, i),
                stock=stock,
                accent=metric_accent(stock.key_metric_label),
            )
            for i, stock in enumerate(state.results)
        ],
    )
