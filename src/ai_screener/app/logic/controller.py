"""Screener controller: the page's loading / error / results state machine.

Pure Python - no Streamlit UI calls. The page keeps a `ScreenerState` in
`st.session_state` and drives it through `ScreenerController`.
"""

from dataclasses import dataclass, field
from typing import Protocol

from loguru import logger

from ai_screener.config.categories import Category, get_category_definition
from ai_screener.core.domain_models import Stock

ERROR_MESSAGE_TEMPLATE = (
    "Failed to fetch stock data: {reason}. Please check your API key and try again."
)
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."


class CategoryFetcher(Protocol):
    async def fetch(self, category: Category) -> list[Stock]: ...


@dataclass
class ScreenerState:
    """Observable UI state plus the bookkeeping for the in-flight request."""

    results: list[Stock] = field(default_factory=list)
    is_loading: bool = False
    error_message: str | None = None
    results_title: str = ""

    # Sequence number of the latest started request
    request_id: int = 0
    pending: Category | None = None

    @property
    def phase(self) -> str:
        """One of idle, loading, success, failed."""
        if self.is_loading:
            return "loading"
        if self.error_message is not None:
            return "failed"
        if self.results:
            return "success"
        return "idle"


class ScreenerController:
    """Applies category selections and fetch outcomes to a `ScreenerState`.

    Only the latest request's outcome is applied: `complete` and `fail` ignore
    any request id that has been superseded.
    """

    def __init__(self, fetcher: CategoryFetcher, state: ScreenerState | None = None) -> None:
        self.fetcher = fetcher
        self.state = state if state is not None else ScreenerState()

    def start(self, category: Category) -> int | None:
        """Transition to Loading for `category`.

        Returns:
            The request id of the new attempt, or None if a fetch is already
            in flight (the selection is rejected and nothing changes)
        """
        state = self.state
        if state.is_loading:
            logger.warning(f"Ignoring selection of {Category(category).value!r} while loading")
            return None

        category = Category(category)
        state.request_id += 1
        state.pending = category
        state.results = []
        state.error_message = None
        state.results_title = get_category_definition(category).title
        state.is_loading = True
        logger.debug(f"Request {state.request_id}: loading {category.value}")
        return state.request_id

    def complete(self, request_id: int, stocks: list[Stock]) -> bool:
        """Apply a successful fetch. Returns False if the request is stale."""
        state = self.state
        if request_id != state.request_id:
            logger.debug(f"Discarding stale result of request {request_id}")
            return False
        state.results = list(stocks)
        state.error_message = None
        state.is_loading = False
        state.pending = None
        return True

    def fail(self, request_id: int, message: str) -> bool:
        """Apply a failed fetch. Returns False if the request is stale."""
        state = self.state
        if request_id != state.request_id:
            logger.debug(f"Discarding stale failure of request {request_id}")
            return False
        state.results = []
        state.results_title = ""
        state.error_message = message
        state.is_loading = False
        state.pending = None
        return True

    async def resolve(self) -> None:
        """Await the fetch for the pending category and apply its outcome."""
        state = self.state
        category = state.pending
        if category is None or not state.is_loading:
            return
        request_id = state.request_id

        try:
            stocks = await self.fetcher.fetch(category)
        except Exception as e:
            reason = str(e)
            message = (
                ERROR_MESSAGE_TEMPLATE.format(reason=reason) if reason else UNKNOWN_ERROR_MESSAGE
            )
            self.fail(request_id, message)
            return

        self.complete(request_id, stocks)

    async def select_category(self, category: Category) -> None:
        """Start a fetch for `category` and wait until it settles.

        A selection made while another fetch is in flight is a no-op.
        """
        if self.start(category) is None:
            return
        await self.resolve()
