"""Category fetcher: prompt in, list of `Stock` records out.

Builds the category prompt, asks the completion service for a JSON array that
follows `STOCK_RESPONSE_SCHEMA`, and parses the reply. Every failure is
normalized into a single `FetchError`; there is no retry and no partial result.
"""

import json

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from ai_screener.config.categories import Category
from ai_screener.core.completion import CompletionClient
from ai_screener.core.domain_models import STOCK_RESPONSE_SCHEMA, Stock
from ai_screener.core.exceptions import FetchError, ParseError
from ai_screener.core.prompts import build_prompt

FETCH_FAILED_MESSAGE = (
    "Failed to retrieve data from Gemini API. "
    "The model may be unavailable or the request could be malformed"
)

_STOCK_LIST_ADAPTER = TypeAdapter(list[Stock])


def parse_stocks(text: str) -> list[Stock]:
    """Parse the model's JSON reply into stock records.

    Order and duplicate tickers are preserved, the item count is not checked.

    Raises:
        ParseError: If the text is not JSON, not an array, or an item does not
            carry the five string fields
    """
    try:
        payload = json.loads(text.strip())
    except json.JSONDecodeError as e:
        raise ParseError(f"Response is not valid JSON: {e}") from e

    if not isinstance(payload, list):
        raise ParseError(f"Expected a JSON array, got {type(payload).__name__}")

    try:
        return _STOCK_LIST_ADAPTER.validate_python(payload)
    except ValidationError as e:
        raise ParseError(f"Response does not match the stock schema: {e}") from e


class StockFetcher:
    """Fetches one category's recommendations from a completion client."""

    def __init__(self, client: CompletionClient, language: str = "English") -> None:
        """Initialize with an already configured client.

        Args:
            client: Completion client holding credential and model
            language: Language requested for the analysis text
        """
        self.client = client
        self.language = language

    async def fetch(self, category: Category) -> list[Stock]:
        """Fetch the recommendations for a category.

        Raises:
            FetchError: On any service, parse, or unexpected error
        """
        category = Category(category)
        logger.info(f"[{category.value}] Requesting stock recommendations")
        try:
            prompt = build_prompt(category, language=self.language)
            text = await self.client.generate_json(prompt, STOCK_RESPONSE_SCHEMA)
            stocks = parse_stocks(text)
        except Exception as e:
            logger.error(f"[{category.value}] Error calling completion service: {e}")
            raise FetchError(FETCH_FAILED_MESSAGE) from e

        logger.success(f"[{category.value}] Received {len(stocks)} stocks")
        return stocks
