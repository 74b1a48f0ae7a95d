"""Pytest configuration and shared fixtures."""

import json
from typing import Any

import pytest

from ai_screener.config.categories import Category
from ai_screener.core.domain_models import Stock
from ai_screener.core.exceptions import FetchError


class FakeCompletionClient:
    """Completion client returning a canned reply and recording the requests."""

    def __init__(self, reply: str = "[]", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[tuple[str, dict[str, Any]]] = []

    async def generate_json(self, prompt: str, schema: dict[str, Any]) -> str:
        self.calls.append((prompt, schema))
        if self.error is not None:
            raise self.error
        return self.reply


class FakeFetcher:
    """Fetcher double for controller tests."""

    def __init__(self, stocks: list[Stock] | None = None, error: Exception | None = None) -> None:
        self.stocks = stocks or []
        self.error = error
        self.requested: list[Category] = []

    async def fetch(self, category: Category) -> list[Stock]:
        self.requested.append(category)
        if self.error is not None:
            raise self.error
        return self.stocks


@pytest.fixture
def sample_stock_payload() -> list[dict[str, str]]:
    """Records as the model returns them (camelCase keys)."""
    return [
        {
            "ticker": "JNJ",
            "companyName": "Johnson & Johnson",
            "keyMetricLabel": "Dividend Yield",
            "keyMetricValue": "3.1%",
            "analysis": "Decades of dividend growth backed by a diversified healthcare business.",
        },
        {
            "ticker": "PG",
            "companyName": "Procter & Gamble",
            "keyMetricLabel": "Dividend Yield",
            "keyMetricValue": "2.4%",
            "analysis": "Consumer staples leader with stable cash flows.",
        },
        {
            "ticker": "JNJ",
            "companyName": "Johnson & Johnson",
            "keyMetricLabel": "Dividend Yield",
            "keyMetricValue": "3.1%",
            "analysis": "Listed twice by the model.",
        },
    ]


@pytest.fixture
def sample_stock_json(sample_stock_payload: list[dict[str, str]]) -> str:
    return json.dumps(sample_stock_payload)


@pytest.fixture
def sample_stocks(sample_stock_payload: list[dict[str, str]]) -> list[Stock]:
    return [Stock.model_validate(item) for item in sample_stock_payload]


@pytest.fixture
def fetch_error() -> FetchError:
    return FetchError("Failed to retrieve data from Gemini API")
