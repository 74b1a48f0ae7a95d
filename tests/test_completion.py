import asyncio
from types import SimpleNamespace
from typing import Any

import pytest

from ai_screener.config.settings import DEFAULT_MODEL, Settings
from ai_screener.core import completion
from ai_screener.core.completion import GeminiCompletionClient
from ai_screener.core.domain_models import STOCK_RESPONSE_SCHEMA
from ai_screener.core.exceptions import ServiceError


class _FakeModels:
    def __init__(self, text: str | None, error: Exception | None) -> None:
        self.text = text
        self.error = error
        self.requests: list[dict[str, Any]] = []

    async def generate_content(self, **kwargs: Any) -> SimpleNamespace:
        self.requests.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


def _install_fake_client(
    monkeypatch: pytest.MonkeyPatch, text: str | None = "[]", error: Exception | None = None
) -> tuple[_FakeModels, list[str]]:
    models = _FakeModels(text, error)
    keys: list[str] = []

    def fake_client(api_key: str) -> SimpleNamespace:
        keys.append(api_key)
        return SimpleNamespace(aio=SimpleNamespace(models=models))

    monkeypatch.setattr(completion.genai, "Client", fake_client)
    return models, keys


def test_missing_api_key_fails_on_request_only() -> None:
    client = GeminiCompletionClient(api_key=None)

    with pytest.raises(ServiceError, match="Missing API key"):
        asyncio.run(client.generate_json("prompt", STOCK_RESPONSE_SCHEMA))


def test_generate_json_requests_structured_output(monkeypatch: pytest.MonkeyPatch) -> None:
    models, keys = _install_fake_client(monkeypatch, text='[{"ticker": "V"}]')
    client = GeminiCompletionClient(api_key="secret", model="gemini-test")

    text = asyncio.run(client.generate_json("find stocks", STOCK_RESPONSE_SCHEMA))

    assert text == '[{"ticker": "V"}]'
    assert keys == ["secret"]
    request = models.requests[0]
    assert request["model"] == "gemini-test"
    assert request["contents"] == "find stocks"
    assert request["config"].response_mime_type == "application/json"
    assert request["config"].response_schema == STOCK_RESPONSE_SCHEMA


def test_generate_json_wraps_sdk_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_fake_client(monkeypatch, error=ConnectionError("unreachable"))
    client = GeminiCompletionClient(api_key="secret")

    with pytest.raises(ServiceError, match="unreachable"):
        asyncio.run(client.generate_json("prompt", STOCK_RESPONSE_SCHEMA))


def test_generate_json_rejects_empty_reply(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_fake_client(monkeypatch, text=None)
    client = GeminiCompletionClient(api_key="secret")

    with pytest.raises(ServiceError, match="empty response"):
        asyncio.run(client.generate_json("prompt", STOCK_RESPONSE_SCHEMA))


def test_client_and_settings_share_default_model(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("GEMINI_MODEL", "MODEL"):
        monkeypatch.delenv(name, raising=False)

    assert GeminiCompletionClient(api_key=None).model == DEFAULT_MODEL
    assert Settings(_env_file=None).model == DEFAULT_MODEL
