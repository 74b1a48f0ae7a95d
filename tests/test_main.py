import json

import pytest
from conftest import FakeCompletionClient

from ai_screener import main as cli


@pytest.fixture
def fake_client(monkeypatch: pytest.MonkeyPatch) -> FakeCompletionClient:
    client = FakeCompletionClient()
    monkeypatch.setattr(cli, "GeminiCompletionClient", lambda api_key, model: client)
    return client


def test_categories_command_runs() -> None:
    cli.main(["categories"])


def test_fetch_prints_json(
    fake_client: FakeCompletionClient,
    sample_stock_json: str,
    sample_stock_payload: list[dict[str, str]],
    capsys: pytest.CaptureFixture[str],
) -> None:
    fake_client.reply = sample_stock_json

    cli.main(["fetch", "dividend", "--json"])

    assert json.loads(capsys.readouterr().out) == sample_stock_payload
    assert "Dividend Yield" in fake_client.calls[0][0]


def test_fetch_exits_on_failure(fake_client: FakeCompletionClient) -> None:
    fake_client.reply = "not json"

    with pytest.raises(SystemExit) as exc_info:
        cli.main(["fetch", "growth"])

    assert exc_info.value.code == 1


def test_unknown_category_is_rejected_by_parser() -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["fetch", "penny"])

    assert exc_info.value.code == 2
