"""Tests for the advice service and adapter factory."""
import json
import pytest
from society.adapters.factory import get_advice_adapter
from society.adapters.mock import MockAdviceAdapter
from society.config import settings
from society.models.preferences import Language
from society.services.advice import (
    ADVICE_FAILED,
    ADVICE_TEMPERATURE,
    NO_INSIGHTS,
    SYSTEM_INSTRUCTIONS,
    AdviceService,
    summarize_for_advice,
)


def test_summary_keeps_only_prompt_fields(scenario_transactions):
    summary = summarize_for_advice(scenario_transactions)

    assert summary[0] == {
        "type": "Deposit/Income",
        "totalAmount": 2000,
        "date": "2026-01-05",
        "itemCount": 1,
        "items": "Monthly Savings",
    }


def test_prompt_names_language_and_embeds_data(scenario_transactions):
    service = AdviceService(adapter=MockAdviceAdapter())
    prompt = service.build_prompt(scenario_transactions, Language.BENGALI)

    assert "Bengali (বাংলা)" in prompt
    payload = prompt.split("Transactions Data: ", 1)[1]
    assert [row["type"] for row in json.loads(payload)] == ["Deposit/Income", "Withdrawal/Expense"]


@pytest.mark.asyncio
async def test_advice_from_mock_adapter(scenario_transactions):
    adapter = MockAdviceAdapter("mock:advisor")
    service = AdviceService(adapter=adapter)

    advice = await service.get_advice(scenario_transactions, Language.ENGLISH)

    assert advice.startswith("1.")
    assert adapter.calls[0]["system_instruction"] == SYSTEM_INSTRUCTIONS[Language.ENGLISH]
    assert adapter.calls[0]["temperature"] == ADVICE_TEMPERATURE


@pytest.mark.asyncio
async def test_bengali_uses_bengali_instruction(scenario_transactions):
    adapter = MockAdviceAdapter("mock:advisor")
    await AdviceService(adapter=adapter).get_advice(scenario_transactions, Language.BENGALI)

    assert adapter.calls[0]["system_instruction"] == SYSTEM_INSTRUCTIONS[Language.BENGALI]


@pytest.mark.asyncio
async def test_empty_reply_becomes_no_insights(scenario_transactions):
    service = AdviceService(adapter=MockAdviceAdapter("mock:empty"))

    assert await service.get_advice(scenario_transactions, Language.ENGLISH) == NO_INSIGHTS[Language.ENGLISH]


@pytest.mark.asyncio
async def test_provider_error_becomes_localized_message(scenario_transactions):
    service = AdviceService(adapter=MockAdviceAdapter("mock:error"))

    assert await service.get_advice(scenario_transactions, Language.BENGALI) == ADVICE_FAILED[Language.BENGALI]


@pytest.mark.asyncio
async def test_missing_api_key_becomes_localized_message(scenario_transactions, monkeypatch):
    monkeypatch.setattr(settings, "google_api_key", None)
    service = AdviceService(model_id="gemini-1.5-flash")

    assert await service.get_advice(scenario_transactions, Language.ENGLISH) == ADVICE_FAILED[Language.ENGLISH]


@pytest.mark.asyncio
async def test_no_transactions_is_rejected():
    with pytest.raises(ValueError):
        await AdviceService(adapter=MockAdviceAdapter()).get_advice([], Language.ENGLISH)


def test_factory_routes_mock_and_unknown_models():
    assert isinstance(get_advice_adapter("mock:advisor"), MockAdviceAdapter)
    fallback = get_advice_adapter("local-model")
    assert isinstance(fallback, MockAdviceAdapter)
    assert fallback.model_id == "mock:local-model"


def test_factory_requires_provider_keys(monkeypatch):
    monkeypatch.setattr(settings, "openai_api_key", None)
    monkeypatch.setattr(settings, "anthropic_api_key", None)

    with pytest.raises(ValueError):
        get_advice_adapter("gpt-4o-mini")
    with pytest.raises(ValueError):
        get_advice_adapter("claude-3-5-haiku-latest")
