"""
Tests for the completion and market research adapters.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from langchain_core.messages import AIMessage, HumanMessage
from tavily import AsyncTavilyClient

from hotel_campaigns.adapters.completion import CompletionService
from hotel_campaigns.adapters.market_research import MarketResearchClient, SearchResult
from hotel_campaigns.errors import (
    CompletionServiceError,
    CompletionTimeoutError,
    ConfigurationError,
    MarketResearchError,
    MarketResearchTimeoutError,
)
from hotel_campaigns.utils.hotel_utils import format_market_research
from hotel_campaigns.utils.llm_utils import get_llm

from .fakes import fake_completion


class TestCompletionService:
    @pytest.mark.asyncio
    async def test_returns_generated_text(self):
        completion = fake_completion("hello")
        assert await completion.complete([HumanMessage(content="hi")]) == "hello"

    @pytest.mark.asyncio
    async def test_transport_error_is_adapter_error(self):
        llm = MagicMock()
        llm.ainvoke = AsyncMock(side_effect=PermissionError("invalid api key"))
        with pytest.raises(CompletionServiceError, match="invalid api key"):
            await CompletionService(llm).complete([HumanMessage(content="hi")])

    @pytest.mark.asyncio
    async def test_timeout(self):
        async def slow(messages):
            await asyncio.sleep(5)
            return AIMessage(content="late")

        llm = MagicMock()
        llm.ainvoke = AsyncMock(side_effect=slow)
        with pytest.raises(CompletionTimeoutError) as exc_info:
            await CompletionService(llm, timeout=0.01).complete([HumanMessage(content="hi")])
        assert exc_info.value.retryable is True


def _client(outcome, **kwargs) -> MarketResearchClient:
    """Client over a fake Tavily whose search returns a response dict or raises/awaits ``outcome``"""
    tavily = MagicMock()
    if isinstance(outcome, dict):
        tavily.search = AsyncMock(return_value=outcome)
    else:
        tavily.search = AsyncMock(side_effect=outcome)
    return MarketResearchClient(client=tavily, **kwargs)


TAVILY_RESPONSE = {
    "query": "maui luxury hotel market",
    "results": [
        {"title": "Maui luxury travel", "url": "https://a.example", "content": "Demand up", "score": 0.9},
        {"title": "Hawaii hotels", "url": "https://b.example", "content": "ADR rising", "score": 0.7},
        {"title": "Extra", "url": "https://c.example", "content": "", "score": 0.1},
    ],
}


class TestMarketResearchClient:
    def test_missing_api_key_fails_fast(self, monkeypatch):
        monkeypatch.delenv("TAVILY_API_KEY", raising=False)
        with pytest.raises(ConfigurationError):
            MarketResearchClient()

    def test_builds_tavily_client_from_key(self):
        client = MarketResearchClient(api_key="tvly-test")
        assert isinstance(client.client, AsyncTavilyClient)

    @pytest.mark.asyncio
    async def test_returns_ranked_results(self):
        client = _client(TAVILY_RESPONSE, max_results=2)

        results = await client.search("maui luxury hotel market")

        client.client.search.assert_awaited_once_with(
            "maui luxury hotel market", search_depth="basic", max_results=2
        )
        assert [r.title for r in results] == ["Maui luxury travel", "Hawaii hotels"]
        assert results[0] == SearchResult(
            title="Maui luxury travel", url="https://a.example", content="Demand up", score=0.9
        )

    @pytest.mark.asyncio
    async def test_empty_response(self):
        assert await _client({"results": []}).search("anything") == []

    @pytest.mark.asyncio
    async def test_service_error(self):
        client = _client(RuntimeError("Unauthorized: missing or invalid API key."))
        with pytest.raises(MarketResearchError, match="invalid API key"):
            await client.search("anything")

    @pytest.mark.asyncio
    async def test_connection_error(self):
        with pytest.raises(MarketResearchError):
            await _client(httpx.ConnectError("connection refused")).search("anything")

    @pytest.mark.asyncio
    async def test_slow_search_times_out(self):
        async def slow(*args, **kwargs):
            await asyncio.sleep(5)
            return TAVILY_RESPONSE

        with pytest.raises(MarketResearchTimeoutError) as exc_info:
            await _client(slow, timeout=0.01).search("anything")
        assert exc_info.value.retryable is True

    @pytest.mark.asyncio
    async def test_client_timeout_is_retryable(self):
        with pytest.raises(MarketResearchTimeoutError):
            await _client(httpx.ReadTimeout("timed out")).search("anything")


class TestFormatMarketResearch:
    def test_empty(self):
        assert format_market_research([]) == "No market research data available."

    def test_numbered_entries(self):
        text = format_market_research([SearchResult(title="Maui", url="https://a.example", content="Demand up")])
        assert text == "1. Maui (https://a.example)\n   Demand up"


class TestGetLLM:
    def test_missing_openai_key(self, monkeypatch):
        monkeypatch.delenv("USE_GROQ_MODEL", raising=False)
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        with pytest.raises(ConfigurationError):
            get_llm()

    def test_missing_groq_key(self, monkeypatch):
        monkeypatch.setenv("USE_GROQ_MODEL", "true")
        monkeypatch.delenv("GROQ_API_KEY", raising=False)
        with pytest.raises(ConfigurationError):
            get_llm()


class TestGeneratorFromEnv:
    def test_search_wired_only_when_key_is_set(self, monkeypatch):
        from hotel_campaigns.campaign_generator import CampaignGenerator

        monkeypatch.delenv("USE_GROQ_MODEL", raising=False)
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        monkeypatch.delenv("TAVILY_API_KEY", raising=False)
        assert CampaignGenerator.from_env().research_client is None

        monkeypatch.setenv("TAVILY_API_KEY", "tvly-test")
        assert isinstance(CampaignGenerator.from_env().research_client, MarketResearchClient)
