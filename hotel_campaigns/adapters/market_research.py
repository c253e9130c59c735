"""
Market research adapter backed by Tavily web search
"""

import asyncio
import os
from dataclasses import dataclass
from typing import Optional

import httpx
from tavily import AsyncTavilyClient

from .. import config
from ..errors import ConfigurationError, MarketResearchError, MarketResearchTimeoutError


@dataclass(frozen=True)
class SearchResult:
    """One ranked search hit"""
    title: str
    url: str
    content: str
    score: float = 0.0


class MarketResearchClient:
    """Queries a web search service for market context about a hotel"""

    def __init__(
        self,
        api_key: Optional[str] = None,
        max_results: int = None,
        timeout: float = None,
        client: Optional[AsyncTavilyClient] = None
    ):
        """
        Args:
            api_key: Tavily API key (optional, uses TAVILY_API_KEY env var if not provided)
            max_results: Number of results to return (default: SEARCH_MAX_RESULTS, 3)
            timeout: Seconds to wait per search (default: SEARCH_TIMEOUT_SECONDS)
            client: Preconfigured Tavily client (default: built from api_key)
        """
        self.api_key = api_key or os.getenv("TAVILY_API_KEY", "")
        if client is None and not self.api_key:
            raise ConfigurationError("TAVILY_API_KEY environment variable is not set")

        self.max_results = max_results or config.SEARCH_MAX_RESULTS
        self.timeout = timeout if timeout is not None else config.SEARCH_TIMEOUT_SECONDS
        self.client = client or AsyncTavilyClient(api_key=self.api_key)

    async def search(self, query: str) -> list[SearchResult]:
        """
        Run a free-text search.

        Args:
            query: Search query (e.g., "Grand Hotel Rome luxury market analysis")

        Returns:
            Up to ``max_results`` results, ranked as returned by the service

        Raises:
            MarketResearchTimeoutError: no answer within the timeout
            MarketResearchError: the search service failed (auth, quota, network)
        """
        try:
            response = await asyncio.wait_for(
                self.client.search(query, search_depth="basic", max_results=self.max_results),
                timeout=self.timeout
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise MarketResearchTimeoutError(f"Search timed out after {self.timeout:g}s") from e
        except Exception as e:
            raise MarketResearchError(f"Search request failed: {e}") from e

        results = []
        for item in (response or {}).get("results", [])[:self.max_results]:
            results.append(SearchResult(
                title=item.get("title", ""),
                url=item.get("url", ""),
                content=item.get("content", ""),
                score=float(item.get("score") or 0.0)
            ))
        return results
