"""
External collaborator adapters (completion and search services)
"""

from .completion import CompletionService
from .market_research import MarketResearchClient, SearchResult

__all__ = ["CompletionService", "MarketResearchClient", "SearchResult"]
