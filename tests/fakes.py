"""
Fake completion services and canned model answers shared by the tests.
"""

import json
from unittest.mock import AsyncMock, MagicMock

from langchain_core.language_models import FakeListChatModel

from hotel_campaigns.adapters.completion import CompletionService

HOTEL_INFO = {
    "name": "Ocean View Resort",
    "website": "https://oceanviewresort.example.com",
    "location": "Maui, Hawaii",
    "features": ["Beachfront location", "Luxury spa", "Private beach access"],
}

RESEARCH_ANSWER = json.dumps({
    "keywords": ["luxury maui beach resort", "oceanfront suite maui", "maui spa getaway"],
    "audience_locations": ["Los Angeles", "San Francisco"],
})

GEO_ANSWER = json.dumps({"cities": ["Seattle", "los angeles", "Vancouver"]})

COPY_ANSWER = """Here are your ads:
```json
{"ad_copies": [
  {"headline": "Oceanfront Maui Luxury", "body": "Private beach, spa and 5-star dining. Book your escape."},
  {"headline": "Your Maui Spa Retreat", "body": "Ocean view rooms and world-class spa. Reserve today."}
]}
```"""

BUDGET_ANSWER = "I recommend a daily budget of $750."


def fake_completion(*answers: str) -> CompletionService:
    """Completion service answering with the given texts, in order"""
    return CompletionService(FakeListChatModel(responses=list(answers)))


def scripted_completion(*outcomes) -> CompletionService:
    """Completion service whose calls return AIMessages or raise exceptions, in order"""
    llm = MagicMock()
    llm.ainvoke = AsyncMock(side_effect=list(outcomes))
    return CompletionService(llm)
