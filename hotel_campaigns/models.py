"""
Data models and state definitions for the hotel campaign workflow
"""

import json
from enum import Enum
from typing import Annotated, Any, Optional, TypedDict

from langchain_core.messages import AnyMessage, HumanMessage
from langgraph.graph.message import add_messages
from pydantic import BaseModel, ConfigDict, Field


class CampaignPhase(str, Enum):
    """Stage of a campaign, computed from state content"""
    RESEARCH = "RESEARCH"          # no keywords yet
    COPYWRITING = "COPYWRITING"    # keywords present, no metrics
    OPTIMIZATION = "OPTIMIZATION"  # metrics present


# ---------------------------------------------------------------------------
# Reducers: how a node's partial update is folded into the previous value
# ---------------------------------------------------------------------------

def replace(previous, new):
    """Latest node output wins"""
    return new


def merge_dicts(previous: Optional[dict], new: Optional[dict]) -> dict:
    """Shallow merge: new keys overwrite matching old keys, others are kept"""
    return {**(previous or {}), **(new or {})}


class CampaignState(TypedDict):
    """State threaded through one workflow run"""
    messages: Annotated[list[AnyMessage], add_messages]  # seed hotel description first
    keywords: Annotated[list[str], replace]
    audience_locations: Annotated[list[str], replace]
    ad_copies: Annotated[list[dict], replace]  # [{"headline": ..., "body": ...}]
    daily_budget: Annotated[float, replace]
    metrics: Annotated[dict[str, Any], merge_dicts]  # CTR, ROAS, currentBid, currentBudget
    recommendations: Annotated[dict[str, Any], replace]
    campaign_phase: Annotated[Optional[str], replace]


STATE_KEYS = tuple(CampaignState.__annotations__)


def compute_phase(state: dict) -> CampaignPhase:
    """
    Resolve the campaign phase from state alone.

    Metrics take precedence over everything else; otherwise the presence of
    keywords separates research from copywriting.
    """
    if state.get("metrics"):
        return CampaignPhase.OPTIMIZATION
    if not state.get("keywords"):
        return CampaignPhase.RESEARCH
    return CampaignPhase.COPYWRITING


def create_initial_state(hotel_info: Optional[dict] = None, metrics: Optional[dict] = None) -> dict:
    """
    Build the seed state for a run.

    Args:
        hotel_info: Hotel description (name, website, location, features...).
            Stored as a JSON message, the first entry of ``messages``.
        metrics: Campaign performance metrics for an optimization run

    Returns:
        A state dictionary with every key populated
    """
    messages = [HumanMessage(content=json.dumps(hotel_info))] if hotel_info else []
    return {
        "messages": messages,
        "keywords": [],
        "audience_locations": [],
        "ad_copies": [],
        "daily_budget": 0.0,
        "metrics": dict(metrics or {}),
        "recommendations": {},
        "campaign_phase": None,
    }


# ---------------------------------------------------------------------------
# Structured model outputs
# ---------------------------------------------------------------------------

class ResearchOutput(BaseModel):
    """Structured output for the research node"""
    keywords: list[str] = Field(
        min_length=1,
        description="List of 5-10 targeted long-tail keywords for the campaign"
    )
    audience_locations: list[str] = Field(
        min_length=1,
        description="List of 3-5 specific cities or regions (feeder markets) to target"
    )


class GeoOutput(BaseModel):
    """Structured output for the geo-targeting node"""
    cities: list[str] = Field(
        description="Feeder-market cities whose residents are likely to book this hotel"
    )


class AdCopy(BaseModel):
    """A single search ad variation"""
    model_config = ConfigDict(str_strip_whitespace=True)

    headline: str = Field(min_length=1, description="Ad headline text (max 30 characters)")
    body: str = Field(min_length=1, description="Ad body text (max 90 characters)")


class CopywriterOutput(BaseModel):
    """Structured output for the copywriter node"""
    ad_copies: list[AdCopy] = Field(min_length=1, description="List of ad copy variations")


class RecommendationAction(str, Enum):
    REDUCE_BID = "reduceBid"
    INCREASE_BUDGET = "increaseBudget"
    MAINTAIN = "maintain"


class Recommendation(BaseModel):
    """Optimization recommendation returned to the caller"""
    action: RecommendationAction
    newBid: Optional[float] = None
    newBudget: Optional[float] = None
    message: Optional[str] = None
