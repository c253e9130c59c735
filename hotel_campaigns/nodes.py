"""
Workflow nodes for hotel campaign generation and optimization

Each node reads the fields it needs from the state and returns a partial
update. The engine folds the update into the state with the reducers declared
on CampaignState.
"""

from typing import Optional

from .adapters.completion import CompletionService
from .adapters.market_research import MarketResearchClient
from .models import (
    CampaignPhase,
    CampaignState,
    CopywriterOutput,
    GeoOutput,
    ResearchOutput,
    compute_phase,
)
from .optimizer import parse_budget, recommend
from .prompts import (
    BUDGET_PROMPT_TEMPLATE,
    COPYWRITER_PROMPT_TEMPLATE,
    GEO_PROMPT_TEMPLATE,
    RESEARCH_PROMPT_TEMPLATE,
)
from .utils.hotel_utils import format_market_research, hotel_description, load_hotel_info
from .utils.parsing import ShapeMismatch, format_instructions, parse_structured

AD_VARIATIONS = 4

FALLBACK_KEYWORDS = [
    "luxury hotel experience",
    "5-star hotel accommodation",
    "premium city hotel",
    "luxury weekend getaway",
    "exclusive hotel suite",
]
NEW_YORK_FEEDER_MARKETS = ["Boston", "Philadelphia", "Washington DC", "Toronto", "London"]
DEFAULT_FEEDER_MARKETS = ["New York City", "Los Angeles", "Chicago", "Miami", "London"]


def _clean(items: list[str]) -> list[str]:
    """Strip entries and drop blanks, keeping order"""
    return [item.strip() for item in items if item and item.strip()]


def _skip_for_optimization(state: CampaignState, node_name: str) -> bool:
    if compute_phase(state) is CampaignPhase.OPTIMIZATION:
        print(f"[{node_name}] Skipped: optimization run")
        return True
    return False


def supervisor_node(state: CampaignState) -> dict:
    """Record the phase computed from the current state"""
    phase = compute_phase(state)
    print(f"\n[Supervisor] Phase: {phase.value}")
    return {"campaign_phase": phase.value}


def research_fallback(hotel_info: dict) -> dict:
    """Content-marketing-safe keywords and feeder markets used when research output is unusable"""
    location = str(hotel_info.get("location", ""))
    locations = NEW_YORK_FEEDER_MARKETS if "New York" in location else DEFAULT_FEEDER_MARKETS
    return {
        "keywords": list(FALLBACK_KEYWORDS),
        "audience_locations": list(locations),
    }


async def research_node(
    state: CampaignState,
    completion: CompletionService,
    research_client: Optional[MarketResearchClient] = None
) -> dict:
    """
    Generate targeted keywords and audience locations for the hotel.

    Market research is optional; when a search client is wired its results
    are embedded in the prompt. Unparseable model output is replaced with
    fallback lists so the run can continue.
    """
    if _skip_for_optimization(state, "Research"):
        return {}

    print(f"\n[Researching market...]")
    hotel_info = load_hotel_info(state)

    search_results = []
    if research_client is not None:
        name = hotel_info.get("name", "hotel")
        query = f"{name} hotel reviews location amenities luxury market analysis"
        search_results = await research_client.search(query)
        print(f"✓ Market research: {len(search_results)} result(s)")

    messages = RESEARCH_PROMPT_TEMPLATE.format_messages(
        market_research=format_market_research(search_results),
        hotel_info=hotel_description(state),
        format_instructions=format_instructions(ResearchOutput)
    )
    text = await completion.complete(messages)
    result = parse_structured(text, ResearchOutput)

    if isinstance(result, ShapeMismatch):
        print(f"✗ Error parsing research response: {result.reason}")
        print("  Using fallback keywords and locations")
        return research_fallback(hotel_info)

    keywords = _clean(result.keywords)
    locations = _clean(result.audience_locations)
    if not keywords or not locations:
        print("✗ Research response contained blank entries only, using fallback")
        return research_fallback(hotel_info)

    print(f"✓ Extracted: {len(keywords)} keyword(s), {len(locations)} location(s)")
    return {
        "keywords": keywords,
        "audience_locations": locations,
    }


async def geo_node(state: CampaignState, completion: CompletionService) -> dict:
    """
    Append newly discovered feeder-market cities to the audience locations.

    Cities already present (case-insensitive) are not added twice. On
    unparseable output the existing locations are returned unchanged.
    """
    if _skip_for_optimization(state, "Geo"):
        return {}

    print(f"\n[Refining geo targeting...]")
    existing = list(state.get("audience_locations") or [])

    messages = GEO_PROMPT_TEMPLATE.format_messages(
        hotel_info=hotel_description(state),
        audience_locations=", ".join(existing) or "none yet",
        format_instructions=format_instructions(GeoOutput)
    )
    text = await completion.complete(messages)
    result = parse_structured(text, GeoOutput)

    if isinstance(result, ShapeMismatch):
        print(f"✗ Error parsing geo response: {result.reason}")
        return {"audience_locations": existing}

    seen = {city.casefold() for city in existing}
    added = []
    for city in _clean(result.cities):
        if city.casefold() not in seen:
            seen.add(city.casefold())
            added.append(city)

    print(f"✓ Added {len(added)} feeder-market city(ies)")
    return {"audience_locations": existing + added}


def copywriter_fallback(hotel_info: dict) -> list[dict]:
    """Two hand-authored ads used when the copywriter output is unusable"""
    name = hotel_info.get("name") or "our hotel"
    return [
        {
            "headline": "Book Your Luxury Escape",
            "body": f"Experience timeless elegance at {name}. Prime location, premium service. Book today."
        },
        {
            "headline": "Best Rates, Book Direct",
            "body": f"Historic charm meets modern luxury at {name}. Exclusive direct-booking perks. Reserve now."
        },
    ]


async def copywriter_node(state: CampaignState, completion: CompletionService) -> dict:
    """Generate search ad variations for the current keywords and locations"""
    if _skip_for_optimization(state, "Copywriter"):
        return {}

    print(f"\n[Writing ad copy...]")
    messages = COPYWRITER_PROMPT_TEMPLATE.format_messages(
        hotel_info=hotel_description(state),
        keywords=", ".join(state.get("keywords") or []),
        audience_locations=", ".join(state.get("audience_locations") or []),
        variations=AD_VARIATIONS,
        format_instructions=format_instructions(CopywriterOutput)
    )
    text = await completion.complete(messages)
    result = parse_structured(text, CopywriterOutput)

    if isinstance(result, ShapeMismatch):
        print(f"✗ Error parsing copywriter response: {result.reason}")
        print("  Using fallback ad copies")
        return {"ad_copies": copywriter_fallback(load_hotel_info(state))}

    print(f"✓ Generated {len(result.ad_copies)} ad variation(s)")
    return {"ad_copies": [ad.model_dump() for ad in result.ad_copies]}


async def optimizer_node(state: CampaignState, completion: CompletionService) -> dict:
    """
    Budget estimation for generation runs, rule-based optimization otherwise.

    Optimization runs never call the model: the recommendation is a pure
    function of the metrics. New bid/budget values are merged into metrics.
    """
    if compute_phase(state) is CampaignPhase.OPTIMIZATION:
        print(f"\n[Optimizing campaign...]")
        recommendation = recommend(state.get("metrics") or {})
        print(f"✓ Recommendation: {recommendation.action.value}")

        update = {"recommendations": recommendation.model_dump(mode="json", exclude_none=True)}
        changes = {
            key: value
            for key, value in (("newBid", recommendation.newBid), ("newBudget", recommendation.newBudget))
            if value is not None
        }
        if changes:
            update["metrics"] = changes
        return update

    print(f"\n[Estimating daily budget...]")
    messages = BUDGET_PROMPT_TEMPLATE.format_messages(
        hotel_info=hotel_description(state),
        keywords=", ".join(state.get("keywords") or []),
        audience_locations=", ".join(state.get("audience_locations") or [])
    )
    text = await completion.complete(messages)
    budget = parse_budget(text)
    print(f"✓ Daily budget: {budget:g}")
    return {"daily_budget": budget}
