"""
Budget parsing and rule-based campaign optimization

Both functions are pure: no model calls, no state access.
"""

import re
from typing import Optional

from .config import DEFAULT_DAILY_BUDGET
from .models import Recommendation, RecommendationAction

LOW_CTR_THRESHOLD = 2
HIGH_ROAS_THRESHOLD = 300
BID_REDUCTION_FACTOR = 0.9
BUDGET_INCREASE_FACTOR = 1.1

_NUMBER_RE = re.compile(r"\d[\d,]*(?:\.\d+)?|\.\d+")


def parse_budget(text: str, default: float = DEFAULT_DAILY_BUDGET) -> float:
    """
    Extract the first numeric token from a model answer.

    "$1,200 per day" -> 1200.0; "I recommend increasing spend" -> default
    """
    match = _NUMBER_RE.search(text or "")
    if not match:
        return default
    try:
        return float(match.group().replace(",", ""))
    except ValueError:
        return default


def _number(value) -> Optional[float]:
    """Metric value as a float, None when absent or not numeric"""
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def recommend(metrics: dict) -> Recommendation:
    """
    Decide the optimization action for a campaign's current metrics.

    Rules are checked in order and the first match wins:
        1. CTR below 2        -> reduceBid,      newBid = currentBid * 0.9
        2. ROAS above 300     -> increaseBudget, newBudget = currentBudget * 1.1
        3. otherwise          -> maintain

    A missing currentBid/currentBudget yields 0. Amounts are rounded to cents.
    """
    ctr = _number(metrics.get("CTR"))
    roas = _number(metrics.get("ROAS"))

    if ctr is not None and ctr < LOW_CTR_THRESHOLD:
        current_bid = _number(metrics.get("currentBid")) or 0.0
        new_bid = round(current_bid * BID_REDUCTION_FACTOR, 2)
        return Recommendation(
            action=RecommendationAction.REDUCE_BID,
            newBid=new_bid,
            message=f"CTR of {ctr:g}% is below {LOW_CTR_THRESHOLD}%. Reduce bid to {new_bid:g}."
        )

    if roas is not None and roas > HIGH_ROAS_THRESHOLD:
        current_budget = _number(metrics.get("currentBudget")) or 0.0
        new_budget = round(current_budget * BUDGET_INCREASE_FACTOR, 2)
        return Recommendation(
            action=RecommendationAction.INCREASE_BUDGET,
            newBudget=new_budget,
            message=f"ROAS of {roas:g}% is above {HIGH_ROAS_THRESHOLD}%. Increase daily budget to {new_budget:g}."
        )

    return Recommendation(
        action=RecommendationAction.MAINTAIN,
        message="Campaign performance is within the acceptable range. No changes recommended."
    )
