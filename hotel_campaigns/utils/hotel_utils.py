"""
Utility functions for working with the seed hotel description
"""

import json

from .parsing import message_text


def hotel_description(state: dict) -> str:
    """Raw text of the seed message (the first message of the run)"""
    messages = state.get("messages") or []
    if not messages:
        return ""
    return message_text(messages[0])


def load_hotel_info(state: dict) -> dict:
    """
    Hotel details decoded from the seed message.

    The seed is normally a JSON object ({"name": ..., "website": ..., ...}).
    Free text is kept under "description" so prompts still receive it.
    """
    text = hotel_description(state)
    if not text:
        return {}
    try:
        info = json.loads(text)
    except ValueError:
        return {"description": text}
    return info if isinstance(info, dict) else {"description": text}


def format_market_research(results: list) -> str:
    """
    Format search results into a readable context string for LLM prompts
    
    Args:
        results: SearchResult objects from the market research adapter
        
    Returns:
        Formatted string with one entry per result
    """
    if not results:
        return "No market research data available."
    
    context_parts = []
    for i, result in enumerate(results, 1):
        entry = f"{i}. {result.title}"
        if result.url:
            entry += f" ({result.url})"
        if result.content:
            entry += f"\n   {result.content}"
        context_parts.append(entry)
    
    return "\n".join(context_parts)
