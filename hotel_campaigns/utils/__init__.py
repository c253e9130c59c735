"""
Utility modules for the hotel campaign workflow
"""

from .hotel_utils import format_market_research, hotel_description, load_hotel_info
from .llm_utils import get_llm
from .parsing import ShapeMismatch, format_instructions, message_text, parse_structured
from .workflow_visualizer import draw_workflow_graph, save_graph

__all__ = [
    "ShapeMismatch",
    "draw_workflow_graph",
    "format_instructions",
    "format_market_research",
    "get_llm",
    "hotel_description",
    "load_hotel_info",
    "message_text",
    "parse_structured",
    "save_graph",
]
