"""
LangGraph workflow builder for hotel campaign generation and optimization
"""

from typing import Optional

from langgraph.checkpoint.base import BaseCheckpointSaver
from langgraph.graph import StateGraph, END

from .adapters.completion import CompletionService
from .adapters.market_research import MarketResearchClient
from .models import CampaignPhase, CampaignState, compute_phase
from .nodes import copywriter_node, geo_node, optimizer_node, research_node, supervisor_node

SUPERVISOR = "supervisor"
RESEARCH = "research"
GEO = "geo"
COPYWRITER = "copywriter"
OPTIMIZER = "optimizer"

NODES = (SUPERVISOR, RESEARCH, GEO, COPYWRITER, OPTIMIZER)

# (current node, phase) -> next node. A phase of None matches any phase.
ROUTES = {
    (SUPERVISOR, CampaignPhase.RESEARCH): RESEARCH,
    (SUPERVISOR, CampaignPhase.COPYWRITING): COPYWRITER,
    (SUPERVISOR, CampaignPhase.OPTIMIZATION): OPTIMIZER,
    (RESEARCH, None): GEO,
    (GEO, None): COPYWRITER,
    (COPYWRITER, None): OPTIMIZER,
    (OPTIMIZER, None): END,
}


def next_node(current: str, phase: CampaignPhase) -> str:
    """
    Look up the node that follows ``current`` in the given phase.

    Raises:
        KeyError: ``current`` is not a node of this workflow
    """
    if (current, phase) in ROUTES:
        return ROUTES[(current, phase)]
    return ROUTES[(current, None)]


def route(current: str, state: CampaignState) -> str:
    """Routing function: next node for the phase computed from state"""
    return next_node(current, compute_phase(state))


def _router(current: str):
    def _route(state: CampaignState) -> str:
        return route(current, state)
    return _route


def _path_map(current: str) -> dict:
    return {target: target for (source, _), target in ROUTES.items() if source == current}


def build_workflow(
    completion: CompletionService,
    research_client: Optional[MarketResearchClient] = None,
    checkpointer: Optional[BaseCheckpointSaver] = None
):
    """
    Build and compile the campaign workflow
    
    Args:
        completion: Completion service used by the model-backed nodes
        research_client: Optional market research client for the research node
        checkpointer: LangGraph checkpointer; every completed node is
            checkpointed under the run's thread id
        
    Returns:
        Compiled workflow graph
    """
    async def research(state: CampaignState) -> dict:
        return await research_node(state, completion, research_client)

    async def geo(state: CampaignState) -> dict:
        return await geo_node(state, completion)

    async def copywriter(state: CampaignState) -> dict:
        return await copywriter_node(state, completion)

    async def optimizer(state: CampaignState) -> dict:
        return await optimizer_node(state, completion)

    workflow = StateGraph(CampaignState)
    
    workflow.add_node(SUPERVISOR, supervisor_node)
    workflow.add_node(RESEARCH, research)
    workflow.add_node(GEO, geo)
    workflow.add_node(COPYWRITER, copywriter)
    workflow.add_node(OPTIMIZER, optimizer)
    
    workflow.set_entry_point(SUPERVISOR)
    
    # Every edge goes through the routing table
    for name in NODES:
        workflow.add_conditional_edges(name, _router(name), _path_map(name))
    
    return workflow.compile(checkpointer=checkpointer)
