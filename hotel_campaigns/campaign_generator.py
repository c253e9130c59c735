"""
Hotel Campaign Generator using LangChain and LangGraph

Main orchestration class for the campaign workflow.
"""

import os
from typing import Optional

from .adapters.completion import CompletionService
from .adapters.market_research import MarketResearchClient
from .config import DEFAULT_DAILY_BUDGET
from .errors import WorkflowError
from .models import create_initial_state
from .store import WorkflowStateStore, make_run_id
from .utils.workflow_visualizer import save_graph
from .workflow import build_workflow


def to_campaign_result(state: dict) -> dict:
    """Result shape of a generation run, as returned to callers"""
    return {
        "keywords": list(state.get("keywords") or []),
        "adCopies": [dict(ad) for ad in state.get("ad_copies") or []],
        "audienceLocations": list(state.get("audience_locations") or []),
        "dailyBudget": float(state.get("daily_budget") or DEFAULT_DAILY_BUDGET),
    }


def to_optimization_result(state: dict) -> dict:
    """Result shape of an optimization run, as returned to callers"""
    return {
        "metrics": dict(state.get("metrics") or {}),
        "recommendations": dict(state.get("recommendations") or {}),
    }


class CampaignGenerator:
    """Main campaign generator orchestrator"""

    def __init__(
        self,
        completion: Optional[CompletionService] = None,
        research_client: Optional[MarketResearchClient] = None,
        store: Optional[WorkflowStateStore] = None
    ):
        """
        Args:
            completion: Completion service (default: built from environment)
            research_client: Market research client; research is skipped when None
            store: Checkpoint store (default: a new in-memory store)
        """
        self.completion = completion or CompletionService.from_env()
        self.research_client = research_client
        self.store = store or WorkflowStateStore()

        # Build the workflow graph
        self.workflow = build_workflow(self.completion, self.research_client, self.store.checkpointer)

    @classmethod
    def from_env(cls, use_market_research: Optional[bool] = None) -> "CampaignGenerator":
        """
        Generator wired to the configured model and, optionally, Tavily search

        Args:
            use_market_research: Wire the search client (default: only when TAVILY_API_KEY is set)
        """
        if use_market_research is None:
            use_market_research = bool(os.getenv("TAVILY_API_KEY"))
        research_client = MarketResearchClient() if use_market_research else None
        return cls(CompletionService.from_env(), research_client)

    async def run(self, initial_state: dict, run_id: str) -> dict:
        """
        Run the workflow for one campaign attempt

        A run id that already has checkpoints is replayed instead of started
        over: a run that failed part-way resumes at the node that failed, a
        finished run returns its final checkpointed state.

        Args:
            initial_state: Seed state (see models.create_initial_state)
            run_id: Unique identifier of this attempt

        Returns:
            Final workflow state

        Raises:
            WorkflowError: a node failed (adapter error or timeout)
        """
        config = self.store.config_for(run_id)
        graph_input = initial_state

        if await self.store.ahas_run(run_id):
            pending = await self.next_nodes(run_id)
            if not pending:
                print(f"[Run {run_id}] Already complete, returning checkpointed state")
                return await self.store.aget(run_id)
            print(f"[Run {run_id}] Resuming from checkpoint at '{pending[0]}'")
            graph_input = None

        try:
            final_state = await self.workflow.ainvoke(graph_input, config)
        except Exception as e:
            pending = await self.next_nodes(run_id)
            node = pending[0] if pending else None
            print(f"✗ Run {run_id} failed at {node or 'unknown node'}: {e}")
            raise WorkflowError(
                str(e),
                run_id=run_id,
                node=node,
                retryable=getattr(e, "retryable", False)
            ) from e

        return dict(final_state)

    async def invoke(self, initial_state: dict, options: dict) -> dict:
        """
        Run with the caller-facing call shape: ``invoke(state, {"run_id": ...})``

        LangGraph-style ``{"configurable": {"thread_id": ...}}`` options are accepted too.
        """
        run_id = options.get("run_id") or options.get("configurable", {}).get("thread_id")
        if not run_id:
            raise ValueError("invoke() requires a run_id")
        return await self.run(initial_state, run_id)

    async def generate_campaign(self, hotel_info: dict, run_id: Optional[str] = None) -> dict:
        """
        Generate keywords, audience locations, ad copies and a daily budget

        Args:
            hotel_info: Hotel details, at least {"name": ..., "website": ...}
            run_id: Run identifier (default: derived from time and hotel name)

        Returns:
            {"keywords": [...], "adCopies": [...], "audienceLocations": [...], "dailyBudget": float}
        """
        run_id = run_id or make_run_id("campaign", hotel_info.get("name"))
        print(f"Starting campaign generation for: {hotel_info.get('name', 'unknown hotel')}")
        final_state = await self.run(create_initial_state(hotel_info=hotel_info), run_id)
        print(f"Campaign generation completed for: {hotel_info.get('name', 'unknown hotel')}")
        return to_campaign_result(final_state)

    async def optimize_campaign(self, metrics: dict, run_id: Optional[str] = None) -> dict:
        """
        Recommend a bid or budget change for an existing campaign

        Args:
            metrics: Non-empty mapping with any of CTR, ROAS, currentBid, currentBudget
            run_id: Run identifier (default: derived from time)

        Returns:
            {"metrics": {...}, "recommendations": {"action": ..., ...}}
        """
        if not metrics:
            raise ValueError("Campaign metrics are required")
        run_id = run_id or make_run_id("optimization")
        print(f"Starting campaign optimization with metrics: {metrics}")
        final_state = await self.run(create_initial_state(metrics=metrics), run_id)
        return to_optimization_result(final_state)

    def draw_workflow(self, output_path: str = "workflow_graph.png"):
        """
        Draw and save the workflow graph visualization

        Args:
            output_path: Path for the image (.png) or Mermaid source (any other extension)
        """
        return save_graph(self.workflow, output_path)

    async def next_nodes(self, run_id: str) -> tuple:
        """Nodes still pending in a run's latest checkpoint (empty when finished or unknown)"""
        snapshot = await self.workflow.aget_state(self.store.config_for(run_id))
        return tuple(snapshot.next)

    async def is_complete(self, run_id: str) -> bool:
        """True when the run has checkpoints and nothing left to execute"""
        return await self.store.ahas_run(run_id) and not await self.next_nodes(run_id)
