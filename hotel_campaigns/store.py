"""
Workflow state store: checkpoints keyed by run identifier

Wraps a LangGraph checkpointer (MemorySaver by default). The compiled graph
writes a checkpoint after every completed node under ``thread_id = run_id``;
this class reads them back as plain state snapshots.
"""

import copy
import re
import time
import uuid
from typing import Optional

from langgraph.checkpoint.base import BaseCheckpointSaver
from langgraph.checkpoint.memory import MemorySaver

from .models import STATE_KEYS


def make_run_id(prefix: str, name: Optional[str] = None) -> str:
    """
    Build a run identifier from a timestamp and a normalized campaign name.

    make_run_id("campaign", "Grand Hotel Rome") -> "campaign-1718000000000-grand-hotel-rome-3f9a1c"
    """
    parts = [prefix, str(time.time_ns() // 1_000_000)]
    if name:
        normalized = re.sub(r"\s+", "-", name.strip().lower())
        if normalized:
            parts.append(normalized)
    parts.append(uuid.uuid4().hex[:6])
    return "-".join(parts)


def _snapshot(checkpoint_tuple) -> dict:
    values = checkpoint_tuple.checkpoint.get("channel_values", {})
    return {key: copy.deepcopy(values[key]) for key in STATE_KEYS if key in values}


class WorkflowStateStore:
    """Keyed, in-memory checkpoint store mapping a run id to its state snapshots"""

    def __init__(self, checkpointer: Optional[BaseCheckpointSaver] = None):
        self.checkpointer = checkpointer or MemorySaver()

    @staticmethod
    def config_for(run_id: str) -> dict:
        """LangGraph run configuration for a run id"""
        return {"configurable": {"thread_id": run_id}}

    def has_run(self, run_id: str) -> bool:
        return self.checkpointer.get_tuple(self.config_for(run_id)) is not None

    def get(self, run_id: str) -> Optional[dict]:
        """
        Latest full state snapshot for a run
        
        Args:
            run_id: Run identifier
            
        Returns:
            Copy of the last checkpointed state, or None for an unknown run
        """
        checkpoint_tuple = self.checkpointer.get_tuple(self.config_for(run_id))
        if checkpoint_tuple is None:
            return None
        return _snapshot(checkpoint_tuple)

    def history(self, run_id: str) -> list[dict]:
        """
        Every state snapshot checkpointed for a run, oldest first.

        The first snapshot is the seed state; each following one is the state
        after one more completed node.
        """
        checkpoints = list(self.checkpointer.list(self.config_for(run_id)))
        return [
            _snapshot(checkpoint_tuple)
            for checkpoint_tuple in reversed(checkpoints)
            if (checkpoint_tuple.metadata or {}).get("source") == "loop"
        ]

    # Async accessors, used by the engine inside a running event loop. Async-only
    # checkpointers (e.g. AsyncSqliteSaver) support only these.

    async def ahas_run(self, run_id: str) -> bool:
        return await self.checkpointer.aget_tuple(self.config_for(run_id)) is not None

    async def aget(self, run_id: str) -> Optional[dict]:
        """Async variant of get()"""
        checkpoint_tuple = await self.checkpointer.aget_tuple(self.config_for(run_id))
        if checkpoint_tuple is None:
            return None
        return _snapshot(checkpoint_tuple)

    async def ahistory(self, run_id: str) -> list[dict]:
        """Async variant of history()"""
        checkpoints = [
            checkpoint_tuple
            async for checkpoint_tuple in self.checkpointer.alist(self.config_for(run_id))
        ]
        return [
            _snapshot(checkpoint_tuple)
            for checkpoint_tuple in reversed(checkpoints)
            if (checkpoint_tuple.metadata or {}).get("source") == "loop"
        ]
