"""
Hotel Campaign Generation AI Package
"""

from .campaign_generator import CampaignGenerator
from .errors import WorkflowError
from .models import CampaignPhase, CampaignState, compute_phase, create_initial_state
from .store import WorkflowStateStore, make_run_id

__all__ = [
    "CampaignGenerator",
    "CampaignPhase",
    "CampaignState",
    "WorkflowError",
    "WorkflowStateStore",
    "compute_phase",
    "create_initial_state",
    "make_run_id",
]
