"""
Shared fixtures for the workflow tests.
"""

import pytest

from hotel_campaigns.campaign_generator import CampaignGenerator
from hotel_campaigns.store import WorkflowStateStore

from .fakes import BUDGET_ANSWER, COPY_ANSWER, GEO_ANSWER, HOTEL_INFO, RESEARCH_ANSWER, fake_completion


@pytest.fixture
def hotel_info():
    return dict(HOTEL_INFO)


@pytest.fixture
def store():
    return WorkflowStateStore()


@pytest.fixture
def generation_completion():
    return fake_completion(RESEARCH_ANSWER, GEO_ANSWER, COPY_ANSWER, BUDGET_ANSWER)


@pytest.fixture
def generator(generation_completion, store):
    return CampaignGenerator(completion=generation_completion, store=store)
