"""
Tests for the checkpoint store.
"""

import re

import pytest
from langgraph.checkpoint.memory import MemorySaver

from hotel_campaigns.campaign_generator import CampaignGenerator
from hotel_campaigns.models import create_initial_state
from hotel_campaigns.store import WorkflowStateStore, make_run_id

from .fakes import BUDGET_ANSWER, COPY_ANSWER, GEO_ANSWER, RESEARCH_ANSWER, fake_completion


class AsyncOnlySaver(MemorySaver):
    """In-memory saver that, like database-backed async savers, rejects sync reads"""

    def get_tuple(self, config):
        raise NotImplementedError("use aget_tuple")

    def list(self, config, **kwargs):
        raise NotImplementedError("use alist")

    async def aget_tuple(self, config):
        return MemorySaver.get_tuple(self, config)

    async def alist(self, config, **kwargs):
        for checkpoint_tuple in MemorySaver.list(self, config, **kwargs):
            yield checkpoint_tuple


class TestMakeRunId:
    def test_normalizes_name(self):
        run_id = make_run_id("campaign", "  Grand   Hotel Rome ")
        assert re.fullmatch(r"campaign-\d+-grand-hotel-rome-[0-9a-f]{6}", run_id)

    def test_without_name(self):
        assert re.fullmatch(r"optimization-\d+-[0-9a-f]{6}", make_run_id("optimization"))

    def test_unique_per_call(self):
        assert make_run_id("campaign", "Hotel") != make_run_id("campaign", "Hotel")


class TestWorkflowStateStore:
    def test_unknown_run(self, store):
        assert store.get("missing") is None
        assert store.history("missing") == []
        assert not store.has_run("missing")

    def test_config_uses_run_id_as_thread(self):
        assert WorkflowStateStore.config_for("run-1") == {"configurable": {"thread_id": "run-1"}}

    @pytest.mark.asyncio
    async def test_latest_snapshot_is_final_state(self, generator, store, hotel_info):
        final_state = await generator.run(create_initial_state(hotel_info=hotel_info), "campaign-store")

        snapshot = store.get("campaign-store")
        assert store.has_run("campaign-store")
        assert snapshot["keywords"] == final_state["keywords"]
        assert snapshot["audience_locations"] == final_state["audience_locations"]
        assert snapshot["ad_copies"] == final_state["ad_copies"]
        assert snapshot["daily_budget"] == 750

    @pytest.mark.asyncio
    async def test_history_has_a_checkpoint_per_node(self, generator, store, hotel_info):
        await generator.run(create_initial_state(hotel_info=hotel_info), "campaign-history")

        history = store.history("campaign-history")

        assert history[0]["keywords"] == []
        assert history[-1]["daily_budget"] == 750
        first_with_keywords = next(i for i, s in enumerate(history) if s.get("keywords"))
        first_with_ads = next(i for i, s in enumerate(history) if s.get("ad_copies"))
        first_with_budget = next(i for i, s in enumerate(history) if s.get("daily_budget"))
        assert first_with_keywords < first_with_ads < first_with_budget
        # geo appends between research and copywriting
        assert history[first_with_keywords]["audience_locations"] == ["Los Angeles", "San Francisco"]
        assert history[first_with_keywords + 1]["audience_locations"][-1] == "Vancouver"

    @pytest.mark.asyncio
    async def test_snapshots_are_copies(self, generator, store, hotel_info):
        await generator.run(create_initial_state(hotel_info=hotel_info), "campaign-copy")

        snapshot = store.get("campaign-copy")
        snapshot["keywords"].append("tampered")

        assert "tampered" not in store.get("campaign-copy")["keywords"]


class TestAsyncAccess:
    @pytest.mark.asyncio
    async def test_unknown_run(self, store):
        assert await store.aget("missing") is None
        assert await store.ahistory("missing") == []
        assert not await store.ahas_run("missing")

    @pytest.mark.asyncio
    async def test_async_reads_match_sync_reads(self, generator, store, hotel_info):
        await generator.run(create_initial_state(hotel_info=hotel_info), "campaign-async")

        assert await store.ahas_run("campaign-async")
        assert await store.aget("campaign-async") == store.get("campaign-async")
        assert await store.ahistory("campaign-async") == store.history("campaign-async")

    @pytest.mark.asyncio
    async def test_engine_works_with_async_only_checkpointer(self, hotel_info):
        store = WorkflowStateStore(AsyncOnlySaver())
        generator = CampaignGenerator(
            completion=fake_completion(RESEARCH_ANSWER, GEO_ANSWER, COPY_ANSWER, BUDGET_ANSWER), store=store
        )

        first = await generator.generate_campaign(hotel_info, run_id="campaign-async-only")
        generator.completion.llm = None
        second = await generator.generate_campaign(hotel_info, run_id="campaign-async-only")

        assert second == first
        assert await generator.is_complete("campaign-async-only")
        assert (await store.ahistory("campaign-async-only"))[-1]["daily_budget"] == 750
