"""Tests for ranking refresh and interaction tracking triggers."""
import asyncio

import pytest
from loguru import logger

from src.toolscout.errors import BackendError
from src.toolscout.ranking_jobs import RANKING_PROCEDURES, RankingRefresher
from tests.factories import make_backend


@pytest.fixture
def captured_logs():
    messages = []
    sink_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(sink_id)


class TestRefreshAllRankings:
    @pytest.mark.asyncio
    async def test_invokes_all_five_procedures(self):
        backend = make_backend()
        await RankingRefresher(backend).refresh_all_rankings()
        called = sorted(call.args[0] for call in backend.call_rpc.await_args_list)
        assert called == sorted(RANKING_PROCEDURES)
        assert len(RANKING_PROCEDURES) == 5

    @pytest.mark.asyncio
    async def test_procedures_run_concurrently(self):
        backend = make_backend()
        in_flight = 0
        peak = 0

        async def slow_rpc(name, params=None):
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1

        backend.call_rpc.side_effect = slow_rpc
        await RankingRefresher(backend).refresh_all_rankings()
        assert peak == 5

    @pytest.mark.asyncio
    async def test_one_failure_does_not_stop_others_or_raise(self, captured_logs):
        backend = make_backend()

        async def flaky(name, params=None):
            if name == "update_weekly_rankings":
                raise BackendError("deadlock detected", status_code=500)

        backend.call_rpc.side_effect = flaky
        result = await RankingRefresher(backend).refresh_all_rankings()

        assert result is None
        assert backend.call_rpc.await_count == 5
        errors = [m for m in captured_logs if "Error updating rankings" in m]
        assert len(errors) == 1
        assert "1/5" in errors[0]
        assert not any("updated successfully" in m for m in captured_logs)

    @pytest.mark.asyncio
    async def test_success_logged(self, captured_logs):
        await RankingRefresher(make_backend()).refresh_all_rankings()
        assert any("All rankings updated successfully" in m for m in captured_logs)


class TestTracking:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("method, procedure", [
        ("record_view", "track_tool_view"),
        ("record_click", "track_tool_click"),
        ("record_favorite", "track_tool_favorite"),
    ])
    async def test_tracking_calls_procedure(self, method, procedure):
        backend = make_backend()
        await getattr(RankingRefresher(backend), method)("tool-1")
        backend.call_rpc.assert_awaited_once_with(procedure, {"p_tool_id": "tool-1"})

    @pytest.mark.asyncio
    async def test_tracking_swallows_errors(self, captured_logs):
        backend = make_backend()
        backend.call_rpc.side_effect = BackendError("offline")
        await RankingRefresher(backend).record_click("tool-1")
        assert any("Error tracking tool click" in m for m in captured_logs)

    @pytest.mark.asyncio
    async def test_collection_view_and_share_rows(self):
        backend = make_backend()
        refresher = RankingRefresher(backend)
        await refresher.record_collection_view("col-1", user_id="u1")
        await refresher.record_collection_share("col-1")
        backend.insert.assert_any_await(
            "collection_views",
            {"collection_id": "col-1", "viewer_user_id": "u1", "viewer_ip": None},
        )
        backend.insert.assert_any_await(
            "collection_shares",
            {"collection_id": "col-1", "shared_by_user_id": None},
        )

    @pytest.mark.asyncio
    async def test_collection_tracking_swallows_errors(self):
        backend = make_backend()
        backend.insert.side_effect = BackendError("offline")
        refresher = RankingRefresher(backend)
        await refresher.record_collection_view("col-1")
        await refresher.record_collection_share("col-1")
