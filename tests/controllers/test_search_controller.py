"""Tests for SearchController."""

from __future__ import annotations

from unittest.mock import AsyncMock

from flightboard.contracts.state import SearchState
from flightboard.controllers.search import SearchController
from flightboard.services.errors import ProviderError
from tests.fakes import make_record

USER_ID = "search-user"


class TestSearchByNumber:
    async def test_normalizes_and_reports_empty(self, provider, store):
        controller = SearchController(provider, store)

        await controller.search_by_number("ac 123")

        assert provider.calls == [("number", "AC123", 5)]
        state = controller.state
        assert state.error == 'No flights found for "AC123".'
        assert state.results == []
        assert state.is_loading is False

    async def test_results(self, provider, store):
        records = [make_record("AC430"), make_record("AC430", status="landed")]
        provider.by_number["AC430"] = records
        controller = SearchController(provider, store)

        await controller.search_by_number(" ac430 ")

        assert controller.state.results == records
        assert controller.state.error is None

    async def test_provider_failure(self, provider, store):
        provider.by_number["AC430"] = ProviderError("get_flight_by_number", "timeout")
        controller = SearchController(provider, store)

        await controller.search_by_number("AC430")

        assert controller.state.error == "Error searching by flight number."
        assert controller.state.results == []
        assert controller.state.is_loading is False

    async def test_unexpected_failure_does_not_escape(self, store):
        provider = AsyncMock()
        provider.get_flight_by_number.side_effect = RuntimeError("bug")
        controller = SearchController(provider, store)

        await controller.search_by_number("AC430")

        assert controller.state.error == "Error searching by flight number."

    async def test_new_search_clears_previous_state(self, provider, store):
        provider.by_number["AC430"] = [make_record("AC430")]
        controller = SearchController(provider, store)
        await controller.search_by_number("XX1")
        assert controller.state.error

        await controller.search_by_number("AC430")

        assert controller.state.error is None
        assert len(controller.state.results) == 1

    async def test_loading_bracket(self, provider, store):
        provider.by_number["AC430"] = [make_record("AC430")]
        controller = SearchController(provider, store)
        seen: list[SearchState] = []
        controller.subscribe(seen.append)

        await controller.search_by_number("AC430")

        loading = [s.is_loading for s in seen]
        assert loading[0] is False  # initial snapshot
        assert loading[1] is True
        assert loading[-1] is False
        # results never observed half-written
        assert all(s.results in ([], provider.by_number["AC430"]) for s in seen)


class TestSearchByRoute:
    async def test_normalizes_and_reports_empty(self, provider, store):
        controller = SearchController(provider, store)

        await controller.search_by_route(" ywg ", "yul")

        assert provider.calls == [("route", "YWG", "YUL", 5)]
        assert controller.state.error == "No flights found for YWG to YUL"
        assert controller.state.results == []

    async def test_results(self, provider, store):
        records = [make_record("AC430"), make_record("WS123")]
        provider.by_route[("YWG", "YUL")] = records
        controller = SearchController(provider, store)

        await controller.search_by_route("YWG", "YUL")

        assert [r.flight_number for r in controller.state.results] == ["AC430", "WS123"]

    async def test_provider_failure(self, provider, store):
        provider.by_route[("YWG", "YUL")] = ProviderError("get_flights_by_route", "500")
        controller = SearchController(provider, store)

        await controller.search_by_route("YWG", "YUL")

        assert controller.state.error == "Error searching by route."
        assert controller.state.is_loading is False


class TestSaveToFavourites:
    async def test_save(self, provider, store):
        controller = SearchController(provider, store)
        record = make_record("AC430", status="active")

        result = await controller.save_to_favourites(record, USER_ID)

        assert result.success
        assert controller.state.save_message == "Flight has been saved to favourites."
        (fav,) = await store.list_favourites(USER_ID)
        assert fav.id == result.data
        assert fav.flight_number == "AC430"
        assert fav.status == "active"
        assert fav.user_id == USER_ID

    async def test_snapshot_defaults_missing_fields(self, provider, store):
        controller = SearchController(provider, store)
        record = make_record(number=None, status=None, dep=None, arr=None, airline=None)

        await controller.save_to_favourites(record, USER_ID)

        (fav,) = await store.list_favourites(USER_ID)
        assert fav.flight_number == ""
        assert fav.airline_name == ""
        assert fav.departure_airport == ""
        assert fav.arrival_iata == ""
        assert fav.status == ""

    async def test_no_identity_never_reaches_store(self, provider):
        store = AsyncMock()
        controller = SearchController(provider, store)

        result = await controller.save_to_favourites(make_record(), None)

        store.add_favourite.assert_not_called()
        assert not result.success
        assert result.error.code == "not_authenticated"
        assert "logged in" in controller.state.save_message

    async def test_store_failure(self, provider, store, fake_client):
        fake_client.fail_with = RuntimeError("quota exceeded")
        controller = SearchController(provider, store)

        result = await controller.save_to_favourites(make_record(), USER_ID)

        assert not result.success
        assert controller.state.save_message == "Failed to save: quota exceeded"
        assert "logged in" not in controller.state.save_message

    async def test_clear_save_message(self, provider, store):
        controller = SearchController(provider, store)
        await controller.save_to_favourites(make_record(), USER_ID)

        controller.clear_save_message()

        assert controller.state.save_message is None

    async def test_save_does_not_touch_results(self, provider, store):
        provider.by_number["AC430"] = [make_record("AC430")]
        controller = SearchController(provider, store)
        await controller.search_by_number("AC430")

        await controller.save_to_favourites(controller.state.results[0], USER_ID)

        assert len(controller.state.results) == 1
