"""Unit tests for the election results service."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from election_results_api.lib.result_store import InvalidResultKeyError, ResultKey, ResultNotFoundError, ResultStore
from election_results_api.services import results_service


@pytest.fixture
def mock_store():
    store = MagicMock(spec=ResultStore)
    store.load_json = AsyncMock(return_value={"votes": 100})
    return store


class TestGetNationalResults:
    """Tests for get_national_results."""

    async def test_loads_national_key(self, mock_store):
        result = await results_service.get_national_results(mock_store, "general", "2020")

        assert result == {"votes": 100}
        mock_store.load_json.assert_awaited_once_with(ResultKey("general", "2020"))

    async def test_invalid_segment_never_reaches_store(self, mock_store):
        with pytest.raises(InvalidResultKeyError):
            await results_service.get_national_results(mock_store, "..", "2020")
        mock_store.load_json.assert_not_awaited()

    async def test_store_errors_propagate(self, mock_store, tmp_path):
        key = ResultKey("general", "1999")
        mock_store.load_json.side_effect = ResultNotFoundError("missing", key, tmp_path)
        with pytest.raises(ResultNotFoundError):
            await results_service.get_national_results(mock_store, "general", "1999")


class TestGetCountyResults:
    """Tests for get_county_results."""

    async def test_loads_county_key(self, mock_store):
        mock_store.load_json.return_value = {"county": "king", "votes": 50}

        result = await results_service.get_county_results(mock_store, "general", "2020", "king")

        assert result == {"county": "king", "votes": 50}
        mock_store.load_json.assert_awaited_once_with(ResultKey("general", "2020", "king"))

    async def test_invalid_county_never_reaches_store(self, mock_store):
        with pytest.raises(InvalidResultKeyError):
            await results_service.get_county_results(mock_store, "general", "2020", "king.json")
        mock_store.load_json.assert_not_awaited()

    async def test_reads_real_store(self, data_dir):
        result = await results_service.get_county_results(ResultStore(data_dir), "st", "2021", "akershus")
        assert result["id"]["navn"] == "Akershus"
