# tests/unit/test_data_service.py
import json

import pytest
from unittest.mock import AsyncMock, patch
from services.data_service import HistoricalDataService
from models.lotto_draw import HistoricalDraw
from utils.exceptions import DataLoadError, ValidationError


@pytest.fixture
def data_service():
    """HistoricalDataService 인스턴스 생성"""
    return HistoricalDataService()


@pytest.fixture
def sample_draws():
    """샘플 당첨 데이터 (마지막 항목이 가장 최근 회차)"""
    return [
        [4, 5, 30, 33, 41, 52],
        [10, 4, 29, 53, 60, 33],
        [7, 14, 23, 38, 46, 52],
    ]


@pytest.fixture
def history_file(tmp_path, sample_draws):
    path = tmp_path / "draws.json"
    path.write_text(json.dumps(sample_draws), encoding="utf-8")
    return str(path)


class TestHistoricalDraw:
    """당첨 번호 모델 검증 테스트"""

    def test_sorts_numbers(self):
        draw = HistoricalDraw.from_raw(0, [60, 1, 30, 15, 45, 2])
        assert draw.numbers == [1, 2, 15, 30, 45, 60]
        assert draw.get_numbers_tuple() == (1, 2, 15, 30, 45, 60)

    @pytest.mark.parametrize("raw", [
        "1,2,3,4,5,6",
        [1, 2, 3, 4, 5],
        [1, 2, 3, 4, 5, 6, 7],
        [1, 2, 3, 4, 5, 61],
        [0, 2, 3, 4, 5, 6],
        [1, 1, 3, 4, 5, 6],
        [1, 2, 3, 4, 5, "6"],
        [1, 2, 3, 4, 5, 6.0],
        [True, 2, 3, 4, 5, 6],
    ])
    def test_rejects_malformed_entries(self, raw):
        with pytest.raises(ValidationError):
            HistoricalDraw.from_raw(0, raw)


class TestLoadFromFile:
    """파일 로드 테스트"""

    @pytest.mark.asyncio
    async def test_loads_draws_and_builds_frequency(self, data_service, history_file):
        success = await data_service.load_historical_data(history_file)

        assert success
        assert data_service.history_available
        assert data_service.load_warning is None
        assert len(data_service.get_all_draws()) == 3

        frequency = data_service.get_frequency_table()
        assert frequency[4] == 2
        assert frequency[33] == 2
        assert frequency[52] == 2
        assert frequency[60] == 1
        assert 1 not in frequency

    @pytest.mark.asyncio
    async def test_last_entry_is_last_draw(self, data_service, history_file):
        await data_service.load_historical_data(history_file)
        assert data_service.get_last_draw() == [7, 14, 23, 38, 46, 52]

    @pytest.mark.asyncio
    async def test_skips_invalid_entries(self, data_service, tmp_path):
        path = tmp_path / "draws.json"
        path.write_text(json.dumps([
            [1, 2, 3, 4, 5, 6],
            [1, 2, 3],
            "garbage",
            [10, 20, 30, 40, 50, 60],
        ]), encoding="utf-8")

        success = await data_service.load_historical_data(str(path))

        assert success
        assert len(data_service.get_all_draws()) == 2
        assert data_service.get_last_draw() == [10, 20, 30, 40, 50, 60]

    @pytest.mark.asyncio
    async def test_frequency_table_is_a_copy(self, data_service, history_file):
        await data_service.load_historical_data(history_file)
        data_service.get_frequency_table()[4] = 999
        assert data_service.get_frequency_table()[4] == 2


class TestDegradedMode:
    """로드 실패 시 빈 데이터로 동작하는지 테스트"""

    async def _assert_degraded(self, data_service, source):
        success = await data_service.load_historical_data(source)

        assert success is False
        assert not data_service.history_available
        assert data_service.get_frequency_table() == {}
        assert data_service.get_last_draw() is None
        assert data_service.load_warning

    @pytest.mark.asyncio
    async def test_missing_source(self, data_service):
        await self._assert_degraded(data_service, None)

    @pytest.mark.asyncio
    async def test_missing_file(self, data_service, tmp_path):
        await self._assert_degraded(data_service, str(tmp_path / "nope.json"))
        assert "파일을 찾을 수 없습니다" in data_service.load_warning

    @pytest.mark.asyncio
    async def test_invalid_json(self, data_service, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[[1, 2, 3", encoding="utf-8")
        await self._assert_degraded(data_service, str(path))

    @pytest.mark.asyncio
    async def test_not_a_list(self, data_service, tmp_path):
        path = tmp_path / "object.json"
        path.write_text(json.dumps({"draws": [[1, 2, 3, 4, 5, 6]]}), encoding="utf-8")
        await self._assert_degraded(data_service, str(path))

    @pytest.mark.asyncio
    async def test_no_valid_entries(self, data_service, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text("[]", encoding="utf-8")
        await self._assert_degraded(data_service, str(path))

    @pytest.mark.asyncio
    async def test_failed_reload_clears_previous_data(self, data_service, history_file, tmp_path):
        await data_service.load_historical_data(history_file)
        await self._assert_degraded(data_service, str(tmp_path / "nope.json"))


class TestLoadFromUrl:
    """URL 로드 테스트"""

    @pytest.mark.asyncio
    async def test_fetches_url(self, data_service, sample_draws):
        with patch.object(data_service, "_fetch_url", AsyncMock(return_value=sample_draws)) as mock_fetch:
            success = await data_service.load_historical_data("https://example.com/draws.json")

        assert success
        mock_fetch.assert_awaited_once_with("https://example.com/draws.json")
        assert len(data_service.get_all_draws()) == 3

    @pytest.mark.asyncio
    async def test_network_error_degrades(self, data_service):
        error = DataLoadError("네트워크 오류: connection refused")
        with patch.object(data_service, "_fetch_url", AsyncMock(side_effect=error)):
            success = await data_service.load_historical_data("http://example.com/draws.json")

        assert success is False
        assert "네트워크 오류" in data_service.load_warning


class TestSummary:
    """빈도 요약 테스트"""

    @pytest.mark.asyncio
    async def test_summary_with_history(self, data_service, history_file):
        await data_service.load_historical_data(history_file)
        summary = data_service.get_summary(top=3)

        assert summary["history_available"] is True
        assert summary["total_draws"] == 3
        assert summary["hottest"] == [
            {"number": 4, "frequency": 2},
            {"number": 33, "frequency": 2},
            {"number": 52, "frequency": 2},
        ]
        assert summary["coldest"][0] == {"number": 1, "frequency": 0}
        assert 1 in summary["never_drawn"]
        assert 4 not in summary["never_drawn"]

    def test_summary_without_history(self, data_service):
        summary = data_service.get_summary()

        assert summary["history_available"] is False
        assert summary["total_draws"] == 0
        assert summary["last_draw"] is None
        assert len(summary["never_drawn"]) == 60
