"""FilterConfig 단위 테스트"""

import dataclasses

import pytest
from config import settings
from models.filter_config import ALL_FILTERS, FilterConfig
from utils.exceptions import ConfigurationError


class TestDefaults:
    """기본값 테스트"""

    def test_defaults_match_settings(self):
        config = FilterConfig.from_settings()

        assert config.sum_min == settings.SUM_MIN == 135
        assert config.sum_max == settings.SUM_MAX == 210
        assert config.parity_pairs == ((3, 3), (2, 4), (4, 2))
        assert config.frequency_bonus_threshold == settings.FREQUENCY_BONUS_THRESHOLD
        assert config.max_consecutive_run == 2
        assert config.active_filters == ALL_FILTERS

    def test_is_immutable(self):
        config = FilterConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.sum_min = 0

    def test_overrides_return_new_object(self):
        config = FilterConfig()
        relaxed = config.with_overrides(sum_min=100)

        assert relaxed.sum_min == 100
        assert config.sum_min == 135

    def test_from_settings_accepts_overrides(self):
        config = FilterConfig.from_settings(unique_across_batch=False, max_attempts=10000)
        assert config.unique_across_batch is False
        assert config.max_attempts == 10000


class TestValidation:
    """설정 검증 테스트"""

    @pytest.mark.parametrize("overrides", [
        {"sum_min": 300, "sum_max": 200},
        {"parity_pairs": ()},
        {"parity_pairs": ((3, 2),)},
        {"min_primes": 4, "max_primes": 3},
        {"min_quadrants": 5},
        {"max_per_row": 0},
        {"max_consecutive_run": 0},
        {"min_distinct_last_digits": 7},
        {"max_last_draw_overlap": 7},
        {"max_attempts": 0},
        {"max_attempts": 10001},
        {"frequency_bonus_threshold": -1},
        {"active_filters": ("sum", "lucky_number")},
    ])
    def test_rejects_inconsistent_values(self, overrides):
        with pytest.raises(ConfigurationError):
            FilterConfig().with_overrides(**overrides)

    def test_accepts_default_config(self):
        FilterConfig().validate()
