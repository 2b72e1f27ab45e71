# models/filter_config.py
from dataclasses import dataclass, field, replace
from typing import Tuple
import logging

from config import settings
from utils.exceptions import ConfigurationError

logger = logging.getLogger("lotto_generator")

ALL_FILTERS = (
    "sum",
    "parity",
    "primes",
    "quadrants",
    "rows",
    "consecutive",
    "last_digits",
    "last_draw",
)


@dataclass(frozen=True)
class FilterConfig:
    """통계 필터 및 생성 루프 설정

    프로세스 전역 상수 대신 생성기 호출 시점에 전달되는 불변 설정 객체입니다.
    임계값을 다시 보정하려면 ``replace()``로 새 객체를 만들어 사용합니다.
    """
    sum_min: int = settings.SUM_MIN
    sum_max: int = settings.SUM_MAX
    parity_pairs: Tuple[Tuple[int, int], ...] = settings.PARITY_PAIRS
    min_primes: int = settings.MIN_PRIMES
    max_primes: int = settings.MAX_PRIMES
    min_quadrants: int = settings.MIN_QUADRANTS
    max_per_quadrant: int = settings.MAX_PER_QUADRANT
    max_per_row: int = settings.MAX_PER_ROW
    max_consecutive_run: int = settings.MAX_CONSECUTIVE_RUN
    min_distinct_last_digits: int = settings.MIN_DISTINCT_LAST_DIGITS
    max_last_draw_overlap: int = settings.MAX_LAST_DRAW_OVERLAP
    max_attempts: int = settings.MAX_ATTEMPTS
    frequency_bonus_threshold: int = settings.FREQUENCY_BONUS_THRESHOLD
    unique_across_batch: bool = settings.UNIQUE_ACROSS_BATCH
    active_filters: Tuple[str, ...] = field(default=ALL_FILTERS)

    @classmethod
    def from_settings(cls, **overrides) -> "FilterConfig":
        """config.settings 값으로 설정 생성 (일부 값 덮어쓰기 가능)"""
        config = cls()
        if overrides:
            config = replace(config, **overrides)
        config.validate()
        return config

    def with_overrides(self, **overrides) -> "FilterConfig":
        """일부 값만 바꾼 새 설정 반환"""
        config = replace(self, **overrides)
        config.validate()
        return config

    def validate(self) -> None:
        """설정값의 일관성 검증"""
        errors = []
        size = settings.NUMBERS_PER_GAME

        if self.sum_min > self.sum_max:
            errors.append(f"sum_min({self.sum_min})이 sum_max({self.sum_max})보다 큽니다")

        if not self.parity_pairs:
            errors.append("허용 짝홀 조합이 비어 있습니다")
        for evens, odds in self.parity_pairs:
            if evens < 0 or odds < 0 or evens + odds != size:
                errors.append(f"잘못된 짝홀 조합: ({evens}, {odds})")

        if not 0 <= self.min_primes <= self.max_primes <= size:
            errors.append(f"소수 개수 범위가 잘못되었습니다: {self.min_primes}-{self.max_primes}")

        if not 1 <= self.min_quadrants <= 4:
            errors.append(f"min_quadrants는 1~4 사이여야 합니다: {self.min_quadrants}")

        if self.max_per_quadrant < 1 or self.max_per_row < 1:
            errors.append("사분면/행 최대 개수는 1 이상이어야 합니다")

        if self.max_consecutive_run < 1:
            errors.append(f"max_consecutive_run은 1 이상이어야 합니다: {self.max_consecutive_run}")

        if not 1 <= self.min_distinct_last_digits <= size:
            errors.append(f"min_distinct_last_digits는 1~{size} 사이여야 합니다")

        if not 0 <= self.max_last_draw_overlap <= size:
            errors.append(f"max_last_draw_overlap는 0~{size} 사이여야 합니다")

        if not 1 <= self.max_attempts <= settings.MAX_ATTEMPTS_CEILING:
            errors.append(f"max_attempts는 1~{settings.MAX_ATTEMPTS_CEILING} 사이여야 합니다: {self.max_attempts}")

        if self.frequency_bonus_threshold < 0:
            errors.append("frequency_bonus_threshold는 0 이상이어야 합니다")

        unknown = [name for name in self.active_filters if name not in ALL_FILTERS]
        if unknown:
            errors.append(f"알 수 없는 필터: {unknown}")

        if errors:
            error_msg = "필터 설정 오류: " + "; ".join(errors)
            logger.error(error_msg)
            raise ConfigurationError(error_msg)
