"""통계 필터 모음

이 모듈은 6개 번호 조합이 통계적으로 "그럴듯한"지 판단하는 필터들을 제공합니다.
각 필터는 부작용 없는 순수 함수이며 조합의 순서와 무관하게 동작합니다.
FilterBank는 활성화된 필터를 모두 AND로 결합합니다.
"""

import logging
from collections import Counter
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from models.filter_config import FilterConfig
from services.number_grid import quadrant, row

logger = logging.getLogger("lotto_generator")

# 60 미만 소수 17개
PRIMES = frozenset([2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59])


def count_evens(combination: Sequence[int]) -> int:
    return sum(1 for n in combination if n % 2 == 0)


def count_primes(combination: Sequence[int]) -> int:
    return sum(1 for n in combination if n in PRIMES)


def passes_sum(combination: Sequence[int], config: FilterConfig) -> bool:
    """합계가 설정 범위(양 끝 포함) 안에 있는지 확인"""
    return config.sum_min <= sum(combination) <= config.sum_max


def passes_parity(combination: Sequence[int], config: FilterConfig) -> bool:
    """(짝수, 홀수) 개수가 허용 조합 중 하나인지 확인"""
    evens = count_evens(combination)
    odds = len(combination) - evens
    return (evens, odds) in {tuple(pair) for pair in config.parity_pairs}


def passes_primes(combination: Sequence[int], config: FilterConfig) -> bool:
    """소수 개수가 설정 범위 안에 있는지 확인"""
    return config.min_primes <= count_primes(combination) <= config.max_primes


def passes_quadrants(combination: Sequence[int], config: FilterConfig) -> bool:
    """최소 사분면 수를 채우고 한 사분면에 과도하게 몰리지 않았는지 확인"""
    counts = Counter(quadrant(n) for n in combination)
    if len(counts) < config.min_quadrants:
        return False
    return max(counts.values()) <= config.max_per_quadrant


def passes_rows(combination: Sequence[int], config: FilterConfig) -> bool:
    """한 행에 과도하게 몰리지 않았는지 확인"""
    counts = Counter(row(n) for n in combination)
    return max(counts.values()) <= config.max_per_row


def passes_consecutive(combination: Sequence[int], config: FilterConfig) -> bool:
    """연속 번호 길이 제한

    window = max_consecutive_run 일 때 정렬된 nums[i..i+window] 구간의
    max - min 이 window 와 같으면 (window+1)개 연속 정수이므로 거부합니다.
    기본값 2에서는 1,2,3 같은 3개 연속이 금지됩니다.
    """
    nums = sorted(combination)
    window = config.max_consecutive_run
    for i in range(len(nums) - window):
        if nums[i + window] - nums[i] == window:
            return False
    return True


def passes_last_digits(combination: Sequence[int], config: FilterConfig) -> bool:
    """서로 다른 끝자리 개수가 최소값 이상인지 확인"""
    return len({n % 10 for n in combination}) >= config.min_distinct_last_digits


def passes_last_draw(
        combination: Sequence[int],
        config: FilterConfig,
        last_draw: Optional[Iterable[int]] = None
) -> bool:
    """직전 회차와 겹치는 번호 수 제한 (직전 회차 정보가 없으면 항상 통과)"""
    if not last_draw:
        return True
    overlap = len(set(combination) & set(last_draw))
    return overlap <= config.max_last_draw_overlap


FilterFunc = Callable[[Sequence[int], FilterConfig, Optional[Iterable[int]]], bool]

FILTERS: Dict[str, FilterFunc] = {
    "sum": lambda c, cfg, last: passes_sum(c, cfg),
    "parity": lambda c, cfg, last: passes_parity(c, cfg),
    "primes": lambda c, cfg, last: passes_primes(c, cfg),
    "quadrants": lambda c, cfg, last: passes_quadrants(c, cfg),
    "rows": lambda c, cfg, last: passes_rows(c, cfg),
    "consecutive": lambda c, cfg, last: passes_consecutive(c, cfg),
    "last_digits": lambda c, cfg, last: passes_last_digits(c, cfg),
    "last_draw": passes_last_draw,
}


class FilterBank:
    """활성 필터 목록을 AND로 결합하는 필터 뱅크"""

    def __init__(self, config: Optional[FilterConfig] = None):
        self.config = config or FilterConfig.from_settings()
        self.active_filters = list(self.config.active_filters)

    def evaluate(
            self,
            combination: Sequence[int],
            last_draw: Optional[Iterable[int]] = None
    ) -> List[str]:
        """통과하지 못한 필터 이름 목록 반환 (빈 목록이면 전부 통과)"""
        return [
            name for name in self.active_filters
            if not FILTERS[name](combination, self.config, last_draw)
        ]

    def accepts(
            self,
            combination: Sequence[int],
            last_draw: Optional[Iterable[int]] = None
    ) -> bool:
        """모든 활성 필터를 통과하면 True (첫 실패에서 중단)"""
        for name in self.active_filters:
            if not FILTERS[name](combination, self.config, last_draw):
                return False
        return True
