"""게임(6개 번호 조합) 생성기

가중치 풀에서 후보를 뽑아 통계 필터를 모두 통과하는 첫 조합을 반환합니다.
시도 횟수 상한 안에 통과 조합을 찾지 못하면 출현 빈도가 가장 낮은
번호 6개를 결정적으로 선택하는 폴백 경로로 전환합니다.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from config.settings import NUMBERS_PER_GAME
from models.filter_config import FilterConfig
from models.generation_result import GameStats, GenerationResult, Provenance
from services.filter_bank import FilterBank, count_evens, count_primes
from services.random_generator import RandomGenerator
from utils.exceptions import InsufficientPoolError

logger = logging.getLogger("lotto_generator")


def compute_stats(combination: Sequence[int]) -> GameStats:
    """조합 통계 계산 (합계, 짝수, 홀수, 소수 개수)"""
    evens = count_evens(combination)
    return GameStats(
        total=sum(combination),
        evens=evens,
        odds=len(combination) - evens,
        primes=count_primes(combination)
    )


class GameGenerator:
    """필터 기반 단일 게임 생성기"""

    def __init__(
            self,
            config: Optional[FilterConfig] = None,
            random_generator: Optional[RandomGenerator] = None
    ):
        """
        Args:
            config: 필터 및 시도 횟수 설정
            random_generator: 후보 추출기 (테스트 시 시드 고정용)
        """
        self.config = config or FilterConfig.from_settings()
        self.random_generator = random_generator or RandomGenerator()
        self.filter_bank = FilterBank(self.config)

    def generate(
            self,
            pool: Sequence[int],
            frequency: Optional[Dict[int, int]] = None,
            last_draw: Optional[Iterable[int]] = None
    ) -> GenerationResult:
        """번호 풀에서 조합 1개 생성

        Args:
            pool: 사용 가능한 번호 (6개 이상)
            frequency: 번호별 과거 출현 횟수 (선택)
            last_draw: 직전 회차 번호 (선택)

        Returns:
            오름차순 정렬된 조합과 출처 태그

        Raises:
            InsufficientPoolError: 풀에 서로 다른 번호가 6개 미만인 경우
        """
        base_pool = sorted(set(pool))
        if len(base_pool) < NUMBERS_PER_GAME:
            raise InsufficientPoolError(
                f"번호 풀이 부족합니다: {len(base_pool)}개 (최소 {NUMBERS_PER_GAME}개 필요)"
            )

        frequency = frequency or {}
        last_draw = list(last_draw) if last_draw else None

        weighted = self.random_generator.build_weighted_pool(
            base_pool, frequency, self.config.frequency_bonus_threshold
        )

        for attempt in range(1, self.config.max_attempts + 1):
            candidate = sorted(
                self.random_generator.sample_candidate(weighted, base_pool, NUMBERS_PER_GAME)
            )

            if self.filter_bank.accepts(candidate, last_draw):
                logger.debug(f"필터 통과 조합 생성: {candidate} (시도 {attempt}회)")
                return GenerationResult(
                    combination=candidate,
                    provenance=Provenance.STATISTICAL,
                    attempts=attempt,
                    stats=compute_stats(candidate)
                )

        combination = self.least_frequent(base_pool, frequency)
        logger.warning(
            f"최대 시도 횟수({self.config.max_attempts})를 초과했습니다. "
            f"빈도 기반 폴백 조합 사용: {combination}"
        )
        return GenerationResult(
            combination=combination,
            provenance=Provenance.FALLBACK,
            attempts=self.config.max_attempts,
            stats=compute_stats(combination)
        )

    @staticmethod
    def least_frequent(pool: Sequence[int], frequency: Dict[int, int]) -> List[int]:
        """출현 빈도가 가장 낮은 번호 6개 (동률은 작은 번호 우선)"""
        ordered = sorted(pool, key=lambda n: (frequency.get(n, 0), n))
        return sorted(ordered[:NUMBERS_PER_GAME])
