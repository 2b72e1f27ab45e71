"""배치(여러 게임) 생성 서비스

GameGenerator를 여러 번 호출해 한 번에 여러 게임을 만듭니다.
unique_across_batch 정책이 켜져 있으면 각 게임의 번호를 풀에서 제거하여
한 배치 안에서 같은 번호가 두 게임 이상에 나오지 않도록 합니다.
"""

import logging
from datetime import datetime
from typing import Dict, Iterable, Optional

from config.settings import (
    MIN_NUMBER, MAX_NUMBER, NUMBERS_PER_GAME, DEFAULT_BATCH_SIZE, MAX_BATCH_SIZE
)
from models.filter_config import FilterConfig
from models.generation_result import BatchResult
from services.game_generator import GameGenerator
from utils.exceptions import ValidationError

logger = logging.getLogger("lotto_generator")


class BatchGenerator:
    """배치 생성기

    번호 풀은 한 번의 generate_batch 호출 동안만 존재하며 호출이 끝나면 버려집니다.
    """

    def __init__(self, game_generator: Optional[GameGenerator] = None):
        """
        Args:
            game_generator: 단일 게임 생성기
        """
        self.game_generator = game_generator or GameGenerator()

    @property
    def config(self) -> FilterConfig:
        return self.game_generator.config

    def generate_batch(
            self,
            count: int = DEFAULT_BATCH_SIZE,
            frequency: Optional[Dict[int, int]] = None,
            last_draw: Optional[Iterable[int]] = None,
            unique_across_batch: Optional[bool] = None
    ) -> BatchResult:
        """요청된 개수만큼 게임 생성

        Args:
            count: 생성할 게임 수 (1-20)
            frequency: 번호별 과거 출현 횟수 (선택)
            last_draw: 직전 회차 번호 (선택)
            unique_across_batch: 배치 내 번호 고유성 정책 (None이면 설정값 사용)

        Returns:
            생성된 게임과 경고 메시지를 담은 BatchResult

        Raises:
            ValidationError: count가 유효하지 않은 경우
        """
        # bool은 int의 하위 타입이므로 별도로 거름
        if isinstance(count, bool) or not isinstance(count, int):
            raise ValidationError(
                f"count must be an integer, got {type(count).__name__}"
            )

        if not 1 <= count <= MAX_BATCH_SIZE:
            raise ValidationError(
                f"count must be between 1 and {MAX_BATCH_SIZE}, got {count}"
            )

        if unique_across_batch is None:
            unique_across_batch = self.config.unique_across_batch

        logger.info(
            f"배치 생성 요청: count={count}, unique_across_batch={unique_across_batch}"
        )

        start_time = datetime.now()
        last_draw = list(last_draw) if last_draw else None
        full_pool = list(range(MIN_NUMBER, MAX_NUMBER + 1))
        pool = list(full_pool)
        result = BatchResult(requested=count)

        for i in range(count):
            if not unique_across_batch:
                pool = list(full_pool)

            if len(pool) < NUMBERS_PER_GAME:
                warning = (
                    f"남은 번호가 {len(pool)}개뿐이라 {i + 1}번째 게임을 만들 수 없습니다. "
                    f"{i}/{count}개 게임만 생성되었습니다."
                )
                logger.warning(warning)
                result.warnings.append(warning)
                break

            game = self.game_generator.generate(pool, frequency, last_draw)
            result.games.append(game)

            if unique_across_batch:
                used = set(game.combination)
                pool = [n for n in pool if n not in used]

            logger.debug(
                f"게임 {i + 1}/{count} 생성 완료: {game.combination} ({game.provenance.value})"
            )

        if result.fallback_count:
            result.warnings.append(
                f"{result.fallback_count}개 게임은 모든 통계 필터를 만족하지 못해 "
                f"빈도 기반 폴백으로 생성되었습니다."
            )

        elapsed_time = (datetime.now() - start_time).total_seconds() * 1000
        logger.info(
            f"배치 생성 완료: {len(result.games)}개 생성, "
            f"소요 시간: {elapsed_time:.2f}ms"
        )

        return result
