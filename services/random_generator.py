"""가중치 번호 풀 구성 및 후보 조합 추출

과거 출현 빈도가 임계값을 넘는 번호는 샘플링 풀에 한 번 더 넣어
조금 더 자주 뽑히도록 합니다. 비례 가중치가 아니라 고정 보너스 1회입니다.
후보 추출은 Fisher-Yates 셔플 후 앞에서부터 서로 다른 번호를 고르는 방식입니다.
"""

import random
import secrets
from typing import Dict, List, Optional, Sequence

from config.settings import NUMBERS_PER_GAME


class RandomGenerator:
    """가중치 풀 기반 후보 조합 생성기

    기본 난수원은 암호학적으로 안전한 SystemRandom이며,
    테스트에서는 시드를 고정한 random.Random을 주입할 수 있습니다.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.random = rng or secrets.SystemRandom()

    @staticmethod
    def build_weighted_pool(
            pool: Sequence[int],
            frequency: Optional[Dict[int, int]] = None,
            threshold: int = 280
    ) -> List[int]:
        """샘플링용 가중치 풀 생성

        Args:
            pool: 중복 없는 기본 번호 풀
            frequency: 번호별 과거 출현 횟수 (없으면 균등)
            threshold: 이 값을 초과한 번호는 한 번 더 들어감

        Returns:
            기본 풀의 모든 번호 + 임계값 초과 번호의 추가 항목
        """
        weighted = list(pool)
        if not frequency:
            return weighted

        weighted.extend(n for n in pool if frequency.get(n, 0) > threshold)
        return weighted

    def sample_candidate(
            self,
            weighted: Sequence[int],
            pool: Sequence[int],
            size: int = NUMBERS_PER_GAME
    ) -> List[int]:
        """가중치 풀에서 서로 다른 번호 size개 추출

        Fisher-Yates 셔플을 앞에서부터 진행하다가 서로 다른 번호가
        size개 모이면 멈춥니다. 가중치로 생긴 중복 항목은 건너뛰며,
        그래도 부족하면 기본 풀의 남은 번호에서 균등하게 채웁니다.

        Returns:
            서로 다른 번호 size개 (정렬되지 않음)
        """
        arr = list(weighted)
        picked = []
        seen = set()
        for i in range(len(arr)):
            j = self.random.randint(i, len(arr) - 1)
            arr[i], arr[j] = arr[j], arr[i]
            n = arr[i]
            if n not in seen:
                seen.add(n)
                picked.append(n)
                if len(picked) == size:
                    return picked

        remaining = [n for n in pool if n not in seen]
        picked.extend(self.random.sample(remaining, size - len(picked)))
        return picked
