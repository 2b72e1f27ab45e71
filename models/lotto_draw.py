# models/lotto_draw.py
from dataclasses import dataclass
from typing import List, Tuple, Any
from utils.exceptions import ValidationError
from config.settings import MIN_NUMBER, MAX_NUMBER, NUMBERS_PER_GAME
import logging

logger = logging.getLogger("lotto_generator")


@dataclass
class HistoricalDraw:
    """과거 당첨 번호 모델"""
    draw_index: int
    numbers: List[int]

    @classmethod
    def from_raw(cls, index: int, raw: Any):
        """JSON 배열 항목에서 HistoricalDraw 객체 생성"""
        if not isinstance(raw, (list, tuple)):
            raise ValidationError(f"당첨 번호 항목이 배열이 아닙니다: {raw!r}")

        if len(raw) != NUMBERS_PER_GAME:
            raise ValidationError(f"번호 개수 불일치: 예상 {NUMBERS_PER_GAME}, 실제 {len(raw)}")

        numbers = []
        for num in raw:
            # bool은 int의 하위 타입이므로 별도로 거름
            if isinstance(num, bool) or not isinstance(num, int):
                raise ValidationError(f"정수가 아닌 번호가 있습니다: {num!r}")
            if num < MIN_NUMBER or num > MAX_NUMBER:
                raise ValidationError(f"유효한 범위({MIN_NUMBER}-{MAX_NUMBER})를 벗어난 번호: {num}")
            numbers.append(num)

        if len(set(numbers)) != NUMBERS_PER_GAME:
            raise ValidationError(f"중복된 번호가 있습니다: {numbers}")

        return cls(draw_index=index, numbers=sorted(numbers))

    def get_numbers_tuple(self) -> Tuple[int, ...]:
        """정렬된 번호 튜플 반환"""
        return tuple(sorted(self.numbers))
