# services/data_service.py
import asyncio
import json
import logging
from collections import Counter
from typing import Any, Dict, List, Optional

import aiohttp

from config.settings import HISTORY_FETCH_TIMEOUT, MIN_NUMBER, MAX_NUMBER
from models.lotto_draw import HistoricalDraw
from utils.exceptions import DataLoadError, ValidationError

logger = logging.getLogger("lotto_generator")


class HistoricalDataService:
    """과거 당첨 데이터 관리 서비스

    JSON 배열(정수 6개 배열의 배열)을 읽어 번호별 출현 빈도와 직전 회차 번호를 만듭니다.
    로드에 실패해도 예외를 올리지 않고 빈 데이터로 동작하며(균등 가중치,
    직전 회차 필터 비활성), 사유는 load_warning에 남깁니다.
    """

    def __init__(self):
        self.draws: List[HistoricalDraw] = []
        self.frequency: Dict[int, int] = {}
        self.load_warning: Optional[str] = None

    @property
    def history_available(self) -> bool:
        return bool(self.draws)

    async def load_historical_data(self, source: Optional[str]) -> bool:
        """과거 당첨 데이터 로드 (파일 경로 또는 http(s) URL)

        Returns:
            로드 성공 여부 (실패 시 빈 데이터로 전환)
        """
        if not source:
            return self._degrade("과거 당첨 데이터 경로가 지정되지 않았습니다. 균등 가중치로 생성합니다.")

        try:
            if source.startswith(("http://", "https://")):
                raw = await self._fetch_url(source)
            else:
                raw = self._read_file(source)

            self.load_from_raw(raw)
            logger.info(f"과거 당첨 데이터 {len(self.draws)}개 로드 성공 (출처: {source})")
            return True

        except DataLoadError as e:
            return self._degrade(f"과거 당첨 데이터를 불러오지 못했습니다: {e.message}")

    def load_from_raw(self, raw: Any) -> None:
        """파싱된 JSON 데이터에서 회차 목록과 빈도표 구성

        Raises:
            DataLoadError: 배열이 아니거나 유효한 회차가 하나도 없는 경우
        """
        if not isinstance(raw, list):
            raise DataLoadError(f"최상위 JSON 값이 배열이 아닙니다: {type(raw).__name__}")

        valid_draws = []
        invalid_draws = []

        for index, entry in enumerate(raw):
            try:
                valid_draws.append(HistoricalDraw.from_raw(index, entry))
            except ValidationError as e:
                logger.warning(f"유효하지 않은 회차 데이터 (인덱스: {index}): {e}")
                invalid_draws.append(index)

        if invalid_draws:
            logger.warning(f"유효하지 않은 회차 데이터 {len(invalid_draws)}개 건너뜀: {invalid_draws}")

        if not valid_draws:
            raise DataLoadError("유효한 회차 데이터가 없습니다")

        frequency = Counter()
        for draw in valid_draws:
            frequency.update(draw.numbers)

        self.draws = valid_draws
        self.frequency = dict(frequency)
        self.load_warning = None

    def _read_file(self, path: str) -> Any:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError as e:
            raise DataLoadError(f"파일을 찾을 수 없습니다: {path}", original_error=e)
        except ValueError as e:
            # JSONDecodeError, UnicodeDecodeError 모두 ValueError
            raise DataLoadError(f"JSON 형식 오류: {e}", original_error=e)
        except OSError as e:
            raise DataLoadError(f"파일 읽기 오류: {e}", original_error=e)

    async def _fetch_url(self, url: str) -> Any:
        timeout = aiohttp.ClientTimeout(total=HISTORY_FETCH_TIMEOUT)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(url) as response:
                    if response.status != 200:
                        raise DataLoadError(f"HTTP {response.status} 응답 ({url})")
                    text = await response.text()
        except UnicodeDecodeError as e:
            raise DataLoadError(f"응답 인코딩 오류: {e}", original_error=e)
        except aiohttp.ClientError as e:
            raise DataLoadError(f"네트워크 오류: {e}", original_error=e)
        except asyncio.TimeoutError as e:
            raise DataLoadError(f"요청 타임아웃 ({url})", original_error=e)

        try:
            return json.loads(text)
        except ValueError as e:
            raise DataLoadError(f"JSON 형식 오류: {e}", original_error=e)

    def _degrade(self, message: str) -> bool:
        logger.warning(message)
        self.draws = []
        self.frequency = {}
        self.load_warning = message
        return False

    def get_last_draw(self) -> Optional[List[int]]:
        """직전 회차 번호 반환 (배열의 마지막 항목이 가장 최근 회차)"""
        if not self.draws:
            return None
        return list(self.draws[-1].numbers)

    def get_all_draws(self) -> List[HistoricalDraw]:
        """모든 당첨 데이터 반환"""
        return self.draws

    def get_frequency_table(self) -> Dict[int, int]:
        """번호별 출현 빈도 반환 (복사본)"""
        return dict(self.frequency)

    def get_summary(self, top: int = 6) -> Dict[str, Any]:
        """빈도 요약 (가장 많이/적게 나온 번호)"""
        counts = {n: self.frequency.get(n, 0) for n in range(MIN_NUMBER, MAX_NUMBER + 1)}
        hottest = sorted(counts, key=lambda n: (-counts[n], n))[:top]
        coldest = sorted(counts, key=lambda n: (counts[n], n))[:top]
        never_drawn = [n for n, c in counts.items() if c == 0]

        return {
            "history_available": self.history_available,
            "total_draws": len(self.draws),
            "last_draw": self.get_last_draw(),
            "hottest": [{"number": n, "frequency": counts[n]} for n in hottest],
            "coldest": [{"number": n, "frequency": counts[n]} for n in coldest],
            "never_drawn": never_drawn,
            "warning": self.load_warning
        }
