from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from config.settings import (
    MIN_NUMBER, MAX_NUMBER, NUMBERS_PER_GAME, DEFAULT_BATCH_SIZE, MAX_BATCH_SIZE
)


class GamesRequest(BaseModel):
    """배치 생성 요청 모델"""
    count: int = Field(DEFAULT_BATCH_SIZE, description="생성할 게임 수")
    unique_across_batch: Optional[bool] = Field(
        None, description="게임 간 번호 중복 금지 여부 (생략 시 서버 설정 사용)"
    )

    @field_validator("count")
    @classmethod
    def validate_count(cls, v):
        if v < 1 or v > MAX_BATCH_SIZE:
            raise ValueError(f"게임 수는 1~{MAX_BATCH_SIZE} 사이여야 합니다")
        return v

    model_config = {
        "json_schema_extra": {
            "example": {
                "count": 3,
                "unique_across_batch": True
            }
        }
    }


class GameRequest(BaseModel):
    """단일 게임 생성 요청 모델"""
    pool: Optional[List[int]] = Field(None, description="사용할 번호 풀 (생략 시 1~60 전체)")

    @field_validator("pool")
    @classmethod
    def validate_pool(cls, v):
        if v is None:
            return v

        if len(set(v)) != len(v):
            raise ValueError("번호 풀에 중복이 있습니다")

        if any(n < MIN_NUMBER or n > MAX_NUMBER for n in v):
            raise ValueError(f"모든 번호는 {MIN_NUMBER}~{MAX_NUMBER} 사이여야 합니다")

        if len(v) < NUMBERS_PER_GAME:
            raise ValueError(f"번호 풀에는 최소 {NUMBERS_PER_GAME}개의 번호가 필요합니다")

        return v


class NumberDetail(BaseModel):
    """번호별 과거 출현 정보"""
    number: int = Field(..., description="번호")
    frequency: int = Field(..., description="과거 출현 횟수")
    previously_drawn: bool = Field(..., description="과거 당첨 기록 여부")


class GameStatsResult(BaseModel):
    """조합 통계"""
    sum: int = Field(..., description="합계")
    evens: int = Field(..., description="짝수 개수")
    odds: int = Field(..., description="홀수 개수")
    primes: int = Field(..., description="소수 개수")


class GameResult(BaseModel):
    """게임 결과 항목"""
    combination: List[int] = Field(..., description="번호 조합 (오름차순)")
    provenance: str = Field(..., description="출처 (statistical / fallback)")
    attempts: int = Field(..., description="사용한 시도 횟수")
    stats: Optional[GameStatsResult] = Field(None, description="조합 통계")
    numbers: List[NumberDetail] = Field(..., description="번호별 과거 출현 정보")


class GamesResponse(BaseModel):
    """배치 생성 응답 모델"""
    requested: int = Field(..., description="요청한 게임 수")
    games: List[GameResult] = Field(..., description="생성된 게임 목록")
    warnings: List[str] = Field(default_factory=list, description="경고 메시지")
    is_partial: bool = Field(..., description="요청보다 적게 생성되었는지 여부")
    history_available: bool = Field(..., description="과거 당첨 데이터 사용 여부")


class GameResponse(BaseModel):
    """단일 게임 생성 응답 모델"""
    game: GameResult = Field(..., description="생성된 게임")
    history_available: bool = Field(..., description="과거 당첨 데이터 사용 여부")
    warning: Optional[str] = Field(None, description="경고 메시지")


class FrequencyEntry(BaseModel):
    number: int
    frequency: int


class HistorySummaryResponse(BaseModel):
    """과거 당첨 데이터 요약 응답 모델"""
    history_available: bool = Field(..., description="과거 당첨 데이터 로드 여부")
    total_draws: int = Field(..., description="로드된 회차 수")
    last_draw: Optional[List[int]] = Field(None, description="직전 회차 번호")
    hottest: List[FrequencyEntry] = Field(..., description="최다 출현 번호")
    coldest: List[FrequencyEntry] = Field(..., description="최소 출현 번호")
    never_drawn: List[int] = Field(..., description="미출현 번호")
    warning: Optional[str] = Field(None, description="로드 실패 사유")
