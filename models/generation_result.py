# models/generation_result.py
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional
import json


class Provenance(str, Enum):
    """조합 출처 (모든 필터 통과 / 폴백)"""
    STATISTICAL = "statistical"
    FALLBACK = "fallback"


@dataclass
class GameStats:
    """조합 통계 요약"""
    total: int
    evens: int
    odds: int
    primes: int

    def to_dict(self):
        return {
            "sum": self.total,
            "evens": self.evens,
            "odds": self.odds,
            "primes": self.primes
        }


@dataclass
class GenerationResult:
    """단일 게임 생성 결과 모델"""
    combination: List[int]
    provenance: Provenance
    attempts: int = 0
    stats: Optional[GameStats] = None

    @property
    def is_fallback(self) -> bool:
        return self.provenance == Provenance.FALLBACK

    def to_dict(self):
        """딕셔너리로 변환"""
        return {
            "combination": self.combination,
            "provenance": self.provenance.value,
            "attempts": self.attempts,
            "stats": self.stats.to_dict() if self.stats else None
        }

    def to_json(self):
        """JSON 문자열로 변환"""
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data):
        """딕셔너리에서 객체 생성"""
        stats = data.get("stats")
        return cls(
            combination=list(data["combination"]),
            provenance=Provenance(data["provenance"]),
            attempts=data.get("attempts", 0),
            stats=GameStats(
                total=stats["sum"],
                evens=stats["evens"],
                odds=stats["odds"],
                primes=stats["primes"]
            ) if stats else None
        )


@dataclass
class BatchResult:
    """배치 생성 결과 모델

    고유성 정책상 풀이 부족해 중단된 경우 warnings에 사유가 남고
    이미 생성된 게임은 그대로 반환됩니다.
    """
    requested: int
    games: List[GenerationResult] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_partial(self) -> bool:
        return len(self.games) < self.requested

    @property
    def fallback_count(self) -> int:
        return sum(1 for game in self.games if game.is_fallback)

    def to_dict(self):
        """딕셔너리로 변환"""
        return {
            "requested": self.requested,
            "games": [game.to_dict() for game in self.games],
            "warnings": list(self.warnings),
            "is_partial": self.is_partial
        }
