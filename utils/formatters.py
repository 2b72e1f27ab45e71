# utils/formatters.py
import json
from typing import Any, Dict, List, Optional, Sequence
from models.generation_result import BatchResult, GenerationResult, Provenance


class ResultFormatter:
    """결과 포맷팅 유틸리티"""

    @staticmethod
    def describe_numbers(
            combination: Sequence[int],
            frequency: Optional[Dict[int, int]] = None
    ) -> List[Dict[str, Any]]:
        """번호별 과거 출현 정보 (한 번도 안 나온 번호 / 나온 번호 구분용)"""
        frequency = frequency or {}
        details = []
        for n in combination:
            count = frequency.get(n, 0)
            details.append({
                "number": n,
                "frequency": count,
                "previously_drawn": count > 0
            })
        return details

    @staticmethod
    def format_game_to_text(
            index: int,
            game: GenerationResult,
            frequency: Optional[Dict[int, int]] = None
    ) -> str:
        """단일 게임을 텍스트로 변환"""
        details = ResultFormatter.describe_numbers(game.combination, frequency)
        # 과거 데이터가 있을 때만 한 번도 나오지 않은 번호를 *로 표시
        numbers_str = " ".join(
            f"{d['number']:02d}" + ("*" if frequency and not d["previously_drawn"] else "")
            for d in details
        )
        line = f"#{index:02d} [{numbers_str}]"

        if game.stats:
            line += (
                f" (합계: {game.stats.total}, 짝수: {game.stats.evens}, "
                f"홀수: {game.stats.odds}, 소수: {game.stats.primes})"
            )
        if game.provenance == Provenance.FALLBACK:
            line += " [폴백]"
        return line

    @staticmethod
    def format_batch_to_text(
            batch: BatchResult,
            frequency: Optional[Dict[int, int]] = None
    ) -> str:
        """배치 결과를 텍스트로 변환"""
        if not batch.games:
            lines = ["생성된 게임이 없습니다."]
        else:
            lines = ["메가세나 추천 번호:"]
            for i, game in enumerate(batch.games, 1):
                lines.append(ResultFormatter.format_game_to_text(i, game, frequency))

            if frequency and any(frequency.get(n, 0) == 0 for g in batch.games for n in g.combination):
                lines.append("(* 과거 당첨 기록이 없는 번호)")

        for warning in batch.warnings:
            lines.append(f"주의: {warning}")

        return "\n".join(lines)

    @staticmethod
    def batch_to_dict(
            batch: BatchResult,
            frequency: Optional[Dict[int, int]] = None
    ) -> Dict[str, Any]:
        """배치 결과를 번호별 출현 정보와 함께 딕셔너리로 변환"""
        data = batch.to_dict()
        for game_dict, game in zip(data["games"], batch.games):
            game_dict["numbers"] = ResultFormatter.describe_numbers(game.combination, frequency)
        return data

    @staticmethod
    def format_batch_to_json(
            batch: BatchResult,
            frequency: Optional[Dict[int, int]] = None,
            pretty: bool = True
    ) -> str:
        """배치 결과를 JSON 문자열로 변환"""
        data = ResultFormatter.batch_to_dict(batch, frequency)

        if pretty:
            return json.dumps(data, indent=2, ensure_ascii=False)
        else:
            return json.dumps(data, ensure_ascii=False)

    @staticmethod
    def format_summary_to_text(summary: Dict[str, Any]) -> str:
        """과거 데이터 요약을 텍스트로 변환"""
        if not summary.get("history_available"):
            return summary.get("warning") or "과거 당첨 데이터가 없습니다."

        last_draw = ", ".join(str(n) for n in summary["last_draw"])
        hottest = ", ".join(f"{d['number']}({d['frequency']})" for d in summary["hottest"])
        coldest = ", ".join(f"{d['number']}({d['frequency']})" for d in summary["coldest"])
        never = ", ".join(str(n) for n in summary["never_drawn"]) or "없음"

        return "\n".join([
            f"과거 당첨 데이터: {summary['total_draws']}회차",
            f"직전 회차: [{last_draw}]",
            f"최다 출현: {hottest}",
            f"최소 출현: {coldest}",
            f"미출현 번호: {never}",
        ])
