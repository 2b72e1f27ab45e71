# api/routers/generation.py
import logging
import time

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_batch_generator, get_data_service, get_game_generator
from api.schemas.generation import (
    GameRequest, GameResponse, GameResult, GamesRequest, GamesResponse, HistorySummaryResponse
)
from config.settings import MIN_NUMBER, MAX_NUMBER
from models.generation_result import GenerationResult
from services.batch_generator import BatchGenerator
from services.data_service import HistoricalDataService
from services.game_generator import GameGenerator
from utils.exceptions import InsufficientPoolError, LottoGeneratorError, ValidationError
from utils.formatters import ResultFormatter

router = APIRouter()
logger = logging.getLogger("lotto_generator")


def _to_game_result(game: GenerationResult, frequency) -> GameResult:
    data = game.to_dict()
    data["numbers"] = ResultFormatter.describe_numbers(game.combination, frequency)
    return GameResult(**data)


@router.post("/games", response_model=GamesResponse, status_code=status.HTTP_200_OK)
async def generate_games(
        request: GamesRequest,
        data_service: HistoricalDataService = Depends(get_data_service),
        batch_generator: BatchGenerator = Depends(get_batch_generator)
):
    """
    추천 게임 배치 생성

    과거 데이터가 없으면 균등 가중치로 생성하고 경고를 함께 반환합니다.
    풀이 부족해 일부만 생성된 경우에도 200으로 응답하며 is_partial이 true가 됩니다.
    """
    start_time = time.time()
    frequency = data_service.get_frequency_table()

    try:
        batch = batch_generator.generate_batch(
            count=request.count,
            frequency=frequency,
            last_draw=data_service.get_last_draw(),
            unique_across_batch=request.unique_across_batch
        )
    except ValidationError as e:
        logger.error(f"입력 검증 오류: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message
        )
    except LottoGeneratorError as e:
        logger.exception(f"게임 생성 중 오류: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="게임 생성에 실패했습니다"
        )

    warnings = list(batch.warnings)
    if data_service.load_warning:
        warnings.insert(0, data_service.load_warning)

    logger.info(f"게임 {len(batch.games)}개 생성 완료 (소요 시간: {time.time() - start_time:.3f}초)")

    return GamesResponse(
        requested=batch.requested,
        games=[_to_game_result(game, frequency) for game in batch.games],
        warnings=warnings,
        is_partial=batch.is_partial,
        history_available=data_service.history_available
    )


@router.post("/game", response_model=GameResponse, status_code=status.HTTP_200_OK)
async def generate_game(
        request: GameRequest,
        data_service: HistoricalDataService = Depends(get_data_service),
        game_generator: GameGenerator = Depends(get_game_generator)
):
    """지정한 번호 풀(기본 1~60)에서 단일 게임 생성"""
    pool = request.pool or list(range(MIN_NUMBER, MAX_NUMBER + 1))
    frequency = data_service.get_frequency_table()

    try:
        game = game_generator.generate(pool, frequency, data_service.get_last_draw())
    except InsufficientPoolError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message
        )

    return GameResponse(
        game=_to_game_result(game, frequency),
        history_available=data_service.history_available,
        warning=data_service.load_warning
    )


@router.get("/history", response_model=HistorySummaryResponse)
async def get_history_summary(
        data_service: HistoricalDataService = Depends(get_data_service)
):
    """과거 당첨 데이터 로드 상태 및 빈도 요약"""
    return HistorySummaryResponse(**data_service.get_summary())
