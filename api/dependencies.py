# api/dependencies.py
import logging

from fastapi import Depends, Request

from models.filter_config import FilterConfig
from services.batch_generator import BatchGenerator
from services.data_service import HistoricalDataService
from services.game_generator import GameGenerator

logger = logging.getLogger("lotto_generator")


def get_data_service(request: Request) -> HistoricalDataService:
    """시작 시 로드된 과거 데이터 서비스 (없으면 빈 데이터로 동작)"""
    data_service = getattr(request.app.state, "data_service", None)
    if data_service is None:
        logger.warning("과거 데이터 서비스가 초기화되지 않았습니다. 빈 데이터로 생성합니다.")
        data_service = HistoricalDataService()
        request.app.state.data_service = data_service
    return data_service


def get_filter_config(request: Request) -> FilterConfig:
    """필터 설정 의존성"""
    config = getattr(request.app.state, "filter_config", None)
    if config is None:
        config = FilterConfig.from_settings()
        request.app.state.filter_config = config
    return config


def get_game_generator(config: FilterConfig = Depends(get_filter_config)) -> GameGenerator:
    """GameGenerator 의존성"""
    return GameGenerator(config)


def get_batch_generator(
        game_generator: GameGenerator = Depends(get_game_generator)
) -> BatchGenerator:
    """BatchGenerator 의존성"""
    return BatchGenerator(game_generator)
