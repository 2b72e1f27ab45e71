# api/main.py
from fastapi import FastAPI
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware
import logging
from config import settings
from models.filter_config import FilterConfig
from services.data_service import HistoricalDataService

from api.routers import generation

# 로깅 설정
logger = logging.getLogger("lotto_generator")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    애플리케이션 라이프스팬 컨텍스트 매니저
    - 시작 시 설정 검증 및 과거 당첨 데이터 1회 로드
    - 로드 실패 시에도 균등 가중치로 계속 동작
    """
    logger.info("애플리케이션 시작 중...")

    # 설정 검증
    settings.verify_settings()
    app.state.filter_config = FilterConfig.from_settings()

    # 과거 당첨 데이터 로드
    data_service = HistoricalDataService()
    await data_service.load_historical_data(settings.HISTORY_SOURCE)
    app.state.data_service = data_service

    logger.info("애플리케이션 초기화 완료")

    yield  # FastAPI 애플리케이션 실행

    logger.info("애플리케이션 종료 중...")


# FastAPI 앱 생성 (lifespan 컨텍스트 매니저 적용)
app = FastAPI(
    title="Mega-Sena Generator API",
    description="메가세나 통계 필터 기반 번호 생성 API",
    version="1.0.0",
    lifespan=lifespan
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # 프로덕션 환경에서는 특정 도메인으로 제한하세요
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 라우터 등록
app.include_router(generation.router, prefix="/api", tags=["generation"])


@app.get("/", tags=["root"])
async def root():
    """API 루트 엔드포인트"""
    return {
        "message": "메가세나 번호 생성기 API에 오신 것을 환영합니다!",
        "docs_url": "/docs",
        "redoc_url": "/redoc"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.main:app", host="0.0.0.0", port=8000, reload=True)
