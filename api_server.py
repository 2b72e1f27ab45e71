#!/usr/bin/env python3
# api_server.py - API 서버 실행 스크립트
import uvicorn
from config.logging_config import setup_logging
from config.settings import LOG_DIR


def main():
    """API 서버 실행을 위한 진입점"""
    # 로깅 설정
    logger = setup_logging(LOG_DIR)
    logger.info("메가세나 번호 생성기 API 서버 시작")

    # FastAPI 애플리케이션 실행
    uvicorn.run(
        "api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )


if __name__ == "__main__":
    main()
