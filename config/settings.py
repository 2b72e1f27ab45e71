# config/settings.py
import os
from dotenv import load_dotenv
import logging
from utils.exceptions import ConfigurationError

# .env 파일 로드
load_dotenv()

logger = logging.getLogger("lotto_generator")

# 메가세나 설정
MIN_NUMBER = 1
MAX_NUMBER = 60
NUMBERS_PER_GAME = 6
GRID_ROWS = 6
GRID_COLUMNS = 10

# 배치 설정
DEFAULT_BATCH_SIZE = 3
MAX_BATCH_SIZE = 20
UNIQUE_ACROSS_BATCH = os.getenv("UNIQUE_ACROSS_BATCH", "true").lower() == "true"

# 생성 루프 설정
MAX_ATTEMPTS = int(os.getenv("MAX_ATTEMPTS", "3000"))
MAX_ATTEMPTS_CEILING = 10000
FREQUENCY_BONUS_THRESHOLD = int(os.getenv("FREQUENCY_BONUS_THRESHOLD", "280"))

# 통계 필터 기본값 (경험적으로 조정된 값)
SUM_MIN = 135
SUM_MAX = 210
PARITY_PAIRS = ((3, 3), (2, 4), (4, 2))  # (짝수, 홀수)
MIN_PRIMES = 1
MAX_PRIMES = 3
MIN_QUADRANTS = 3
MAX_PER_QUADRANT = 3
MAX_PER_ROW = 2
MAX_CONSECUTIVE_RUN = 2  # 1,2,3 처럼 3개 연속은 금지
MIN_DISTINCT_LAST_DIGITS = 4
MAX_LAST_DRAW_OVERLAP = int(os.getenv("MAX_LAST_DRAW_OVERLAP", "2"))

# 과거 당첨 데이터 (파일 경로 또는 http(s) URL)
HISTORY_SOURCE = os.getenv("HISTORY_SOURCE")
HISTORY_FETCH_TIMEOUT = int(os.getenv("HISTORY_FETCH_TIMEOUT", "30"))  # 초 단위

# 로그 설정
LOG_DIR = os.getenv("LOG_DIR", "logs")


def verify_settings():
    """생성 관련 설정값 검증"""
    errors = []

    if not 1 <= MAX_ATTEMPTS <= MAX_ATTEMPTS_CEILING:
        errors.append(f"MAX_ATTEMPTS는 1~{MAX_ATTEMPTS_CEILING} 사이여야 합니다: {MAX_ATTEMPTS}")

    if FREQUENCY_BONUS_THRESHOLD < 0:
        errors.append(f"FREQUENCY_BONUS_THRESHOLD는 0 이상이어야 합니다: {FREQUENCY_BONUS_THRESHOLD}")

    if not 0 <= MAX_LAST_DRAW_OVERLAP <= NUMBERS_PER_GAME:
        errors.append(f"MAX_LAST_DRAW_OVERLAP는 0~{NUMBERS_PER_GAME} 사이여야 합니다: {MAX_LAST_DRAW_OVERLAP}")

    if errors:
        error_msg = "잘못된 설정값이 있습니다: " + "; ".join(errors)
        logger.error(error_msg)
        raise ConfigurationError(error_msg)

    if not HISTORY_SOURCE:
        logger.info("HISTORY_SOURCE가 설정되지 않았습니다. 균등 가중치로 생성합니다.")

    logger.info("생성 설정 검증 완료")
