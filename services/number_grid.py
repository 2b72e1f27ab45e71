"""6×10 번호 격자 좌표 계산

메가세나 용지는 1-60을 6행 10열로 배치합니다.
사분면은 행 1-3/4-6, 열 1-5/6-10 기준으로 나누며
1(좌상), 2(우상), 3(좌하), 4(우하) 순으로 번호를 붙입니다.
"""

from typing import Tuple

from config.settings import GRID_ROWS, GRID_COLUMNS

HALF_ROWS = GRID_ROWS // 2
HALF_COLUMNS = GRID_COLUMNS // 2


def row(n: int) -> int:
    """번호가 위치한 행 (1-6)"""
    return (n - 1) // GRID_COLUMNS + 1


def column(n: int) -> int:
    """번호가 위치한 열 (1-10)"""
    return (n - 1) % GRID_COLUMNS + 1


def quadrant(n: int) -> int:
    """번호가 위치한 사분면 (1-4)"""
    bottom = row(n) > HALF_ROWS
    right = column(n) > HALF_COLUMNS
    return 1 + (2 if bottom else 0) + (1 if right else 0)


def grid_position(n: int) -> Tuple[int, int, int]:
    """(행, 열, 사분면) 반환"""
    return row(n), column(n), quadrant(n)
