"""번호 격자 좌표 단위 테스트"""

import pytest
from services.number_grid import row, column, quadrant, grid_position


class TestRowAndColumn:
    """행/열 계산 테스트"""

    @pytest.mark.parametrize("n, expected_row, expected_column", [
        (1, 1, 1),
        (10, 1, 10),
        (11, 2, 1),
        (25, 3, 5),
        (31, 4, 1),
        (60, 6, 10),
    ])
    def test_row_and_column(self, n, expected_row, expected_column):
        assert row(n) == expected_row
        assert column(n) == expected_column

    def test_every_number_maps_inside_grid(self):
        """1-60 모든 번호가 6×10 격자 안에 들어감"""
        positions = {(row(n), column(n)) for n in range(1, 61)}
        assert len(positions) == 60
        assert all(1 <= r <= 6 and 1 <= c <= 10 for r, c in positions)


class TestQuadrant:
    """사분면 계산 테스트"""

    @pytest.mark.parametrize("n, expected", [
        (1, 1), (25, 1),    # 좌상
        (6, 2), (30, 2),    # 우상
        (31, 3), (55, 3),   # 좌하
        (36, 4), (60, 4),   # 우하
    ])
    def test_quadrant_boundaries(self, n, expected):
        assert quadrant(n) == expected

    def test_each_quadrant_holds_fifteen_numbers(self):
        counts = {}
        for n in range(1, 61):
            counts[quadrant(n)] = counts.get(quadrant(n), 0) + 1
        assert counts == {1: 15, 2: 15, 3: 15, 4: 15}

    def test_grid_position_is_stable(self):
        """같은 번호는 항상 같은 좌표"""
        assert grid_position(38) == (4, 8, 4)
        assert grid_position(38) == grid_position(38)
