"""Integration tests configuration

이 모듈은 통합 테스트를 위한 pytest fixtures를 제공합니다.
"""

import json
import random

import pytest


@pytest.fixture
def history_draws():
    """과거 당첨 데이터 200회차 (일부 번호는 빈도 보너스 임계값 초과)"""
    rng = random.Random(2024)
    draws = [sorted(rng.sample(range(1, 61), 6)) for _ in range(200)]
    return draws


@pytest.fixture
def history_file(tmp_path, history_draws):
    """과거 당첨 데이터 JSON 파일"""
    path = tmp_path / "megasena_draws.json"
    path.write_text(json.dumps(history_draws), encoding="utf-8")
    return str(path)
